"""
Core interfaces and abstract base classes for the campus object model.
"""

from abc import ABC, abstractmethod
from typing import List


class Student(ABC):
    """Prototype interface shared by every student variant."""
    
    @abstractmethod
    def clone(self) -> 'Student':
        """Return a new, independent student with equivalent state."""
        pass
    
    @abstractmethod
    def can_take_course(self, course: str) -> bool:
        """Check if the student may take the given course."""
        pass
    
    @abstractmethod
    def has_test_to_skip_levels(self) -> bool:
        """Check if the student passed the test to skip levels."""
        pass
    
    @abstractmethod
    def get_categories(self) -> List[str]:
        """Get the student's categories in insertion order."""
        pass


class StudentFactory(ABC):
    """Abstract factory for creating students from raw fields."""
    
    @abstractmethod
    def create_student(self, categories: List[str], test_to_skip_levels: bool) -> Student:
        """Create a student."""
        pass
