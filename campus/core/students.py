"""
Concrete student prototypes.
"""

from typing import Iterable, List

from .interfaces import Student


class BasicStudent(Student):
    """Immutable student holding categories and the skip-levels flag."""
    
    def __init__(self, categories: Iterable[str], test_to_skip_levels: bool):
        self._categories = tuple(categories)
        self._test_to_skip_levels = test_to_skip_levels
    
    def clone(self) -> 'BasicStudent':
        return BasicStudent(self._categories, self._test_to_skip_levels)
    
    def can_take_course(self, course: str) -> bool:
        # Placeholder eligibility: every course is open to a basic student.
        return True
    
    def has_test_to_skip_levels(self) -> bool:
        return self._test_to_skip_levels
    
    def get_categories(self) -> List[str]:
        return list(self._categories)
    
    def __repr__(self) -> str:
        return (f"{self.__class__.__name__}(categories={list(self._categories)}, "
                f"test_to_skip_levels={self._test_to_skip_levels})")
