"""
Process-wide registry of students.
"""

import threading
from typing import Any, Dict, List, Optional

from .decorators import StudentDecorator
from .interfaces import Student


class University:
    """
    Append-only registry of student references.
    
    ``University.get_instance()`` returns the lazily created process-wide
    instance. A University can also be constructed directly and handed to
    collaborators that should not share global state.
    """
    
    _instance: Optional['University'] = None
    _instance_lock = threading.Lock()
    
    def __init__(self):
        self._students: List[Student] = []
    
    @classmethod
    def get_instance(cls) -> 'University':
        """Get the process-wide University, creating it on first use."""
        if cls._instance is None:
            with cls._instance_lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance
    
    @classmethod
    def reset_instance(cls) -> None:
        """Drop the process-wide University; the next get_instance() creates a new one."""
        with cls._instance_lock:
            cls._instance = None
    
    def add_student(self, student: Student) -> None:
        """Register a student. Duplicates are kept."""
        self._students.append(student)
    
    def get_students(self) -> List[Student]:
        """Get a snapshot of registered students in insertion order."""
        return self._students.copy()
    
    def get_statistics(self) -> Dict[str, Any]:
        """Get registry statistics."""
        decorated = sum(1 for s in self._students if isinstance(s, StudentDecorator))
        return {
            'total_students': len(self._students),
            'decorated_students': decorated,
            'basic_students': len(self._students) - decorated,
        }
