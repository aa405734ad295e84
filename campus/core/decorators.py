"""
Decorators that layer extra behaviour over an existing student.
"""

from typing import List, Optional, Union

from .enums import StudentEnhancement
from .exceptions import ConfigurationError
from .interfaces import Student


class StudentDecorator(Student):
    """
    Forwarding wrapper around exactly one student.
    
    The wrapped student is shared, not copied: the same object may also be
    registered with a University or wrapped by other decorators. Subclasses
    override only the operations they enhance.
    """
    
    enhancement: Optional[StudentEnhancement] = None
    
    def __init__(self, base_student: Student):
        self._base_student = base_student
    
    @property
    def base_student(self) -> Student:
        """Get the wrapped student."""
        return self._base_student
    
    def clone(self) -> Student:
        """Clone the wrapped student. The copy carries no decoration."""
        return self._base_student.clone()

    def clone_decorated(self) -> 'StudentDecorator':
        """Clone the wrapped chain and re-apply every decoration to the copy."""
        if isinstance(self._base_student, StudentDecorator):
            return self._rewrap(self._base_student.clone_decorated())
        return self._rewrap(self._base_student.clone())

    def _rewrap(self, student: Student) -> 'StudentDecorator':
        """Wrap another student the way this decorator wraps its own."""
        return type(self)(student)

    def can_take_course(self, course: str) -> bool:
        return self._base_student.can_take_course(course)
    
    def has_test_to_skip_levels(self) -> bool:
        return self._base_student.has_test_to_skip_levels()
    
    def get_categories(self) -> List[str]:
        return self._base_student.get_categories()
    
    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._base_student!r})"


class TutoringSupportDecorator(StudentDecorator):
    """Student with tutoring support, which opens every course."""
    
    enhancement = StudentEnhancement.TUTORING_SUPPORT
    
    def can_take_course(self, course: str) -> bool:
        return True


def get_enhancements(student: Student) -> List[StudentEnhancement]:
    """List the enhancements applied to a student, outermost first."""
    enhancements = []
    while isinstance(student, StudentDecorator):
        if student.enhancement is not None:
            enhancements.append(student.enhancement)
        student = student.base_student
    return enhancements


class DecoratorFactory:
    """Factory for wrapping students by enhancement."""
    
    _decorators = {
        StudentEnhancement.TUTORING_SUPPORT: TutoringSupportDecorator,
    }
    
    @staticmethod
    def create_decorator(enhancement: Union[str, StudentEnhancement], student: Student) -> StudentDecorator:
        """Wrap a student in the decorator registered for the enhancement."""
        try:
            enhancement = StudentEnhancement(enhancement)
        except ValueError:
            raise ConfigurationError(
                f"Unsupported enhancement: {enhancement}",
                error_code="unsupported_enhancement",
                details={"supported": [e.value for e in StudentEnhancement]}
            )
        return DecoratorFactory._decorators[enhancement](student)
