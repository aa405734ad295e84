"""
Core module containing the student object model and pattern implementations.
"""

from .interfaces import *
from .students import *
from .decorators import *
from .factories import *
from .builders import *
from .university import *
from .exceptions import *
from .enums import *

__all__ = [
    # Interfaces
    "Student",
    "StudentFactory",
    
    # Students
    "BasicStudent",
    
    # Decorators
    "StudentDecorator",
    "TutoringSupportDecorator",
    "DecoratorFactory",
    "get_enhancements",
    
    # Factories and builders
    "BasicStudentFactory",
    "BasicStudentBuilder",
    
    # Registry
    "University",
    
    # Enums
    "StudentEnhancement",
    
    # Exceptions
    "CampusException",
    "ConfigurationError",
]
