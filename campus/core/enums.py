"""
Enumerations and constants for the campus package.
"""

from enum import Enum


class StudentEnhancement(Enum):
    """Enhancements that can be layered over a student."""
    TUTORING_SUPPORT = "tutoring_support"
