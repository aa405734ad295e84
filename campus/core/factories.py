from typing import List

from .interfaces import StudentFactory
from .students import BasicStudent


class BasicStudentFactory(StudentFactory):
    """Factory producing BasicStudent instances."""
    
    def create_student(self, categories: List[str], test_to_skip_levels: bool) -> BasicStudent:
        return BasicStudent(categories, test_to_skip_levels)
