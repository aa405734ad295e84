"""
Fluent builder for BasicStudent.
"""

from typing import List

from .students import BasicStudent


class BasicStudentBuilder:
    """
    Accumulates student fields and produces a BasicStudent on build().
    
    Builder state survives build(), so repeated builds yield students with
    the same fields until a setter is called again.
    """
    
    def __init__(self):
        self._categories: List[str] = []
        self._test_to_skip_levels = False
    
    def set_categories(self, categories: List[str]) -> 'BasicStudentBuilder':
        self._categories = list(categories)
        return self
    
    def set_test_to_skip_levels(self, test_to_skip_levels: bool) -> 'BasicStudentBuilder':
        self._test_to_skip_levels = test_to_skip_levels
        return self
    
    def build(self) -> BasicStudent:
        return BasicStudent(self._categories, self._test_to_skip_levels)
