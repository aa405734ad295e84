"""
Campus: Student/University object model built on classic design patterns.

Demonstrates prototype (clone), decorator, factory, builder and singleton
wiring over a small academic domain, with a REST surface over the registry.
"""

__version__ = "1.0.0"
__author__ = "Campus Development Team"
__description__ = "Student/University object model built on classic design patterns"
