#!/usr/bin/env python3
"""
Demo scenario for the campus platform.
"""

import sys
import os

# Add the project root to the Python path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from campus.main import CampusPlatform
from campus.core import (
    BasicStudentBuilder, DecoratorFactory, StudentEnhancement,
    TutoringSupportDecorator, University, get_enhancements,
)


def run_demo():
    """Run a walkthrough of every pattern in the object model."""
    print("=" * 60)
    print("CAMPUS STUDENT REGISTRY - DEMO")
    print("=" * 60)

    # A dedicated registry keeps the demo independent of the process-wide one
    platform = CampusPlatform(university=University())

    print("\n1. Factory, decorator and singleton walkthrough...")
    platform.run_demo()

    print("\n2. Demonstrating the builder...")
    demonstrate_builder(platform)

    print("\n3. Demonstrating the prototype (clone)...")
    demonstrate_prototype(platform)

    print("\n4. Demonstrating the singleton accessor...")
    demonstrate_singleton()

    print("\n5. Registry statistics...")
    show_statistics(platform)

    print("\n" + "=" * 60)
    print("DEMO COMPLETED SUCCESSFULLY!")
    print("=" * 60)


def demonstrate_builder(platform):
    """Build students fluently and register them."""
    builder = BasicStudentBuilder().set_categories(["Bio"])

    first = builder.build()
    second = builder.build()
    print(f"  Built twice without reset: {first.get_categories()} / {second.get_categories()}")

    advanced = builder.set_categories(["Chemistry", "Bio"]).set_test_to_skip_levels(True).build()
    print(f"  Reconfigured build: {advanced.get_categories()}, "
          f"skip levels: {advanced.has_test_to_skip_levels()}")

    for student in (first, second, advanced):
        platform.university.add_student(student)
    print(f"  ✓ Registered {len(platform.university.get_students())} students so far")


def demonstrate_prototype(platform):
    """Clone plain and decorated students."""
    student = platform.student_factory.create_student(["Art"], False)
    copy = student.clone()
    print(f"  BasicStudent clone is a new object: {copy is not student}, "
          f"categories: {copy.get_categories()}")

    tutored = DecoratorFactory.create_decorator(StudentEnhancement.TUTORING_SUPPORT, student)
    plain_copy = tutored.clone()
    print(f"  Decorated clone() drops the decoration: {type(plain_copy).__name__}")

    tutored_copy = tutored.clone_decorated()
    print(f"  clone_decorated() keeps it: {type(tutored_copy).__name__}, "
          f"enhancements: {[e.value for e in get_enhancements(tutored_copy)]}")

    platform.university.add_student(tutored_copy)
    print("  ✓ Registered the decorated clone")


def demonstrate_singleton():
    """Show that the accessor always yields the same University."""
    first = University.get_instance()
    second = University.get_instance()
    print(f"  get_instance() returns the same object: {first is second}")

    first.add_student(TutoringSupportDecorator(BasicStudentBuilder().build()))
    print(f"  Process-wide registry size: {len(second.get_students())}")


def show_statistics(platform):
    """Print registry statistics."""
    for key, value in platform.university.get_statistics().items():
        print(f"  {key}: {value}")


if __name__ == "__main__":
    run_demo()
