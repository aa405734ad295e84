"""
Script to add sample students to the campus registry via REST API.
Make sure the server is running before executing this script.

Usage:
    python add_data.py
"""

import requests
import json
import sys
import os


BASE_URL = os.environ.get("CAMPUS_BASE_URL", "http://127.0.0.1:8000")

_OK_CHAR = "[OK]"
_FAIL_CHAR = "[FAIL]"
_INFO_CHAR = "[INFO]"

def check_server():
    """Check if the server is running."""
    try:
        response = requests.get(f"{BASE_URL}/health", timeout=2)
        if response.status_code == 200:
            print(f"{_OK_CHAR} Server is running")
            return True
    except requests.exceptions.RequestException:
        pass
    print(f"{_FAIL_CHAR} Server is not running!")
    print("\nPlease start the server first:")
    print("  python -m campus.main --serve --rest-port 8000")
    return False

def create_student(categories, test_to_skip_levels, enhancements=None):
    """Create and register a new student."""
    url = f"{BASE_URL}/students"
    data = {
        "categories": categories,
        "test_to_skip_levels": test_to_skip_levels,
        "enhancements": enhancements or []
    }
    try:
        response = requests.post(url, json=data)
        if response.status_code == 201:
            student = response.json()
            print(f"{_OK_CHAR} Created {student['kind']} #{student['index']}: {', '.join(categories) or '-'}")
            return student
        else:
            print(f"{_FAIL_CHAR} Failed to create student: {response.text}")
            return None
    except requests.exceptions.RequestException as e:
        print(f"{_FAIL_CHAR} Error creating student: {e}")
        return None

def clone_student(index, keep_enhancements=False):
    """Register a clone of an existing student."""
    url = f"{BASE_URL}/students/{index}/clone"
    try:
        response = requests.post(url, params={"keep_enhancements": keep_enhancements})
        if response.status_code == 201:
            student = response.json()
            print(f"{_OK_CHAR} Cloned student #{index} as #{student['index']} ({student['kind']})")
            return student
        else:
            print(f"{_FAIL_CHAR} Failed to clone student: {response.text}")
            return None
    except requests.exceptions.RequestException as e:
        print(f"{_FAIL_CHAR} Error cloning student: {e}")
        return None

def check_eligibility(index, course):
    """Ask whether a student can take a course."""
    url = f"{BASE_URL}/students/{index}/eligibility"
    try:
        response = requests.get(url, params={"course": course})
        if response.status_code == 200:
            result = response.json()
            print(f"{_INFO_CHAR} Student #{index} can take '{course}': {result['can_take_course']}")
            return result
        else:
            print(f"{_FAIL_CHAR} Failed to check eligibility: {response.text}")
            return None
    except requests.exceptions.RequestException as e:
        print(f"{_FAIL_CHAR} Error checking eligibility: {e}")
        return None

def list_students():
    """List all registered students."""
    try:
        response = requests.get(f"{BASE_URL}/students")
        if response.status_code == 200:
            students = response.json()
            print(f"\n{'='*60}")
            print(f"Students ({len(students)})")
            print(f"{'='*60}")
            for student in students:
                enhancements = ', '.join(student['enhancements']) or 'none'
                print(f"  #{student['index']:<3} | {student['kind']:26} | {', '.join(student['categories']):20} | {enhancements}")
            return students
        else:
            print(f"{_FAIL_CHAR} Failed to list students: {response.text}")
            return []
    except requests.exceptions.RequestException as e:
        print(f"{_FAIL_CHAR} Error listing students: {e}")
        return []

def get_statistics():
    """Get registry statistics."""
    try:
        response = requests.get(f"{BASE_URL}/statistics")
        if response.status_code == 200:
            stats = response.json()
            print(f"\n{'='*60}")
            print("Registry Statistics")
            print(f"{'='*60}")
            print(json.dumps(stats['statistics'], indent=2))
            return stats
        else:
            print(f"{_FAIL_CHAR} Failed to get statistics: {response.text}")
            return None
    except requests.exceptions.RequestException as e:
        print(f"{_FAIL_CHAR} Error getting statistics: {e}")
        return None

def main():
    """Main execution."""
    print("="*60)
    print("Campus Registry - Data Addition Script")
    print("="*60)
    print()

    # Check if server is running
    if not check_server():
        sys.exit(1)

    print("\n" + "="*60)
    print("Adding Sample Data...")
    print("="*60 + "\n")

    # Create students
    print("Creating students...")
    students = []
    students.append(create_student(["Math", "Physics"], True, ["tutoring_support"]))
    students.append(create_student(["Biology"], False))
    students.append(create_student(["History", "Literature"], False, ["tutoring_support"]))
    students.append(create_student([], True))

    # Clone the first tutored student
    print("\nCloning students...")
    if students[0]:
        clone_student(students[0]["index"])
        clone_student(students[0]["index"], keep_enhancements=True)

    # Check eligibility
    print("\nChecking eligibility...")
    for student in students:
        if student:
            check_eligibility(student['index'], "Advanced Quantum Mechanics")

    # Display results
    list_students()
    get_statistics()

    print("\n" + "="*60)
    print(f"{_OK_CHAR} Sample data added successfully!")
    print("="*60)
    print("\nYou can now:")
    print(f"  - View API docs: {BASE_URL}/docs")
    print(f"  - List students: curl {BASE_URL}/students")
    print(f"  - Get statistics: curl {BASE_URL}/statistics")
    print()

if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        print(f"\n\n{_FAIL_CHAR} Interrupted by user")
        sys.exit(1)
