from campus.core.decorators import TutoringSupportDecorator
from campus.core.factories import BasicStudentFactory
from campus.core.students import BasicStudent
from campus.core.university import University


def test_get_instance_returns_same_object():
    assert University.get_instance() is University.get_instance()


def test_reset_instance_creates_new_registry():
    first = University.get_instance()
    first.add_student(BasicStudent([], False))
    University.reset_instance()
    second = University.get_instance()
    assert second is not first
    assert second.get_students() == []


def test_add_student_keeps_order_and_duplicates():
    university = University.get_instance()
    previous = len(university.get_students())
    a = BasicStudent(["A"], False)
    b = BasicStudent(["B"], True)
    for student in (a, b, a):
        university.add_student(student)
    students = university.get_students()
    assert len(students) == previous + 3
    assert students[-3:] == [a, b, a]


def test_get_students_returns_snapshot():
    university = University()
    first = BasicStudent([], False)
    university.add_student(first)
    snapshot = university.get_students()
    university.add_student(BasicStudent([], True))
    assert len(snapshot) == 1
    assert snapshot[0] is first

    snapshot.clear()
    assert len(university.get_students()) == 2


def test_directly_constructed_university_is_isolated():
    local = University()
    local.add_student(BasicStudent([], False))
    assert University.get_instance().get_students() == []


def test_statistics_count_decorated_students():
    university = University()
    base = BasicStudent(["Math"], False)
    university.add_student(base)
    university.add_student(TutoringSupportDecorator(base))
    assert university.get_statistics() == {
        'total_students': 2,
        'decorated_students': 1,
        'basic_students': 1,
    }


def test_factory_decorator_singleton_scenario():
    student = BasicStudentFactory().create_student(["Math", "Physics"], True)
    assert student.get_categories() == ["Math", "Physics"]
    assert student.has_test_to_skip_levels() is True

    tutored = TutoringSupportDecorator(student)
    assert tutored.can_take_course("Advanced Quantum Mechanics") is True

    University.get_instance().add_student(tutored)
    assert len(University.get_instance().get_students()) == 1
