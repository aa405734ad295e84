import pytest

from campus.core.university import University


@pytest.fixture(autouse=True)
def fresh_university_singleton():
    University.reset_instance()
    yield
    University.reset_instance()
