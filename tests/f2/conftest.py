"""Fixtures for F2 tests - Procedures, views and sample data."""

import pytest

from registrar.db.courses_repository import insert_course
from registrar.db.students_repository import insert_student


@pytest.fixture
def second_student_id(init_test_db) -> int:
    """Another stored student, for per-student view rows."""
    return insert_student("Gwen Stacy", 22, "gwenstacy08@gmail.com", "456 Oak Avenue")


@pytest.fixture
def second_course_id(init_test_db) -> int:
    """Another stored course, for students enrolled twice."""
    return insert_course("Biology", 4, "Statistical Biology")
