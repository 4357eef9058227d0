"""Tests for Courses repository."""

import pytest

from registrar.db.courses_repository import (
    delete_course,
    get_all_courses,
    get_course_by_id,
    insert_course,
    update_course,
)
from registrar.db.database import DEFAULT_COURSE_DESCRIPTION
from registrar.db.enrollments_repository import get_enrollment_by_id
from registrar.db.errors import CheckViolationError


class TestInsertCourse:
    """Tests for insert_course."""

    def test_description_defaults(self, init_test_db):
        """Omitted description gets the store default."""
        course_id = insert_course("Biology", 4)

        course = get_course_by_id(course_id)
        assert course.description == "No description available"
        assert course.description == DEFAULT_COURSE_DESCRIPTION

    def test_description_kept(self, course_id):
        assert get_course_by_id(course_id).description == "Data Structures and Algorithms"

    @pytest.mark.parametrize("credits", [0, -1])
    def test_non_positive_credits_rejected(self, init_test_db, credits):
        with pytest.raises(CheckViolationError):
            insert_course("Nothing", credits)

        assert get_all_courses() == []

    def test_one_credit_accepted(self, init_test_db):
        course_id = insert_course("Seminar", 1)

        assert get_course_by_id(course_id).credits == 1


class TestUpdateCourse:
    """Tests for update_course."""

    def test_update_fields(self, course_id):
        update_course(course_id, "Software Engineering II", 5, "Design Patterns")

        course = get_course_by_id(course_id)
        assert course.name == "Software Engineering II"
        assert course.credits == 5
        assert course.description == "Design Patterns"

    def test_update_without_description_writes_default(self, course_id):
        """Omitted description reads back as the default text, not NULL."""
        update_course(course_id, "Software Engineering", 3)

        assert get_course_by_id(course_id).description == DEFAULT_COURSE_DESCRIPTION

    def test_update_invalid_credits(self, course_id):
        with pytest.raises(CheckViolationError):
            update_course(course_id, "Software Engineering", 0, None)

        assert get_course_by_id(course_id).credits == 3

    def test_update_not_found(self, init_test_db):
        with pytest.raises(ValueError, match="Course not found"):
            update_course(42, "Ghost", 1, None)


class TestDeleteCourse:
    """Tests for delete_course."""

    def test_delete_cascades_to_enrollments(self, course_id, enrollment_id):
        assert delete_course(course_id) is True

        assert get_course_by_id(course_id) is None
        assert get_enrollment_by_id(enrollment_id) is None

    def test_delete_not_found(self, init_test_db):
        assert delete_course(42) is False
