"""Tests for the sample data set."""

from datetime import date

from registrar.core.seed import seed_sample_data
from registrar.db.courses_repository import get_all_courses
from registrar.db.models import UserRole
from registrar.db.students_repository import get_all_students, get_student_by_email
from registrar.db.users_repository import get_all_users
from registrar.db.views import get_attendance_summary, list_student_courses


class TestSeedSampleData:
    """Tests for seed_sample_data."""

    def test_seed_inserts_rows(self, init_test_db):
        assert seed_sample_data() is True

        assert [s.name for s in get_all_students()] == [
            "Peter Parker",
            "Gwen Stacy",
            "May Parker",
        ]
        assert [c.credits for c in get_all_courses()] == [3, 4, 2]
        assert [u.role for u in get_all_users()] == [
            UserRole.ADMIN,
            UserRole.TEACHER,
            UserRole.STUDENT,
        ]

    def test_seed_twice_skips(self, init_test_db):
        seed_sample_data()

        assert seed_sample_data() is False
        assert len(get_all_students()) == 3

    def test_seeded_views(self, init_test_db):
        """Peter has two Present rows on the same date; Gwen one Absent."""
        seed_sample_data()
        peter = get_student_by_email("peter11@gmail.com")
        gwen = get_student_by_email("gwenstacy08@gmail.com")
        may = get_student_by_email("pmay51@gmail.com")

        rows = list_student_courses(peter.id)
        assert len(rows) == 1
        assert rows[0].course_name == "Software Engineering"
        assert rows[0].enrollment_date == date(2025, 1, 1)

        peter_summary = get_attendance_summary(peter.id)
        assert (peter_summary.total_present, peter_summary.total_absent) == (2, 0)
        gwen_summary = get_attendance_summary(gwen.id)
        assert (gwen_summary.total_present, gwen_summary.total_absent) == (0, 1)
        assert get_attendance_summary(may.id) is None
