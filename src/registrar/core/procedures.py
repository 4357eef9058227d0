"""Enrollment and attendance procedures.

Responsibilities:
- enroll_student: enroll a student in a course, dated today
- mark_attendance: record one attendance status for an enrollment

Each procedure runs in a single transaction. Failures surface as
ConstraintViolationError subclasses from registrar.db.errors.
"""

from __future__ import annotations

from datetime import date

import structlog

from registrar.db.attendance_repository import AttendanceRecord
from registrar.db.database import get_db
from registrar.db.enrollments_repository import EnrollmentRecord
from registrar.db.models import AttendanceStatus, date_value, enum_value

logger = structlog.get_logger(__name__)


def enroll_student(student_id: int, course_id: int) -> EnrollmentRecord:
    """Enroll a student in a course.

    The enrollment is dated to the day of the call.

    Args:
        student_id: Existing student id
        course_id: Existing course id

    Returns:
        The created EnrollmentRecord

    Raises:
        ForeignKeyViolationError: If the student or course doesn't exist
        UniqueViolationError: If the student is already enrolled in the course
    """
    today = date.today()

    with get_db() as conn:
        cursor = conn.execute(
            """
            INSERT INTO Enrollments (student_id, course_id, enrollment_date)
            VALUES (?, ?, ?)
            """,
            (student_id, course_id, today.isoformat()),
        )
        enrollment_id = cursor.lastrowid

    logger.info(
        "procedures.enrolled",
        enrollment_id=enrollment_id,
        student_id=student_id,
        course_id=course_id,
    )
    return EnrollmentRecord(
        id=enrollment_id,
        student_id=student_id,
        course_id=course_id,
        enrollment_date=today,
    )


def mark_attendance(
    enrollment_id: int,
    attendance_date: date,
    status: AttendanceStatus | str,
) -> AttendanceRecord:
    """Record attendance for an enrollment on a date.

    Existing records for the same enrollment and date are not checked;
    calling this twice stores two rows.

    Args:
        enrollment_id: Existing enrollment id
        attendance_date: Day the attendance refers to
        status: Present, Absent or Late

    Returns:
        The created AttendanceRecord

    Raises:
        CheckViolationError: If status is not an allowed value
        ForeignKeyViolationError: If the enrollment doesn't exist
    """
    value = enum_value(status)

    with get_db() as conn:
        cursor = conn.execute(
            """
            INSERT INTO Attendance (enrollment_id, attendance_date, status)
            VALUES (?, ?, ?)
            """,
            (enrollment_id, date_value(attendance_date), value),
        )
        attendance_id = cursor.lastrowid

    logger.info(
        "procedures.attendance_marked",
        attendance_id=attendance_id,
        enrollment_id=enrollment_id,
        date=date_value(attendance_date),
        status=value,
    )
    return AttendanceRecord(
        id=attendance_id,
        enrollment_id=enrollment_id,
        attendance_date=attendance_date,
        status=AttendanceStatus(value),
    )
