"""Repository functions for Enrollments table.

An enrollment links one student to one course. The (student_id,
course_id) pair is unique.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

import structlog

from registrar.db.database import get_db
from registrar.db.models import date_value

logger = structlog.get_logger(__name__)


@dataclass
class EnrollmentRecord:
    """Enrollment record from database."""

    id: int
    student_id: int
    course_id: int
    enrollment_date: date


def insert_enrollment(
    student_id: int,
    course_id: int,
    enrollment_date: date | None = None,
) -> int:
    """Insert a new enrollment record.

    Args:
        student_id: Existing student id
        course_id: Existing course id
        enrollment_date: Date of enrollment. None uses the store's
            default, today's date.

    Returns:
        Generated enrollment id

    Raises:
        ForeignKeyViolationError: If the student or course doesn't exist
        UniqueViolationError: If the student is already enrolled
    """
    with get_db() as conn:
        if enrollment_date is None:
            cursor = conn.execute(
                "INSERT INTO Enrollments (student_id, course_id) VALUES (?, ?)",
                (student_id, course_id),
            )
        else:
            cursor = conn.execute(
                """
                INSERT INTO Enrollments (student_id, course_id, enrollment_date)
                VALUES (?, ?, ?)
                """,
                (student_id, course_id, date_value(enrollment_date)),
            )
        enrollment_id = cursor.lastrowid

    logger.debug(
        "enrollments.inserted",
        enrollment_id=enrollment_id,
        student_id=student_id,
        course_id=course_id,
    )
    return enrollment_id


def get_enrollment_by_id(enrollment_id: int) -> EnrollmentRecord | None:
    """Get enrollment by ID, None if not found."""
    with get_db() as conn:
        row = conn.execute(
            "SELECT * FROM Enrollments WHERE id = ?", (enrollment_id,)
        ).fetchone()

    if row is None:
        return None

    return _row_to_record(row)


def get_enrollment(student_id: int, course_id: int) -> EnrollmentRecord | None:
    """Get the enrollment of a student in a course.

    Args:
        student_id: Student identifier
        course_id: Course identifier

    Returns:
        EnrollmentRecord if the student is enrolled, None otherwise
    """
    with get_db() as conn:
        row = conn.execute(
            "SELECT * FROM Enrollments WHERE student_id = ? AND course_id = ?",
            (student_id, course_id),
        ).fetchone()

    if row is None:
        return None

    return _row_to_record(row)


def get_enrollments_for_student(student_id: int) -> list[EnrollmentRecord]:
    """Get all enrollments of a student, oldest first."""
    with get_db() as conn:
        rows = conn.execute(
            "SELECT * FROM Enrollments WHERE student_id = ? ORDER BY enrollment_date, id",
            (student_id,),
        ).fetchall()

    return [_row_to_record(row) for row in rows]


def delete_enrollment(enrollment_id: int) -> bool:
    """Delete enrollment by ID. Its attendance rows are removed by the store.

    Returns:
        True if deleted, False if not found
    """
    with get_db() as conn:
        cursor = conn.execute(
            "DELETE FROM Enrollments WHERE id = ?", (enrollment_id,)
        )

    deleted = cursor.rowcount > 0
    if deleted:
        logger.debug("enrollments.deleted", enrollment_id=enrollment_id)

    return deleted


def _row_to_record(row) -> EnrollmentRecord:
    """Convert database row to EnrollmentRecord."""
    return EnrollmentRecord(
        id=row["id"],
        student_id=row["student_id"],
        course_id=row["course_id"],
        enrollment_date=date.fromisoformat(row["enrollment_date"]),
    )
