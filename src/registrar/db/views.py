"""Queries over the StudentCourses and AttendanceSummary views.

Both views are recomputed by the store on every query.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from registrar.db.database import get_db


@dataclass
class StudentCourseRow:
    """One (student, enrolled course) pair."""

    student_id: int
    student_name: str
    course_name: str
    enrollment_date: date


@dataclass
class AttendanceSummaryRow:
    """Attendance totals of one student across all enrollments."""

    student_id: int
    student_name: str
    total_present: int
    total_absent: int
    total_late: int


def list_student_courses(student_id: int | None = None) -> list[StudentCourseRow]:
    """List rows of the StudentCourses view.

    Args:
        student_id: Restrict to one student (optional)

    Returns:
        Rows ordered by student id, then enrollment date
    """
    query = "SELECT * FROM StudentCourses"
    params: tuple = ()
    if student_id is not None:
        query += " WHERE student_id = ?"
        params = (student_id,)
    query += " ORDER BY student_id, enrollment_date, course_name"

    with get_db() as conn:
        rows = conn.execute(query, params).fetchall()

    return [
        StudentCourseRow(
            student_id=row["student_id"],
            student_name=row["student_name"],
            course_name=row["course_name"],
            enrollment_date=date.fromisoformat(row["enrollment_date"]),
        )
        for row in rows
    ]


def list_attendance_summary(student_id: int | None = None) -> list[AttendanceSummaryRow]:
    """List rows of the AttendanceSummary view.

    Students without any attendance record have no row.

    Args:
        student_id: Restrict to one student (optional)
    """
    query = "SELECT * FROM AttendanceSummary"
    params: tuple = ()
    if student_id is not None:
        query += " WHERE student_id = ?"
        params = (student_id,)
    query += " ORDER BY student_id"

    with get_db() as conn:
        rows = conn.execute(query, params).fetchall()

    return [_row_to_summary(row) for row in rows]


def get_attendance_summary(student_id: int) -> AttendanceSummaryRow | None:
    """Get the attendance totals of one student.

    Args:
        student_id: Student identifier

    Returns:
        AttendanceSummaryRow, or None if the student has no attendance
        records
    """
    with get_db() as conn:
        row = conn.execute(
            "SELECT * FROM AttendanceSummary WHERE student_id = ?", (student_id,)
        ).fetchone()

    if row is None:
        return None

    return _row_to_summary(row)


def _row_to_summary(row) -> AttendanceSummaryRow:
    return AttendanceSummaryRow(
        student_id=row["student_id"],
        student_name=row["student_name"],
        total_present=row["total_present"],
        total_absent=row["total_absent"],
        total_late=row["total_late"],
    )
