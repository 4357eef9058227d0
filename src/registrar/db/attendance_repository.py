"""Repository functions for Attendance table.

No uniqueness is enforced on (enrollment_id, attendance_date): marking the
same enrollment twice on one date stores two rows.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

import structlog

from registrar.db.database import get_db
from registrar.db.models import AttendanceStatus, date_value, enum_value

logger = structlog.get_logger(__name__)


@dataclass
class AttendanceRecord:
    """Attendance record from database."""

    id: int
    enrollment_id: int
    attendance_date: date
    status: AttendanceStatus


def insert_attendance(
    enrollment_id: int,
    attendance_date: date,
    status: AttendanceStatus | str,
) -> int:
    """Insert a new attendance record.

    Args:
        enrollment_id: Existing enrollment id
        attendance_date: Day the attendance refers to
        status: Present, Absent or Late

    Returns:
        Generated attendance id

    Raises:
        CheckViolationError: If status is not an allowed value
        ForeignKeyViolationError: If the enrollment doesn't exist
    """
    with get_db() as conn:
        cursor = conn.execute(
            """
            INSERT INTO Attendance (enrollment_id, attendance_date, status)
            VALUES (?, ?, ?)
            """,
            (enrollment_id, date_value(attendance_date), enum_value(status)),
        )
        attendance_id = cursor.lastrowid

    logger.debug(
        "attendance.inserted",
        attendance_id=attendance_id,
        enrollment_id=enrollment_id,
        status=enum_value(status),
    )
    return attendance_id


def get_attendance_by_id(attendance_id: int) -> AttendanceRecord | None:
    """Get attendance record by ID, None if not found."""
    with get_db() as conn:
        row = conn.execute(
            "SELECT * FROM Attendance WHERE id = ?", (attendance_id,)
        ).fetchone()

    if row is None:
        return None

    return _row_to_record(row)


def get_attendance_for_enrollment(enrollment_id: int) -> list[AttendanceRecord]:
    """Get attendance history of an enrollment.

    Args:
        enrollment_id: Enrollment identifier

    Returns:
        Records ordered by date, then insertion order
    """
    with get_db() as conn:
        rows = conn.execute(
            """
            SELECT * FROM Attendance
            WHERE enrollment_id = ?
            ORDER BY attendance_date, id
            """,
            (enrollment_id,),
        ).fetchall()

    return [_row_to_record(row) for row in rows]


def delete_attendance(attendance_id: int) -> bool:
    """Delete attendance record by ID.

    Returns:
        True if deleted, False if not found
    """
    with get_db() as conn:
        cursor = conn.execute(
            "DELETE FROM Attendance WHERE id = ?", (attendance_id,)
        )

    deleted = cursor.rowcount > 0
    if deleted:
        logger.debug("attendance.deleted", attendance_id=attendance_id)

    return deleted


def _row_to_record(row) -> AttendanceRecord:
    """Convert database row to AttendanceRecord."""
    return AttendanceRecord(
        id=row["id"],
        enrollment_id=row["enrollment_id"],
        attendance_date=date.fromisoformat(row["attendance_date"]),
        status=AttendanceStatus(row["status"]),
    )
