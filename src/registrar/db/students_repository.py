"""Repository functions for Students table.

Provides CRUD operations for the Students table. Deleting a student
cascades to its enrollments and their attendance rows.
"""

from __future__ import annotations

from dataclasses import dataclass

import structlog

from registrar.db.database import get_db

logger = structlog.get_logger(__name__)


@dataclass
class StudentRecord:
    """Student record from database."""

    id: int
    name: str
    age: int
    email: str
    address: str | None


def insert_student(
    name: str,
    age: int,
    email: str,
    address: str | None = None,
) -> int:
    """Insert a new student record.

    Args:
        name: Full name
        age: Age in years, 1 to 119
        email: Unique contact email
        address: Postal address (optional)

    Returns:
        Generated student id

    Raises:
        CheckViolationError: If age is out of range
        UniqueViolationError: If email already exists
    """
    with get_db() as conn:
        cursor = conn.execute(
            "INSERT INTO Students (name, age, email, address) VALUES (?, ?, ?, ?)",
            (name, age, email, address),
        )
        student_id = cursor.lastrowid

    logger.debug("students.inserted", student_id=student_id, email=email)
    return student_id


def get_student_by_id(student_id: int) -> StudentRecord | None:
    """Get student by ID.

    Args:
        student_id: Student identifier

    Returns:
        StudentRecord if found, None otherwise
    """
    with get_db() as conn:
        row = conn.execute(
            "SELECT * FROM Students WHERE id = ?", (student_id,)
        ).fetchone()

    if row is None:
        return None

    return _row_to_record(row)


def get_student_by_email(email: str) -> StudentRecord | None:
    """Get student by email, None if not found."""
    with get_db() as conn:
        row = conn.execute(
            "SELECT * FROM Students WHERE email = ?", (email,)
        ).fetchone()

    if row is None:
        return None

    return _row_to_record(row)


def get_all_students() -> list[StudentRecord]:
    """Get all students ordered by id."""
    with get_db() as conn:
        rows = conn.execute("SELECT * FROM Students ORDER BY id").fetchall()

    return [_row_to_record(row) for row in rows]


def update_student(
    student_id: int,
    name: str,
    age: int,
    email: str,
    address: str | None = None,
) -> None:
    """Update an existing student record.

    Raises:
        ValueError: If student_id doesn't exist
        CheckViolationError: If age is out of range
        UniqueViolationError: If email belongs to another student
    """
    with get_db() as conn:
        cursor = conn.execute(
            """
            UPDATE Students SET
                name = ?,
                age = ?,
                email = ?,
                address = ?
            WHERE id = ?
            """,
            (name, age, email, address, student_id),
        )

        if cursor.rowcount == 0:
            raise ValueError(f"Student not found: {student_id}")

    logger.debug("students.updated", student_id=student_id)


def delete_student(student_id: int) -> bool:
    """Delete student by ID.

    Enrollments and attendance of the student are removed by the store.

    Returns:
        True if deleted, False if not found
    """
    with get_db() as conn:
        cursor = conn.execute("DELETE FROM Students WHERE id = ?", (student_id,))

    deleted = cursor.rowcount > 0
    if deleted:
        logger.debug("students.deleted", student_id=student_id)

    return deleted


def _row_to_record(row) -> StudentRecord:
    """Convert database row to StudentRecord."""
    return StudentRecord(
        id=row["id"],
        name=row["name"],
        age=row["age"],
        email=row["email"],
        address=row["address"],
    )
