"""Repository functions for Courses table."""

from __future__ import annotations

from dataclasses import dataclass

import structlog

from registrar.db.database import DEFAULT_COURSE_DESCRIPTION, get_db

logger = structlog.get_logger(__name__)


@dataclass
class CourseRecord:
    """Course record from database."""

    id: int
    name: str
    description: str | None
    credits: int


def insert_course(
    name: str,
    credits: int,
    description: str | None = None,
) -> int:
    """Insert a new course record.

    When description is None the column is left out of the statement so
    the store fills in its default text.

    Args:
        name: Course name
        credits: Credit value, must be positive
        description: Course description (optional)

    Returns:
        Generated course id

    Raises:
        CheckViolationError: If credits is not positive
    """
    with get_db() as conn:
        if description is None:
            cursor = conn.execute(
                "INSERT INTO Courses (name, credits) VALUES (?, ?)",
                (name, credits),
            )
        else:
            cursor = conn.execute(
                "INSERT INTO Courses (name, description, credits) VALUES (?, ?, ?)",
                (name, description, credits),
            )
        course_id = cursor.lastrowid

    logger.debug("courses.inserted", course_id=course_id, name=name)
    return course_id


def get_course_by_id(course_id: int) -> CourseRecord | None:
    """Get course by ID.

    Args:
        course_id: Course identifier

    Returns:
        CourseRecord if found, None otherwise
    """
    with get_db() as conn:
        row = conn.execute(
            "SELECT * FROM Courses WHERE id = ?", (course_id,)
        ).fetchone()

    if row is None:
        return None

    return _row_to_record(row)


def get_all_courses() -> list[CourseRecord]:
    """Get all courses ordered by id."""
    with get_db() as conn:
        rows = conn.execute("SELECT * FROM Courses ORDER BY id").fetchall()

    return [_row_to_record(row) for row in rows]


def update_course(
    course_id: int,
    name: str,
    credits: int,
    description: str | None = None,
) -> None:
    """Update an existing course record.

    A description of None writes DEFAULT_COURSE_DESCRIPTION, the same text
    the store uses when a course is inserted without one.

    Raises:
        ValueError: If course_id doesn't exist
        CheckViolationError: If credits is not positive
    """
    if description is None:
        description = DEFAULT_COURSE_DESCRIPTION

    with get_db() as conn:
        cursor = conn.execute(
            "UPDATE Courses SET name = ?, description = ?, credits = ? WHERE id = ?",
            (name, description, credits, course_id),
        )

        if cursor.rowcount == 0:
            raise ValueError(f"Course not found: {course_id}")

    logger.debug("courses.updated", course_id=course_id)


def delete_course(course_id: int) -> bool:
    """Delete course by ID. Its enrollments are removed by the store.

    Returns:
        True if deleted, False if not found
    """
    with get_db() as conn:
        cursor = conn.execute("DELETE FROM Courses WHERE id = ?", (course_id,))

    deleted = cursor.rowcount > 0
    if deleted:
        logger.debug("courses.deleted", course_id=course_id)

    return deleted


def _row_to_record(row) -> CourseRecord:
    return CourseRecord(
        id=row["id"],
        name=row["name"],
        description=row["description"],
        credits=row["credits"],
    )
