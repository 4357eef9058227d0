"""Repository functions for Users table.

password_hash is stored as given; no hashing or verification happens
here. Users are not linked to Students.
"""

from __future__ import annotations

from dataclasses import dataclass

import structlog

from registrar.db.database import get_db
from registrar.db.models import UserRole, enum_value

logger = structlog.get_logger(__name__)


@dataclass
class UserRecord:
    """User record from database."""

    id: int
    username: str
    password_hash: str
    role: UserRole


def insert_user(username: str, password_hash: str, role: UserRole | str) -> int:
    """Insert a new user record.

    Args:
        username: Unique login name
        password_hash: Opaque credential string
        role: Admin, Teacher or Student

    Returns:
        Generated user id

    Raises:
        UniqueViolationError: If username already exists
        CheckViolationError: If role is not an allowed value
    """
    with get_db() as conn:
        cursor = conn.execute(
            "INSERT INTO Users (username, password_hash, role) VALUES (?, ?, ?)",
            (username, password_hash, enum_value(role)),
        )
        user_id = cursor.lastrowid

    logger.debug("users.inserted", user_id=user_id, username=username)
    return user_id


def get_user_by_username(username: str) -> UserRecord | None:
    """Get user by username.

    Args:
        username: Login name

    Returns:
        UserRecord if found, None otherwise
    """
    with get_db() as conn:
        row = conn.execute(
            "SELECT * FROM Users WHERE username = ?", (username,)
        ).fetchone()

    if row is None:
        return None

    return _row_to_record(row)


def get_all_users() -> list[UserRecord]:
    with get_db() as conn:
        rows = conn.execute("SELECT * FROM Users ORDER BY id").fetchall()

    return [_row_to_record(row) for row in rows]


def update_user_role(user_id: int, role: UserRole | str) -> None:
    """Change the role of a user.

    Raises:
        ValueError: If user_id doesn't exist
        CheckViolationError: If role is not an allowed value
    """
    with get_db() as conn:
        cursor = conn.execute(
            "UPDATE Users SET role = ? WHERE id = ?",
            (enum_value(role), user_id),
        )

        if cursor.rowcount == 0:
            raise ValueError(f"User not found: {user_id}")

    logger.debug("users.role_updated", user_id=user_id, role=enum_value(role))


def delete_user(user_id: int) -> bool:
    """Delete user by ID.

    Returns:
        True if deleted, False if not found
    """
    with get_db() as conn:
        cursor = conn.execute("DELETE FROM Users WHERE id = ?", (user_id,))

    deleted = cursor.rowcount > 0
    if deleted:
        logger.debug("users.deleted", user_id=user_id)

    return deleted


def _row_to_record(row) -> UserRecord:
    """Convert database row to UserRecord."""
    return UserRecord(
        id=row["id"],
        username=row["username"],
        password_hash=row["password_hash"],
        role=UserRole(row["role"]),
    )
