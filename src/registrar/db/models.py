"""Enumerated column values.

The store restricts Attendance.status and Users.role with CHECK
constraints; these enums mirror the allowed values.
"""

from __future__ import annotations

from datetime import date
from enum import Enum


class AttendanceStatus(str, Enum):
    """Allowed values of Attendance.status."""

    PRESENT = "Present"
    ABSENT = "Absent"
    LATE = "Late"


class UserRole(str, Enum):
    """Allowed values of Users.role."""

    ADMIN = "Admin"
    TEACHER = "Teacher"
    STUDENT = "Student"


def enum_value(value: Enum | str) -> str:
    """Return the string stored for an enum member or a raw string.

    Raw strings are passed through unchanged so the store decides
    whether they are valid.
    """
    if isinstance(value, Enum):
        return value.value
    return value


def date_value(value: date | None) -> str | None:
    """Return the ISO text stored for a date.

    None is passed through so NOT NULL columns reject it in the store.
    """
    if value is None:
        return None
    return value.isoformat()
