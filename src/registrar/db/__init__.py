"""Database module for SQLite persistence.

Provides:
- Database connection management
- Schema lifecycle (init, drop, reset)
- Repository functions per table
- Queries over the StudentCourses and AttendanceSummary views
"""

from registrar.db.database import drop_db, get_db, init_db, reset_db
from registrar.db.errors import (
    CheckViolationError,
    ConstraintViolationError,
    ForeignKeyViolationError,
    NotNullViolationError,
    RegistrarError,
    UniqueViolationError,
)
from registrar.db.models import AttendanceStatus, UserRole

__all__ = [
    "drop_db",
    "get_db",
    "init_db",
    "reset_db",
    "CheckViolationError",
    "ConstraintViolationError",
    "ForeignKeyViolationError",
    "NotNullViolationError",
    "RegistrarError",
    "UniqueViolationError",
    "AttendanceStatus",
    "UserRole",
]
