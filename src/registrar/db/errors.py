"""Constraint violation errors.

SQLite reports every constraint failure as sqlite3.IntegrityError.
translate_integrity_error() maps it to one of the classes below based on
the store's message, which is kept as the exception message.
"""

from __future__ import annotations

import sqlite3


class RegistrarError(Exception):
    """Base error for the registrar package."""


class ConstraintViolationError(RegistrarError):
    """Raised when the store rejects a statement on a constraint."""

    def __init__(self, message: str, detail: str | None = None):
        self.detail = detail
        super().__init__(message)


class CheckViolationError(ConstraintViolationError):
    """Value outside its allowed domain (age, credits, status, role)."""


class UniqueViolationError(ConstraintViolationError):
    """Duplicate email, username or (student, course) enrollment."""


class ForeignKeyViolationError(ConstraintViolationError):
    """Row references a parent id that does not exist."""


class NotNullViolationError(ConstraintViolationError):
    """Required column left empty."""


_PREFIXES: tuple[tuple[str, type[ConstraintViolationError]], ...] = (
    ("UNIQUE constraint failed", UniqueViolationError),
    ("CHECK constraint failed", CheckViolationError),
    ("FOREIGN KEY constraint failed", ForeignKeyViolationError),
    ("NOT NULL constraint failed", NotNullViolationError),
)


def translate_integrity_error(error: sqlite3.IntegrityError) -> ConstraintViolationError:
    """Build the matching ConstraintViolationError for an IntegrityError.

    Args:
        error: Error raised by sqlite3

    Returns:
        A ConstraintViolationError subclass instance. Unknown messages map
        to the base class.
    """
    message = str(error)
    for prefix, error_class in _PREFIXES:
        if message.startswith(prefix):
            detail = message[len(prefix):].lstrip(": ").strip()
            return error_class(message, detail=detail or None)
    return ConstraintViolationError(message)
