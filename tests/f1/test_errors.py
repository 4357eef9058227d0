"""Tests for IntegrityError translation."""

import sqlite3

import pytest

from registrar.db.errors import (
    CheckViolationError,
    ConstraintViolationError,
    ForeignKeyViolationError,
    NotNullViolationError,
    RegistrarError,
    UniqueViolationError,
    translate_integrity_error,
)
from registrar.db.students_repository import insert_student


@pytest.mark.parametrize(
    "message,expected,detail",
    [
        ("UNIQUE constraint failed: Students.email", UniqueViolationError, "Students.email"),
        ("CHECK constraint failed: age > 0 AND age < 120", CheckViolationError, "age > 0 AND age < 120"),
        ("FOREIGN KEY constraint failed", ForeignKeyViolationError, None),
        ("NOT NULL constraint failed: Users.role", NotNullViolationError, "Users.role"),
    ],
)
def test_translate_known_messages(message, expected, detail):
    error = translate_integrity_error(sqlite3.IntegrityError(message))

    assert type(error) is expected
    assert str(error) == message
    assert error.detail == detail


def test_translate_unknown_message():
    error = translate_integrity_error(sqlite3.IntegrityError("datatype mismatch"))

    assert type(error) is ConstraintViolationError


def test_hierarchy():
    assert issubclass(UniqueViolationError, ConstraintViolationError)
    assert issubclass(ConstraintViolationError, RegistrarError)


def test_raised_error_chains_sqlite_error(init_test_db):
    """Repository errors keep the original sqlite3 error as cause."""
    insert_student("Peter Parker", 23, "peter11@gmail.com")

    with pytest.raises(UniqueViolationError) as exc_info:
        insert_student("Peter Parker", 23, "peter11@gmail.com")

    assert isinstance(exc_info.value.__cause__, sqlite3.IntegrityError)
