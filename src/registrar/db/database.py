"""SQLite database connection and schema management.

Provides connection management and the schema lifecycle (create, drop,
reset) for the registrar database.
"""

from __future__ import annotations

import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Generator

import structlog

from registrar.db.errors import translate_integrity_error

logger = structlog.get_logger(__name__)

# Default database location
DEFAULT_DB_PATH = Path("db/registrar.db")

DEFAULT_COURSE_DESCRIPTION = "No description available"

# Current connection (module-level for simplicity in CLI context)
_db_path: Path | None = None


def init_db(db_path: Path | None = None) -> None:
    """Initialize database with schema.

    Creates the database file, all tables, indexes and views if they
    don't exist. Calling it again on an initialized database is a no-op.

    Args:
        db_path: Path to database file. Defaults to db/registrar.db
    """
    global _db_path
    _db_path = db_path or DEFAULT_DB_PATH

    with get_db() as conn:
        _create_schema(conn)

    logger.info("database.initialized", path=str(_db_path))


def drop_db(db_path: Path | None = None) -> None:
    """Drop all views and tables.

    Dependent tables are dropped before the tables they reference.
    Missing objects are ignored, so this can run on an empty database.

    Args:
        db_path: Database to drop from. Defaults to the current database.
    """
    global _db_path
    if db_path is not None:
        _db_path = db_path

    with get_db() as conn:
        conn.executescript(
            """
            DROP VIEW IF EXISTS AttendanceSummary;
            DROP VIEW IF EXISTS StudentCourses;
            DROP TABLE IF EXISTS Users;
            DROP TABLE IF EXISTS Attendance;
            DROP TABLE IF EXISTS Enrollments;
            DROP TABLE IF EXISTS Courses;
            DROP TABLE IF EXISTS Students;
            """
        )

    logger.info("database.dropped", path=str(get_db_path()))


def reset_db(db_path: Path | None = None) -> None:
    """Drop and recreate the schema. All rows are lost."""
    drop_db(db_path)
    init_db(db_path or _db_path)


def get_db_path() -> Path:
    """Return the path of the database currently in use."""
    return _db_path or DEFAULT_DB_PATH


@contextmanager
def get_db() -> Generator[sqlite3.Connection, None, None]:
    """Get database connection as context manager.

    Commits when the block completes, rolls back on any exception.
    Constraint failures are re-raised as ConstraintViolationError
    subclasses.

    Yields:
        SQLite connection with row factory set to sqlite3.Row

    Example:
        with get_db() as conn:
            cursor = conn.execute("SELECT * FROM Students")
            rows = cursor.fetchall()
    """
    db_path = get_db_path()

    # Ensure directory exists
    db_path.parent.mkdir(parents=True, exist_ok=True)

    conn = sqlite3.connect(db_path)
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys = ON")

    try:
        yield conn
        conn.commit()
    except sqlite3.IntegrityError as e:
        conn.rollback()
        raise translate_integrity_error(e) from e
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def _create_schema(conn: sqlite3.Connection) -> None:
    """Create database schema.

    Uses IF NOT EXISTS for idempotency.
    """
    conn.executescript(
        f"""
        -- Students: personal information
        CREATE TABLE IF NOT EXISTS Students (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT NOT NULL,
            age INTEGER NOT NULL CHECK (age > 0 AND age < 120),
            email TEXT NOT NULL UNIQUE,
            address TEXT
        );

        -- Courses: course catalogue
        CREATE TABLE IF NOT EXISTS Courses (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT NOT NULL,
            description TEXT DEFAULT '{DEFAULT_COURSE_DESCRIPTION}',
            credits INTEGER NOT NULL CHECK (credits > 0)
        );

        -- Enrollments: links students to courses, one row per pair
        CREATE TABLE IF NOT EXISTS Enrollments (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            student_id INTEGER NOT NULL,
            course_id INTEGER NOT NULL,
            enrollment_date TEXT NOT NULL DEFAULT (date('now', 'localtime')),
            FOREIGN KEY (student_id) REFERENCES Students(id) ON DELETE CASCADE,
            FOREIGN KEY (course_id) REFERENCES Courses(id) ON DELETE CASCADE,
            UNIQUE (student_id, course_id)
        );

        -- Attendance: several rows per enrollment and date are allowed
        CREATE TABLE IF NOT EXISTS Attendance (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            enrollment_id INTEGER NOT NULL,
            attendance_date TEXT NOT NULL,
            status TEXT NOT NULL CHECK (status IN ('Present', 'Absent', 'Late')),
            FOREIGN KEY (enrollment_id) REFERENCES Enrollments(id) ON DELETE CASCADE
        );

        -- Users: login identities, not linked to Students
        CREATE TABLE IF NOT EXISTS Users (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            username TEXT NOT NULL UNIQUE,
            password_hash TEXT NOT NULL,
            role TEXT NOT NULL CHECK (role IN ('Admin', 'Teacher', 'Student'))
        );

        -- Indexes
        CREATE INDEX IF NOT EXISTS idx_student_name ON Students(name);
        CREATE INDEX IF NOT EXISTS idx_course_name ON Courses(name);

        CREATE VIEW IF NOT EXISTS StudentCourses AS
        SELECT
            s.id AS student_id,
            s.name AS student_name,
            c.name AS course_name,
            e.enrollment_date
        FROM Students s
        JOIN Enrollments e ON s.id = e.student_id
        JOIN Courses c ON e.course_id = c.id;

        CREATE VIEW IF NOT EXISTS AttendanceSummary AS
        SELECT
            e.student_id,
            s.name AS student_name,
            COUNT(CASE WHEN a.status = 'Present' THEN 1 END) AS total_present,
            COUNT(CASE WHEN a.status = 'Absent' THEN 1 END) AS total_absent,
            COUNT(CASE WHEN a.status = 'Late' THEN 1 END) AS total_late
        FROM Attendance a
        JOIN Enrollments e ON a.enrollment_id = e.id
        JOIN Students s ON e.student_id = s.id
        GROUP BY e.student_id, s.name;
        """
    )
