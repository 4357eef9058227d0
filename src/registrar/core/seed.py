"""Sample data for a fresh database.

Three students, three courses, one enrollment each, a few attendance
records and one user per role. Attendance for enrollment 1 is recorded
twice on 2025-01-03.
"""

from __future__ import annotations

from datetime import date

import structlog

from registrar.db.database import get_db
from registrar.db.models import AttendanceStatus, UserRole

logger = structlog.get_logger(__name__)

SAMPLE_STUDENTS = [
    ("Peter Parker", 23, "peter11@gmail.com", "123 Maple Street"),
    ("Gwen Stacy", 22, "gwenstacy08@gmail.com", "456 Oak Avenue"),
    ("May Parker", 51, "pmay51@gmail.com", "51 Station Street"),
]

SAMPLE_COURSES = [
    ("Software Engineering", "Data Structures and Algorithms", 3),
    ("Biology", "Statistical Biology", 4),
    ("Artificial Intelligence", "Neural Networks", 2),
]

# (student index, course index, date)
SAMPLE_ENROLLMENTS = [
    (0, 0, date(2025, 1, 1)),
    (1, 1, date(2025, 1, 2)),
    (2, 2, date(2025, 1, 3)),
]

# (enrollment index, date, status)
SAMPLE_ATTENDANCE = [
    (0, date(2025, 1, 3), AttendanceStatus.PRESENT),
    (1, date(2025, 1, 3), AttendanceStatus.ABSENT),
    (0, date(2025, 1, 3), AttendanceStatus.PRESENT),
]

SAMPLE_USERS = [
    ("admin", "hashedpassword123", UserRole.ADMIN),
    ("teacher1", "hashedpassword456", UserRole.TEACHER),
    ("student1", "hashedpassword789", UserRole.STUDENT),
]


def seed_sample_data() -> bool:
    """Insert the sample data set in one transaction.

    Returns:
        True if data was inserted, False if Students already had rows
    """
    with get_db() as conn:
        count = conn.execute("SELECT COUNT(*) FROM Students").fetchone()[0]
        if count > 0:
            logger.info("seed.skipped", existing_students=count)
            return False

        student_ids = [
            conn.execute(
                "INSERT INTO Students (name, age, email, address) VALUES (?, ?, ?, ?)",
                student,
            ).lastrowid
            for student in SAMPLE_STUDENTS
        ]
        course_ids = [
            conn.execute(
                "INSERT INTO Courses (name, description, credits) VALUES (?, ?, ?)",
                course,
            ).lastrowid
            for course in SAMPLE_COURSES
        ]
        enrollment_ids = [
            conn.execute(
                """
                INSERT INTO Enrollments (student_id, course_id, enrollment_date)
                VALUES (?, ?, ?)
                """,
                (student_ids[s], course_ids[c], day.isoformat()),
            ).lastrowid
            for s, c, day in SAMPLE_ENROLLMENTS
        ]
        for e, day, status in SAMPLE_ATTENDANCE:
            conn.execute(
                """
                INSERT INTO Attendance (enrollment_id, attendance_date, status)
                VALUES (?, ?, ?)
                """,
                (enrollment_ids[e], day.isoformat(), status.value),
            )
        for username, password_hash, role in SAMPLE_USERS:
            conn.execute(
                "INSERT INTO Users (username, password_hash, role) VALUES (?, ?, ?)",
                (username, password_hash, role.value),
            )

    logger.info(
        "seed.inserted",
        students=len(SAMPLE_STUDENTS),
        courses=len(SAMPLE_COURSES),
        enrollments=len(SAMPLE_ENROLLMENTS),
        attendance=len(SAMPLE_ATTENDANCE),
        users=len(SAMPLE_USERS),
    )
    return True
