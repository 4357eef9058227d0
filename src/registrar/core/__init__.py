"""Core operations: procedures and sample data."""

from registrar.core.procedures import enroll_student, mark_attendance
from registrar.core.seed import seed_sample_data

__all__ = ["enroll_student", "mark_attendance", "seed_sample_data"]
