"""Registrar: students, courses, enrollments and attendance on SQLite."""

__version__ = "0.1.0"
