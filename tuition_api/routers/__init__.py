from . import health, auth, students, teachers, branches, receipts, activity_logs

__all__ = [
    "health",
    "auth",
    "students",
    "teachers",
    "branches",
    "receipts",
    "activity_logs",
]
