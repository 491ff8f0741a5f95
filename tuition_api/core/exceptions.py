# tuition_api/core/exceptions.py
"""Custom exceptions for the tuition back-office API."""
from fastapi import HTTPException
from typing import Any, Dict, Optional


class TuitionAPIException(HTTPException):
    """Base exception for the application."""
    def __init__(
        self,
        status_code: int,
        detail: Any,
        headers: Optional[Dict[str, Any]] = None
    ):
        super().__init__(status_code=status_code, detail=detail, headers=headers)


class NotFoundError(TuitionAPIException):
    """Raised when a record id is unknown."""
    def __init__(self, resource: str):
        super().__init__(status_code=404, detail=f"{resource} not found")


class InvalidCredentials(TuitionAPIException):
    def __init__(self):
        super().__init__(status_code=401, detail="Invalid credentials")


class DuplicateRecordError(TuitionAPIException):
    """Raised when a unique field collides with an existing record."""
    def __init__(self, resource: str, field: str, value: Any = None):
        detail = {
            "error": f"Duplicate {field}",
            "message": f"A {resource.lower()} with this {field} already exists",
            "field": field,
        }
        if value is not None:
            detail["value"] = value
        super().__init__(status_code=409, detail=detail)


class DatabaseError(TuitionAPIException):
    """Raised for store failures; the message stays generic."""
    def __init__(self, message: str = "Database error"):
        super().__init__(
            status_code=500,
            detail={
                "error": "Database Error",
                "message": message
            }
        )


class InvalidRecordError(TuitionAPIException):
    """Raised when a write breaks a NOT NULL or CHECK constraint."""
    def __init__(self, resource: str):
        super().__init__(
            status_code=400,
            detail={
                "error": "Invalid record",
                "message": f"The {resource.lower()} violates a required-field or range constraint",
            }
        )
