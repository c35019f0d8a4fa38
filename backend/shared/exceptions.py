"""
Base exception classes for the Task Tracker backend.

Each module should define its own exceptions that inherit from these bases.
The API layer maps each base class to an HTTP status in api/errors.py.
"""

from typing import Optional, Any


class TaskTrackerError(Exception):
    """
    Base exception for all Task Tracker errors.

    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class NotFoundError(TaskTrackerError):
    """Resource not found."""

    pass


class ValidationError(TaskTrackerError):
    """
    Input validation failed.

    Carries every violation found as a list of {field, message} pairs.
    """

    def __init__(
        self,
        message: str = "Validation failed",
        errors: Optional[list[dict[str, str]]] = None,
        code: Optional[str] = "VALIDATION_ERROR",
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.errors = errors or []

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["errors"] = self.errors
        return result


class ConflictError(TaskTrackerError):
    """A unique field already exists."""

    pass


class CredentialsError(TaskTrackerError):
    """Login credentials were rejected."""

    pass


class AuthenticationError(TaskTrackerError):
    """Authentication failed (invalid or missing token)."""

    pass


class InternalError(TaskTrackerError):
    """Unexpected server-side failure (store, hashing, signing)."""

    pass
