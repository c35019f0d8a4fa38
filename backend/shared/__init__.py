"""
Shared infrastructure for the Task Tracker backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- database: Supabase client lifecycle
- repository: Base class for Supabase repositories
- logging_setup: Root logger configuration
- exceptions: Base exception classes
- validation: Conversion of validation errors into {field, message} pairs

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .database import connect, disconnect, get_supabase_client
from .exceptions import (
    TaskTrackerError,
    NotFoundError,
    ValidationError,
    ConflictError,
    CredentialsError,
    AuthenticationError,
    InternalError,
)
from .models import AuthContext, CamelModel, FieldError

__all__ = [
    "Settings",
    "get_settings",
    "connect",
    "disconnect",
    "get_supabase_client",
    "TaskTrackerError",
    "NotFoundError",
    "ValidationError",
    "ConflictError",
    "CredentialsError",
    "AuthenticationError",
    "InternalError",
    "AuthContext",
    "CamelModel",
    "FieldError",
]
