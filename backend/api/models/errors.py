"""
Error response models.

Standardized error responses for the API. Bodies are produced by the
handlers in api/errors.py; these models document them in OpenAPI.
"""

from typing import Any

from pydantic import BaseModel, Field

from shared.models import FieldError


class ErrorResponse(BaseModel):
    """Standard error response format."""

    error: str
    message: str
    details: dict[str, Any] = Field(default_factory=dict)


class ValidationErrorResponse(ErrorResponse):
    """Validation error response format."""

    error: str = "VALIDATION_ERROR"
    message: str = "Validation failed"
    errors: list[FieldError]
