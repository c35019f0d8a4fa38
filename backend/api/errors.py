"""
Exception handlers.

Maps the exception taxonomy onto HTTP responses. Authentication and
internal failures get generic bodies; the cause goes to the log only.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from shared.exceptions import (
    AuthenticationError,
    ConflictError,
    CredentialsError,
    InternalError,
    NotFoundError,
    TaskTrackerError,
    ValidationError,
)
from shared.validation import field_errors

logger = logging.getLogger(__name__)

# Checked in order; the first matching base class wins
STATUS_BY_ERROR: list[tuple[type[TaskTrackerError], int]] = [
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (ConflictError, status.HTTP_400_BAD_REQUEST),
    (CredentialsError, status.HTTP_400_BAD_REQUEST),
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (InternalError, status.HTTP_500_INTERNAL_SERVER_ERROR),
]

UNAUTHORIZED_BODY = {"error": "UNAUTHORIZED", "message": "Unauthorized", "details": {}}
INTERNAL_ERROR_BODY = {
    "error": "INTERNAL_ERROR",
    "message": "Internal server error",
    "details": {},
}


def status_for(exc: TaskTrackerError) -> int:
    """HTTP status for a domain exception."""
    for error_type, status_code in STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def task_tracker_error_handler(request: Request, exc: TaskTrackerError) -> JSONResponse:
    """Domain exception handler."""
    status_code = status_for(exc)

    if status_code == status.HTTP_401_UNAUTHORIZED:
        logger.debug("Rejected %s %s: %s", request.method, request.url.path, exc.code)
        return JSONResponse(
            status_code=status_code,
            content=UNAUTHORIZED_BODY,
            headers={"WWW-Authenticate": "Bearer"},
        )

    if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error(
            "%s %s failed: %s %s",
            request.method,
            request.url.path,
            exc.code,
            exc.details,
            exc_info=exc,
        )
        return JSONResponse(status_code=status_code, content=INTERNAL_ERROR_BODY)

    return JSONResponse(status_code=status_code, content=exc.to_dict())


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Request validation exception handler; reports every violation."""
    error = ValidationError(errors=field_errors(exc.errors()))
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=error.to_dict())


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last-resort handler for store failures and bugs."""
    logger.error(
        "Unhandled error on %s %s", request.method, request.url.path, exc_info=exc
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=INTERNAL_ERROR_BODY,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach all handlers to the application."""
    app.add_exception_handler(TaskTrackerError, task_tracker_error_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
