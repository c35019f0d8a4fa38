"""
Authentication module exceptions.

These exceptions are raised by the auth module and caught by the API
error handlers, which turn them into HTTP responses.
"""

from shared.exceptions import (
    AuthenticationError,
    ConflictError,
    CredentialsError,
    InternalError,
)


class InvalidTokenError(AuthenticationError):
    """Raised when a JWT token is invalid, malformed or forged."""

    def __init__(self, message: str = "Invalid authentication token"):
        super().__init__(message, code="INVALID_TOKEN")


class ExpiredTokenError(AuthenticationError):
    """Raised when a JWT token has expired."""

    def __init__(self, message: str = "Authentication token has expired"):
        super().__init__(message, code="TOKEN_EXPIRED")


class MissingTokenError(AuthenticationError):
    """Raised when no authentication token is provided."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message, code="MISSING_TOKEN")


class InvalidCredentialsError(CredentialsError):
    """
    Raised when login fails.

    Unknown usernames and wrong passwords both raise this, with the
    same message, so callers cannot enumerate accounts.
    """

    def __init__(self):
        super().__init__("Invalid credentials", code="INVALID_CREDENTIALS")


class AccountConflictError(ConflictError):
    """Raised when a username or email is already registered."""

    def __init__(self):
        super().__init__(
            "Username or email already exists",
            code="ACCOUNT_EXISTS",
        )


class CredentialHashingError(InternalError):
    """Raised when the password hasher itself fails."""

    def __init__(self, reason: str):
        super().__init__(
            "Password hashing failed",
            code="HASHING_FAILED",
            details={"reason": reason},
        )


class TokenConfigurationError(InternalError):
    """Raised when tokens are used without a signing secret configured."""

    def __init__(self):
        super().__init__(
            "Server authentication not configured",
            code="AUTH_NOT_CONFIGURED",
        )
