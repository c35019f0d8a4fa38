"""
Authentication module.

Handles account registration, login, password hashing and access tokens.

Public API:
- IAccountService: Interface for account operations
- PasswordHasher, TokenService: Credential primitives
- Account, RegisterRequest, LoginRequest, TokenResponse: Models
- Auth exceptions: InvalidTokenError, ExpiredTokenError, etc.
"""

from .interfaces import IAccountRepository, IAccountService
from .models import (
    Account,
    LoginRequest,
    RegisterRequest,
    RegisterResponse,
    TokenPayload,
    TokenResponse,
)
from .passwords import PasswordHasher
from .tokens import TokenService
from .exceptions import (
    InvalidTokenError,
    ExpiredTokenError,
    MissingTokenError,
    InvalidCredentialsError,
    AccountConflictError,
    CredentialHashingError,
    TokenConfigurationError,
)

__all__ = [
    # Interfaces
    "IAccountRepository",
    "IAccountService",
    # Primitives
    "PasswordHasher",
    "TokenService",
    # Models
    "Account",
    "LoginRequest",
    "RegisterRequest",
    "RegisterResponse",
    "TokenPayload",
    "TokenResponse",
    # Exceptions
    "InvalidTokenError",
    "ExpiredTokenError",
    "MissingTokenError",
    "InvalidCredentialsError",
    "AccountConflictError",
    "CredentialHashingError",
    "TokenConfigurationError",
]
