"""
Authentication module interfaces.

The API layer depends on IAccountService, and the service depends on
IAccountRepository, never on the concrete classes. This enables testing
with in-memory fakes and swapping the store.
"""

from typing import Protocol, Optional, runtime_checkable

from .models import Account, RegisterRequest, LoginRequest, TokenResponse


@runtime_checkable
class IAccountRepository(Protocol):
    """Storage contract for accounts."""

    def find_by_username(self, username: str) -> Optional[Account]:
        ...

    def exists_with_username_or_email(self, username: str, email: str) -> bool:
        ...

    def insert(self, username: str, email: str, password_hash: str) -> Account:
        """
        Persist a new account.

        Implementations must reject duplicate usernames and emails
        atomically by raising AccountConflictError.
        """
        ...


@runtime_checkable
class IAccountService(Protocol):
    """
    Interface for account operations.

    This protocol defines the contract that the auth module exposes
    to the API layer.
    """

    async def register(self, request: RegisterRequest) -> Account:
        """
        Register a new account.

        Args:
            request: Validated registration payload

        Returns:
            The created account (callers must not expose password_hash)

        Raises:
            AccountConflictError: If username or email is taken
            CredentialHashingError: If hashing fails
        """
        ...

    async def login(self, request: LoginRequest) -> TokenResponse:
        """
        Exchange credentials for an access token.

        Raises:
            InvalidCredentialsError: For unknown user or wrong password alike
        """
        ...
