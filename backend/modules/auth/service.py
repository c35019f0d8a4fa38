"""
Account service implementation.

Registers accounts and exchanges credentials for access tokens.
"""

import asyncio
import logging

from .exceptions import AccountConflictError, InvalidCredentialsError
from .interfaces import IAccountRepository, IAccountService
from .models import Account, LoginRequest, RegisterRequest, TokenResponse
from .passwords import PasswordHasher
from .tokens import TokenService

logger = logging.getLogger(__name__)


class AccountService(IAccountService):
    """
    Implementation of the account service.

    Repository and hashing calls block, so they run in worker threads
    to keep the event loop free for other requests.
    """

    def __init__(
        self,
        repository: IAccountRepository,
        hasher: PasswordHasher,
        tokens: TokenService,
    ):
        self._repository = repository
        self._hasher = hasher
        self._tokens = tokens

    async def register(self, request: RegisterRequest) -> Account:
        """Register a new account; no token is issued."""
        taken = await asyncio.to_thread(
            self._repository.exists_with_username_or_email,
            request.username,
            request.email,
        )
        if taken:
            logger.info("Registration rejected: username or email already exists")
            raise AccountConflictError()

        password_hash = await asyncio.to_thread(self._hasher.hash, request.password)

        # insert() raises AccountConflictError if a concurrent registration won
        account = await asyncio.to_thread(
            self._repository.insert,
            request.username,
            request.email,
            password_hash,
        )
        logger.info("Registered account %s", account.id)
        return account

    async def login(self, request: LoginRequest) -> TokenResponse:
        """Verify credentials and issue a token."""
        account = await asyncio.to_thread(
            self._repository.find_by_username, request.username
        )

        if account is None:
            await asyncio.to_thread(self._hasher.dummy_verify)
            raise InvalidCredentialsError()

        valid = await asyncio.to_thread(
            self._hasher.verify, request.password, account.password_hash
        )
        if not valid:
            logger.info("Failed login for account %s", account.id)
            raise InvalidCredentialsError()

        return TokenResponse(token=self._tokens.issue(account.id))
