"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations.

Tests replace pieces through app.dependency_overrides or by setting the
container's private attributes before first access.
"""

from datetime import timedelta
from typing import TYPE_CHECKING

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.auth.interfaces import IAccountRepository, IAccountService
    from modules.auth.passwords import PasswordHasher
    from modules.auth.tokens import TokenService
    from modules.tasks.interfaces import ITaskRepository, ITaskService


class ServiceContainer:
    """
    Container for all service instances.

    This class manages the lifecycle of service instances and their
    dependencies. Services are created lazily on first access.

    All services are cached as singletons within the container.
    Use reset() to clear all cached services for testing.
    """

    def __init__(self) -> None:
        self._password_hasher: "PasswordHasher | None" = None
        self._token_service: "TokenService | None" = None
        self._account_repository: "IAccountRepository | None" = None
        self._task_repository: "ITaskRepository | None" = None
        self._account_service: "IAccountService | None" = None
        self._task_service: "ITaskService | None" = None

    @property
    def password_hasher(self) -> "PasswordHasher":
        """Get the password hasher instance."""
        if self._password_hasher is None:
            from modules.auth.passwords import PasswordHasher
            from shared.config import get_settings
            self._password_hasher = PasswordHasher(rounds=get_settings().bcrypt_rounds)
        return self._password_hasher

    @property
    def tokens(self) -> "TokenService":
        """Get the token service instance."""
        if self._token_service is None:
            from modules.auth.tokens import TokenService
            from shared.config import get_settings
            settings = get_settings()
            self._token_service = TokenService(
                secret=settings.jwt_secret,
                algorithm=settings.jwt_algorithm,
                expires_in=timedelta(minutes=settings.access_token_expire_minutes),
            )
        return self._token_service

    @property
    def account_repository(self) -> "IAccountRepository":
        """Get the account repository instance."""
        if self._account_repository is None:
            from modules.auth.repository import AccountRepository
            from shared.database import get_supabase_client
            self._account_repository = AccountRepository(get_supabase_client())
        return self._account_repository

    @property
    def task_repository(self) -> "ITaskRepository":
        """Get the task repository instance."""
        if self._task_repository is None:
            from modules.tasks.repository import TaskRepository
            from shared.database import get_supabase_client
            self._task_repository = TaskRepository(get_supabase_client())
        return self._task_repository

    @property
    def accounts(self) -> "IAccountService":
        """Get the account service instance."""
        if self._account_service is None:
            from modules.auth.service import AccountService
            self._account_service = AccountService(
                repository=self.account_repository,
                hasher=self.password_hasher,
                tokens=self.tokens,
            )
        return self._account_service

    @property
    def tasks(self) -> "ITaskService":
        """Get the task service instance."""
        if self._task_service is None:
            from modules.tasks.service import TaskService
            from shared.config import get_settings
            settings = get_settings()
            self._task_service = TaskService(
                repository=self.task_repository,
                default_page_size=settings.default_page_size,
                max_page_size=settings.max_page_size,
            )
        return self._task_service

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self._password_hasher = None
        self._token_service = None
        self._account_repository = None
        self._task_repository = None
        self._account_service = None
        self._task_service = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    This clears the cached container, so the next call to get_container()
    will create a fresh container with new service instances.

    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_token_service() -> "TokenService":
    """FastAPI dependency for the token service."""
    return get_container().tokens


def get_account_service() -> "IAccountService":
    """FastAPI dependency for the account service."""
    return get_container().accounts


def get_task_service() -> "ITaskService":
    """FastAPI dependency for the task service."""
    return get_container().tasks
