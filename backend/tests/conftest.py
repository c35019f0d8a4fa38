"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
Route tests run against the real application with the store replaced by the
in-memory repositories from tests/fakes.py.
"""

import pytest
from datetime import datetime, timezone, timedelta
import jwt  # PyJWT

from api.app import create_app
from api.dependencies import get_container, reset_container
from modules.auth.passwords import PasswordHasher
from modules.auth.tokens import TokenService
from shared.config import get_settings
from shared.database import disconnect

from tests.fakes import InMemoryAccountRepository, InMemoryTaskRepository


# Test JWT secret (only for testing)
TEST_JWT_SECRET = "test-secret-key-for-testing-only"

# bcrypt's minimum work factor keeps the suite fast
TEST_BCRYPT_ROUNDS = 4


def create_test_token(
    account_id: str = "test-account-123",
    expired: bool = False,
    secret: str = TEST_JWT_SECRET,
) -> str:
    """
    Create a test JWT token for authentication.

    Args:
        account_id: Account ID to put in the subject claim
        expired: If True, creates a token that expired an hour ago
        secret: Signing secret

    Returns:
        JWT token string
    """
    now = datetime.now(timezone.utc)
    exp = now - timedelta(hours=1) if expired else now + timedelta(hours=1)

    payload = {
        "sub": account_id,
        "exp": int(exp.timestamp()),
        "iat": int((now - timedelta(hours=2 if expired else 0)).timestamp()),
    }
    return jwt.encode(payload, secret, algorithm="HS256")


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset the service container, settings cache and store client around each test."""
    reset_container()
    get_settings.cache_clear()
    disconnect()
    yield
    reset_container()
    get_settings.cache_clear()
    disconnect()


@pytest.fixture
def token_service() -> TokenService:
    """Token service signing with the test secret."""
    return TokenService(secret=TEST_JWT_SECRET)


@pytest.fixture
def password_hasher() -> PasswordHasher:
    """Fast bcrypt hasher."""
    return PasswordHasher(rounds=TEST_BCRYPT_ROUNDS)


@pytest.fixture
def account_repository() -> InMemoryAccountRepository:
    return InMemoryAccountRepository()


@pytest.fixture
def task_repository() -> InMemoryTaskRepository:
    return InMemoryTaskRepository()


@pytest.fixture
def container(token_service, password_hasher, account_repository, task_repository):
    """Service container wired to in-memory repositories."""
    container = get_container()
    container._token_service = token_service
    container._password_hasher = password_hasher
    container._account_repository = account_repository
    container._task_repository = task_repository
    return container


@pytest.fixture
def app(container):
    """Create a fresh app wired to the in-memory container."""
    return create_app()


@pytest.fixture
def client(app):
    """Test client that does not run the lifespan (no store connection)."""
    from fastapi.testclient import TestClient

    return TestClient(app)


@pytest.fixture
def test_account_id() -> str:
    """Provide a consistent test account ID."""
    return "test-account-123"


@pytest.fixture
def auth_token(test_account_id: str) -> str:
    """Create a valid auth token for testing."""
    return create_test_token(account_id=test_account_id)


@pytest.fixture
def auth_headers(auth_token: str) -> dict[str, str]:
    """Create authorization headers with a valid token."""
    return {"Authorization": f"Bearer {auth_token}"}
