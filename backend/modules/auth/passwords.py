"""
Password hashing.

Wraps passlib's bcrypt context. Hashes are salted, so hashing the same
password twice yields two different strings that both verify.
"""

import logging

from passlib.context import CryptContext

from .exceptions import CredentialHashingError

logger = logging.getLogger(__name__)


class PasswordHasher:
    """Hash and verify passwords with bcrypt."""

    def __init__(self, rounds: int = 10):
        self._context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=rounds,
        )

    def hash(self, password: str) -> str:
        """
        Generate a salted password hash.

        Args:
            password: Plain text password

        Returns:
            Password hash

        Raises:
            CredentialHashingError: If the hashing backend fails
        """
        try:
            return self._context.hash(password)
        except Exception as e:
            logger.exception("Password hashing failed")
            raise CredentialHashingError(type(e).__name__) from e

    def verify(self, password: str, hashed_password: str) -> bool:
        """
        Verify a password against a stored hash.

        Returns False for any mismatch, including a stored value that
        is not a recognizable hash.
        """
        if not password or not hashed_password:
            return False
        try:
            return self._context.verify(password, hashed_password)
        except (ValueError, TypeError):
            logger.warning("Stored password hash could not be verified")
            return False

    def dummy_verify(self) -> bool:
        """Spend the time of a real verify; used when no account matched."""
        return self._context.dummy_verify()
