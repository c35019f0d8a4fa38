"""
Access token issuance and verification.

Tokens are stateless HS256 JWTs carrying the account ID as the subject.
Changing the signing secret invalidates every outstanding token.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt

from .exceptions import (
    ExpiredTokenError,
    InvalidTokenError,
    MissingTokenError,
    TokenConfigurationError,
)
from .models import TokenPayload


class TokenService:
    """Issue and verify signed, time-limited identity tokens."""

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        expires_in: timedelta = timedelta(hours=1),
    ):
        self._secret = secret
        self._algorithm = algorithm
        self._expires_in = expires_in

    def _require_secret(self) -> str:
        if not self._secret:
            raise TokenConfigurationError()
        return self._secret

    def issue(self, account_id: str, now: Optional[datetime] = None) -> str:
        """
        Create a signed token for an account.

        Args:
            account_id: Account the token asserts
            now: Issue time, defaults to the current UTC time

        Returns:
            Encoded JWT string
        """
        secret = self._require_secret()
        issued_at = now or datetime.now(timezone.utc)
        payload = {
            "sub": account_id,
            "iat": issued_at,
            "exp": issued_at + self._expires_in,
        }
        return jwt.encode(payload, secret, algorithm=self._algorithm)

    def decode(self, token: Optional[str]) -> TokenPayload:
        """
        Verify a token and return its claims.

        Raises:
            MissingTokenError: If token is empty or None
            ExpiredTokenError: If the token is past its expiry
            InvalidTokenError: If the signature or structure is wrong
        """
        if not token:
            raise MissingTokenError()

        secret = self._require_secret()
        try:
            payload = jwt.decode(
                token,
                secret,
                algorithms=[self._algorithm],
                options={"require": ["sub", "exp", "iat"]},
            )
        except jwt.ExpiredSignatureError:
            raise ExpiredTokenError()
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(str(e))

        return TokenPayload(**payload)

    def verify(self, token: Optional[str]) -> str:
        """Verify a token and return the account ID it was issued for."""
        return self.decode(token).sub
