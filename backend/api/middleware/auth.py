"""
Bearer token authentication gate.

Extracts the bearer token from the Authorization header, verifies it with
the token service and resolves the caller's AuthContext. Any failure raises
an AuthenticationError, which the API error handlers turn into a generic 401
before the route body runs.
"""

from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from modules.auth.exceptions import MissingTokenError
from modules.auth.tokens import TokenService
from shared.models import AuthContext

from ..dependencies import get_token_service

# Bearer token extractor; returns None instead of raising so the
# rejection goes through the same path as a bad token
bearer_scheme = HTTPBearer(auto_error=False)


async def get_auth_context(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    tokens: TokenService = Depends(get_token_service),
) -> AuthContext:
    """
    Dependency that requires authentication.

    Usage:
        @router.get("/protected")
        async def protected_route(ctx: AuthContext = Depends(get_auth_context)):
            return {"account_id": ctx.account_id}

    Raises:
        MissingTokenError: No bearer credential in the request
        ExpiredTokenError: Token is past its expiry
        InvalidTokenError: Token is malformed or its signature does not match
    """
    if credentials is None:
        raise MissingTokenError()

    account_id = tokens.verify(credentials.credentials)
    return AuthContext(account_id=account_id)


# Type alias for cleaner route definitions
RequireAuth = Depends(get_auth_context)
