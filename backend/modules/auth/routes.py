"""
Account API endpoints.

Registration and login. Both are public; validation failures, conflicts and
bad credentials all come back as 400 through the API error handlers.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_account_service
from api.models.errors import ValidationErrorResponse

from .interfaces import IAccountService
from .models import LoginRequest, RegisterRequest, RegisterResponse, TokenResponse

router = APIRouter()

_ERROR_RESPONSES = {
    400: {"model": ValidationErrorResponse},
}


@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=201,
    responses=_ERROR_RESPONSES,
)
async def register(
    request: RegisterRequest,
    service: IAccountService = Depends(get_account_service),
) -> RegisterResponse:
    """
    Register a new account.

    A token is not returned; log in separately.
    """
    await service.register(request)
    return RegisterResponse()


@router.post("/login", response_model=TokenResponse, responses=_ERROR_RESPONSES)
async def login(
    request: LoginRequest,
    service: IAccountService = Depends(get_account_service),
) -> TokenResponse:
    """
    Exchange username and password for an access token.

    The token expires after one hour by default.
    """
    return await service.login(request)
