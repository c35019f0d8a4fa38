"""
Authentication module data models.

Request models double as the registration and login validators: every
field check runs and all violations are reported together.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, EmailStr, Field, TypeAdapter, field_validator
from pydantic_core import PydanticCustomError

from shared.validation import has_nul, reject_nul

_email_adapter = TypeAdapter(EmailStr)


def _require_username(value: Any) -> str:
    if not isinstance(value, str) or not value.strip():
        raise PydanticCustomError("username_required", "Username is required")
    return reject_nul(value, "Username")


class TokenPayload(BaseModel):
    """Decoded access token claims."""

    sub: str = Field(..., description="Subject (account ID)")
    exp: int = Field(..., description="Expiration timestamp")
    iat: int = Field(..., description="Issued at timestamp")


class Account(BaseModel):
    """
    A registered account as stored.

    Internal only: the password hash never leaves the service layer.
    """

    id: str = Field(..., description="Account ID (UUID)")
    username: str = Field(..., description="Unique username")
    email: str = Field(..., description="Unique email address")
    password_hash: str = Field(..., repr=False, description="bcrypt hash")
    created_at: Optional[datetime] = Field(None, description="Registration time")


class RegisterRequest(BaseModel):
    """Registration payload."""

    username: str = Field(default="", validate_default=True)
    email: str = Field(default="", validate_default=True)
    password: str = Field(default="", validate_default=True)

    @field_validator("username", mode="before")
    @classmethod
    def username_required(cls, v: Any) -> str:
        return _require_username(v)

    @field_validator("email", mode="before")
    @classmethod
    def email_valid(cls, v: Any) -> str:
        if not isinstance(v, str) or has_nul(v):
            raise PydanticCustomError("email_invalid", "Please provide a valid email")
        try:
            return str(_email_adapter.validate_python(v))
        except ValueError:
            raise PydanticCustomError("email_invalid", "Please provide a valid email")

    @field_validator("password", mode="before")
    @classmethod
    def password_length(cls, v: Any) -> str:
        if not isinstance(v, str) or len(v) < 6:
            raise PydanticCustomError(
                "password_too_short",
                "Password must be at least 6 characters long",
            )
        return reject_nul(v, "Password")


class LoginRequest(BaseModel):
    """Login payload. No password policy checks, by intent."""

    username: str = Field(default="", validate_default=True)
    password: str = Field(default="", validate_default=True)

    @field_validator("username", mode="before")
    @classmethod
    def username_required(cls, v: Any) -> str:
        return _require_username(v)

    @field_validator("password", mode="before")
    @classmethod
    def password_required(cls, v: Any) -> str:
        if not isinstance(v, str) or not v:
            raise PydanticCustomError("password_required", "Password is required")
        return reject_nul(v, "Password")


class RegisterResponse(BaseModel):
    """Confirmation returned after registration."""

    message: str = "User registered successfully"


class TokenResponse(BaseModel):
    """Access token returned after login."""

    token: str
