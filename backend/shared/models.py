"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class AuthContext(BaseModel):
    """
    Identity resolved by the auth gate for a single request.

    Produced only from a verified token and passed explicitly into
    service calls. It is the sole source of owner identity for tasks.
    """

    account_id: str = Field(..., description="ID of the authenticated account")

    model_config = {"frozen": True}


class CamelModel(BaseModel):
    """
    Base for API models exchanged as camelCase JSON.

    Fields are declared in snake_case; input accepts either spelling and
    responses are serialized with the camelCase aliases.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class FieldError(BaseModel):
    """A single validation violation."""

    field: str
    message: str
