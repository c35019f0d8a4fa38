"""
Validation helpers shared by the request models and the API error handlers.

Pydantic already collects every violation on a model; these helpers turn
its error list into the {field, message} pairs returned to clients.
"""

from typing import Any, Iterable, Mapping, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from pydantic_core import PydanticCustomError

from .exceptions import ValidationError

M = TypeVar("M", bound=BaseModel)

# Location prefixes FastAPI adds in front of the field name
_LOCATION_PREFIXES = {"body", "query", "path", "header", "cookie"}

# Raised when the body is valid JSON but not an object
_OBJECT_TYPE_ERRORS = {"model_type", "model_attributes_type", "dict_type"}


def _field_name(loc: Iterable[Any]) -> str:
    parts = [str(p) for p in loc if not isinstance(p, int)]
    if len(parts) > 1 and parts[0] in _LOCATION_PREFIXES:
        parts = parts[1:]
    return ".".join(parts) or "body"


def _message(error: Mapping[str, Any]) -> str:
    if error.get("type") == "json_invalid":
        return "Request body must be valid JSON"
    if error.get("type") in _OBJECT_TYPE_ERRORS:
        return "Request body must be a JSON object"
    return str(error.get("msg", "Invalid value"))


def field_errors(errors: Iterable[Mapping[str, Any]]) -> list[dict[str, str]]:
    """
    Convert pydantic/FastAPI error dicts into {field, message} pairs.

    Args:
        errors: Output of ValidationError.errors() or RequestValidationError.errors()

    Returns:
        One entry per violation, in the order pydantic reported them
    """
    return [
        {"field": _field_name(error.get("loc", ())), "message": _message(error)}
        for error in errors
    ]


def validate_payload(model: Type[M], data: Any) -> M:
    """
    Validate raw data against a request model outside of FastAPI.

    Raises:
        ValidationError: With every violation found, never just the first
    """
    try:
        return model.model_validate(data)
    except PydanticValidationError as e:
        raise ValidationError(errors=field_errors(e.errors())) from e


def has_nul(value: Any) -> bool:
    """Whether value is a string containing NUL, which Postgres text cannot hold."""
    return isinstance(value, str) and "\x00" in value


def reject_nul(value: Any, label: str) -> Any:
    """
    Field validator helper: fail when a string contains NUL.

    Raises:
        PydanticCustomError: "<label> must not contain null characters"
    """
    if has_nul(value):
        raise PydanticCustomError(
            "null_character", f"{label} must not contain null characters"
        )
    return value
