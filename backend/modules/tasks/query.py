"""
Task listing query builder.

Turns raw listing parameters into a normalized TaskQuery. Owner scoping is
always applied; every other parameter is optional and composes
independently, so leaving one out never changes how the others behave.
"""

import math
from datetime import date
from typing import Optional

from pydantic import BaseModel

from shared.exceptions import ValidationError
from shared.validation import has_nul
from .models import TaskListParams, parse_iso_date

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100

# Offsets are sent to Postgres as bigint
MAX_OFFSET = 2**63 - 1

# Public sort keys mapped to storage columns
SORT_FIELDS = {
    "status": "status",
    "dueDate": "due_date",
}
DEFAULT_SORT_FIELD = "due_date"


class TaskQuery(BaseModel):
    """Normalized filter, sort and page for listing one owner's tasks."""

    owner_id: str

    # Filters (None means not applied)
    status: Optional[str] = None
    due_from: Optional[date] = None
    due_to: Optional[date] = None
    search: Optional[str] = None

    # Sort
    sort_field: str = DEFAULT_SORT_FIELD
    descending: bool = False

    # Page
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT

    model_config = {"frozen": True}

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    def total_pages(self, total: int) -> int:
        """Number of pages needed for total matches at this page size."""
        return math.ceil(total / self.limit)


def _present(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


def _positive_int(value: Optional[str], default: int) -> int:
    """Parse a positive integer, falling back to default on anything else."""
    value = _present(value)
    if value is None:
        return default
    try:
        number = int(value)
    except ValueError:
        return default
    return number if number > 0 else default


def build_task_query(
    owner_id: str,
    params: Optional[TaskListParams] = None,
    default_limit: int = DEFAULT_LIMIT,
    max_limit: int = MAX_LIMIT,
) -> TaskQuery:
    """
    Build the listing query for an owner.

    Args:
        owner_id: Authenticated account ID; always restricts the results
        params: Raw query parameters
        default_limit: Page size used when limit is missing or invalid
        max_limit: Upper bound on page size

    Returns:
        Normalized TaskQuery

    Raises:
        ValidationError: If startDate or endDate is not an ISO 8601 date, or
            status or search contains a null character
    """
    params = params or TaskListParams()

    limit = min(_positive_int(params.limit, default_limit), max_limit)
    # Clamp so the last row index, page * limit - 1, fits in bigint
    page = min(_positive_int(params.page, DEFAULT_PAGE), (MAX_OFFSET + 1) // limit)

    sort_field = SORT_FIELDS.get(_present(params.sort_by) or "", DEFAULT_SORT_FIELD)
    descending = _present(params.order) == "desc"

    errors: list[dict[str, str]] = []
    bounds: dict[str, Optional[date]] = {}
    for field, raw in (("startDate", params.start_date), ("endDate", params.end_date)):
        raw = _present(raw)
        bounds[field] = None
        if raw is None:
            continue
        try:
            bounds[field] = parse_iso_date(raw)
        except ValueError:
            errors.append({"field": field, "message": "Please provide a valid date"})
    for field, raw in (("status", params.status), ("search", params.search)):
        if has_nul(raw):
            errors.append({"field": field, "message": "Value must not contain null characters"})
    if errors:
        raise ValidationError(errors=errors)

    return TaskQuery(
        owner_id=owner_id,
        status=_present(params.status),
        due_from=bounds["startDate"],
        due_to=bounds["endDate"],
        search=_present(params.search),
        sort_field=sort_field,
        descending=descending,
        page=page,
        limit=limit,
    )
