"""
Tasks module data models.

TaskPayload is the task validator used by both create and update: it
collects every violation and ignores unknown fields, so a client cannot
smuggle in an owner.
"""

from datetime import date, datetime
from enum import Enum
from typing import Any, Optional

from pydantic import Field, field_validator
from pydantic_core import PydanticCustomError

from shared.models import CamelModel
from shared.validation import reject_nul


class TaskStatus(str, Enum):
    """Task progress status."""

    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"


def parse_iso_date(value: str) -> date:
    """
    Parse an ISO 8601 date or date-time string into a calendar date.

    Date-times are reduced to their date part as written, without
    timezone conversion.

    Raises:
        ValueError: If value is not an ISO 8601 date or date-time
    """
    text = value.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    return datetime.fromisoformat(text).date()


class TaskPayload(CamelModel):
    """Body of POST /tasks and PUT /tasks/{id}."""

    title: str = Field(default="", validate_default=True, description="Task title")
    description: Optional[str] = Field(None, description="Free-form details")
    status: TaskStatus = Field(default=None, validate_default=True)
    due_date: Optional[date] = Field(None, description="Due date (YYYY-MM-DD)")

    @field_validator("title", mode="before")
    @classmethod
    def title_required(cls, v: Any) -> str:
        if not isinstance(v, str) or not v.strip():
            raise PydanticCustomError("title_required", "Title is required")
        return reject_nul(v, "Title")

    @field_validator("description", mode="before")
    @classmethod
    def description_text(cls, v: Any) -> Any:
        return reject_nul(v, "Description")

    @field_validator("status", mode="before")
    @classmethod
    def status_known(cls, v: Any) -> TaskStatus:
        if isinstance(v, TaskStatus):
            return v
        try:
            return TaskStatus(v)
        except ValueError:
            raise PydanticCustomError(
                "status_invalid",
                "Status must be either pending, in-progress, or completed",
            )

    @field_validator("due_date", mode="before")
    @classmethod
    def due_date_iso(cls, v: Any) -> Optional[date]:
        if v is None or isinstance(v, date):
            return v
        if isinstance(v, str):
            try:
                return parse_iso_date(v)
            except ValueError:
                pass
        raise PydanticCustomError("date_invalid", "Please provide a valid date")


class Task(CamelModel):
    """A stored task, as returned to its owner."""

    id: str = Field(..., description="Task ID (UUID)")
    title: str
    description: Optional[str] = None
    status: TaskStatus
    due_date: Optional[date] = None
    owner_id: str = Field(..., description="ID of the owning account")
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class TaskListParams(CamelModel):
    """
    Raw listing parameters, exactly as received in the query string.

    Values stay strings here; build_task_query() normalizes them.
    """

    page: Optional[str] = None
    limit: Optional[str] = None
    sort_by: Optional[str] = None
    order: Optional[str] = None
    status: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    search: Optional[str] = None


class TaskListResponse(CamelModel):
    """One page of tasks plus pagination metadata."""

    tasks: list[Task]
    current_page: int
    total_pages: int
    total_tasks: int


class TaskDeletedResponse(CamelModel):
    """Confirmation returned after deletion."""

    message: str = "Task deleted successfully"
