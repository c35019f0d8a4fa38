"""
Tasks module interfaces.

ITaskService is what the API layer depends on. ITaskRepository is the
document-store contract the service is written against: every single-task
operation takes the owner ID and must filter on it in the same store call.
"""

from typing import Any, Optional, Protocol, runtime_checkable

from shared.models import AuthContext
from .models import Task, TaskListParams, TaskListResponse, TaskPayload
from .query import TaskQuery


@runtime_checkable
class ITaskRepository(Protocol):
    """Storage contract for tasks."""

    def insert(self, data: dict[str, Any]) -> Task:
        ...

    def find(self, query: TaskQuery) -> list[Task]:
        """Return one page of tasks matching the query, sorted."""
        ...

    def count(self, query: TaskQuery) -> int:
        """Count all tasks matching the query's filters, ignoring paging."""
        ...

    def find_one(self, task_id: str, owner_id: str) -> Optional[Task]:
        ...

    def update(
        self, task_id: str, owner_id: str, changes: dict[str, Any]
    ) -> Optional[Task]:
        ...

    def delete(self, task_id: str, owner_id: str) -> bool:
        """Delete the task; False if no task with that id belongs to owner."""
        ...


@runtime_checkable
class ITaskService(Protocol):
    """
    Interface for task operations.

    Every method takes the AuthContext resolved by the auth gate; the
    owner is never read from the payload.
    """

    async def create_task(self, ctx: AuthContext, payload: TaskPayload) -> Task:
        """
        Create a task owned by the authenticated account.

        Returns:
            The created task with its assigned ID
        """
        ...

    async def list_tasks(
        self, ctx: AuthContext, params: TaskListParams
    ) -> TaskListResponse:
        """
        List the account's tasks with filtering, sorting and pagination.

        Raises:
            ValidationError: If a date filter is malformed
        """
        ...

    async def get_task(self, ctx: AuthContext, task_id: str) -> Task:
        """
        Raises:
            TaskNotFoundError: If the account has no task with that ID
        """
        ...

    async def update_task(
        self, ctx: AuthContext, task_id: str, payload: TaskPayload
    ) -> Task:
        """
        Replace title and status, and description/due date when supplied.

        Raises:
            TaskNotFoundError: If the account has no task with that ID
        """
        ...

    async def delete_task(self, ctx: AuthContext, task_id: str) -> None:
        """
        Raises:
            TaskNotFoundError: If the account has no task with that ID
        """
        ...
