"""
Task service implementation.

Binds every operation to the authenticated owner and delegates storage
to an ITaskRepository.
"""

import asyncio
import logging
from typing import Any

from shared.models import AuthContext
from .exceptions import TaskNotFoundError
from .interfaces import ITaskRepository, ITaskService
from .models import Task, TaskListParams, TaskListResponse, TaskPayload
from .query import DEFAULT_LIMIT, MAX_LIMIT, build_task_query

logger = logging.getLogger(__name__)


class TaskService(ITaskService):
    """
    Task service backed by a repository.

    Repository calls block on the network, so they run in worker threads.
    """

    def __init__(
        self,
        repository: ITaskRepository,
        default_page_size: int = DEFAULT_LIMIT,
        max_page_size: int = MAX_LIMIT,
    ):
        self._repository = repository
        self._default_page_size = default_page_size
        self._max_page_size = max_page_size

    async def create_task(self, ctx: AuthContext, payload: TaskPayload) -> Task:
        """Create a task owned by ctx.account_id."""
        data = self._to_columns(payload, partial=False)
        data["owner_id"] = ctx.account_id

        task = await asyncio.to_thread(self._repository.insert, data)
        logger.info("Account %s created task %s", ctx.account_id, task.id)
        return task

    async def list_tasks(
        self, ctx: AuthContext, params: TaskListParams
    ) -> TaskListResponse:
        """List one page of the account's tasks."""
        query = build_task_query(
            ctx.account_id,
            params,
            default_limit=self._default_page_size,
            max_limit=self._max_page_size,
        )

        tasks = await asyncio.to_thread(self._repository.find, query)
        total = await asyncio.to_thread(self._repository.count, query)

        return TaskListResponse(
            tasks=tasks,
            current_page=query.page,
            total_pages=query.total_pages(total),
            total_tasks=total,
        )

    async def get_task(self, ctx: AuthContext, task_id: str) -> Task:
        """Get one of the account's tasks."""
        task = await asyncio.to_thread(
            self._repository.find_one, task_id, ctx.account_id
        )
        if task is None:
            raise TaskNotFoundError(task_id)
        return task

    async def update_task(
        self, ctx: AuthContext, task_id: str, payload: TaskPayload
    ) -> Task:
        """Update one of the account's tasks; the owner never changes."""
        changes = self._to_columns(payload, partial=True)
        task = await asyncio.to_thread(
            self._repository.update, task_id, ctx.account_id, changes
        )
        if task is None:
            raise TaskNotFoundError(task_id)
        logger.info("Account %s updated task %s", ctx.account_id, task_id)
        return task

    async def delete_task(self, ctx: AuthContext, task_id: str) -> None:
        """Delete one of the account's tasks."""
        deleted = await asyncio.to_thread(
            self._repository.delete, task_id, ctx.account_id
        )
        if not deleted:
            raise TaskNotFoundError(task_id)
        logger.info("Account %s deleted task %s", ctx.account_id, task_id)

    @staticmethod
    def _to_columns(payload: TaskPayload, partial: bool) -> dict[str, Any]:
        """
        Map a validated payload to storage columns.

        With partial=True, description and due_date are only included
        when the client sent them (an explicit null clears them).
        """
        data: dict[str, Any] = {
            "title": payload.title,
            "status": payload.status.value,
        }
        sent = payload.model_fields_set
        if not partial or "description" in sent:
            data["description"] = payload.description
        if not partial or "due_date" in sent:
            data["due_date"] = payload.due_date.isoformat() if payload.due_date else None
        return data
