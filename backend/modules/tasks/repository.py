"""
Task repository for database access.

Encapsulates all Supabase queries and data mapping for the tasks table.
Each single-task operation filters on id and owner_id together, so a
task belonging to someone else is indistinguishable from a missing one.
"""

from datetime import datetime, timezone
from typing import Any, Optional

from shared.repository import BaseRepository
from .models import Task, TaskStatus
from .query import TaskQuery


class TaskRepository(BaseRepository[Task]):
    """Repository for task data access."""

    table_name = "tasks"

    # -------------------------------------------------------------------------
    # Listing
    # -------------------------------------------------------------------------

    def find(self, query: TaskQuery) -> list[Task]:
        """
        Get one page of tasks matching the query.

        Ties on the sort column are broken by creation time and id so
        that consecutive pages never overlap.
        """
        builder = self._apply_filters(self._table().select("*"), query)
        result = (
            builder.order(query.sort_field, desc=query.descending)
            .order("created_at")
            .order("id")
            .range(query.offset, query.offset + query.limit - 1)
            .execute()
        )
        return [self._map_to_task(row) for row in result.data]

    def count(self, query: TaskQuery) -> int:
        """Count tasks matching the query's filters, ignoring pagination."""
        builder = self._apply_filters(
            self._table().select("id", count="exact", head=True), query
        )
        result = builder.execute()
        return result.count or 0

    # -------------------------------------------------------------------------
    # Single task operations
    # -------------------------------------------------------------------------

    def insert(self, data: dict[str, Any]) -> Task:
        """
        Create a new task record.

        Args:
            data: Column values, including owner_id

        Returns:
            Created Task with generated ID and timestamps.
        """
        result = self._table().insert(data).execute()
        return self._map_to_task(result.data[0])

    def find_one(self, task_id: str, owner_id: str) -> Optional[Task]:
        """Get a task by ID if it belongs to owner_id."""
        task_id = self.canonical_uuid(task_id)
        if task_id is None:
            return None
        result = (
            self._table().select("*")
            .eq("id", task_id)
            .eq("owner_id", owner_id)
            .execute()
        )
        if not result.data:
            return None
        return self._map_to_task(result.data[0])

    def update(
        self, task_id: str, owner_id: str, changes: dict[str, Any]
    ) -> Optional[Task]:
        """
        Update a task owned by owner_id.

        Returns:
            The updated Task, or None if no such task belongs to owner_id.
        """
        task_id = self.canonical_uuid(task_id)
        if task_id is None:
            return None
        data = {k: v for k, v in changes.items() if k not in ("id", "owner_id")}
        data["updated_at"] = datetime.now(timezone.utc).isoformat()
        result = (
            self._table().update(data)
            .eq("id", task_id)
            .eq("owner_id", owner_id)
            .execute()
        )
        if not result.data:
            return None
        return self._map_to_task(result.data[0])

    def delete(self, task_id: str, owner_id: str) -> bool:
        """
        Delete a task owned by owner_id.

        Returns:
            True if a row was deleted.
        """
        task_id = self.canonical_uuid(task_id)
        if task_id is None:
            return False
        result = (
            self._table().delete()
            .eq("id", task_id)
            .eq("owner_id", owner_id)
            .execute()
        )
        return bool(result.data)

    # -------------------------------------------------------------------------
    # Private helpers
    # -------------------------------------------------------------------------

    def _apply_filters(self, builder, query: TaskQuery):
        """Add owner scoping and the optional filters to a query builder."""
        builder = builder.eq("owner_id", query.owner_id)

        if query.status is not None:
            builder = builder.eq("status", query.status)

        if query.due_from is not None:
            builder = builder.gte("due_date", query.due_from.isoformat())
        if query.due_to is not None:
            builder = builder.lte("due_date", query.due_to.isoformat())

        if query.search is not None:
            pattern = self.quote_filter_value(self.regex_literal(query.search))
            builder = builder.or_(f"title.imatch.{pattern},description.imatch.{pattern}")

        return builder

    def _map_to_task(self, data: dict[str, Any]) -> Task:
        """Map database row to Task model."""
        return Task(
            id=str(data["id"]),
            title=data["title"],
            description=data.get("description"),
            status=TaskStatus(data["status"]),
            due_date=data.get("due_date"),
            owner_id=str(data["owner_id"]),
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
        )
