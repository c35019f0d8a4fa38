"""
Tasks module.

Owner-scoped task CRUD with filtering, sorting and pagination.

Public API:
- ITaskService: Interface for task operations
- build_task_query / TaskQuery: Listing query builder
- Task, TaskPayload, TaskListResponse: Models
"""

from .interfaces import ITaskRepository, ITaskService
from .models import (
    Task,
    TaskDeletedResponse,
    TaskListParams,
    TaskListResponse,
    TaskPayload,
    TaskStatus,
)
from .query import TaskQuery, build_task_query
from .exceptions import TaskNotFoundError

__all__ = [
    # Interfaces
    "ITaskRepository",
    "ITaskService",
    # Models
    "Task",
    "TaskDeletedResponse",
    "TaskListParams",
    "TaskListResponse",
    "TaskPayload",
    "TaskStatus",
    # Query
    "TaskQuery",
    "build_task_query",
    # Exceptions
    "TaskNotFoundError",
]
