"""
Tasks module exceptions.
"""

from shared.exceptions import NotFoundError


class TaskNotFoundError(NotFoundError):
    """
    Raised when a task does not exist for the requesting owner.

    Another account's task is reported exactly like a missing one.
    """

    def __init__(self, task_id: str):
        super().__init__(
            "Task not found",
            code="TASK_NOT_FOUND",
            details={"task_id": task_id},
        )
