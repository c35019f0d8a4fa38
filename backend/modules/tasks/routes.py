"""
Task API endpoints.

Every route requires a bearer token. The auth gate runs before any
business logic, and its AuthContext is the only owner identity used.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from api.dependencies import get_task_service
from api.middleware.auth import get_auth_context
from api.models.errors import ErrorResponse, ValidationErrorResponse
from shared.models import AuthContext

from .interfaces import ITaskService
from .models import (
    Task,
    TaskDeletedResponse,
    TaskListParams,
    TaskListResponse,
    TaskPayload,
)

router = APIRouter(
    responses={401: {"model": ErrorResponse}},
)

_NOT_FOUND = {404: {"model": ErrorResponse}}
_INVALID = {400: {"model": ValidationErrorResponse}}


@router.post("", response_model=Task, status_code=201, responses=_INVALID)
async def create_task(
    payload: TaskPayload,
    ctx: AuthContext = Depends(get_auth_context),
    service: ITaskService = Depends(get_task_service),
) -> Task:
    """
    Create a task owned by the caller.
    """
    return await service.create_task(ctx, payload)


@router.get("", response_model=TaskListResponse, responses=_INVALID)
async def list_tasks(
    page: Optional[str] = Query(default=None, description="Page number (1-indexed, default 1)"),
    limit: Optional[str] = Query(default=None, description="Items per page (default 10)"),
    sort_by: Optional[str] = Query(default=None, alias="sortBy", description="status or dueDate"),
    order: Optional[str] = Query(default=None, description="asc or desc"),
    status: Optional[str] = Query(default=None, description="Exact status to match"),
    start_date: Optional[str] = Query(default=None, alias="startDate", description="Earliest due date, inclusive"),
    end_date: Optional[str] = Query(default=None, alias="endDate", description="Latest due date, inclusive"),
    search: Optional[str] = Query(default=None, description="Substring of title or description"),
    ctx: AuthContext = Depends(get_auth_context),
    service: ITaskService = Depends(get_task_service),
) -> TaskListResponse:
    """
    List the caller's tasks.

    Invalid page or limit values fall back to the defaults.
    """
    params = TaskListParams(
        page=page,
        limit=limit,
        sort_by=sort_by,
        order=order,
        status=status,
        start_date=start_date,
        end_date=end_date,
        search=search,
    )
    return await service.list_tasks(ctx, params)


@router.get("/{task_id}", response_model=Task, responses=_NOT_FOUND)
async def get_task(
    task_id: str,
    ctx: AuthContext = Depends(get_auth_context),
    service: ITaskService = Depends(get_task_service),
) -> Task:
    """
    Get one of the caller's tasks.
    """
    return await service.get_task(ctx, task_id)


@router.put("/{task_id}", response_model=Task, responses={**_INVALID, **_NOT_FOUND})
async def update_task(
    task_id: str,
    payload: TaskPayload,
    ctx: AuthContext = Depends(get_auth_context),
    service: ITaskService = Depends(get_task_service),
) -> Task:
    """
    Update one of the caller's tasks.

    Title and status are required; description and dueDate are left
    unchanged when omitted.
    """
    return await service.update_task(ctx, task_id, payload)


@router.delete("/{task_id}", response_model=TaskDeletedResponse, responses=_NOT_FOUND)
async def delete_task(
    task_id: str,
    ctx: AuthContext = Depends(get_auth_context),
    service: ITaskService = Depends(get_task_service),
) -> TaskDeletedResponse:
    """
    Delete one of the caller's tasks.
    """
    await service.delete_task(ctx, task_id)
    return TaskDeletedResponse()
