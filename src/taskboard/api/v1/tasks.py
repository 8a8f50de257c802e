"""Task endpoints nested under their project.

Every route authorizes the project before the task is looked up, so a
caller without access to the project cannot learn which task ids exist.
"""

from datetime import date
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, BackgroundTasks, Query, Request, status

from src.taskboard.api.dependencies import (
    CurrentUser,
    NotificationServiceDep,
    ProjectServiceDep,
    TaskListCacheDep,
    TaskServiceDep,
)
from src.taskboard.core.cache import build_task_list_cache_key
from src.taskboard.core.exceptions import NotFoundError
from src.taskboard.models import TaskStatus
from src.taskboard.policies import Action
from src.taskboard.repositories import TaskFilters
from src.taskboard.schemas.task import TaskCreate, TaskListResponse, TaskRead, TaskUpdate

router = APIRouter(prefix="/projects/{project_id}/tasks", tags=["tasks"])


@router.get(
    "",
    response_model=TaskListResponse,
    summary="List tasks",
    description=(
        "List a project's tasks, 10 per page, oldest first. "
        "Results are cached per user until the next task change in the project."
    ),
    responses={
        200: {"description": "Page of tasks"},
        403: {"description": "Not the project owner"},
        404: {"description": "Project not found"},
    },
)
async def list_tasks(
    project_id: UUID,
    request: Request,
    current_user: CurrentUser,
    project_service: ProjectServiceDep,
    task_service: TaskServiceDep,
    cache: TaskListCacheDep,
    status_filter: Annotated[
        TaskStatus | None, Query(alias="status", description="Only tasks in this status")
    ] = None,
    due_date: Annotated[date | None, Query(description="Only tasks due on this date")] = None,
    search: Annotated[
        str | None, Query(description="Case-insensitive match on title or description")
    ] = None,
    page: Annotated[int, Query(ge=1, description="1-based page number")] = 1,
) -> TaskListResponse:
    """List tasks in a project, served from cache when possible."""
    project = await project_service.get_authorized(current_user, project_id, Action.VIEW)
    filters = TaskFilters(status=status_filter, due_date=due_date, search=search)

    async def build() -> TaskListResponse:
        result = await task_service.list_tasks(project, filters, page)
        return TaskListResponse(
            items=[TaskRead.model_validate(t) for t in result.items],
            total=result.total,
            page=result.page,
            per_page=result.per_page,
            pages=result.pages,
        )

    key = build_task_list_cache_key(
        project.id,
        current_user.id,
        project.tasks_last_updated_at,
        dict(request.query_params),
    )
    return await cache.get_or_build(key, build, TaskListResponse)


@router.post(
    "",
    response_model=TaskRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create task",
    responses={
        201: {"description": "Task created"},
        403: {"description": "Not the project owner"},
        404: {"description": "Project not found"},
        422: {"description": "Validation error"},
    },
)
async def create_task(
    project_id: UUID,
    request: TaskCreate,
    current_user: CurrentUser,
    project_service: ProjectServiceDep,
    task_service: TaskServiceDep,
) -> TaskRead:
    """Create a task in a project."""
    project = await project_service.get_authorized(current_user, project_id, Action.UPDATE)
    task = await task_service.create(project, request)
    return TaskRead.model_validate(task)


@router.get(
    "/{task_id}",
    response_model=TaskRead,
    summary="Get task",
    responses={
        200: {"description": "Task details"},
        403: {"description": "Not the project owner"},
        404: {"description": "Project or task not found"},
    },
)
async def get_task(
    project_id: UUID,
    task_id: UUID,
    current_user: CurrentUser,
    project_service: ProjectServiceDep,
    task_service: TaskServiceDep,
) -> TaskRead:
    """Get a task by ID."""
    project = await project_service.get_authorized(current_user, project_id, Action.VIEW)
    task = await task_service.get_authorized(current_user, project, task_id, Action.VIEW)
    return TaskRead.model_validate(task)


@router.put(
    "/{task_id}",
    response_model=TaskRead,
    summary="Replace task fields",
    responses={
        200: {"description": "Task updated"},
        403: {"description": "Not the project owner"},
        404: {"description": "Project or task not found"},
    },
)
@router.patch(
    "/{task_id}",
    response_model=TaskRead,
    summary="Update task",
    description="Update the supplied fields. A status change notifies the project owner.",
    responses={
        200: {"description": "Task updated"},
        403: {"description": "Not the project owner"},
        404: {"description": "Project or task not found"},
    },
)
async def update_task(
    project_id: UUID,
    task_id: UUID,
    request: TaskUpdate,
    background_tasks: BackgroundTasks,
    current_user: CurrentUser,
    project_service: ProjectServiceDep,
    task_service: TaskServiceDep,
    notification_service: NotificationServiceDep,
) -> TaskRead:
    """Update a task."""
    project = await project_service.get_authorized(current_user, project_id, Action.UPDATE)
    task = await task_service.get_authorized(current_user, project, task_id, Action.UPDATE)

    old_status = task.status
    updated = await task_service.update(project, task, request)
    if not updated:
        if request.model_fields_set:
            raise NotFoundError("Task", task_id)
        return TaskRead.model_validate(task)

    if task.status != old_status:
        await notification_service.notify_task_status_changed(
            background_tasks, project, task, old_status, task.status
        )
    return TaskRead.model_validate(task)


@router.delete(
    "/{task_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete task",
    responses={
        204: {"description": "Task deleted"},
        403: {"description": "Not the project owner"},
        404: {"description": "Project or task not found"},
    },
)
async def delete_task(
    project_id: UUID,
    task_id: UUID,
    current_user: CurrentUser,
    project_service: ProjectServiceDep,
    task_service: TaskServiceDep,
) -> None:
    """Delete a task and its comments."""
    project = await project_service.get_authorized(current_user, project_id, Action.UPDATE)
    task = await task_service.get_authorized(current_user, project, task_id, Action.DELETE)
    if not await task_service.delete(project, task):
        raise NotFoundError("Task", task_id)
