"""Comment endpoints nested under their task."""

from uuid import UUID

from fastapi import APIRouter, status

from src.taskboard.api.dependencies import CommentServiceDep, CurrentUser, TaskServiceDep
from src.taskboard.core.exceptions import NotFoundError
from src.taskboard.policies import Action
from src.taskboard.schemas.comment import CommentCreate, CommentRead, CommentUpdate

router = APIRouter(prefix="/tasks/{task_id}/comments", tags=["comments"])


@router.get(
    "",
    response_model=list[CommentRead],
    summary="List comments",
    responses={
        403: {"description": "Task not visible to the caller"},
        404: {"description": "Task not found"},
    },
)
async def list_comments(
    task_id: UUID,
    current_user: CurrentUser,
    task_service: TaskServiceDep,
    comment_service: CommentServiceDep,
) -> list[CommentRead]:
    task, _project = await task_service.resolve(current_user, task_id, Action.VIEW)
    comments = await comment_service.list_comments(task)
    return [CommentRead.model_validate(c) for c in comments]


@router.post(
    "",
    response_model=CommentRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create comment",
    responses={
        403: {"description": "Task not visible to the caller"},
        404: {"description": "Task not found"},
        422: {"description": "Validation error"},
    },
)
async def create_comment(
    task_id: UUID,
    request: CommentCreate,
    current_user: CurrentUser,
    task_service: TaskServiceDep,
    comment_service: CommentServiceDep,
) -> CommentRead:
    task, project = await task_service.resolve(current_user, task_id, Action.VIEW)
    comment = await comment_service.create(current_user, task, project, request)
    return CommentRead.model_validate(comment)


@router.get(
    "/{comment_id}",
    response_model=CommentRead,
    summary="Get comment",
    responses={
        403: {"description": "Task not visible to the caller"},
        404: {"description": "Task or comment not found"},
    },
)
async def get_comment(
    task_id: UUID,
    comment_id: UUID,
    current_user: CurrentUser,
    task_service: TaskServiceDep,
    comment_service: CommentServiceDep,
) -> CommentRead:
    task, project = await task_service.resolve(current_user, task_id, Action.VIEW)
    comment = await comment_service.get_authorized(
        current_user, task, project, comment_id, Action.VIEW
    )
    return CommentRead.model_validate(comment)


@router.put(
    "/{comment_id}",
    response_model=CommentRead,
    summary="Replace comment",
    responses={
        403: {"description": "Not the comment author"},
        404: {"description": "Task or comment not found"},
    },
)
@router.patch(
    "/{comment_id}",
    response_model=CommentRead,
    summary="Update comment",
    responses={
        403: {"description": "Not the comment author"},
        404: {"description": "Task or comment not found"},
    },
)
async def update_comment(
    task_id: UUID,
    comment_id: UUID,
    request: CommentUpdate,
    current_user: CurrentUser,
    task_service: TaskServiceDep,
    comment_service: CommentServiceDep,
) -> CommentRead:
    """Edit a comment. Only its author may do this."""
    task, project = await task_service.resolve(current_user, task_id, Action.VIEW)
    comment = await comment_service.get_authorized(
        current_user, task, project, comment_id, Action.UPDATE
    )
    if not await comment_service.update(comment, request):
        raise NotFoundError("Comment", comment_id)
    return CommentRead.model_validate(comment)


@router.delete(
    "/{comment_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete comment",
    responses={
        204: {"description": "Comment deleted"},
        403: {"description": "Not the comment author"},
        404: {"description": "Task or comment not found"},
    },
)
async def delete_comment(
    task_id: UUID,
    comment_id: UUID,
    current_user: CurrentUser,
    task_service: TaskServiceDep,
    comment_service: CommentServiceDep,
) -> None:
    """Delete a comment. Only its author may do this."""
    task, project = await task_service.resolve(current_user, task_id, Action.VIEW)
    comment = await comment_service.get_authorized(
        current_user, task, project, comment_id, Action.DELETE
    )
    if not await comment_service.delete(comment):
        raise NotFoundError("Comment", comment_id)
