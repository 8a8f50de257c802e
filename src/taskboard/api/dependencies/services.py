"""Service factory dependencies."""

from typing import Annotated

from fastapi import Depends

from src.taskboard.api.dependencies.db import DBSession
from src.taskboard.api.dependencies.repositories import (
    CommentRepo,
    ProjectRepo,
    TaskRepo,
    UserRepo,
)
from src.taskboard.services import (
    CommentService,
    NotificationService,
    ProjectService,
    TaskService,
    UserService,
)


def get_user_service(user_repo: UserRepo) -> UserService:
    """Get user service."""
    return UserService(user_repo)


def get_project_service(project_repo: ProjectRepo, session: DBSession) -> ProjectService:
    """Get project service."""
    return ProjectService(project_repo, session)


def get_task_service(
    task_repo: TaskRepo,
    project_repo: ProjectRepo,
    session: DBSession,
) -> TaskService:
    """Get task service."""
    return TaskService(task_repo, project_repo, session)


def get_comment_service(comment_repo: CommentRepo, session: DBSession) -> CommentService:
    """Get comment service."""
    return CommentService(comment_repo, session)


def get_notification_service(user_repo: UserRepo) -> NotificationService:
    """Get notification service."""
    return NotificationService(user_repo)


UserServiceDep = Annotated[UserService, Depends(get_user_service)]
ProjectServiceDep = Annotated[ProjectService, Depends(get_project_service)]
TaskServiceDep = Annotated[TaskService, Depends(get_task_service)]
CommentServiceDep = Annotated[CommentService, Depends(get_comment_service)]
NotificationServiceDep = Annotated[NotificationService, Depends(get_notification_service)]
