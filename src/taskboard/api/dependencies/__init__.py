"""FastAPI dependency injection definitions."""

# Auth
from src.taskboard.api.dependencies.auth import CurrentUser, get_current_user

# Cache
from src.taskboard.api.dependencies.cache import TaskListCacheDep

# Database
from src.taskboard.api.dependencies.db import DBSession, get_db_session

# Repositories
from src.taskboard.api.dependencies.repositories import (
    CommentRepo,
    ProjectRepo,
    TaskRepo,
    UserRepo,
    get_comment_repository,
    get_project_repository,
    get_task_repository,
    get_user_repository,
)

# Services
from src.taskboard.api.dependencies.services import (
    CommentServiceDep,
    NotificationServiceDep,
    ProjectServiceDep,
    TaskServiceDep,
    UserServiceDep,
    get_comment_service,
    get_notification_service,
    get_project_service,
    get_task_service,
    get_user_service,
)

__all__ = [
    # Database
    "DBSession",
    "get_db_session",
    # Auth
    "CurrentUser",
    "get_current_user",
    # Cache
    "TaskListCacheDep",
    # Repositories
    "CommentRepo",
    "ProjectRepo",
    "TaskRepo",
    "UserRepo",
    "get_comment_repository",
    "get_project_repository",
    "get_task_repository",
    "get_user_repository",
    # Services
    "CommentServiceDep",
    "NotificationServiceDep",
    "ProjectServiceDep",
    "TaskServiceDep",
    "UserServiceDep",
    "get_comment_service",
    "get_notification_service",
    "get_project_service",
    "get_task_service",
    "get_user_service",
]
