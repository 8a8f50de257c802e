from src.taskboard.schemas.comment import (
    CommentAuthor,
    CommentCreate,
    CommentRead,
    CommentUpdate,
)
from src.taskboard.schemas.pagination import PagedResponse
from src.taskboard.schemas.project import ProjectCreate, ProjectRead, ProjectUpdate
from src.taskboard.schemas.task import TaskCreate, TaskListResponse, TaskRead, TaskUpdate
from src.taskboard.schemas.user import UserRead

__all__ = [
    # Comment
    "CommentAuthor",
    "CommentCreate",
    "CommentRead",
    "CommentUpdate",
    # Pagination
    "PagedResponse",
    # Project
    "ProjectCreate",
    "ProjectRead",
    "ProjectUpdate",
    # Task
    "TaskCreate",
    "TaskListResponse",
    "TaskRead",
    "TaskUpdate",
    # User
    "UserRead",
]
