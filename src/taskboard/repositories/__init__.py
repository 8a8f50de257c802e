"""Repository layer - data access abstraction."""

from src.taskboard.repositories.base import BaseRepository, Page
from src.taskboard.repositories.comment import CommentRepository
from src.taskboard.repositories.project import ProjectRepository
from src.taskboard.repositories.task import TASK_PAGE_SIZE, TaskFilters, TaskRepository
from src.taskboard.repositories.user import UserRepository

__all__ = [
    # Base
    "BaseRepository",
    "Page",
    # Entities
    "CommentRepository",
    "ProjectRepository",
    "TaskRepository",
    "UserRepository",
    # Task listing
    "TASK_PAGE_SIZE",
    "TaskFilters",
]
