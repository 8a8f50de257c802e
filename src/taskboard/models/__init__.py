"""Model exports.

Import from here: `from src.taskboard.models import Project, Task`
"""

from src.taskboard.models.comment import Comment
from src.taskboard.models.enums import TaskStatus
from src.taskboard.models.project import Project
from src.taskboard.models.task import Task
from src.taskboard.models.user import User

__all__ = [
    # Enums
    "TaskStatus",
    # Models
    "Comment",
    "Project",
    "Task",
    "User",
]
