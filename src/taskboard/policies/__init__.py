"""Authorization policies.

Import from here so every model has its policy registered:
`from src.taskboard.policies import Action, authorize`
"""

from src.taskboard.models import Comment, Project, Task
from src.taskboard.policies.base import (
    Action,
    Policy,
    authorize,
    can,
    policy_for,
    register_policy,
)
from src.taskboard.policies.comment import CommentPolicy
from src.taskboard.policies.project import ProjectPolicy
from src.taskboard.policies.task import TaskPolicy

register_policy(Project, ProjectPolicy())
register_policy(Task, TaskPolicy())
register_policy(Comment, CommentPolicy())

__all__ = [
    "Action",
    "CommentPolicy",
    "Policy",
    "ProjectPolicy",
    "TaskPolicy",
    "authorize",
    "can",
    "policy_for",
    "register_policy",
]
