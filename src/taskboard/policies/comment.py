"""Comment policy.

Reading and posting follow the parent task's view rule. Changing or
removing a comment is reserved for its author.
"""

from src.taskboard.models import Comment, Project, Task, User
from src.taskboard.policies.base import Policy
from src.taskboard.policies.task import TaskPolicy

_task_policy = TaskPolicy()


class CommentPolicy(Policy):
    def view(  # type: ignore[override]
        self, actor: User, comment: Comment, task: Task, project: Project
    ) -> bool:
        return comment.task_id == task.id and _task_policy.view(actor, task, project)

    def create(self, actor: User, task: Task, project: Project) -> bool:  # type: ignore[override]
        return _task_policy.view(actor, task, project)

    def update(self, actor: User, comment: Comment, *parents: object) -> bool:  # type: ignore[override]
        return actor.id == comment.user_id

    def delete(self, actor: User, comment: Comment, *parents: object) -> bool:  # type: ignore[override]
        return actor.id == comment.user_id
