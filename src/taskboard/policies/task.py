"""Task policy. Tasks are owned through their project."""

from src.taskboard.models import Project, Task, User
from src.taskboard.policies.base import Policy


def _owns_through_project(actor: User, task: Task, project: Project) -> bool:
    return task.project_id == project.id and actor.id == project.owner_id


class TaskPolicy(Policy):
    def view(self, actor: User, task: Task, project: Project) -> bool:  # type: ignore[override]
        return _owns_through_project(actor, task, project)

    def create(self, actor: User, project: Project) -> bool:  # type: ignore[override]
        return actor.id == project.owner_id

    def update(self, actor: User, task: Task, project: Project) -> bool:  # type: ignore[override]
        return _owns_through_project(actor, task, project)

    def delete(self, actor: User, task: Task, project: Project) -> bool:  # type: ignore[override]
        return _owns_through_project(actor, task, project)
