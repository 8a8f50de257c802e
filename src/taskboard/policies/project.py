"""Project ownership policy."""

from src.taskboard.models import Project, User
from src.taskboard.policies.base import Policy


class ProjectPolicy(Policy):
    """Only the owner may see or change a project. Any user may create one."""

    def view(self, actor: User, project: Project) -> bool:  # type: ignore[override]
        return actor.id == project.owner_id

    def create(self, actor: User) -> bool:  # type: ignore[override]
        return actor.is_active

    def update(self, actor: User, project: Project) -> bool:  # type: ignore[override]
        return actor.id == project.owner_id

    def delete(self, actor: User, project: Project) -> bool:  # type: ignore[override]
        return actor.id == project.owner_id
