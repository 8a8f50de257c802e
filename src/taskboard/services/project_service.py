"""Project service - ownership-scoped CRUD."""

from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.taskboard.core.exceptions import NotFoundError
from src.taskboard.core.logging import get_logger
from src.taskboard.models import Project, User
from src.taskboard.policies import Action, authorize
from src.taskboard.repositories import ProjectRepository
from src.taskboard.schemas.project import ProjectCreate, ProjectUpdate

logger = get_logger(__name__)


class ProjectService:
    """Project service - business logic only."""

    def __init__(self, project_repo: ProjectRepository, session: AsyncSession):
        self.project_repo = project_repo
        self.session = session

    async def list_for_user(self, actor: User) -> list[Project]:
        """List the projects owned by actor."""
        return await self.project_repo.list_for_owner(actor.id)

    async def get_authorized(self, actor: User, project_id: UUID, action: Action) -> Project:
        """Load a project and check actor may perform action on it.

        Raises:
            NotFoundError: No project has this id.
            ForbiddenError: The policy denies the action.
        """
        project = await self.project_repo.get_by_id(project_id)
        if project is None:
            raise NotFoundError("Project", project_id)
        authorize(actor, action, project)
        return project

    async def create(self, actor: User, data: ProjectCreate) -> Project:
        """Create a project owned by actor."""
        authorize(actor, Action.CREATE, Project)
        try:
            project = await self.project_repo.create_for_owner(actor.id, data.model_dump())
            await self.session.commit()
        except SQLAlchemyError:
            await self.session.rollback()
            raise
        logger.info("Project created", project_id=str(project.id))
        return project

    async def update(self, project: Project, data: ProjectUpdate) -> bool:
        """Apply the supplied fields to project.

        Returns:
            True if the row was updated. False for an empty update or a
            project that no longer exists.
        """
        fields = data.model_dump(exclude_unset=True)
        try:
            updated = await self.project_repo.update(project, fields)
            await self.session.commit()
        except SQLAlchemyError:
            await self.session.rollback()
            raise
        if updated:
            logger.info("Project updated", project_id=str(project.id), fields=sorted(fields))
        return updated

    async def delete(self, project: Project) -> bool:
        """Delete project together with its tasks and their comments."""
        try:
            deleted = await self.project_repo.delete(project)
            await self.session.commit()
        except SQLAlchemyError:
            await self.session.rollback()
            raise
        if deleted:
            logger.info("Project deleted", project_id=str(project.id))
        return deleted
