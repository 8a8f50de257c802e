"""Task service.

Every successful task mutation advances the parent project's
tasks_last_updated_at in the same transaction, which retires all cached
listings of that project. Failed or no-op mutations leave it untouched.
"""

from datetime import datetime, timedelta
from typing import Any
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.taskboard.core.exceptions import NotFoundError
from src.taskboard.core.logging import get_logger
from src.taskboard.models import Project, Task, User
from src.taskboard.models.base import utc_now
from src.taskboard.policies import Action, authorize
from src.taskboard.repositories import Page, ProjectRepository, TaskFilters, TaskRepository
from src.taskboard.schemas.task import TaskCreate, TaskUpdate

logger = get_logger(__name__)

TIMESTAMP_RESOLUTION = timedelta(microseconds=1)


def next_tasks_timestamp(previous: datetime | None, now: datetime | None = None) -> datetime:
    """Return a timestamp strictly later than previous.

    Two mutations inside one clock tick (or a clock that stepped back)
    still produce distinct, increasing values.
    """
    now = now or utc_now()
    if previous is None:
        return now
    return max(now, previous + TIMESTAMP_RESOLUTION)


class TaskService:
    """Task service - business logic only."""

    def __init__(
        self,
        task_repo: TaskRepository,
        project_repo: ProjectRepository,
        session: AsyncSession,
    ):
        self.task_repo = task_repo
        self.project_repo = project_repo
        self.session = session

    async def list_tasks(
        self,
        project: Project,
        filters: TaskFilters | None = None,
        page: int = 1,
    ) -> Page[Task]:
        """List project's tasks matching filters."""
        return await self.task_repo.list_for_project(project.id, filters, page)

    async def get_authorized(
        self, actor: User, project: Project, task_id: UUID, action: Action
    ) -> Task:
        """Load a task inside project and check actor may perform action on it.

        The project must already have been authorized by the caller.

        Raises:
            NotFoundError: No task with this id belongs to project.
            ForbiddenError: The policy denies the action.
        """
        task = await self.task_repo.get_by_id(task_id)
        if task is None or task.project_id != project.id:
            raise NotFoundError("Task", task_id)
        authorize(actor, action, task, project)
        return task

    async def resolve(self, actor: User, task_id: UUID, action: Action) -> tuple[Task, Project]:
        """Load a task with its project and authorize action on the task.

        Used by routes that address a task without its project.
        """
        task = await self.task_repo.get_by_id(task_id)
        if task is None:
            raise NotFoundError("Task", task_id)
        project = await self.project_repo.get_by_id(task.project_id)
        if project is None:
            raise NotFoundError("Task", task_id)
        authorize(actor, action, task, project)
        return task, project

    async def create(self, project: Project, data: TaskCreate) -> Task:
        """Create a task in project."""
        try:
            task = await self.task_repo.create_for_project(project.id, data.model_dump())
            await self._touch_project(project)
            await self.session.commit()
        except SQLAlchemyError:
            await self.session.rollback()
            raise
        logger.info("Task created", task_id=str(task.id), project_id=str(project.id))
        return task

    async def update(self, project: Project, task: Task, data: TaskUpdate) -> bool:
        """Apply the supplied fields to task.

        Returns:
            The repository result. The project timestamp only moves when
            this is True.
        """
        fields: dict[str, Any] = data.model_dump(exclude_unset=True)
        try:
            updated = await self.task_repo.update(task, fields)
            if updated:
                await self._touch_project(project)
            await self.session.commit()
        except SQLAlchemyError:
            await self.session.rollback()
            raise
        if updated:
            logger.info(
                "Task updated",
                task_id=str(task.id),
                project_id=str(project.id),
                fields=sorted(fields),
            )
        return updated

    async def delete(self, project: Project, task: Task) -> bool:
        """Delete task and its comments."""
        try:
            deleted = await self.task_repo.delete(task)
            if deleted:
                await self._touch_project(project)
            await self.session.commit()
        except SQLAlchemyError:
            await self.session.rollback()
            raise
        if deleted:
            logger.info("Task deleted", task_id=str(task.id), project_id=str(project.id))
        return deleted

    async def _touch_project(self, project: Project) -> None:
        stamp = next_tasks_timestamp(project.tasks_last_updated_at)
        await self.project_repo.update(project, {"tasks_last_updated_at": stamp})
        project.tasks_last_updated_at = stamp
