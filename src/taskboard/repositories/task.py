"""Repository for Task entity."""

from dataclasses import dataclass
from datetime import date
from typing import Any
from uuid import UUID

from sqlalchemy import or_
from sqlmodel import col, select

from src.taskboard.models import Task, TaskStatus
from src.taskboard.repositories.base import BaseRepository, Page

TASK_PAGE_SIZE = 10


@dataclass(frozen=True)
class TaskFilters:
    """Optional constraints for task listings. None means no constraint."""

    status: TaskStatus | None = None
    due_date: date | None = None
    search: str | None = None


class TaskRepository(BaseRepository[Task]):
    """Repository for Task entity."""

    model = Task

    async def list_for_project(
        self,
        project_id: UUID,
        filters: TaskFilters | None = None,
        page: int = 1,
    ) -> Page[Task]:
        """List a project's tasks matching filters, TASK_PAGE_SIZE per page.

        search is a case-insensitive substring match against title OR
        description. LIKE wildcards in the term match literally.
        """
        filters = filters or TaskFilters()
        query = select(Task).where(Task.project_id == project_id)

        if filters.status is not None:
            query = query.where(Task.status == TaskStatus(filters.status).value)
        if filters.due_date is not None:
            query = query.where(Task.due_date == filters.due_date)
        if filters.search:
            query = query.where(
                or_(
                    col(Task.title).icontains(filters.search, autoescape=True),
                    col(Task.description).icontains(filters.search, autoescape=True),
                )
            )

        return await self.paginate(
            query,
            page,
            TASK_PAGE_SIZE,
            order_by=(col(Task.created_at), col(Task.id)),
        )

    async def create_for_project(self, project_id: UUID, fields: dict[str, Any]) -> Task:
        """Create a task inside project_id."""
        return await self.create(Task(project_id=project_id, **fields))
