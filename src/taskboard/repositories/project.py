"""Repository for Project entity."""

from typing import Any
from uuid import UUID

from sqlmodel import col, select

from src.taskboard.models import Project
from src.taskboard.repositories.base import BaseRepository


class ProjectRepository(BaseRepository[Project]):
    """Repository for Project entity."""

    model = Project

    async def list_for_owner(self, owner_id: UUID) -> list[Project]:
        """List a user's projects, oldest first."""
        result = await self.session.execute(
            select(Project)
            .where(Project.owner_id == owner_id)
            .order_by(col(Project.created_at), col(Project.id))
        )
        return list(result.scalars().all())

    async def create_for_owner(self, owner_id: UUID, fields: dict[str, Any]) -> Project:
        """Create a project owned by owner_id."""
        return await self.create(Project(owner_id=owner_id, **fields))
