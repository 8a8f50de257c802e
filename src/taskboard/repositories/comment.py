"""Repository for Comment entity."""

from typing import Any
from uuid import UUID

from sqlmodel import col, select

from src.taskboard.models import Comment
from src.taskboard.repositories.base import BaseRepository


class CommentRepository(BaseRepository[Comment]):
    """Repository for Comment entity."""

    model = Comment

    async def list_for_task(self, task_id: UUID) -> list[Comment]:
        """List a task's comments with their authors, oldest first."""
        result = await self.session.execute(
            select(Comment)
            .where(Comment.task_id == task_id)
            .order_by(col(Comment.created_at), col(Comment.id))
        )
        return list(result.scalars().all())

    async def create_for_task(
        self, task_id: UUID, user_id: UUID, fields: dict[str, Any]
    ) -> Comment:
        """Create a comment on task_id authored by user_id, with its author loaded."""
        comment = await self.create(Comment(task_id=task_id, user_id=user_id, **fields))
        await self.session.refresh(comment, ["author"])
        return comment
