"""Comment service."""

from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.taskboard.core.exceptions import NotFoundError
from src.taskboard.core.logging import get_logger
from src.taskboard.models import Comment, Project, Task, User
from src.taskboard.policies import Action, authorize
from src.taskboard.repositories import CommentRepository
from src.taskboard.schemas.comment import CommentCreate, CommentUpdate

logger = get_logger(__name__)


class CommentService:
    """Comment service - business logic only."""

    def __init__(self, comment_repo: CommentRepository, session: AsyncSession):
        self.comment_repo = comment_repo
        self.session = session

    async def list_comments(self, task: Task) -> list[Comment]:
        return await self.comment_repo.list_for_task(task.id)

    async def get_authorized(
        self,
        actor: User,
        task: Task,
        project: Project,
        comment_id: UUID,
        action: Action,
    ) -> Comment:
        """Load a comment on task and check actor may perform action on it.

        Raises:
            NotFoundError: No comment with this id belongs to task.
            ForbiddenError: The policy denies the action.
        """
        comment = await self.comment_repo.get_by_id(comment_id)
        if comment is None or comment.task_id != task.id:
            raise NotFoundError("Comment", comment_id)
        authorize(actor, action, comment, task, project)
        return comment

    async def create(
        self, actor: User, task: Task, project: Project, data: CommentCreate
    ) -> Comment:
        """Post a comment on task as actor."""
        authorize(actor, Action.CREATE, Comment, task, project)
        try:
            comment = await self.comment_repo.create_for_task(task.id, actor.id, data.model_dump())
            await self.session.commit()
        except SQLAlchemyError:
            await self.session.rollback()
            raise
        logger.info("Comment created", comment_id=str(comment.id), task_id=str(task.id))
        return comment

    async def update(self, comment: Comment, data: CommentUpdate) -> bool:
        try:
            updated = await self.comment_repo.update(comment, data.model_dump(exclude_unset=True))
            await self.session.commit()
        except SQLAlchemyError:
            await self.session.rollback()
            raise
        if updated:
            logger.info("Comment updated", comment_id=str(comment.id))
        return updated

    async def delete(self, comment: Comment) -> bool:
        try:
            deleted = await self.comment_repo.delete(comment)
            await self.session.commit()
        except SQLAlchemyError:
            await self.session.rollback()
            raise
        if deleted:
            logger.info("Comment deleted", comment_id=str(comment.id))
        return deleted
