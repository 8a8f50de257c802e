from uuid import UUID

from src.taskboard.models import User
from src.taskboard.repositories import UserRepository


class UserService:
    """User lookup service."""

    def __init__(self, user_repo: UserRepository):
        self.user_repo = user_repo

    async def get_by_id(self, user_id: UUID) -> User | None:
        """Get user by ID."""
        return await self.user_repo.get_by_id(user_id)
