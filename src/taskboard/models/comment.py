"""Comment model."""

from datetime import datetime
from typing import TYPE_CHECKING
from uuid import UUID, uuid4

from sqlalchemy import Text
from sqlmodel import Field, Relationship, SQLModel

from src.taskboard.models.base import utc_now

if TYPE_CHECKING:
    from src.taskboard.models.user import User


class Comment(SQLModel, table=True):
    """Comment on a task. Only its author may change or remove it."""

    __tablename__ = "comments"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    task_id: UUID = Field(foreign_key="tasks.id", ondelete="CASCADE", index=True)
    user_id: UUID = Field(foreign_key="users.id", ondelete="CASCADE", index=True)
    content: str = Field(sa_type=Text)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    # Loaded with every comment query
    author: "User" = Relationship(sa_relationship_kwargs={"lazy": "selectin"})
