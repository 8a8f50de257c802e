"""Project model."""

from datetime import datetime
from uuid import UUID, uuid4

from sqlalchemy import Text
from sqlmodel import Field, SQLModel

from src.taskboard.models.base import utc_now


class Project(SQLModel, table=True):
    """Project owned by a single user.

    tasks_last_updated_at moves forward on every successful task mutation
    and is the version component of cached task listings.
    """

    __tablename__ = "projects"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    owner_id: UUID = Field(foreign_key="users.id", ondelete="CASCADE", index=True)
    name: str = Field(max_length=255)
    description: str | None = Field(default=None, sa_type=Text)
    tasks_last_updated_at: datetime | None = Field(default=None)
    created_at: datetime = Field(default_factory=utc_now, index=True)
    updated_at: datetime = Field(default_factory=utc_now)
