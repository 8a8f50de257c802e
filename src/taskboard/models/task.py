"""Task model."""

from datetime import date, datetime
from uuid import UUID, uuid4

from sqlalchemy import Text
from sqlmodel import Field, SQLModel

from src.taskboard.models.base import utc_now
from src.taskboard.models.enums import TaskStatus


class Task(SQLModel, table=True):
    """Task inside a project. Its effective owner is the project owner."""

    __tablename__ = "tasks"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    project_id: UUID = Field(foreign_key="projects.id", ondelete="CASCADE", index=True)
    title: str = Field(max_length=255)
    description: str | None = Field(default=None, sa_type=Text)
    status: str = Field(default=TaskStatus.TODO.value, max_length=20, index=True)
    due_date: date | None = Field(default=None, index=True)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
