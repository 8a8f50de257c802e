"""Task schemas for API request/response."""

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.taskboard.models import TaskStatus
from src.taskboard.schemas.fields import OptionalText, Title, reject_null
from src.taskboard.schemas.pagination import PagedResponse


class TaskCreate(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    title: Title
    description: OptionalText = None
    status: TaskStatus = Field(default=TaskStatus.TODO, validate_default=True)
    due_date: date | None = None


class TaskUpdate(BaseModel):
    """Omitted fields are left unchanged. Status changes notify the project owner."""

    model_config = ConfigDict(use_enum_values=True)

    title: Title | None = None
    description: OptionalText = None
    status: TaskStatus | None = None
    due_date: date | None = None

    @field_validator("title", "status")
    @classmethod
    def not_null(cls, v: str | None) -> str:
        return reject_null(v)


class TaskRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    project_id: UUID
    title: str
    description: str | None
    status: TaskStatus
    due_date: date | None
    created_at: datetime
    updated_at: datetime


TaskListResponse = PagedResponse[TaskRead]
