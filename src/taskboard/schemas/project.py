"""Project schemas for API request/response."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, field_validator

from src.taskboard.schemas.fields import OptionalText, Title, reject_null


class ProjectCreate(BaseModel):
    name: Title
    description: OptionalText = None


class ProjectUpdate(BaseModel):
    """Omitted fields are left unchanged."""

    name: Title | None = None
    description: OptionalText = None

    @field_validator("name")
    @classmethod
    def name_not_null(cls, v: str | None) -> str:
        return reject_null(v)


class ProjectRead(BaseModel):
    """A project as returned to its owner.

    tasks_last_updated_at is null until the first task change.
    """

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    owner_id: UUID
    name: str
    description: str | None
    tasks_last_updated_at: datetime | None
    created_at: datetime
    updated_at: datetime
