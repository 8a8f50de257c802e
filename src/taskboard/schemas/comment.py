"""Comment schemas for API request/response."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from src.taskboard.schemas.fields import CommentText


class CommentCreate(BaseModel):
    content: CommentText


class CommentUpdate(CommentCreate):
    pass


class CommentAuthor(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    full_name: str


class CommentRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    task_id: UUID
    user_id: UUID
    author: CommentAuthor
    content: str
    created_at: datetime
    updated_at: datetime
