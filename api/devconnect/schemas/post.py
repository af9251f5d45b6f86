"""Post schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, field_validator


class CreatePostRequest(BaseModel):
    """Request to create a post."""

    text: str

    @field_validator("text")
    @classmethod
    def validate_text(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Text is required")
        return v


class PostResponse(BaseModel):
    """A post with its author's name and avatar at creation time."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user_id: UUID
    text: str
    name: str | None
    avatar: str | None
    created_at: datetime
