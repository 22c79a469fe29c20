from datetime import datetime

from pydantic import Field, field_validator

from app.schemas.base import BaseSchema, PositionedResponse


class CardCreate(BaseSchema):
    list_id: int
    title: str = Field(min_length=1, max_length=255)
    description: str | None = None
    position: float


class CardUpdate(BaseSchema):
    title: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None

    @field_validator("title")
    @classmethod
    def title_not_cleared(cls, v: str | None) -> str:
        if v is None:
            raise ValueError("Title cannot be cleared")
        return v


class CardMove(BaseSchema):
    """Rank-based move: ``position`` is the target rank in ``list_id``."""

    list_id: int
    position: int = Field(ge=0)


class CardResponse(PositionedResponse):
    list_id: int
    title: str
    description: str | None = None
    is_archived: bool
    archived_at: datetime | None = None
