from pydantic import Field

from app.schemas.base import BaseSchema, PositionedResponse


class BoardListCreate(BaseSchema):
    board_id: int
    name: str = Field(min_length=1, max_length=255)
    position: float
    color: str | None = None


class BoardListUpdate(BaseSchema):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    color: str | None = None


class BoardListResponse(PositionedResponse):
    board_id: int
    name: str
    color: str | None = None
