from pydantic import Field

from app.core.constants import BoardRole
from app.schemas.base import BaseSchema, BaseTimestampSchema


class BoardCreate(BaseSchema):
    workspace_id: int
    name: str = Field(min_length=1, max_length=255)
    description: str | None = None
    is_public: bool = False


class BoardUpdate(BaseSchema):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None
    is_public: bool | None = None


class BoardResponse(BaseTimestampSchema):
    id: int
    workspace_id: int
    name: str
    description: str | None = None
    is_public: bool
    role: BoardRole | None = None
