from datetime import datetime

from app.core.constants import BoardRole
from app.schemas.base import BaseSchema


class BoardShareCreate(BaseSchema):
    board_id: int
    user_id: int
    role: BoardRole = BoardRole.VIEWER


class BoardShareUpdate(BaseSchema):
    role: BoardRole | None = None


class BoardShareResponse(BaseSchema):
    id: int
    board_id: int
    user_id: int
    role: BoardRole
    user_email: str | None = None
    user_name: str | None = None
    created_at: datetime | None = None
    updated: bool = False
