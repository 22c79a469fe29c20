from pydantic import Field

from app.schemas.base import BaseSchema, BaseTimestampSchema


class WorkspaceCreate(BaseSchema):
    user_id: int
    name: str = Field(min_length=1, max_length=255)
    description: str | None = None


class WorkspaceUpdate(BaseSchema):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None


class WorkspaceResponse(BaseSchema):
    """A workspace as seen by a user.

    The virtual "Shared with me" workspace has a string id and no owner.
    """

    id: int | str
    user_id: int | None = None
    name: str
    description: str | None = None
    board_count: int = 0
    is_virtual: bool = False


class WorkspaceRecord(BaseTimestampSchema):
    id: int
    user_id: int
    name: str
    description: str | None = None
