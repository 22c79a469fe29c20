from pydantic import Field

from app.schemas.base import BaseSchema, BaseTimestampSchema


class CommentCreate(BaseSchema):
    card_id: int
    user_id: int
    content: str = Field(min_length=1, max_length=2000)


class CommentResponse(BaseTimestampSchema):
    id: int
    card_id: int
    user_id: int
    content: str
