from datetime import datetime

from pydantic import BaseModel, ConfigDict


class BaseSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True, extra="forbid")


class BaseTimestampSchema(BaseSchema):
    created_at: datetime
    updated_at: datetime | None = None


class PositionedResponse(BaseTimestampSchema):
    """Read model of an ordered row. Display order is ``(position, created_at, id)``."""

    id: int
    position: float
