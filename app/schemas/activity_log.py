from datetime import datetime
from typing import Any

from app.core.constants import ActivityAction
from app.schemas.base import BaseSchema


class ActivityLogResponse(BaseSchema):
    id: int
    card_id: int
    user_id: int
    action: ActivityAction
    details: dict[str, Any] | None = None
    created_at: datetime
