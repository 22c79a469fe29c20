from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.constants import ActivityAction
from app.models.activity_log import ActivityLog


class ActivityRepo:
    """Append-only card activity entries.

    ``record`` only adds the entry to the session so it commits together with
    the change it describes.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    def record(
        self,
        card_id: int,
        user_id: int,
        action: ActivityAction,
        details: dict[str, Any] | None = None,
    ) -> ActivityLog:
        entry = ActivityLog(card_id=card_id, user_id=user_id, action=action, details=details)
        self.session.add(entry)
        return entry

    async def get_card_activity(self, card_id: int, *, limit: int = 50) -> list[ActivityLog]:
        """Get the latest entries for a card, newest first."""
        stmt = (
            select(ActivityLog)
            .where(ActivityLog.card_id == card_id)
            .order_by(ActivityLog.created_at.desc(), ActivityLog.id.desc())
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
