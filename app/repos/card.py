from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.board_list import BoardList
from app.models.card import Card
from app.repos.base import BaseRepository
from app.schemas.card import CardCreate, CardUpdate


class CardRepo(BaseRepository[Card, CardCreate, CardUpdate]):
    def __init__(self, session: AsyncSession):
        super().__init__(session, Card)

    async def get_list_cards(self, list_id: int, *, include_archived: bool = False) -> list[Card]:
        """Get the cards of a list in display order (position, then creation time, then id)."""
        stmt = select(Card).where(Card.list_id == list_id)
        if not include_archived:
            stmt = stmt.where(Card.is_archived.is_(False))
        stmt = stmt.order_by(Card.position, Card.created_at, Card.id)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_last(self, list_id: int) -> Card | None:
        """Get the non-archived card currently displayed last in a list."""
        stmt = (
            select(Card)
            .where(Card.list_id == list_id, Card.is_archived.is_(False))
            .order_by(Card.position.desc(), Card.created_at.desc(), Card.id.desc())
            .limit(1)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_archived_for_board(self, board_id: int) -> list[Card]:
        """Get archived cards across every list of a board, most recently archived first."""
        stmt = (
            select(Card)
            .join(BoardList, BoardList.id == Card.list_id)
            .where(BoardList.board_id == board_id, Card.is_archived.is_(True))
            .order_by(Card.archived_at.desc(), Card.id.desc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
