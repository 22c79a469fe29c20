from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.board_list import BoardList
from app.repos.base import BaseRepository
from app.schemas.board_list import BoardListCreate, BoardListUpdate


class BoardListRepo(BaseRepository[BoardList, BoardListCreate, BoardListUpdate]):
    def __init__(self, session: AsyncSession):
        super().__init__(session, BoardList)

    async def get_board_lists(self, board_id: int) -> list[BoardList]:
        """Get the lists of a board in display order.

        Ties on ``position`` fall back to creation time, then id.
        """
        stmt = (
            select(BoardList)
            .where(BoardList.board_id == board_id)
            .order_by(BoardList.position, BoardList.created_at, BoardList.id)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_last(self, board_id: int) -> BoardList | None:
        """Get the list currently displayed last on a board."""
        stmt = (
            select(BoardList)
            .where(BoardList.board_id == board_id)
            .order_by(BoardList.position.desc(), BoardList.created_at.desc(), BoardList.id.desc())
            .limit(1)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()
