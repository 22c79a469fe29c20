from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.board_share import BoardShare
from app.models.user import User
from app.repos.base import BaseRepository
from app.schemas.board_share import BoardShareCreate, BoardShareUpdate


class BoardShareRepo(BaseRepository[BoardShare, BoardShareCreate, BoardShareUpdate]):
    def __init__(self, session: AsyncSession):
        super().__init__(session, BoardShare)

    async def get_by_board_and_user(self, board_id: int, user_id: int) -> BoardShare | None:
        stmt = select(BoardShare).where(
            BoardShare.board_id == board_id,
            BoardShare.user_id == user_id,
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_board_shares(self, board_id: int) -> list[tuple[BoardShare, User]]:
        """Get all shares of a board with the shared user, newest first."""
        stmt = (
            select(BoardShare, User)
            .join(User, User.id == BoardShare.user_id)
            .where(BoardShare.board_id == board_id)
            .order_by(BoardShare.created_at.desc(), BoardShare.id.desc())
        )
        result = await self.session.execute(stmt)
        return [(share, user) for share, user in result.all()]

    async def upsert(
        self,
        schema: BoardShareCreate,
        *,
        auto_commit: bool = True,
    ) -> tuple[BoardShare, bool]:
        """Create a share or update the role of the existing (board, user) row.

        Returns ``(share, updated)`` where ``updated`` is True when a row already existed.
        """
        existing = await self.get_by_board_and_user(schema.board_id, schema.user_id)
        if existing:
            existing.role = schema.role
            await self._finish(existing, auto_commit=auto_commit)
            return existing, True
        return await self.create_one(schema, auto_commit=auto_commit), False

    async def delete_by_board_and_user(
        self, board_id: int, user_id: int, *, auto_commit: bool = True
    ) -> bool:
        stmt = delete(BoardShare).where(
            BoardShare.board_id == board_id,
            BoardShare.user_id == user_id,
        )
        result = await self.session.execute(stmt)
        await self._finish(None, auto_commit=auto_commit)
        return result.rowcount > 0  # type: ignore
