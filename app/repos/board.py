from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.board import Board
from app.models.board_share import BoardShare
from app.models.workspace import Workspace
from app.repos.base import BaseRepository
from app.schemas.board import BoardCreate, BoardUpdate


class BoardRepo(BaseRepository[Board, BoardCreate, BoardUpdate]):
    def __init__(self, session: AsyncSession):
        super().__init__(session, Board)

    async def get_workspace_boards(self, workspace_id: int) -> list[Board]:
        """Get all boards in a workspace, oldest first."""
        stmt = (
            select(Board)
            .where(Board.workspace_id == workspace_id)
            .order_by(Board.created_at, Board.id)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_shared_boards(self, user_id: int) -> list[tuple[Board, str]]:
        """Get boards shared with a user in other owners' workspaces, with the stored role."""
        stmt = (
            select(Board, BoardShare.role)
            .join(BoardShare, BoardShare.board_id == Board.id)
            .join(Workspace, Workspace.id == Board.workspace_id)
            .where(BoardShare.user_id == user_id, Workspace.user_id != user_id)
            .order_by(BoardShare.created_at.desc(), Board.id)
        )
        result = await self.session.execute(stmt)
        return [(board, role) for board, role in result.all()]

    async def count_shared_boards(self, user_id: int) -> int:
        stmt = (
            select(func.count(BoardShare.id))
            .join(Board, Board.id == BoardShare.board_id)
            .join(Workspace, Workspace.id == Board.workspace_id)
            .where(BoardShare.user_id == user_id, Workspace.user_id != user_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def get_public(self, board_id: int) -> Board | None:
        """Get a board only if it is flagged public."""
        stmt = select(Board).where(Board.id == board_id, Board.is_public.is_(True))
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()
