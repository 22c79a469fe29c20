from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.board import Board
from app.models.workspace import Workspace
from app.repos.base import BaseRepository
from app.schemas.workspace import WorkspaceCreate, WorkspaceUpdate


class WorkspaceRepo(BaseRepository[Workspace, WorkspaceCreate, WorkspaceUpdate]):
    def __init__(self, session: AsyncSession):
        super().__init__(session, Workspace)

    async def get_user_workspaces(self, user_id: int) -> list[Workspace]:
        """Get all workspaces owned by a user, oldest first."""
        stmt = (
            select(Workspace)
            .where(Workspace.user_id == user_id)
            .order_by(Workspace.created_at, Workspace.id)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def count_boards(self, workspace_ids: list[int]) -> dict[int, int]:
        """Return board counts keyed by workspace id (missing ids count zero)."""
        if not workspace_ids:
            return {}
        stmt = (
            select(Board.workspace_id, func.count(Board.id))
            .where(Board.workspace_id.in_(workspace_ids))
            .group_by(Board.workspace_id)
        )
        result = await self.session.execute(stmt)
        counts = {ws_id: 0 for ws_id in workspace_ids}
        counts.update({ws_id: count for ws_id, count in result.all()})
        return counts
