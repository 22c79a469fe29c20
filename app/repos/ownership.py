"""Ownership-chain lookups used to resolve board roles.

Every query here is a single round trip. Database failures surface as
:class:`PersistenceError` so callers can tell them apart from "no role".
"""

from typing import Protocol

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions.domain import PersistenceError
from app.models.board import Board
from app.models.board_list import BoardList
from app.models.board_share import BoardShare
from app.models.card import Card
from app.models.workspace import Workspace


class OwnershipLookup(Protocol):
    async def is_workspace_owner(self, user_id: int, board_id: int) -> bool: ...

    async def get_share_role(self, board_id: int, user_id: int) -> str | None: ...

    async def get_board_id_for_list(self, list_id: int) -> int | None: ...

    async def get_board_id_for_card(self, card_id: int) -> int | None: ...


class OwnershipRepo:
    """SQL implementation of :class:`OwnershipLookup`."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def _scalar(self, stmt, what: str):
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            raise PersistenceError(f"Failed to look up {what}") from e
        return result.scalar_one_or_none()

    async def is_workspace_owner(self, user_id: int, board_id: int) -> bool:
        """True if ``user_id`` owns the workspace containing ``board_id``."""
        stmt = (
            select(Board.id)
            .join(Workspace, Workspace.id == Board.workspace_id)
            .where(Board.id == board_id, Workspace.user_id == user_id)
        )
        return await self._scalar(stmt, "board owner") is not None

    async def get_share_role(self, board_id: int, user_id: int) -> str | None:
        """Raw role string stored for (board, user), unvalidated."""
        stmt = select(BoardShare.role).where(
            BoardShare.board_id == board_id,
            BoardShare.user_id == user_id,
        )
        return await self._scalar(stmt, "board share")

    async def get_board_id_for_list(self, list_id: int) -> int | None:
        stmt = select(BoardList.board_id).where(BoardList.id == list_id)
        return await self._scalar(stmt, "list board")

    async def get_board_id_for_card(self, card_id: int) -> int | None:
        stmt = (
            select(BoardList.board_id)
            .join(Card, Card.list_id == BoardList.id)
            .where(Card.id == card_id)
        )
        return await self._scalar(stmt, "card board")
