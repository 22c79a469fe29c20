from loguru import logger

from app.core.exceptions.domain import ResourceNotFoundError
from app.core.permissions import can_manage_lists, can_view
from app.repos.board_list import BoardListRepo
from app.repos.ownership import OwnershipRepo
from app.schemas.board_list import BoardListCreate, BoardListResponse, BoardListUpdate
from app.services.base import BaseService
from app.services.ordering import allocate_position, apply_reindex
from app.services.permission_service import PermissionResolver, ensure_capability
from app.utils.position import position_between


class ListService(BaseService):
    async def get_lists(self, principal_id: int, board_id: int) -> list[BoardListResponse]:
        async with self._session_factory() as session:
            role = await PermissionResolver(OwnershipRepo(session)).resolve_role(
                principal_id, board_id
            )
            ensure_capability(role, can_view, "Board", board_id)

            lists = await BoardListRepo(session).get_board_lists(board_id)
            return [BoardListResponse.model_validate(lst) for lst in lists]

    async def create_list(
        self, principal_id: int, board_id: int, name: str, color: str | None = None
    ) -> BoardListResponse:
        """Append a new list after the board's last list."""
        async with self._session_factory() as session:
            role = await PermissionResolver(OwnershipRepo(session)).resolve_role(
                principal_id, board_id
            )
            ensure_capability(role, can_manage_lists, "Board", board_id)

            repo = BoardListRepo(session)
            last = await repo.get_last(board_id)
            board_list = await repo.create_one(
                BoardListCreate(
                    board_id=board_id,
                    name=name,
                    color=color,
                    position=position_between(last, None),
                )
            )
            logger.info(f"List created: id={board_list.id} board={board_id}")
            return BoardListResponse.model_validate(board_list)

    async def place_list(
        self,
        principal_id: int,
        list_id: int,
        *,
        before_id: int | None = None,
        after_id: int | None = None,
        auto_reindex: bool = True,
    ) -> BoardListResponse:
        """Reorder a list so it sits between the lists ``before_id`` and ``after_id``."""
        async with self._session_factory() as session:
            role = await PermissionResolver(OwnershipRepo(session)).resolve_role_by_list(
                principal_id, list_id
            )
            ensure_capability(role, can_manage_lists, "List", list_id)

            repo = BoardListRepo(session)
            board_list = await repo.get_by_id(list_id)
            if board_list is None:
                raise ResourceNotFoundError("List", str(list_id))

            siblings = [
                lst for lst in await repo.get_board_lists(board_list.board_id) if lst.id != list_id
            ]
            board_list.position = allocate_position(
                siblings,
                before_id=before_id,
                after_id=after_id,
                min_gap=self.settings.position_min_gap,
                auto_reindex=auto_reindex,
            )
            await session.commit()
            await session.refresh(board_list)
            return BoardListResponse.model_validate(board_list)

    async def update_list(
        self, principal_id: int, list_id: int, data: BoardListUpdate
    ) -> BoardListResponse:
        async with self._session_factory() as session:
            role = await PermissionResolver(OwnershipRepo(session)).resolve_role_by_list(
                principal_id, list_id
            )
            ensure_capability(role, can_manage_lists, "List", list_id)

            board_list = await BoardListRepo(session).update_by_id(list_id, data)
            if board_list is None:
                raise ResourceNotFoundError("List", str(list_id))
            return BoardListResponse.model_validate(board_list)

    async def delete_list(self, principal_id: int, list_id: int) -> bool:
        """Delete a list and its cards."""
        async with self._session_factory() as session:
            role = await PermissionResolver(OwnershipRepo(session)).resolve_role_by_list(
                principal_id, list_id
            )
            ensure_capability(role, can_manage_lists, "List", list_id)

            deleted = await BoardListRepo(session).delete_by_id(list_id)
            if deleted:
                logger.info(f"List deleted: id={list_id} by user={principal_id}")
            return deleted

    async def reindex_lists(self, principal_id: int, board_id: int) -> list[BoardListResponse]:
        """Respace a board's lists to 1000, 2000, ... in their current order."""
        async with self._session_factory() as session:
            role = await PermissionResolver(OwnershipRepo(session)).resolve_role(
                principal_id, board_id
            )
            ensure_capability(role, can_manage_lists, "Board", board_id)

            lists = await BoardListRepo(session).get_board_lists(board_id)
            apply_reindex(lists)
            await session.commit()
            for lst in lists:
                await session.refresh(lst)

            logger.info(f"Reindexed {len(lists)} lists on board={board_id}")
            return [BoardListResponse.model_validate(lst) for lst in lists]
