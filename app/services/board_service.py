from loguru import logger

from app.core.constants import SHARED_WORKSPACE_DESCRIPTION, SHARED_WORKSPACE_NAME, BoardRole
from app.core.exceptions.domain import ResourceNotFoundError
from app.core.permissions import can_manage_board, can_view
from app.repos.board import BoardRepo
from app.repos.ownership import OwnershipRepo
from app.repos.workspace import WorkspaceRepo
from app.schemas.board import BoardCreate, BoardResponse, BoardUpdate
from app.schemas.workspace import WorkspaceCreate, WorkspaceRecord, WorkspaceResponse
from app.services.base import BaseService
from app.services.permission_service import PermissionResolver, ensure_capability


def _board_response(board, role: BoardRole | None) -> BoardResponse:
    return BoardResponse.model_validate(board).model_copy(update={"role": role})


class BoardService(BaseService):
    """Workspaces, boards, and the virtual "Shared with me" workspace."""

    async def create_workspace(
        self, principal_id: int, name: str, description: str | None = None
    ) -> WorkspaceRecord:
        async with self._session_factory() as session:
            workspace = await WorkspaceRepo(session).create_one(
                WorkspaceCreate(user_id=principal_id, name=name, description=description)
            )
            logger.info(f"Workspace created: id={workspace.id} owner={principal_id}")
            return WorkspaceRecord.model_validate(workspace)

    async def list_workspaces(self, principal_id: int) -> list[WorkspaceResponse]:
        """The principal's own workspaces, plus "Shared with me" when anything is shared with them."""
        async with self._session_factory() as session:
            workspace_repo = WorkspaceRepo(session)
            workspaces = await workspace_repo.get_user_workspaces(principal_id)
            counts = await workspace_repo.count_boards([ws.id for ws in workspaces])

            result = [
                WorkspaceResponse(
                    id=ws.id,
                    user_id=ws.user_id,
                    name=ws.name,
                    description=ws.description,
                    board_count=counts.get(ws.id, 0),
                )
                for ws in workspaces
            ]

            shared_count = await BoardRepo(session).count_shared_boards(principal_id)
            if shared_count > 0:
                result.append(
                    WorkspaceResponse(
                        id=self.settings.shared_workspace_id,
                        name=SHARED_WORKSPACE_NAME,
                        description=SHARED_WORKSPACE_DESCRIPTION,
                        board_count=shared_count,
                        is_virtual=True,
                    )
                )
            return result

    async def list_boards(self, principal_id: int, workspace_id: int | str) -> list[BoardResponse]:
        """Boards of a workspace, or of the virtual shared workspace when given its reserved id."""
        async with self._session_factory() as session:
            board_repo = BoardRepo(session)

            if workspace_id == self.settings.shared_workspace_id:
                shared = await board_repo.get_shared_boards(principal_id)
                return [
                    _board_response(board, BoardRole.parse(role))
                    for board, role in shared
                    if BoardRole.parse(role) is not None
                ]

            try:
                workspace = await WorkspaceRepo(session).get_by_id(int(workspace_id))
            except ValueError as e:
                raise ResourceNotFoundError("Workspace", str(workspace_id)) from e
            if workspace is None or workspace.user_id != principal_id:
                raise ResourceNotFoundError("Workspace", str(workspace_id))

            boards = await board_repo.get_workspace_boards(workspace.id)
            return [_board_response(board, BoardRole.OWNER) for board in boards]

    async def create_board(
        self,
        principal_id: int,
        workspace_id: int,
        name: str,
        description: str | None = None,
        is_public: bool = False,
    ) -> BoardResponse:
        """Create a board. Only the workspace owner may add boards to a workspace."""
        async with self._session_factory() as session:
            workspace = await WorkspaceRepo(session).get_by_id(workspace_id)
            if workspace is None or workspace.user_id != principal_id:
                raise ResourceNotFoundError("Workspace", str(workspace_id))

            board = await BoardRepo(session).create_one(
                BoardCreate(
                    workspace_id=workspace_id,
                    name=name,
                    description=description,
                    is_public=is_public,
                )
            )
            logger.info(f"Board created: id={board.id} workspace={workspace_id}")
            return _board_response(board, BoardRole.OWNER)

    async def get_role(self, principal_id: int, board_id: int) -> BoardRole | None:
        async with self._session_factory() as session:
            return await PermissionResolver(OwnershipRepo(session)).resolve_role(
                principal_id, board_id
            )

    async def get_board(self, principal_id: int, board_id: int) -> BoardResponse:
        async with self._session_factory() as session:
            role = await PermissionResolver(OwnershipRepo(session)).resolve_role(
                principal_id, board_id
            )
            ensure_capability(role, can_view, "Board", board_id)

            board = await BoardRepo(session).get_by_id(board_id)
            if board is None:
                raise ResourceNotFoundError("Board", str(board_id))
            return _board_response(board, role)

    async def get_public_board(self, board_id: int) -> BoardResponse:
        """Read a board without authentication. Private boards look like missing ones."""
        async with self._session_factory() as session:
            board = await BoardRepo(session).get_public(board_id)
            if board is None:
                raise ResourceNotFoundError("Board", str(board_id))
            return _board_response(board, None)

    async def update_board(
        self, principal_id: int, board_id: int, data: BoardUpdate
    ) -> BoardResponse:
        async with self._session_factory() as session:
            role = await PermissionResolver(OwnershipRepo(session)).resolve_role(
                principal_id, board_id
            )
            ensure_capability(role, can_manage_board, "Board", board_id)

            board = await BoardRepo(session).update_by_id(board_id, data)
            if board is None:
                raise ResourceNotFoundError("Board", str(board_id))
            logger.info(f"Board updated: id={board_id} by user={principal_id}")
            return _board_response(board, role)

    async def set_public(self, principal_id: int, board_id: int, is_public: bool) -> BoardResponse:
        return await self.update_board(principal_id, board_id, BoardUpdate(is_public=is_public))

    async def delete_board(self, principal_id: int, board_id: int) -> bool:
        async with self._session_factory() as session:
            role = await PermissionResolver(OwnershipRepo(session)).resolve_role(
                principal_id, board_id
            )
            ensure_capability(role, can_manage_board, "Board", board_id)

            deleted = await BoardRepo(session).delete_by_id(board_id)
            if deleted:
                logger.info(f"Board deleted: id={board_id} by user={principal_id}")
            return deleted

    async def move_board(
        self, principal_id: int, board_id: int, workspace_id: int
    ) -> BoardResponse:
        """Move a board to another workspace.

        Requires owning both workspaces; an ``owner`` share is not enough.
        """
        async with self._session_factory() as session:
            ownership = OwnershipRepo(session)
            if not await ownership.is_workspace_owner(principal_id, board_id):
                raise ResourceNotFoundError("Board", str(board_id))

            target = await WorkspaceRepo(session).get_by_id(workspace_id)
            if target is None or target.user_id != principal_id:
                raise ResourceNotFoundError("Workspace", str(workspace_id))

            board_repo = BoardRepo(session)
            board = await board_repo.get_by_id(board_id)
            board.workspace_id = workspace_id  # type: ignore[union-attr]
            await session.commit()
            await session.refresh(board)

            logger.info(f"Board moved: id={board_id} to workspace={workspace_id}")
            return _board_response(board, BoardRole.OWNER)
