from loguru import logger

from app.core.constants import BoardRole
from app.core.exceptions.domain import InvalidRoleError, ResourceNotFoundError, SelfShareError
from app.core.permissions import can_manage_board
from app.repos.board_share import BoardShareRepo
from app.repos.ownership import OwnershipRepo
from app.repos.user import UserRepo
from app.schemas.board_share import BoardShareCreate, BoardShareResponse
from app.services.base import BaseService
from app.services.permission_service import PermissionResolver, ensure_capability


class ShareService(BaseService):
    """Grant, update, list and revoke board shares."""

    async def list_shares(self, principal_id: int, board_id: int) -> list[BoardShareResponse]:
        async with self._session_factory() as session:
            role = await PermissionResolver(OwnershipRepo(session)).resolve_role(
                principal_id, board_id
            )
            ensure_capability(role, can_manage_board, "Board", board_id)

            shares = await BoardShareRepo(session).get_board_shares(board_id)
            return [
                BoardShareResponse(
                    id=share.id,
                    board_id=share.board_id,
                    user_id=share.user_id,
                    role=share.role,
                    user_email=user.email,
                    user_name=user.name,
                    created_at=share.created_at,
                )
                for share, user in shares
                if BoardRole.parse(share.role) is not None
            ]

    async def share_board(
        self,
        principal_id: int,
        board_id: int,
        email: str,
        role: str = BoardRole.VIEWER,
    ) -> BoardShareResponse:
        """Share a board with the user registered under ``email``.

        Sharing again with the same user changes the role of the existing grant.

        Raises:
            InvalidRoleError: If ``role`` is not one of the four board roles.
            ResourceNotFoundError: If the board is not visible or the user does not exist.
            AuthorizationError: If the principal cannot manage the board.
            SelfShareError: If the target user already owns the board.
        """
        board_role = BoardRole.parse(role)
        if board_role is None:
            raise InvalidRoleError(role)

        async with self._session_factory() as session:
            ownership = OwnershipRepo(session)
            principal_role = await PermissionResolver(ownership).resolve_role(
                principal_id, board_id
            )
            ensure_capability(principal_role, can_manage_board, "Board", board_id)

            target = await UserRepo(session).get_by_email(email)
            if target is None:
                raise ResourceNotFoundError("User", email.lower())

            if target.id == principal_id:
                raise SelfShareError("Cannot share with yourself")
            if await ownership.is_workspace_owner(target.id, board_id):
                raise SelfShareError()

            share, updated = await BoardShareRepo(session).upsert(
                BoardShareCreate(board_id=board_id, user_id=target.id, role=board_role)
            )
            action = "updated" if updated else "granted"
            logger.info(
                f"Board share {action}: board={board_id} user={target.id} role={board_role}"
            )
            return BoardShareResponse(
                id=share.id,
                board_id=board_id,
                user_id=target.id,
                role=board_role,
                user_email=target.email,
                user_name=target.name,
                created_at=share.created_at,
                updated=updated,
            )

    async def revoke_share(self, principal_id: int, board_id: int, user_id: int) -> None:
        async with self._session_factory() as session:
            role = await PermissionResolver(OwnershipRepo(session)).resolve_role(
                principal_id, board_id
            )
            ensure_capability(role, can_manage_board, "Board", board_id)

            deleted = await BoardShareRepo(session).delete_by_board_and_user(board_id, user_id)
            if not deleted:
                raise ResourceNotFoundError("Share", f"{board_id}/{user_id}")
            logger.info(f"Board share revoked: board={board_id} user={user_id}")
