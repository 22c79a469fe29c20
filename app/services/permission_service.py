"""Resolve a principal's role on a board and enforce capabilities.

The workspace owner is always ``owner`` and is checked before any stored
share, so a share row can never override ownership. Unknown boards, lists
and cards resolve to ``None`` just like boards the principal has no access
to. Database errors are not caught here.
"""

from collections.abc import Callable

from loguru import logger

from app.core.constants import BoardRole
from app.core.exceptions.domain import AuthorizationError, ResourceNotFoundError
from app.repos.ownership import OwnershipLookup


class PermissionResolver:
    def __init__(self, lookup: OwnershipLookup):
        self.lookup = lookup

    async def resolve_role(self, principal_id: int, board_id: int) -> BoardRole | None:
        """Effective role of ``principal_id`` on ``board_id``, or None."""
        if await self.lookup.is_workspace_owner(principal_id, board_id):
            return BoardRole.OWNER

        stored = await self.lookup.get_share_role(board_id, principal_id)
        if stored is None:
            return None

        role = BoardRole.parse(stored)
        if role is None:
            logger.warning(
                f"Ignoring share with invalid role {stored!r} (board={board_id}, user={principal_id})"
            )
        return role

    async def resolve_role_by_list(self, principal_id: int, list_id: int) -> BoardRole | None:
        board_id = await self.lookup.get_board_id_for_list(list_id)
        if board_id is None:
            return None
        return await self.resolve_role(principal_id, board_id)

    async def resolve_role_by_card(self, principal_id: int, card_id: int) -> BoardRole | None:
        board_id = await self.lookup.get_board_id_for_card(card_id)
        if board_id is None:
            return None
        return await self.resolve_role(principal_id, board_id)


def ensure_capability(
    role: BoardRole | None,
    check: Callable[[BoardRole | None], bool],
    resource: str,
    identifier: object,
) -> BoardRole:
    """Return ``role`` if ``check`` allows it.

    Raises:
        ResourceNotFoundError: If there is no role at all, so private boards stay hidden.
        AuthorizationError: If the role exists but lacks the capability.
    """
    if role is None:
        logger.debug(f"No role on {resource} {identifier}")
        raise ResourceNotFoundError(resource, str(identifier))
    if not check(role):
        logger.debug(f"Role {role} denied {check.__name__} on {resource} {identifier}")
        raise AuthorizationError()
    return role
