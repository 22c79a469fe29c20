"""Board capability table.

Every capability check in the application goes through the functions below.
A role of ``None`` means the principal has no relationship to the board and
is denied everything.
"""

from app.core.constants import BoardCapability, BoardRole

PERMISSIONS: dict[BoardRole, frozenset[BoardCapability]] = {
    BoardRole.OWNER: frozenset(
        {
            BoardCapability.VIEW,
            BoardCapability.COMMENT,
            BoardCapability.EDIT_CARDS,
            BoardCapability.MANAGE_LISTS,
            BoardCapability.MANAGE_BOARD,
        }
    ),
    BoardRole.EDITOR: frozenset(
        {
            BoardCapability.VIEW,
            BoardCapability.COMMENT,
            BoardCapability.EDIT_CARDS,
            BoardCapability.MANAGE_LISTS,
        }
    ),
    BoardRole.COMMENTER: frozenset({BoardCapability.VIEW, BoardCapability.COMMENT}),
    BoardRole.VIEWER: frozenset({BoardCapability.VIEW}),
}


def has_capability(role: BoardRole | None, capability: BoardCapability) -> bool:
    if role is None:
        return False
    return capability in PERMISSIONS[role]


def can_view(role: BoardRole | None) -> bool:
    """Check if a role can view the board."""
    return has_capability(role, BoardCapability.VIEW)


def can_comment(role: BoardRole | None) -> bool:
    """Check if a role can add comments."""
    return has_capability(role, BoardCapability.COMMENT)


def can_edit_cards(role: BoardRole | None) -> bool:
    """Check if a role can create, update, archive and move cards."""
    return has_capability(role, BoardCapability.EDIT_CARDS)


def can_manage_lists(role: BoardRole | None) -> bool:
    """Check if a role can create, rename, delete and reorder lists."""
    return has_capability(role, BoardCapability.MANAGE_LISTS)


def can_manage_board(role: BoardRole | None) -> bool:
    """Check if a role can change board settings, sharing, or delete the board."""
    return has_capability(role, BoardCapability.MANAGE_BOARD)
