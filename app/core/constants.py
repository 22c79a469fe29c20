from enum import StrEnum


class FieldSizes:
    TINY = 20
    SHORT = 50
    MEDIUM = 255
    LONG = 500
    TEXT = 2000


class UserRole(StrEnum):
    ADMIN = "admin"
    USER = "user"


class UserStatus(StrEnum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class BoardRole(StrEnum):
    """Role of a principal on a board, most privileged first."""

    OWNER = "owner"
    EDITOR = "editor"
    COMMENTER = "commenter"
    VIEWER = "viewer"

    @classmethod
    def parse(cls, value: str | None) -> "BoardRole | None":
        """Return the matching role, or None for anything outside the four variants."""
        if value is None:
            return None
        try:
            return cls(value)
        except ValueError:
            return None


class BoardCapability(StrEnum):
    VIEW = "view"
    COMMENT = "comment"
    EDIT_CARDS = "edit_cards"
    MANAGE_LISTS = "manage_lists"
    MANAGE_BOARD = "manage_board"


SHARED_WORKSPACE_NAME = "Shared with me"
SHARED_WORKSPACE_DESCRIPTION = "Boards shared with you by other users"

# Position of the first item in an empty collection, and the gap left after the last one.
POSITION_STEP = 1000.0


class ActivityAction(StrEnum):
    """What happened to a card, as recorded in its activity log."""

    MOVED = "moved"
    ARCHIVED = "archived"
    RESTORED = "restored"
    COMMENTED = "commented"
