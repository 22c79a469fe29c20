import pytest
from sqlalchemy.exc import IntegrityError, OperationalError
from sqlalchemy.pool import StaticPool

from app.core.constants import BoardRole
from app.core.exceptions.domain import (
    AuthorizationError,
    PersistenceError,
    ResourceNotFoundError,
)
from app.core.permissions import can_comment, can_view
from app.models.board_share import BoardShare
from app.models.db import build_engine, build_session_factory
from app.repos.ownership import OwnershipRepo
from app.services.permission_service import PermissionResolver, ensure_capability


class FakeLookup:
    """In-memory ownership chain that records every lookup."""

    def __init__(self, owners=None, shares=None, list_boards=None, card_boards=None):
        self.owners = owners or {}  # board_id -> owner user id
        self.shares = shares or {}  # (board_id, user_id) -> raw role
        self.list_boards = list_boards or {}
        self.card_boards = card_boards or {}
        self.calls = []

    async def is_workspace_owner(self, user_id, board_id):
        self.calls.append("owner")
        return self.owners.get(board_id) == user_id

    async def get_share_role(self, board_id, user_id):
        self.calls.append("share")
        return self.shares.get((board_id, user_id))

    async def get_board_id_for_list(self, list_id):
        self.calls.append("list")
        return self.list_boards.get(list_id)

    async def get_board_id_for_card(self, card_id):
        self.calls.append("card")
        return self.card_boards.get(card_id)


class BrokenLookup(FakeLookup):
    async def is_workspace_owner(self, user_id, board_id):
        raise PersistenceError("connection lost")


@pytest.fixture
def lookup():
    return FakeLookup(
        owners={10: 1},
        shares={(10, 1): "viewer", (10, 2): "editor", (10, 3): "superuser"},
        list_boards={100: 10},
        card_boards={1000: 10},
    )


async def test_workspace_owner_wins_over_conflicting_share(lookup):
    resolver = PermissionResolver(lookup)
    assert await resolver.resolve_role(1, 10) is BoardRole.OWNER
    assert lookup.calls == ["owner"]


async def test_share_role_is_returned(lookup):
    resolver = PermissionResolver(lookup)
    assert await resolver.resolve_role(2, 10) is BoardRole.EDITOR
    assert lookup.calls == ["owner", "share"]


async def test_unrelated_principal_has_no_role(lookup):
    assert await PermissionResolver(lookup).resolve_role(99, 10) is None


async def test_unknown_board_has_no_role(lookup):
    assert await PermissionResolver(lookup).resolve_role(1, 999) is None


async def test_invalid_stored_role_is_no_role(lookup):
    assert await PermissionResolver(lookup).resolve_role(3, 10) is None


async def test_list_and_card_resolution_delegate_to_board(lookup):
    resolver = PermissionResolver(lookup)
    for principal in (1, 2, 3, 99):
        direct = await resolver.resolve_role(principal, 10)
        assert await resolver.resolve_role_by_list(principal, 100) == direct
        assert await resolver.resolve_role_by_card(principal, 1000) == direct


async def test_missing_list_or_card_has_no_role(lookup):
    resolver = PermissionResolver(lookup)
    assert await resolver.resolve_role_by_list(1, 404) is None
    assert await resolver.resolve_role_by_card(1, 404) is None
    assert lookup.calls == ["list", "card"]


async def test_lookup_failures_propagate():
    with pytest.raises(PersistenceError):
        await PermissionResolver(BrokenLookup()).resolve_role(1, 10)


def test_ensure_capability_distinguishes_not_found_from_forbidden():
    with pytest.raises(ResourceNotFoundError):
        ensure_capability(None, can_view, "Board", 1)
    with pytest.raises(AuthorizationError):
        ensure_capability(BoardRole.VIEWER, can_comment, "Board", 1)
    assert ensure_capability(BoardRole.COMMENTER, can_comment, "Board", 1) is BoardRole.COMMENTER


async def test_database_resolution_matches_shares(session, world):
    resolver = PermissionResolver(OwnershipRepo(session))
    expected = {
        world.owner: BoardRole.OWNER,
        world.co_owner: BoardRole.OWNER,
        world.editor: BoardRole.EDITOR,
        world.commenter: BoardRole.COMMENTER,
        world.viewer: BoardRole.VIEWER,
        world.stranger: None,
    }
    for user_id, role in expected.items():
        assert await resolver.resolve_role(user_id, world.board) == role
        assert await resolver.resolve_role_by_list(user_id, world.doing) == role
        assert await resolver.resolve_role_by_card(user_id, world.todo_cards[0]) == role


async def test_owner_share_row_never_downgrades_owner(session, world):
    session.add(BoardShare(board_id=world.board, user_id=world.owner, role="viewer"))
    await session.commit()

    resolver = PermissionResolver(OwnershipRepo(session))
    assert await resolver.resolve_role(world.owner, world.board) is BoardRole.OWNER


async def test_database_rejects_unknown_role_strings(session, world):
    session.add(BoardShare(board_id=world.board, user_id=world.stranger, role="admin"))
    with pytest.raises(IntegrityError):
        await session.commit()


async def test_database_errors_become_persistence_errors():
    engine = build_engine("sqlite+aiosqlite://", poolclass=StaticPool)  # no tables
    try:
        async with build_session_factory(engine)() as session:
            with pytest.raises(PersistenceError) as exc_info:
                await PermissionResolver(OwnershipRepo(session)).resolve_role(1, 1)
            assert isinstance(exc_info.value.__cause__, OperationalError)
    finally:
        await engine.dispose()
