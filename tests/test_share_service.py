import pytest

from app.core.constants import BoardRole
from app.core.exceptions.domain import (
    AuthorizationError,
    InvalidRoleError,
    ResourceNotFoundError,
    SelfShareError,
)
from app.services.board_service import BoardService
from app.services.share_service import ShareService


@pytest.fixture
def shares(session_factory):
    return ShareService(session_factory)


async def test_share_creates_then_updates_single_grant(shares, world):
    created = await shares.share_board(world.owner, world.board, "stranger@example.com", "commenter")
    assert created.role is BoardRole.COMMENTER
    assert created.updated is False

    updated = await shares.share_board(world.owner, world.board, "STRANGER@example.com", "editor")
    assert updated.updated is True
    assert updated.id == created.id

    grants = [s for s in await shares.list_shares(world.owner, world.board) if s.user_id == world.stranger]
    assert len(grants) == 1
    assert grants[0].role is BoardRole.EDITOR


async def test_default_role_is_viewer(shares, world):
    share = await shares.share_board(world.owner, world.board, "stranger@example.com")
    assert share.role is BoardRole.VIEWER


async def test_cannot_share_with_workspace_owner(shares, world):
    with pytest.raises(SelfShareError):
        await shares.share_board(world.co_owner, world.board, "owner@example.com", "viewer")


async def test_cannot_share_with_yourself(shares, world):
    with pytest.raises(SelfShareError):
        await shares.share_board(world.owner, world.board, "owner@example.com", "editor")


async def test_invalid_role_rejected(shares, world):
    with pytest.raises(InvalidRoleError):
        await shares.share_board(world.owner, world.board, "stranger@example.com", "admin")


async def test_only_board_managers_can_share(shares, world):
    with pytest.raises(AuthorizationError):
        await shares.share_board(world.editor, world.board, "stranger@example.com", "viewer")
    with pytest.raises(ResourceNotFoundError):
        await shares.share_board(world.stranger, world.board, "viewer@example.com", "owner")


async def test_shared_owner_can_manage_shares(shares, world):
    share = await shares.share_board(world.co_owner, world.board, "stranger@example.com", "viewer")
    assert share.user_id == world.stranger
    assert len(await shares.list_shares(world.co_owner, world.board)) == 5


async def test_unknown_user(shares, world):
    with pytest.raises(ResourceNotFoundError):
        await shares.share_board(world.owner, world.board, "nobody@example.com")


async def test_revoke_share_removes_access(shares, session_factory, world):
    await shares.revoke_share(world.owner, world.board, world.viewer)

    assert await BoardService(session_factory).get_role(world.viewer, world.board) is None
    with pytest.raises(ResourceNotFoundError):
        await shares.revoke_share(world.owner, world.board, world.viewer)
