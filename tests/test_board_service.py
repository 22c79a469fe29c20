import pytest

from app.core.constants import BoardRole
from app.core.exceptions.domain import AuthorizationError, ResourceNotFoundError
from app.repos.card import CardRepo
from app.schemas.board import BoardUpdate
from app.services.board_service import BoardService


@pytest.fixture
def boards(session_factory):
    return BoardService(session_factory)


async def test_owner_workspaces_have_no_virtual_entry(boards, world):
    workspaces = await boards.list_workspaces(world.owner)
    assert [(w.id, w.board_count, w.is_virtual) for w in workspaces] == [(world.workspace, 1, False)]


async def test_shared_boards_appear_in_virtual_workspace(boards, world):
    workspaces = await boards.list_workspaces(world.editor)
    assert len(workspaces) == 1
    shared = workspaces[0]
    assert shared.is_virtual
    assert shared.id == "__shared__"
    assert shared.board_count == 1

    listed = await boards.list_boards(world.editor, "__shared__")
    assert [(b.id, b.role) for b in listed] == [(world.board, BoardRole.EDITOR)]


async def test_stranger_has_nothing_shared(boards, world):
    assert await boards.list_workspaces(world.stranger) == []
    assert await boards.list_boards(world.stranger, "__shared__") == []


async def test_other_users_workspace_is_not_found(boards, world):
    with pytest.raises(ResourceNotFoundError):
        await boards.list_boards(world.editor, world.workspace)
    with pytest.raises(ResourceNotFoundError):
        await boards.list_boards(world.editor, "not-a-number")
    with pytest.raises(ResourceNotFoundError):
        await boards.create_board(world.editor, world.workspace, "Intruder")


async def test_get_board_reports_role(boards, world):
    assert (await boards.get_board(world.viewer, world.board)).role is BoardRole.VIEWER
    assert (await boards.get_board(world.owner, world.board)).role is BoardRole.OWNER
    with pytest.raises(ResourceNotFoundError):
        await boards.get_board(world.stranger, world.board)


async def test_public_board(boards, world):
    with pytest.raises(ResourceNotFoundError):
        await boards.get_public_board(world.board)

    await boards.set_public(world.co_owner, world.board, True)
    assert (await boards.get_public_board(world.board)).is_public


async def test_update_requires_manage_board(boards, world):
    with pytest.raises(AuthorizationError):
        await boards.update_board(world.editor, world.board, BoardUpdate(name="Renamed"))
    updated = await boards.update_board(world.owner, world.board, BoardUpdate(name="Renamed"))
    assert updated.name == "Renamed"


async def test_move_board_needs_workspace_ownership(boards, world):
    target = await boards.create_workspace(world.owner, "Archive")
    foreign = await boards.create_workspace(world.co_owner, "Elsewhere")

    with pytest.raises(ResourceNotFoundError):
        await boards.move_board(world.co_owner, world.board, foreign.id)

    moved = await boards.move_board(world.owner, world.board, target.id)
    assert moved.workspace_id == target.id
    assert await boards.get_role(world.editor, world.board) is BoardRole.EDITOR


async def test_delete_board_cascades(boards, session_factory, world):
    with pytest.raises(AuthorizationError):
        await boards.delete_board(world.editor, world.board)

    assert await boards.delete_board(world.owner, world.board)
    async with session_factory() as session:
        assert await CardRepo(session).get_by_id(world.todo_cards[0]) is None
    assert await boards.get_role(world.editor, world.board) is None
