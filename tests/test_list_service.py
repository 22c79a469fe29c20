import pytest

from app.core.exceptions.domain import AuthorizationError, PrecisionExhaustedError
from app.repos.board_list import BoardListRepo
from app.schemas.board_list import BoardListUpdate
from app.services.list_service import ListService


@pytest.fixture
def lists(session_factory):
    return ListService(session_factory)


async def test_create_list_appends(lists, world):
    created = await lists.create_list(world.editor, world.board, "Done", color="green")
    assert created.position == 3000
    assert [lst.id for lst in await lists.get_lists(world.viewer, world.board)][-1] == created.id


async def test_commenter_cannot_manage_lists(lists, world):
    with pytest.raises(AuthorizationError):
        await lists.create_list(world.commenter, world.board, "Nope")
    with pytest.raises(AuthorizationError):
        await lists.update_list(world.viewer, world.todo, BoardListUpdate(name="Nope"))


async def test_place_list_at_head_and_between(lists, world):
    done = await lists.create_list(world.owner, world.board, "Done")

    head = await lists.place_list(world.owner, done.id, after_id=world.todo)
    assert head.position == 500

    middle = await lists.place_list(world.owner, done.id, before_id=world.todo, after_id=world.doing)
    assert middle.position == 1500
    assert [lst.id for lst in await lists.get_lists(world.owner, world.board)] == [
        world.todo,
        done.id,
        world.doing,
    ]


async def test_place_list_reindexes_exhausted_neighbors(lists, session_factory, world):
    async with session_factory() as session:
        repo = BoardListRepo(session)
        for list_id in (world.todo, world.doing):
            (await repo.get_by_id(list_id)).position = 1000.0
        await session.commit()

    done = await lists.create_list(world.owner, world.board, "Done")
    with pytest.raises(PrecisionExhaustedError):
        await lists.place_list(
            world.owner, done.id, before_id=world.todo, after_id=world.doing, auto_reindex=False
        )

    placed = await lists.place_list(world.owner, done.id, before_id=world.todo, after_id=world.doing)
    assert placed.position == 1500
    assert [(lst.id, lst.position) for lst in await lists.get_lists(world.owner, world.board)] == [
        (world.todo, 1000),
        (done.id, 1500),
        (world.doing, 2000),
    ]


async def test_reindex_and_delete(lists, world):
    await lists.place_list(world.owner, world.doing, after_id=world.todo)
    result = await lists.reindex_lists(world.editor, world.board)
    assert [(lst.id, lst.position) for lst in result] == [(world.doing, 1000), (world.todo, 2000)]

    assert await lists.delete_list(world.editor, world.doing)
    assert [lst.id for lst in await lists.get_lists(world.owner, world.board)] == [world.todo]


async def test_tied_list_positions_fall_back_to_creation_order(lists, session_factory, world):
    done = await lists.create_list(world.owner, world.board, "Done")
    async with session_factory() as session:
        repo = BoardListRepo(session)
        for list_id in (done.id, world.doing, world.todo):
            (await repo.get_by_id(list_id)).position = 1000.0
        await session.commit()

    assert [lst.id for lst in await lists.get_lists(world.viewer, world.board)] == [
        world.todo,
        world.doing,
        done.id,
    ]

    placed = await lists.place_list(world.owner, done.id, before_id=world.todo, after_id=world.doing)
    assert placed.position == 1500
    assert [lst.id for lst in await lists.get_lists(world.owner, world.board)] == [
        world.todo,
        done.id,
        world.doing,
    ]
