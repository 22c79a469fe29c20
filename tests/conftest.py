import os
from dataclasses import dataclass

os.environ.setdefault("ADMIN_EMAIL", "admin@example.com")
os.environ.setdefault("DB_PATH", ":memory:")

import pytest
import pytest_asyncio
from loguru import logger
from sqlalchemy.pool import StaticPool

from app.core.constants import BoardRole, UserStatus
from app.models.db import build_engine, build_session_factory
from app.models.registry import Base
from app.repos.board import BoardRepo
from app.repos.board_list import BoardListRepo
from app.repos.board_share import BoardShareRepo
from app.repos.card import CardRepo
from app.repos.user import UserRepo
from app.repos.workspace import WorkspaceRepo
from app.schemas.board import BoardCreate
from app.schemas.board_list import BoardListCreate
from app.schemas.board_share import BoardShareCreate
from app.schemas.card import CardCreate
from app.schemas.user import UserCreate
from app.schemas.workspace import WorkspaceCreate


@pytest.fixture(autouse=True)
def _quiet_logger():
    logger.remove()
    yield


@pytest_asyncio.fixture
async def engine():
    engine = build_engine("sqlite+aiosqlite://", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return build_session_factory(engine)


@pytest_asyncio.fixture
async def session(session_factory):
    async with session_factory() as session:
        yield session


@dataclass
class World:
    owner: int
    co_owner: int
    editor: int
    commenter: int
    viewer: int
    stranger: int
    workspace: int
    board: int
    todo: int
    doing: int
    todo_cards: list[int]
    doing_cards: list[int]


async def make_user(session, email: str) -> int:
    user = await UserRepo(session).create_one(
        UserCreate(email=email, password_hash="not-a-real-hash", status=UserStatus.APPROVED)
    )
    return user.id


@pytest_asyncio.fixture
async def world(session_factory) -> World:
    """Owner's board with two lists, shared with one user per role.

    "todo" holds three cards at ranks 0, 1, 2 and "doing" two cards at ranks 0, 1.
    """
    async with session_factory() as session:
        users = {
            name: await make_user(session, f"{name}@example.com")
            for name in ("owner", "co_owner", "editor", "commenter", "viewer", "stranger")
        }
        workspace = await WorkspaceRepo(session).create_one(
            WorkspaceCreate(user_id=users["owner"], name="Product")
        )
        board = await BoardRepo(session).create_one(
            BoardCreate(workspace_id=workspace.id, name="Roadmap")
        )

        share_repo = BoardShareRepo(session)
        for name, role in (
            ("co_owner", BoardRole.OWNER),
            ("editor", BoardRole.EDITOR),
            ("commenter", BoardRole.COMMENTER),
            ("viewer", BoardRole.VIEWER),
        ):
            await share_repo.create_one(
                BoardShareCreate(board_id=board.id, user_id=users[name], role=role)
            )

        list_repo = BoardListRepo(session)
        todo = await list_repo.create_one(
            BoardListCreate(board_id=board.id, name="To do", position=1000)
        )
        doing = await list_repo.create_one(
            BoardListCreate(board_id=board.id, name="Doing", position=2000)
        )

        card_repo = CardRepo(session)
        todo_cards = [
            (await card_repo.create_one(CardCreate(list_id=todo.id, title=f"A{i}", position=i))).id
            for i in range(3)
        ]
        doing_cards = [
            (await card_repo.create_one(CardCreate(list_id=doing.id, title=f"B{i}", position=i))).id
            for i in range(2)
        ]

    return World(
        workspace=workspace.id,
        board=board.id,
        todo=todo.id,
        doing=doing.id,
        todo_cards=todo_cards,
        doing_cards=doing_cards,
        **users,
    )
