"""Import every model so ``Base.metadata`` knows all tables."""

from app.models.activity_log import ActivityLog
from app.models.base import Base
from app.models.board import Board
from app.models.board_list import BoardList
from app.models.board_share import BoardShare
from app.models.card import Card
from app.models.comment import Comment
from app.models.session import Session
from app.models.user import User
from app.models.workspace import Workspace

__all__ = [
    "ActivityLog",
    "Base",
    "Board",
    "BoardList",
    "BoardShare",
    "Card",
    "Comment",
    "Session",
    "User",
    "Workspace",
]
