from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from app.core.constants import FieldSizes
from app.models.base import Base, PositionedMixin


class BoardList(PositionedMixin, Base):
    board_id: Mapped[int] = mapped_column(
        ForeignKey("board.id", ondelete="CASCADE"), nullable=False, index=True
    )
    name: Mapped[str] = mapped_column(String(FieldSizes.MEDIUM), nullable=False)
    color: Mapped[str | None] = mapped_column(String(FieldSizes.TINY), nullable=True)
