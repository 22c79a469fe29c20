from datetime import datetime

from sqlalchemy import Boolean, DateTime, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from app.core.constants import FieldSizes
from app.models.base import Base, PositionedMixin


class Card(PositionedMixin, Base):
    list_id: Mapped[int] = mapped_column(
        ForeignKey("board_list.id", ondelete="CASCADE"), nullable=False, index=True
    )
    title: Mapped[str] = mapped_column(String(FieldSizes.MEDIUM), nullable=False)
    description: Mapped[str | None] = mapped_column(String(FieldSizes.TEXT), nullable=True)
    is_archived: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    archived_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
