from sqlalchemy import Boolean, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from app.core.constants import FieldSizes
from app.models.base import Base


class Board(Base):
    workspace_id: Mapped[int] = mapped_column(
        ForeignKey("workspace.id", ondelete="CASCADE"), nullable=False, index=True
    )
    name: Mapped[str] = mapped_column(String(FieldSizes.MEDIUM), nullable=False)
    description: Mapped[str | None] = mapped_column(String(FieldSizes.TEXT), nullable=True)
    is_public: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
