from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from app.core.constants import FieldSizes
from app.models.base import Base


class Workspace(Base):
    user_id: Mapped[int] = mapped_column(
        ForeignKey("user.id", ondelete="CASCADE"), nullable=False, index=True
    )
    name: Mapped[str] = mapped_column(String(FieldSizes.MEDIUM), nullable=False)
    description: Mapped[str | None] = mapped_column(String(FieldSizes.TEXT), nullable=True)
