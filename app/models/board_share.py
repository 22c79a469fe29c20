from sqlalchemy import CheckConstraint, ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from app.core.constants import BoardRole, FieldSizes
from app.models.base import Base

_ROLE_VALUES = ", ".join(f"'{role.value}'" for role in BoardRole)


class BoardShare(Base):
    __table_args__ = (
        UniqueConstraint("board_id", "user_id", name="uq_board_share"),
        CheckConstraint(f"role IN ({_ROLE_VALUES})", name="ck_board_share_role"),
    )

    board_id: Mapped[int] = mapped_column(
        ForeignKey("board.id", ondelete="CASCADE"), nullable=False, index=True
    )
    user_id: Mapped[int] = mapped_column(
        ForeignKey("user.id", ondelete="CASCADE"), nullable=False, index=True
    )
    role: Mapped[str] = mapped_column(
        String(FieldSizes.TINY), nullable=False, default=BoardRole.VIEWER
    )
