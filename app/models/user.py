from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from app.core.constants import FieldSizes, UserRole, UserStatus
from app.models.base import Base


class User(Base):
    email: Mapped[str] = mapped_column(
        String(FieldSizes.MEDIUM), unique=True, nullable=False, index=True
    )
    name: Mapped[str | None] = mapped_column(String(FieldSizes.MEDIUM), nullable=True)
    password_hash: Mapped[str] = mapped_column(String(FieldSizes.LONG), nullable=False)
    role: Mapped[str] = mapped_column(
        String(FieldSizes.TINY), nullable=False, default=UserRole.USER
    )
    status: Mapped[str] = mapped_column(
        String(FieldSizes.TINY), nullable=False, default=UserStatus.PENDING
    )

    @property
    def is_approved(self) -> bool:
        return self.status == UserStatus.APPROVED
