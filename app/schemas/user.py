from datetime import datetime

from pydantic import EmailStr, Field, SecretStr, field_validator

from app.core.constants import UserRole, UserStatus
from app.schemas.base import BaseSchema


class UserRegister(BaseSchema):
    email: EmailStr
    password: SecretStr = Field(min_length=8, max_length=128)
    name: str | None = Field(default=None, max_length=255)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.lower()

    @field_validator("password")
    @classmethod
    def validate_password_strength(cls, v: SecretStr) -> SecretStr:
        password = v.get_secret_value()
        if not any(c.isupper() for c in password):
            raise ValueError("Password must contain at least one uppercase letter")
        if not any(c.isdigit() for c in password):
            raise ValueError("Password must contain at least one digit")
        return v


class UserLogin(BaseSchema):
    email: EmailStr
    password: SecretStr


class UserCreate(BaseSchema):
    """Internal schema for creating a user in the database."""

    email: str
    name: str | None = None
    password_hash: str
    role: str = UserRole.USER
    status: str = UserStatus.PENDING


class UserUpdate(BaseSchema):
    """Schema for updating user fields."""

    name: str | None = None
    role: str | None = None
    status: str | None = None
    password_hash: str | None = None


class UserResponse(BaseSchema):
    id: int
    email: str
    name: str | None = None
    role: str
    status: str
    created_at: datetime
    updated_at: datetime | None = None
