from functools import lru_cache
from pathlib import Path

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Admin
    admin_email: str = Field(description="Email of the admin user (auto-approved on register)")

    # Session
    session_expiry_hours: int = Field(default=72, description="Session expiry in hours")

    # Database
    db_path: str = Field(default="./data/kanban.db", description="Path to SQLite database file")

    # Ordering
    position_min_gap: float = Field(
        default=1e-9,
        gt=0,
        description="Neighbors closer than this are reindexed before inserting between them",
    )

    # Sharing
    shared_workspace_id: str = Field(
        default="__shared__",
        description="Reserved id of the virtual 'Shared with me' workspace",
    )

    # App
    app_name: str = Field(default="Kanban Boards")
    debug: bool = Field(default=False)
    log_file: str | None = Field(
        default="logs/kanban.log", description="Rotated log file, or empty for console only"
    )

    @computed_field
    @property
    def db_url(self) -> str:
        return f"sqlite+aiosqlite:///{self.db_path}"

    @computed_field
    @property
    def db_directory(self) -> Path:
        return Path(self.db_path).parent


@lru_cache
def get_settings() -> Settings:
    return Settings()  # type: ignore
