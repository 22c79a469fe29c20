from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.core.config import get_settings


class BaseService:
    """Services open one session per operation from an injected factory."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession] | None = None):
        if session_factory is None:
            from app.models.db import async_session_factory

            session_factory = async_session_factory
        self._session_factory = session_factory
        self.settings = get_settings()
