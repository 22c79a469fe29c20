import asyncio

from loguru import logger

from app.core.config import get_settings
from app.core.logger import sanitize_dict, setup_logger
from app.services.auth_service import AuthService


async def init_db() -> None:
    """Ensure the database directory and all tables exist."""
    settings = get_settings()
    settings.db_directory.mkdir(parents=True, exist_ok=True)

    from app.models.db import engine
    from app.models.registry import Base

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def startup() -> int:
    """Create tables, then drop expired sessions. Returns how many were removed."""
    await init_db()
    return await AuthService().cleanup_sessions()


def main():
    settings = get_settings()
    setup_logger(debug=settings.debug, log_file=settings.log_file)
    logger.debug(f"Settings: {sanitize_dict(settings.model_dump())}")

    removed = asyncio.run(startup())
    logger.info(f"{settings.app_name} ready (db={settings.db_path}, expired sessions removed={removed})")


if __name__ == "__main__":
    main()
