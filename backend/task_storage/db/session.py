"""
Database session management.

WHY: Async database sessions are required for FastAPI's async/await pattern.
One session per request; the request's work is committed when the handler
returns and rolled back if it raises.
"""

from typing import Any, AsyncGenerator, Dict
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker

from task_storage.core.config import settings


def _engine_options() -> Dict[str, Any]:
    """
    Build engine keyword arguments for the configured database.

    SQLite (aiosqlite) uses a non-queue pool and rejects pool sizing.
    """
    options: Dict[str, Any] = {"echo": settings.DEBUG, "pool_pre_ping": True}
    if not settings.is_sqlite:
        options["pool_size"] = settings.DB_POOL_SIZE
        options["max_overflow"] = settings.DB_MAX_OVERFLOW
    return options


engine = create_async_engine(settings.async_database_url, **_engine_options())

# expire_on_commit=False keeps loaded projects usable after the commit in get_db
AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autocommit=False,
    autoflush=False,
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency to get database session.

    Yields:
        AsyncSession: Database session for the request
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()
