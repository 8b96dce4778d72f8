"""Library catalog database.

The catalog holds the movies, media sources and streams that the sort
endpoints read. The service only reads from it; `scripts/seed_library.py`
is the one writer.

`init_db()` must run before `get_session()`; the lifespan in `main.py` does
this and keeps serving IMDb list endpoints if the catalog is unreachable.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from advanced_sorting.settings import get_settings


class Base(DeclarativeBase):
    """Declarative base for the catalog tables."""


_catalog_engine: AsyncEngine | None = None
_catalog_sessions: async_sessionmaker[AsyncSession] | None = None


async def init_db() -> None:
    """Create the catalog engine from settings.database_url."""
    global _catalog_engine, _catalog_sessions

    settings = get_settings()
    _catalog_engine = create_async_engine(
        settings.async_database_url,
        echo=settings.debug,
        pool_size=5,
        max_overflow=10,
        pool_pre_ping=True,
    )
    # Items are converted to LibraryItem after the session closes
    _catalog_sessions = async_sessionmaker(_catalog_engine, expire_on_commit=False)


async def ping_db() -> None:
    """Fail fast at startup if the catalog can't be reached."""
    async with get_session() as session:
        await session.execute(text("SELECT 1"))


async def close_db() -> None:
    global _catalog_engine, _catalog_sessions
    if _catalog_engine is None:
        return
    await _catalog_engine.dispose()
    _catalog_engine = None
    _catalog_sessions = None


@asynccontextmanager
async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """Catalog session; commits on exit, rolls back if the block raises."""
    if _catalog_sessions is None:
        raise RuntimeError("Library catalog is not connected, call init_db() first")

    async with _catalog_sessions() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
