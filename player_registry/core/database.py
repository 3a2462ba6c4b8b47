"""Async SQLAlchemy engine and per-request sessions.

The URL comes from ``Settings.database_url``: PostgreSQL through asyncpg in
deployment, SQLite through aiosqlite in tests and local runs.
"""

from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Dict, Optional

import structlog
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    create_async_engine,
    async_sessionmaker,
)
from sqlalchemy.pool import StaticPool

from .config import Settings, get_global_settings

logger = structlog.get_logger(__name__)


def engine_options(database_url: str) -> Dict[str, Any]:
    """Engine keyword arguments suited to the URL's backend.

    An in-memory SQLite database lives inside a single connection, so every
    session has to share that one connection.

    :param database_url: SQLAlchemy URL
    :returns: Extra arguments for ``create_async_engine``
    """
    url = make_url(database_url)
    if url.get_backend_name() != "sqlite":
        return {"pool_pre_ping": True}
    if url.database in (None, "", ":memory:"):
        return {
            "poolclass": StaticPool,
            "connect_args": {"check_same_thread": False},
        }
    return {"connect_args": {"check_same_thread": False}}


class DatabaseManager:
    """Owns the engine and hands out sessions for the player tables."""

    def __init__(self, settings: Optional[Settings] = None):
        """Create the engine and session factory.

        :param settings: Settings to read the URL and echo flag from,
            defaults to the process-wide settings
        """
        settings = settings or get_global_settings()
        self.database_url = settings.database_url

        self.engine = create_async_engine(
            self.database_url,
            echo=settings.debug,  # SQL echo in debug mode
            **engine_options(self.database_url),
        )
        self.async_session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

    @asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession, None]:
        """Session that rolls back when the block raises."""
        async with self.async_session_factory() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise

    async def close(self) -> None:
        """Dispose of pooled connections."""
        await self.engine.dispose()
        logger.info("database_engine_disposed")


# Process-wide manager used by the request dependency
db_manager = DatabaseManager()


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency yielding one session per request."""
    async with db_manager.get_session() as session:
        yield session
