"""Persistence gateway — owns the async engine and hands out sessions.

One ``Database`` is built by the application factory and kept on
``app.state``; the FastAPI lifespan connects it on startup and closes it on
shutdown. Closing waits for in-flight sessions before the engine is disposed.
"""

import asyncio
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from app.infrastructure.database.base import Base

logger = logging.getLogger(__name__)


class DatabaseClosedError(RuntimeError):
    """Raised when a session is requested after the gateway was closed."""


def to_async_url(url: str) -> str:
    """Convert a sync SQLAlchemy URL to an async one."""
    if url.startswith("sqlite:///"):
        return url.replace("sqlite:///", "sqlite+aiosqlite:///", 1)
    if url.startswith("postgresql://"):
        return url.replace("postgresql://", "postgresql+asyncpg://", 1)
    return url


class Database:
    """Async engine, session factory and in-flight session bookkeeping."""

    def __init__(self, url: str, *, echo: bool = False, shutdown_timeout: float = 10.0):
        self._url = to_async_url(url)
        self._shutdown_timeout = shutdown_timeout
        self._engine: AsyncEngine = create_async_engine(self._url, echo=echo, future=True)
        self._session_factory = async_sessionmaker(
            self._engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )
        self._active_sessions = 0
        self._idle = asyncio.Event()
        self._idle.set()
        self._closed = False

    @property
    def engine(self) -> AsyncEngine:
        return self._engine

    @property
    def is_closed(self) -> bool:
        return self._closed

    @property
    def active_sessions(self) -> int:
        return self._active_sessions

    async def connect(self, create_tables: bool = True) -> None:
        """Check connectivity and optionally create the schema."""
        async with self._engine.begin() as conn:
            await conn.execute(text("SELECT 1"))
            if create_tables:
                await conn.run_sync(Base.metadata.create_all)
        logger.info("Database connected (%s)", self._engine.url.render_as_string(hide_password=True))

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """Yield a session that commits on success and rolls back on error."""
        if self._closed:
            raise DatabaseClosedError("Database gateway is closed")

        self._active_sessions += 1
        self._idle.clear()
        try:
            async with self._session_factory() as session:
                try:
                    yield session
                    await session.commit()
                except Exception:
                    await session.rollback()
                    raise
        finally:
            self._active_sessions -= 1
            if self._active_sessions == 0:
                self._idle.set()

    async def close(self) -> None:
        """Refuse new sessions, drain in-flight ones, then dispose the engine."""
        if self._closed:
            return
        self._closed = True

        if self._active_sessions:
            logger.info("Waiting for %d in-flight database session(s)", self._active_sessions)
            try:
                await asyncio.wait_for(self._idle.wait(), timeout=self._shutdown_timeout)
            except asyncio.TimeoutError:
                logger.warning(
                    "Closing database with %d session(s) still active after %.1fs",
                    self._active_sessions,
                    self._shutdown_timeout,
                )

        await self._engine.dispose()
        logger.info("Database connection pool disposed")
