"""Persistence: async engine handle, session factory, and Base for SQLAlchemy ORM.

Schema is managed by Alembic migrations. The engine (and its connection
pool) belongs to a Database instance created by the application lifespan at
startup and disposed at shutdown; it is passed explicitly to whoever needs
sessions instead of living in module globals.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from app.core.config import Settings

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy declarative models."""


class Database:
    """Process-wide engine and session factory.

    Safe for concurrent use by all repositories; each request gets its own
    session from session().
    """

    def __init__(self, engine: AsyncEngine) -> None:
        self.engine = engine
        self._session_factory = async_sessionmaker(
            bind=engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> Database:
        """Create the engine from settings (pool sizes, per-statement timeout)."""
        connect_args: dict[str, Any] = {}
        if "asyncpg" in settings.database_url:
            connect_args["command_timeout"] = settings.db_command_timeout
            connect_args["server_settings"] = {"jit": "off"}
        engine = create_async_engine(
            settings.database_url,
            echo=settings.database_echo,
            pool_pre_ping=True,
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_recycle=3600,
            connect_args=connect_args,
        )
        logger.info("Database engine created (pool_size=%s)", settings.db_pool_size)
        return cls(engine)

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """Yield a session; uncommitted work is discarded when it closes.

        Repositories commit their own writes so invalidation can follow the
        commit.
        """
        async with self._session_factory() as session:
            yield session

    async def dispose(self) -> None:
        """Close all pooled connections. Call on app shutdown."""
        await self.engine.dispose()
        logger.info("Database engine disposed")
