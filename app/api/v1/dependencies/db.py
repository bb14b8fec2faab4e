"""Database session and cache store dependencies (composition root)."""

from __future__ import annotations

from collections.abc import AsyncIterator
from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import Settings, get_settings
from app.infrastructure.cache.cache_protocol import CacheProtocol
from app.infrastructure.cache.invalidation import CacheInvalidator
from app.infrastructure.persistence.database import Database


async def get_db(request: Request) -> AsyncIterator[AsyncSession]:
    """One session per request from the process-wide Database handle.

    Repositories commit their own writes; anything left uncommitted is
    discarded when the session closes.
    """
    database: Database = request.app.state.database
    async with database.session() as session:
        yield session


def get_cache(request: Request) -> CacheProtocol | None:
    """Process-wide cache store, or None when Redis is disabled."""
    return getattr(request.app.state, "cache", None)


def get_invalidator(
    cache: Annotated[CacheProtocol | None, Depends(get_cache)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> CacheInvalidator:
    """Invalidator with the configured retry budget."""
    return CacheInvalidator(
        cache,
        attempts=settings.cache_invalidation_attempts,
        backoff_seconds=settings.cache_invalidation_backoff_seconds,
    )
