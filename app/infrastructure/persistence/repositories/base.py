"""Base repository: lookups plus the commit-then-invalidate write path."""

from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.infrastructure.cache.cache_aside import ReadThroughCache
from app.infrastructure.cache.cache_protocol import CacheProtocol
from app.infrastructure.cache.invalidation import (
    CacheInvalidator,
    InvalidationContext,
    InvalidationPolicy,
    Mutation,
)
from app.infrastructure.persistence.database import Base


def related_ids(*values: str | None) -> tuple[str, ...]:
    """Return the non-empty values once each, in order."""
    seen: list[str] = []
    for value in values:
        if value and value not in seen:
            seen.append(value)
    return tuple(seen)


class BaseRepository[ModelType: Base]:
    """Base repository for one entity family.

    Reads that participate in the cache go through self.reader. Writes call
    _commit_and_invalidate so the database commit always precedes the cache
    deletes, and a failed commit never reaches invalidation.
    """

    def __init__(
        self,
        db: AsyncSession,
        model: type[ModelType],
        cache: CacheProtocol | None = None,
        *,
        cache_ttl: int | None = None,
        invalidator: CacheInvalidator | None = None,
    ) -> None:
        self.db = db
        self.model = model
        self.cache = cache
        self.reader = ReadThroughCache(cache, cache_ttl)
        self.invalidator = invalidator or CacheInvalidator(cache)

    async def get_by_id(self, entity_id: str) -> ModelType | None:
        """Return a single record by primary key, or None (never cached)."""
        model: Any = self.model
        result = await self.db.execute(select(self.model).where(model.id == entity_id))
        return result.scalar_one_or_none()

    async def exists(self, entity_id: str) -> bool:
        """Return True if a record with entity_id exists (row count based)."""
        model: Any = self.model
        result = await self.db.execute(select(model.id).where(model.id == entity_id))
        return result.scalar_one_or_none() is not None

    async def _commit_and_invalidate(
        self,
        policy: InvalidationPolicy,
        mutation: Mutation,
        context: InvalidationContext,
    ) -> None:
        """Commit the pending write, then clear every cache key it affects."""
        await self.db.commit()
        await self.invalidator.invalidate(policy, mutation, context)
