"""Read-through (cache-aside) helper shared by the catalog repositories.

Only identity-keyed and whole-collection reads go through here; parameterized
reads (e.g. song search) query the database directly so the key space stays
bounded.

Known race: a reader that queried the database before a writer committed
can still store its result after the writer's invalidation ran, leaving a
stale entry until the next invalidating write or the TTL backstop. No
versioning or locking closes this window.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Awaitable, Callable
from typing import Any

from app.application.dtos.cache import CachedResult
from app.infrastructure.cache.cache_protocol import MISS, CacheProtocol
from app.infrastructure.exceptions import CacheUnavailableError

logger = logging.getLogger(__name__)


class ReadThroughCache:
    """Cache-aside reads over a CacheProtocol store.

    Values are JSON-encoded here; the store only sees strings. When no store
    is configured every read goes to the loader.
    """

    def __init__(self, cache: CacheProtocol | None, ttl: int | None = None) -> None:
        self.cache = cache
        self.ttl = ttl

    async def fetch[T](
        self,
        key: str,
        loader: Callable[[], Awaitable[T]],
        *,
        encode: Callable[[T], Any],
        decode: Callable[[Any], T],
    ) -> CachedResult[T]:
        """Return the cached value for key, or load, store and return it.

        Args:
            key: Cache key owned by the calling repository.
            loader: Canonical database read; raises NotFound for absent entities.
            encode: Converts the loaded value to a JSON-compatible structure.
            decode: Rebuilds the value from the JSON structure.

        Returns:
            CachedResult tagged from_cache=True on a hit.
        """
        if self.cache is None:
            return CachedResult(await loader())

        cached = await self._get(key)
        if cached is not MISS:
            return CachedResult(decode(json.loads(cached)), from_cache=True)

        value = await loader()
        await self._set(key, json.dumps(encode(value)))
        return CachedResult(value)

    async def _get(self, key: str) -> Any:
        assert self.cache is not None
        try:
            return await self.cache.get(key)
        except CacheUnavailableError as e:
            logger.warning("Cache read bypassed for %s: %s", key, e.details.get("reason"))
            return MISS

    async def _set(self, key: str, payload: str) -> None:
        assert self.cache is not None
        try:
            await self.cache.set(key, payload, ttl=self.ttl)
        except CacheUnavailableError as e:
            logger.warning("Cache populate skipped for %s: %s", key, e.details.get("reason"))
