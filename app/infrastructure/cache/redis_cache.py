"""Redis-backed cache store.

Implements CacheProtocol over redis.asyncio with string keys and string
values (decode_responses=True). Serialization is the caller's job. Every
command carries the cache_timeout_seconds socket timeout; on connection or
timeout errors the store reconnects once and otherwise raises
CacheUnavailableError.
"""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Awaitable, Callable

import redis.asyncio as redis

from app.core.config import Settings, get_settings
from app.infrastructure.cache.cache_protocol import MISS, CacheValue
from app.infrastructure.exceptions import CacheUnavailableError

logger = logging.getLogger(__name__)

# Minimum seconds between reconnect attempts while the backend is down.
RECONNECT_INTERVAL_SECONDS = 5.0


class RedisCacheStore:
    """Async Redis cache store.

    Created once per process by the application lifespan and shared by all
    repositories. Call connect() at startup and disconnect() at shutdown.
    """

    def __init__(
        self,
        redis_client: redis.Redis | None = None,
        settings: Settings | None = None,
    ) -> None:
        """Initialize cache store.

        Args:
            redis_client: Optional Redis client for testing or DI.
            settings: Optional settings; defaults to get_settings().
        """
        self.redis = redis_client
        self.settings = settings or get_settings()
        self._connected = redis_client is not None
        self._next_reconnect_at = 0.0
        self._reconnect_lock = asyncio.Lock()

    async def connect(self) -> None:
        """Establish Redis connection. Call on app startup.

        A failed connection leaves the store unavailable; reads degrade to the
        database and later calls retry the connection.
        """
        if self.redis is not None:
            return
        client = redis.Redis(
            host=self.settings.redis_host,
            port=self.settings.redis_port,
            db=self.settings.redis_db,
            password=self.settings.redis_password.get_secret_value()
            if self.settings.redis_password
            else None,
            decode_responses=True,
            socket_connect_timeout=self.settings.cache_timeout_seconds,
            socket_timeout=self.settings.cache_timeout_seconds,
            socket_keepalive=True,
        )
        try:
            await client.ping()
        except (redis.ConnectionError, redis.TimeoutError) as e:
            logger.warning("Redis connection failed: %s. Cache unavailable.", e)
            await client.aclose()
            self._next_reconnect_at = time.monotonic() + RECONNECT_INTERVAL_SECONDS
            return
        if self.redis is not None:
            # another caller connected while this ping was in flight
            await client.aclose()
            return
        self.redis = client
        self._connected = True
        logger.info(
            "Redis cache connected: %s:%s",
            self.settings.redis_host,
            self.settings.redis_port,
        )

    async def disconnect(self) -> None:
        """Close Redis connection. Call on app shutdown."""
        if self.redis is not None:
            await self.redis.aclose()
            self.redis = None
            self._connected = False
            logger.info("Redis cache disconnected")

    async def _reconnect(self) -> bool:
        """Drop the current client and connect again. Returns True if connected.

        Concurrent callers that saw the same broken client share one
        reconnect: whoever acquires the lock first rebuilds the client and the
        rest reuse it.
        """
        broken = self.redis
        async with self._reconnect_lock:
            if self.redis is not broken and self.is_available():
                return True
            if time.monotonic() < self._next_reconnect_at:
                return False
            if self.redis is not None:
                try:
                    await self.redis.aclose()
                except redis.RedisError:
                    logger.debug("Ignoring error while closing broken Redis client")
            self.redis = None
            self._connected = False
            await self.connect()
            return self._connected

    def is_available(self) -> bool:
        """Return True if Redis is connected and usable."""
        return self._connected and self.redis is not None

    async def _execute[T](
        self,
        operation: str,
        key: str,
        command: Callable[[redis.Redis], Awaitable[T]],
    ) -> T:
        """Run one Redis command with a single reconnect on connection failure."""
        if not self.is_available() and not await self._reconnect():
            raise CacheUnavailableError(operation, key, "not connected")
        assert self.redis is not None
        try:
            return await command(self.redis)
        except (redis.ConnectionError, redis.TimeoutError) as e:
            logger.warning("Cache %s failed for key %s: %s", operation, key, e)
            if await self._reconnect() and self.redis is not None:
                try:
                    return await command(self.redis)
                except redis.RedisError as retry_error:
                    raise CacheUnavailableError(
                        operation, key, str(retry_error)
                    ) from retry_error
            raise CacheUnavailableError(operation, key, str(e)) from e
        except redis.RedisError as e:
            logger.exception("Cache %s error for key %s", operation, key)
            raise CacheUnavailableError(operation, key, str(e)) from e

    async def get(self, key: str) -> CacheValue:
        """Return the cached string for key, or MISS.

        Raises:
            CacheUnavailableError: Backend disconnected or timed out.
        """
        value = await self._execute("get", key, lambda r: r.get(key))
        if value is None:
            logger.debug("Cache MISS: %s", key)
            return MISS
        logger.debug("Cache HIT: %s", key)
        return value

    async def set(self, key: str, value: str, ttl: int | None = None) -> None:
        """Store value; with ttl the key expires after ttl seconds.

        Raises:
            CacheUnavailableError: Backend disconnected or timed out.
        """
        await self._execute("set", key, lambda r: r.set(key, value, ex=ttl))
        logger.debug("Cache SET: %s (TTL: %ss)", key, ttl)

    async def delete(self, key: str) -> None:
        """Remove key. Deleting an absent key is a no-op.

        Raises:
            CacheUnavailableError: Backend disconnected or timed out.
        """
        await self._execute("delete", key, lambda r: r.delete(key))
        logger.debug("Cache DELETE: %s", key)
