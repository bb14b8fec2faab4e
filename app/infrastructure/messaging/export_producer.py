"""Redis list producer for export jobs.

Jobs are JSON-encoded and pushed onto a named list with RPUSH; the export
worker pops them from the other end. Delivery is fire-and-forget: once RPUSH
returns, durability is the broker's concern.
"""

from __future__ import annotations

import json
import logging
from typing import Any

import redis.asyncio as redis

from app.core.config import Settings, get_settings
from app.infrastructure.exceptions import QueuePublishError

logger = logging.getLogger(__name__)


class RedisQueueProducer:
    """Publishes messages to Redis lists (IExportProducer)."""

    def __init__(
        self,
        redis_client: redis.Redis | None = None,
        settings: Settings | None = None,
    ) -> None:
        """Initialize. Pass redis_client for DI/testing."""
        self.redis = redis_client
        self.settings = settings or get_settings()
        self._connected = redis_client is not None

    async def connect(self) -> None:
        """Establish Redis connection. Call on app startup."""
        if self._connected:
            return
        client = redis.Redis(
            host=self.settings.redis_host,
            port=self.settings.redis_port,
            db=self.settings.redis_db,
            password=self.settings.redis_password.get_secret_value()
            if self.settings.redis_password
            else None,
            decode_responses=True,
            socket_connect_timeout=5,
        )
        try:
            await client.ping()
        except (redis.ConnectionError, redis.TimeoutError) as e:
            logger.warning("Export producer connection failed: %s", e)
            await client.aclose()
            return
        self.redis = client
        self._connected = True
        logger.info("Export producer connected")

    async def disconnect(self) -> None:
        """Close Redis connection. Call on app shutdown."""
        if self.redis is not None:
            await self.redis.aclose()
            self.redis = None
            self._connected = False
            logger.info("Export producer disconnected")

    def is_available(self) -> bool:
        """Return True if Redis is connected."""
        return self._connected and self.redis is not None

    async def send_message(self, queue: str, message: dict[str, Any]) -> None:
        """Push message onto queue.

        Raises:
            QueuePublishError: Broker unreachable or rejected the push.
        """
        if not self.is_available():
            await self.connect()
        if self.redis is None:
            raise QueuePublishError(queue, "not connected")
        try:
            await self.redis.rpush(queue, json.dumps(message))
        except redis.RedisError as e:
            logger.exception("Failed to publish to %s", queue)
            raise QueuePublishError(queue, str(e)) from e
        logger.debug("Published message to %s", queue)
