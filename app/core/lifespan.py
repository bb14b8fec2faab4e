"""Application lifespan: startup and shutdown.

Single place for all startup/shutdown logic (SRP). Used by main.py; no
business logic here, only wiring of infrastructure: the database handle,
the Redis cache store and the export producer. Each is created once per
process, kept on app.state, and closed on exit.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from app.core.config import get_settings
from app.infrastructure.cache.redis_cache import RedisCacheStore
from app.infrastructure.messaging.export_producer import RedisQueueProducer
from app.infrastructure.persistence.database import Database
from app.shared.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup order: logging, database, Redis cache (if enabled), export
    producer. Shutdown runs in reverse.
    """
    settings = get_settings()
    setup_logging()

    # ---- Startup ----
    app.state.database = Database.from_settings(settings)

    if settings.redis_enabled:
        cache = RedisCacheStore(settings=settings)
        await cache.connect()
        app.state.cache = cache
    else:
        app.state.cache = None
        logger.info("Redis disabled; reads go straight to the database")

    producer = RedisQueueProducer(settings=settings)
    await producer.connect()
    app.state.export_producer = producer

    yield

    # ---- Shutdown ----
    await app.state.export_producer.disconnect()

    if getattr(app.state, "cache", None) is not None:
        await app.state.cache.disconnect()
        logger.info("Cache disconnected")

    await app.state.database.dispose()
