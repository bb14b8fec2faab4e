"""Infrastructure exceptions for cache and messaging backends.

These extend CatalogException so presentation can map them consistently,
but CacheUnavailableError is normally absorbed below the HTTP layer: reads
fall back to the database and invalidation escalates it as
CacheInvalidationError.
"""

from app.domain.exceptions import CatalogException


class CacheUnavailableError(CatalogException):
    """Cache backend is disconnected or did not answer within its timeout."""

    def __init__(self, operation: str, key: str, reason: str) -> None:
        super().__init__(
            f"Cache {operation} unavailable for key {key}",
            "CACHE_UNAVAILABLE",
            {"operation": operation, "key": key, "reason": reason},
        )


class QueuePublishError(CatalogException):
    """Export job could not be handed to the broker."""

    def __init__(self, queue: str, reason: str) -> None:
        super().__init__(
            f"Failed to publish to queue {queue}",
            "QUEUE_PUBLISH_ERROR",
            {"queue": queue, "reason": reason},
        )
