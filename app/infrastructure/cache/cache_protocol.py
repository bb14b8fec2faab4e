"""Cache protocol for the repository layer (DIP).

Keys and values are strings; callers serialize before ``set`` and parse after
``get``. A miss is the explicit ``MISS`` sentinel, never ``None`` or ``""``.
"""

from enum import Enum
from typing import Literal, Protocol


class CacheMiss(Enum):
    """Sentinel type for an absent cache key."""

    MISS = "miss"

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISS"


MISS = CacheMiss.MISS

type CacheValue = str | Literal[CacheMiss.MISS]


class CacheProtocol(Protocol):
    """Protocol for cache backends (e.g. Redis). Used by cache-aware repositories.

    Backend connection or timeout failures raise CacheUnavailableError so the
    caller decides whether to degrade (reads) or escalate (invalidation).
    """

    def is_available(self) -> bool:
        """Return True if cache is connected and usable."""
        ...

    async def get(self, key: str) -> CacheValue:
        """Return the cached string or MISS."""
        ...

    async def set(self, key: str, value: str, ttl: int | None = None) -> None:
        """Store value, expiring after ttl seconds when given."""
        ...

    async def delete(self, key: str) -> None:
        """Remove key; deleting an absent key is not an error."""
        ...
