"""Provenance-tagged read results."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CachedResult[T]:
    """Value returned by a cache-aware read.

    from_cache is True only when the value was served from the cache store;
    freshly computed values (cache miss or cache bypass) carry False.
    """

    value: T
    from_cache: bool = False
