"""Cache: Redis store, key builders, read-through helper and invalidation tables.

Used by the catalog repositories. Key format lives in keys.py; which keys a
write clears lives in invalidation.py.
"""

from app.infrastructure.cache.cache_aside import ReadThroughCache
from app.infrastructure.cache.cache_protocol import MISS, CacheMiss, CacheProtocol
from app.infrastructure.cache.invalidation import (
    ALBUM_LIKE_POLICY,
    ALBUM_POLICY,
    COLLABORATION_POLICY,
    PLAYLIST_POLICY,
    SONG_POLICY,
    CacheInvalidator,
    InvalidationContext,
    InvalidationPolicy,
    Mutation,
)
from app.infrastructure.cache.keys import (
    album_key,
    album_likes_key,
    playlist_key,
    playlists_key,
    song_key,
    songs_all_key,
)
from app.infrastructure.cache.redis_cache import RedisCacheStore

__all__ = [
    "ALBUM_LIKE_POLICY",
    "ALBUM_POLICY",
    "COLLABORATION_POLICY",
    "MISS",
    "PLAYLIST_POLICY",
    "SONG_POLICY",
    "CacheInvalidator",
    "CacheMiss",
    "CacheProtocol",
    "InvalidationContext",
    "InvalidationPolicy",
    "Mutation",
    "ReadThroughCache",
    "RedisCacheStore",
    "album_key",
    "album_likes_key",
    "playlist_key",
    "playlists_key",
    "song_key",
    "songs_all_key",
]
