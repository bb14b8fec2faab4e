"""Cache key builders. Single place for key format.

Keys are ``<kind>:<identifier>``. Identifiers must not contain
CACHE_KEY_SEP to avoid ambiguous or colliding keys. Per-entity keys and
collection-wide keys (``songs:all``) are independent entries.
"""

from app.core.constants import (
    CACHE_KEY_ALL,
    CACHE_KEY_SEP,
    CACHE_PREFIX_ALBUM,
    CACHE_PREFIX_ALBUM_LIKES,
    CACHE_PREFIX_PLAYLIST,
    CACHE_PREFIX_PLAYLISTS,
    CACHE_PREFIX_SONG,
    CACHE_PREFIX_SONGS,
)


def is_valid_key_component(value: str) -> bool:
    """True if value can be used as a key identifier.

    Generated ids never contain the separator, so a value that fails this
    check cannot name a stored entity.
    """
    return bool(value) and CACHE_KEY_SEP not in value


def _validate_key_component(value: str, name: str) -> None:
    """Raise ValueError if value is empty or contains the cache key separator.

    Args:
        value: String component used in a cache key.
        name: Name of the component (for error message).
    """
    if not value:
        raise ValueError(f"Cache key component {name!r} must not be empty")
    if CACHE_KEY_SEP in value:
        raise ValueError(
            f"Cache key component {name!r} must not contain separator {CACHE_KEY_SEP!r}"
        )


def _key(prefix: str, identifier: str, name: str) -> str:
    _validate_key_component(identifier, name)
    return f"{prefix}{CACHE_KEY_SEP}{identifier}"


def song_key(song_id: str) -> str:
    """Cache key for a single song."""
    return _key(CACHE_PREFIX_SONG, song_id, "song_id")


def songs_all_key() -> str:
    """Cache key for the unfiltered song listing."""
    return f"{CACHE_PREFIX_SONGS}{CACHE_KEY_SEP}{CACHE_KEY_ALL}"


def album_key(album_id: str) -> str:
    """Cache key for an album with its songs."""
    return _key(CACHE_PREFIX_ALBUM, album_id, "album_id")


def album_likes_key(album_id: str) -> str:
    """Cache key for an album's like count."""
    return _key(CACHE_PREFIX_ALBUM_LIKES, album_id, "album_id")


def playlist_key(playlist_id: str) -> str:
    """Cache key for a playlist with its songs."""
    return _key(CACHE_PREFIX_PLAYLIST, playlist_id, "playlist_id")


def playlists_key(user_id: str) -> str:
    """Cache key for the playlists a user owns or collaborates on."""
    return _key(CACHE_PREFIX_PLAYLISTS, user_id, "user_id")
