"""Core constants: cache key prefixes and shared literal values.

Single source of truth for cache key structure. Used by
app.infrastructure.cache.keys and the invalidation tables.
"""

# Cache key prefixes (<prefix>:<identifier>)
CACHE_PREFIX_SONG = "song"
CACHE_PREFIX_SONGS = "songs"
CACHE_PREFIX_ALBUM = "album"
CACHE_PREFIX_ALBUM_LIKES = "album_likes"
CACHE_PREFIX_PLAYLIST = "playlist"
CACHE_PREFIX_PLAYLISTS = "playlists"

# Identifier segment for collection-wide keys
CACHE_KEY_ALL = "all"

# Delimiter for composite keys
CACHE_KEY_SEP = ":"

# Value of the provenance header on cache hits
DATA_SOURCE_CACHE = "cache"

# ID prefixes for generated identifiers
ID_PREFIX_USER = "user"
ID_PREFIX_ALBUM = "album"
ID_PREFIX_SONG = "song"
ID_PREFIX_PLAYLIST = "playlist"
ID_PREFIX_PLAYLIST_SONG = "playlist-song"
ID_PREFIX_COLLABORATION = "collab"
ID_PREFIX_LIKE = "like"
ID_PREFIX_ACTIVITY = "activity"
