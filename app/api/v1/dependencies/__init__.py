"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for DB sessions, the cache store, caller identity,
repositories and use cases. Routes depend only on these, not on
infrastructure directly.
"""

from app.api.v1.dependencies.auth import get_current_user_id
from app.api.v1.dependencies.catalog import (
    get_album_like_repo,
    get_album_repo,
    get_collaboration_repo,
    get_export_producer,
    get_export_service,
    get_playlist_authorization,
    get_playlist_repo,
    get_playlist_service,
    get_song_repo,
    get_user_repo,
)
from app.api.v1.dependencies.db import get_cache, get_db, get_invalidator
from app.api.v1.dependencies.provenance import mark_data_source

__all__ = [
    "get_album_like_repo",
    "get_album_repo",
    "get_cache",
    "get_collaboration_repo",
    "get_current_user_id",
    "get_db",
    "get_export_producer",
    "get_export_service",
    "get_invalidator",
    "get_playlist_authorization",
    "get_playlist_repo",
    "get_playlist_service",
    "get_song_repo",
    "get_user_repo",
    "mark_data_source",
]
