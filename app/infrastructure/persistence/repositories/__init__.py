"""Persistence repositories: SQLAlchemy data access with cache-aside reads."""

from app.infrastructure.persistence.repositories.album_like_repo import (
    AlbumLikeRepository,
)
from app.infrastructure.persistence.repositories.album_repo import AlbumRepository
from app.infrastructure.persistence.repositories.base import BaseRepository
from app.infrastructure.persistence.repositories.collaboration_repo import (
    CollaborationRepository,
)
from app.infrastructure.persistence.repositories.playlist_repo import (
    PlaylistRepository,
)
from app.infrastructure.persistence.repositories.song_repo import SongRepository
from app.infrastructure.persistence.repositories.user_repo import UserRepository

__all__ = [
    "AlbumLikeRepository",
    "AlbumRepository",
    "BaseRepository",
    "CollaborationRepository",
    "PlaylistRepository",
    "SongRepository",
    "UserRepository",
]
