"""Persistence models: ORM entities and mixins."""

from app.infrastructure.persistence.models.album import Album
from app.infrastructure.persistence.models.album_like import UserAlbumLike
from app.infrastructure.persistence.models.collaboration import Collaboration
from app.infrastructure.persistence.models.mixins import (
    CatalogModel,
    StringIdMixin,
    TimestampMixin,
)
from app.infrastructure.persistence.models.playlist import (
    Playlist,
    PlaylistSong,
    PlaylistSongActivity,
)
from app.infrastructure.persistence.models.song import Song
from app.infrastructure.persistence.models.user import User

__all__ = [
    "Album",
    "CatalogModel",
    "Collaboration",
    "Playlist",
    "PlaylistSong",
    "PlaylistSongActivity",
    "Song",
    "StringIdMixin",
    "TimestampMixin",
    "User",
    "UserAlbumLike",
]
