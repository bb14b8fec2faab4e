"""Application DTOs (no ORM dependency)."""

from app.application.dtos.access import AccessResult
from app.application.dtos.album import AlbumCreate, AlbumResult
from app.application.dtos.cache import CachedResult
from app.application.dtos.export import PlaylistExportJob
from app.application.dtos.playlist import (
    PlaylistActivity,
    PlaylistDetail,
    PlaylistSummary,
)
from app.application.dtos.song import SongCreate, SongResult, SongSummary

__all__ = [
    "AccessResult",
    "AlbumCreate",
    "AlbumResult",
    "CachedResult",
    "PlaylistActivity",
    "PlaylistDetail",
    "PlaylistExportJob",
    "PlaylistSummary",
    "SongCreate",
    "SongResult",
    "SongSummary",
]
