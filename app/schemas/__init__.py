"""Pydantic request/response schemas for the API."""

from app.schemas.album import (
    AlbumCoverRequest,
    AlbumCreatedResponse,
    AlbumLikesResponse,
    AlbumRequest,
    AlbumResponse,
)
from app.schemas.common import MessageResponse
from app.schemas.export import ExportQueuedResponse, PlaylistExportRequest
from app.schemas.health import HealthResponse
from app.schemas.playlist import (
    CollaborationCreatedResponse,
    CollaborationRequest,
    PlaylistActivitiesResponse,
    PlaylistCreatedResponse,
    PlaylistListItem,
    PlaylistRequest,
    PlaylistSongRequest,
    PlaylistSongsResponse,
)
from app.schemas.song import (
    SongCreatedResponse,
    SongListItem,
    SongRequest,
    SongResponse,
)

__all__ = [
    "AlbumCoverRequest",
    "AlbumCreatedResponse",
    "AlbumLikesResponse",
    "AlbumRequest",
    "AlbumResponse",
    "CollaborationCreatedResponse",
    "CollaborationRequest",
    "ExportQueuedResponse",
    "HealthResponse",
    "MessageResponse",
    "PlaylistActivitiesResponse",
    "PlaylistCreatedResponse",
    "PlaylistExportRequest",
    "PlaylistListItem",
    "PlaylistRequest",
    "PlaylistSongRequest",
    "PlaylistSongsResponse",
    "SongCreatedResponse",
    "SongListItem",
    "SongRequest",
    "SongResponse",
]
