"""Playlist, playlist song and collaboration API schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from app.domain.enums import PlaylistActivityAction
from app.schemas.song import SongListItem


class PlaylistRequest(BaseModel):
    """Request body for POST /playlists."""

    name: str = Field(..., min_length=1, max_length=255)


class PlaylistCreatedResponse(BaseModel):
    """Response for POST /playlists."""

    playlist_id: str


class PlaylistListItem(BaseModel):
    """Playlist the caller owns or collaborates on. username is the owner's."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    username: str | None


class PlaylistSongRequest(BaseModel):
    """Request body for POST/DELETE /playlists/{id}/songs."""

    song_id: str = Field(..., min_length=1, max_length=64)


class PlaylistSongsResponse(BaseModel):
    """Playlist with its songs."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    username: str | None
    songs: list[SongListItem] = Field(default_factory=list)


class PlaylistActivityItem(BaseModel):
    """One entry of the playlist song activity log."""

    model_config = ConfigDict(from_attributes=True)

    username: str
    title: str
    action: PlaylistActivityAction
    time: datetime


class PlaylistActivitiesResponse(BaseModel):
    """Response for GET /playlists/{id}/activities."""

    playlist_id: str
    activities: list[PlaylistActivityItem]


class CollaborationRequest(BaseModel):
    """Request body for POST/DELETE /collaborations."""

    playlist_id: str = Field(..., min_length=1, max_length=64)
    user_id: str = Field(..., min_length=1, max_length=64)


class CollaborationCreatedResponse(BaseModel):
    """Response for POST /collaborations."""

    collaboration_id: str
