"""DTOs for playlists, playlist songs and the activity log."""

from dataclasses import dataclass, field
from datetime import datetime

from app.application.dtos.song import SongSummary


@dataclass(frozen=True)
class PlaylistSummary:
    """Playlist as listed for a user (playlists:<userId>). username is the owner's."""

    id: str
    name: str
    username: str | None


@dataclass(frozen=True)
class PlaylistDetail:
    """Playlist with its songs (playlist:<id>)."""

    id: str
    name: str
    username: str | None
    songs: list[SongSummary] = field(default_factory=list)


@dataclass(frozen=True)
class PlaylistActivity:
    """One add/delete entry of the playlist song activity log."""

    username: str
    title: str
    action: str
    time: datetime
