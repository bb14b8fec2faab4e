"""DTOs for songs (no dependency on ORM)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SongCreate:
    """Input for add_song / edit_song. album_id is optional."""

    title: str
    year: int
    genre: str
    performer: str
    duration: int | None = None
    album_id: str | None = None


@dataclass(frozen=True)
class SongSummary:
    """Song as it appears in listings (songs:all, albums, playlists)."""

    id: str
    title: str
    performer: str


@dataclass(frozen=True)
class SongResult:
    """Full song read-model (song:<id>)."""

    id: str
    title: str
    year: int
    genre: str
    performer: str
    duration: int | None
    album_id: str | None
