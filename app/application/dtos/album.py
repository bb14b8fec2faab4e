"""DTOs for albums (no dependency on ORM)."""

from dataclasses import dataclass, field

from app.application.dtos.song import SongSummary


@dataclass(frozen=True)
class AlbumCreate:
    """Input for add_album / edit_album."""

    name: str
    year: int


@dataclass(frozen=True)
class AlbumResult:
    """Album read-model with its songs (album:<id>)."""

    id: str
    name: str
    year: int
    cover_url: str | None = None
    songs: list[SongSummary] = field(default_factory=list)
