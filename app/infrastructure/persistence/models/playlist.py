"""Playlist ORM models: playlists, their songs, and the song activity log."""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import CatalogModel, StringIdMixin


class Playlist(CatalogModel, Base):
    """Playlist model. Table: playlists. owner is the single owning user."""

    __tablename__ = "playlists"

    name: Mapped[str] = mapped_column(String, nullable=False)
    owner: Mapped[str] = mapped_column(
        String(64),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )


class PlaylistSong(StringIdMixin, Base):
    """Song membership of a playlist. Unique (playlist_id, song_id)."""

    __tablename__ = "playlist_songs"

    playlist_id: Mapped[str] = mapped_column(
        String(64),
        ForeignKey("playlists.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    song_id: Mapped[str] = mapped_column(
        String(64),
        ForeignKey("songs.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    __table_args__ = (
        UniqueConstraint("playlist_id", "song_id", name="uq_playlist_song"),
    )


class PlaylistSongActivity(StringIdMixin, Base):
    """Append-only log of songs added to or removed from a playlist."""

    __tablename__ = "playlist_song_activities"

    playlist_id: Mapped[str] = mapped_column(
        String(64),
        ForeignKey("playlists.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    song_id: Mapped[str] = mapped_column(
        String(64), ForeignKey("songs.id", ondelete="CASCADE"), nullable=False
    )
    user_id: Mapped[str] = mapped_column(
        String(64), ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    action: Mapped[str] = mapped_column(String(16), nullable=False)
    time: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
