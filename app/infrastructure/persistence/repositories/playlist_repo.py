"""Playlist repository.

Caches playlists:<userId> (playlists a user owns or collaborates on) and
playlist:<id> (playlist with its songs). Ownership lookups for authorization
always read the database.
"""

from __future__ import annotations

from dataclasses import asdict
from typing import Any

from sqlalchemy import delete, insert, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.cache import CachedResult
from app.application.dtos.playlist import (
    PlaylistActivity,
    PlaylistDetail,
    PlaylistSummary,
)
from app.application.dtos.song import SongSummary
from app.core.constants import (
    ID_PREFIX_ACTIVITY,
    ID_PREFIX_PLAYLIST,
    ID_PREFIX_PLAYLIST_SONG,
)
from app.domain.enums import PlaylistActivityAction
from app.domain.exceptions import InvariantException, PlaylistNotFoundError
from app.infrastructure.cache.cache_protocol import CacheProtocol
from app.infrastructure.cache.invalidation import (
    PLAYLIST_POLICY,
    CacheInvalidator,
    InvalidationContext,
    Mutation,
)
from app.infrastructure.cache.keys import (
    is_valid_key_component,
    playlist_key,
    playlists_key,
)
from app.infrastructure.persistence.models.collaboration import Collaboration
from app.infrastructure.persistence.models.playlist import (
    Playlist,
    PlaylistSong,
    PlaylistSongActivity,
)
from app.infrastructure.persistence.models.song import Song
from app.infrastructure.persistence.models.user import User
from app.infrastructure.persistence.repositories.base import (
    BaseRepository,
    related_ids,
)
from app.shared.utils.datetime import utc_now
from app.shared.utils.generators import generate_id


def _summaries_to_cache(playlists: list[PlaylistSummary]) -> list[dict[str, Any]]:
    return [asdict(p) for p in playlists]


def _summaries_from_cache(data: list[dict[str, Any]]) -> list[PlaylistSummary]:
    return [PlaylistSummary(**item) for item in data]


def _detail_from_cached(data: dict[str, Any]) -> PlaylistDetail:
    return PlaylistDetail(
        id=data["id"],
        name=data["name"],
        username=data.get("username"),
        songs=[SongSummary(**song) for song in data.get("songs", [])],
    )


class PlaylistRepository(BaseRepository[Playlist]):
    """Playlists, their songs, and the song activity log."""

    def __init__(
        self,
        db: AsyncSession,
        cache: CacheProtocol | None = None,
        *,
        cache_ttl: int | None = None,
        invalidator: CacheInvalidator | None = None,
    ) -> None:
        super().__init__(
            db, Playlist, cache, cache_ttl=cache_ttl, invalidator=invalidator
        )

    async def add_playlist(self, name: str, owner: str) -> str:
        """Create a playlist owned by owner and return its id."""
        playlist_id = generate_id(ID_PREFIX_PLAYLIST)
        try:
            result = await self.db.execute(
                insert(Playlist)
                .values(id=playlist_id, name=name, owner=owner)
                .returning(Playlist.id)
            )
        except IntegrityError as e:
            await self.db.rollback()
            raise InvariantException(
                "Playlist could not be added", {"owner": owner}
            ) from e
        created_id = result.scalar_one_or_none()
        if created_id is None:
            await self.db.rollback()
            raise InvariantException("Playlist could not be added")
        await self._commit_and_invalidate(
            PLAYLIST_POLICY,
            Mutation.PLAYLIST_ADDED,
            InvalidationContext(entity_id=created_id, owner_id=owner),
        )
        return created_id

    async def get_playlists(self, user_id: str) -> CachedResult[list[PlaylistSummary]]:
        """Playlists user_id owns or collaborates on, from cache if present."""
        if not is_valid_key_component(user_id):
            # no stored user can own or collaborate under this id
            return CachedResult([])

        async def load() -> list[PlaylistSummary]:
            result = await self.db.execute(
                select(Playlist.id, Playlist.name, User.username)
                .outerjoin(User, Playlist.owner == User.id)
                .outerjoin(Collaboration, Collaboration.playlist_id == Playlist.id)
                .where(
                    or_(Playlist.owner == user_id, Collaboration.user_id == user_id)
                )
                .group_by(Playlist.id, Playlist.name, User.username)
            )
            return [
                PlaylistSummary(id=row.id, name=row.name, username=row.username)
                for row in result.all()
            ]

        return await self.reader.fetch(
            playlists_key(user_id),
            load,
            encode=_summaries_to_cache,
            decode=_summaries_from_cache,
        )

    async def get_owner(self, playlist_id: str) -> str | None:
        """Owner id of the playlist, or None if it does not exist (never cached)."""
        result = await self.db.execute(
            select(Playlist.owner).where(Playlist.id == playlist_id)
        )
        return result.scalar_one_or_none()

    async def delete_playlist(self, playlist_id: str) -> None:
        """Delete a playlist. Raises PlaylistNotFoundError.

        Clears the owner's and every collaborator's playlist listing plus the
        playlist's own song list.
        """
        owner = await self.get_owner(playlist_id)
        if owner is None:
            raise PlaylistNotFoundError(playlist_id)
        collaborators = await self.db.execute(
            select(Collaboration.user_id).where(
                Collaboration.playlist_id == playlist_id
            )
        )
        collaborator_ids = related_ids(*collaborators.scalars().all())
        result = await self.db.execute(
            delete(Playlist)
            .where(Playlist.id == playlist_id)
            .returning(Playlist.id)
            .execution_options(synchronize_session=False)
        )
        if result.scalar_one_or_none() is None:
            await self.db.rollback()
            raise PlaylistNotFoundError(playlist_id)
        await self._commit_and_invalidate(
            PLAYLIST_POLICY,
            Mutation.PLAYLIST_DELETED,
            InvalidationContext(
                entity_id=playlist_id, owner_id=owner, user_ids=collaborator_ids
            ),
        )

    async def add_playlist_song(self, playlist_id: str, song_id: str) -> str:
        """Add a song to a playlist. Raises InvariantException (duplicate or rejected)."""
        entry_id = generate_id(ID_PREFIX_PLAYLIST_SONG)
        try:
            result = await self.db.execute(
                insert(PlaylistSong)
                .values(id=entry_id, playlist_id=playlist_id, song_id=song_id)
                .returning(PlaylistSong.id)
            )
        except IntegrityError as e:
            await self.db.rollback()
            raise InvariantException(
                "Song could not be added to playlist",
                {"playlist_id": playlist_id, "song_id": song_id},
            ) from e
        if result.scalar_one_or_none() is None:
            await self.db.rollback()
            raise InvariantException("Song could not be added to playlist")
        await self._commit_and_invalidate(
            PLAYLIST_POLICY,
            Mutation.PLAYLIST_SONG_ADDED,
            InvalidationContext(entity_id=playlist_id),
        )
        return entry_id

    async def get_playlist_songs(self, playlist_id: str) -> CachedResult[PlaylistDetail]:
        """Playlist with its songs, from cache if present. Raises PlaylistNotFoundError."""
        if not is_valid_key_component(playlist_id):
            raise PlaylistNotFoundError(playlist_id)

        async def load() -> PlaylistDetail:
            playlist = await self.db.execute(
                select(Playlist.id, Playlist.name, User.username)
                .outerjoin(User, Playlist.owner == User.id)
                .where(Playlist.id == playlist_id)
            )
            row = playlist.one_or_none()
            if row is None:
                raise PlaylistNotFoundError(playlist_id)
            songs = await self.db.execute(
                select(Song.id, Song.title, Song.performer)
                .join(PlaylistSong, PlaylistSong.song_id == Song.id)
                .where(PlaylistSong.playlist_id == playlist_id)
            )
            return PlaylistDetail(
                id=row.id,
                name=row.name,
                username=row.username,
                songs=[
                    SongSummary(id=s.id, title=s.title, performer=s.performer)
                    for s in songs.all()
                ],
            )

        return await self.reader.fetch(
            playlist_key(playlist_id),
            load,
            encode=asdict,
            decode=_detail_from_cached,
        )

    async def delete_playlist_song(self, playlist_id: str, song_id: str) -> None:
        """Remove a song from a playlist. Raises InvariantException if it was not there."""
        result = await self.db.execute(
            delete(PlaylistSong)
            .where(
                PlaylistSong.playlist_id == playlist_id,
                PlaylistSong.song_id == song_id,
            )
            .returning(PlaylistSong.id)
            .execution_options(synchronize_session=False)
        )
        if result.scalar_one_or_none() is None:
            await self.db.rollback()
            raise InvariantException(
                "Song could not be removed from playlist",
                {"playlist_id": playlist_id, "song_id": song_id},
            )
        await self._commit_and_invalidate(
            PLAYLIST_POLICY,
            Mutation.PLAYLIST_SONG_DELETED,
            InvalidationContext(entity_id=playlist_id),
        )

    async def add_activity(
        self,
        playlist_id: str,
        song_id: str,
        user_id: str,
        action: PlaylistActivityAction,
    ) -> str:
        """Append an entry to the playlist song activity log (not cached)."""
        activity_id = generate_id(ID_PREFIX_ACTIVITY)
        result = await self.db.execute(
            insert(PlaylistSongActivity)
            .values(
                id=activity_id,
                playlist_id=playlist_id,
                song_id=song_id,
                user_id=user_id,
                action=action.value,
                time=utc_now(),
            )
            .returning(PlaylistSongActivity.id)
        )
        if result.scalar_one_or_none() is None:
            await self.db.rollback()
            raise InvariantException("Activity could not be recorded")
        await self.db.commit()
        return activity_id

    async def get_activities(self, playlist_id: str) -> list[PlaylistActivity]:
        """Activity log of a playlist, oldest first (not cached)."""
        result = await self.db.execute(
            select(
                User.username,
                Song.title,
                PlaylistSongActivity.action,
                PlaylistSongActivity.time,
            )
            .join(User, User.id == PlaylistSongActivity.user_id)
            .join(Song, Song.id == PlaylistSongActivity.song_id)
            .where(PlaylistSongActivity.playlist_id == playlist_id)
            .order_by(PlaylistSongActivity.time.asc())
        )
        return [
            PlaylistActivity(
                username=row.username, title=row.title, action=row.action, time=row.time
            )
            for row in result.all()
        ]
