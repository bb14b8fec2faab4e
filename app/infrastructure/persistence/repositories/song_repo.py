"""Song repository with read-through caching of song:<id> and songs:all."""

from __future__ import annotations

from dataclasses import asdict
from typing import Any

from sqlalchemy import delete, insert, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.cache import CachedResult
from app.application.dtos.song import SongCreate, SongResult, SongSummary
from app.core.constants import ID_PREFIX_SONG
from app.domain.exceptions import InvariantException, SongNotFoundError
from app.infrastructure.cache.cache_protocol import CacheProtocol
from app.infrastructure.cache.invalidation import (
    SONG_POLICY,
    CacheInvalidator,
    InvalidationContext,
    Mutation,
)
from app.infrastructure.cache.keys import (
    is_valid_key_component,
    song_key,
    songs_all_key,
)
from app.infrastructure.persistence.models.playlist import PlaylistSong
from app.infrastructure.persistence.models.song import Song
from app.infrastructure.persistence.repositories.base import (
    BaseRepository,
    related_ids,
)
from app.shared.utils.generators import generate_id


def _song_to_result(song: Song) -> SongResult:
    """Map ORM Song to application SongResult."""
    return SongResult(
        id=song.id,
        title=song.title,
        year=song.year,
        genre=song.genre,
        performer=song.performer,
        duration=song.duration,
        album_id=song.album_id,
    )


def _summaries_to_cache(songs: list[SongSummary]) -> list[dict[str, Any]]:
    return [asdict(s) for s in songs]


def _summaries_from_cache(data: list[dict[str, Any]]) -> list[SongSummary]:
    return [SongSummary(**item) for item in data]


def _song_values(data: SongCreate) -> dict[str, Any]:
    return {
        "title": data.title,
        "year": data.year,
        "genre": data.genre,
        "performer": data.performer,
        "duration": data.duration,
        "album_id": data.album_id,
    }


class SongRepository(BaseRepository[Song]):
    """Songs. Caches song:<id> and songs:all; title/performer search is never cached."""

    def __init__(
        self,
        db: AsyncSession,
        cache: CacheProtocol | None = None,
        *,
        cache_ttl: int | None = None,
        invalidator: CacheInvalidator | None = None,
    ) -> None:
        super().__init__(
            db, Song, cache, cache_ttl=cache_ttl, invalidator=invalidator
        )

    async def add_song(self, data: SongCreate) -> str:
        """Insert a song and return its id.

        Raises InvariantException when the insert is rejected (e.g. unknown album).
        """
        song_id = generate_id(ID_PREFIX_SONG)
        try:
            result = await self.db.execute(
                insert(Song).values(id=song_id, **_song_values(data)).returning(Song.id)
            )
        except IntegrityError as e:
            await self.db.rollback()
            raise InvariantException(
                "Song could not be added", {"album_id": data.album_id}
            ) from e
        created_id = result.scalar_one_or_none()
        if created_id is None:
            await self.db.rollback()
            raise InvariantException("Song could not be added")
        await self._commit_and_invalidate(
            SONG_POLICY,
            Mutation.SONG_ADDED,
            InvalidationContext(entity_id=created_id, album_ids=related_ids(data.album_id)),
        )
        return created_id

    async def get_songs(
        self, title: str | None = None, performer: str | None = None
    ) -> CachedResult[list[SongSummary]]:
        """List songs. Unfiltered listing is cached as songs:all; searches are not."""
        if title or performer:
            return CachedResult(await self._search_songs(title, performer))
        return await self.reader.fetch(
            songs_all_key(),
            self._load_all_songs,
            encode=_summaries_to_cache,
            decode=_summaries_from_cache,
        )

    async def _load_all_songs(self) -> list[SongSummary]:
        result = await self.db.execute(select(Song.id, Song.title, Song.performer))
        return [
            SongSummary(id=row.id, title=row.title, performer=row.performer)
            for row in result.all()
        ]

    async def _search_songs(
        self, title: str | None, performer: str | None
    ) -> list[SongSummary]:
        stmt = select(Song.id, Song.title, Song.performer)
        if title:
            stmt = stmt.where(Song.title.ilike(f"%{title}%"))
        if performer:
            stmt = stmt.where(Song.performer.ilike(f"%{performer}%"))
        result = await self.db.execute(stmt)
        return [
            SongSummary(id=row.id, title=row.title, performer=row.performer)
            for row in result.all()
        ]

    async def get_song_by_id(self, song_id: str) -> CachedResult[SongResult]:
        """Get a song, from cache if present. Raises SongNotFoundError."""
        if not is_valid_key_component(song_id):
            raise SongNotFoundError(song_id)

        async def load() -> SongResult:
            song = await self.get_by_id(song_id)
            if song is None:
                raise SongNotFoundError(song_id)
            return _song_to_result(song)

        return await self.reader.fetch(
            song_key(song_id),
            load,
            encode=asdict,
            decode=lambda data: SongResult(**data),
        )

    async def edit_song(self, song_id: str, data: SongCreate) -> None:
        """Replace a song's fields. Raises SongNotFoundError.

        An album_id with no matching album raises InvariantException.

        Clears the song, the listing, the previous and new album, and every
        playlist that embeds the song.
        """
        previous = await self.db.execute(
            select(Song.album_id).where(Song.id == song_id)
        )
        previous_row = previous.one_or_none()
        if previous_row is None:
            raise SongNotFoundError(song_id)
        playlist_ids = await self._playlists_containing(song_id)
        try:
            result = await self.db.execute(
                update(Song)
                .where(Song.id == song_id)
                .values(**_song_values(data))
                .returning(Song.id)
                .execution_options(synchronize_session=False)
            )
        except IntegrityError as e:
            await self.db.rollback()
            raise InvariantException(
                "Song could not be updated", {"album_id": data.album_id}
            ) from e
        if result.scalar_one_or_none() is None:
            await self.db.rollback()
            raise SongNotFoundError(song_id)
        await self._commit_and_invalidate(
            SONG_POLICY,
            Mutation.SONG_EDITED,
            InvalidationContext(
                entity_id=song_id,
                album_ids=related_ids(previous_row.album_id, data.album_id),
                playlist_ids=playlist_ids,
            ),
        )

    async def delete_song(self, song_id: str) -> None:
        """Delete a song. Raises SongNotFoundError."""
        playlist_ids = await self._playlists_containing(song_id)
        result = await self.db.execute(
            delete(Song)
            .where(Song.id == song_id)
            .returning(Song.id, Song.album_id)
            .execution_options(synchronize_session=False)
        )
        row = result.one_or_none()
        if row is None:
            await self.db.rollback()
            raise SongNotFoundError(song_id)
        await self._commit_and_invalidate(
            SONG_POLICY,
            Mutation.SONG_DELETED,
            InvalidationContext(
                entity_id=song_id,
                album_ids=related_ids(row.album_id),
                playlist_ids=playlist_ids,
            ),
        )

    async def verify_song_exists(self, song_id: str) -> None:
        """Raise SongNotFoundError if the song does not exist."""
        if not await self.exists(song_id):
            raise SongNotFoundError(song_id)

    async def _playlists_containing(self, song_id: str) -> tuple[str, ...]:
        result = await self.db.execute(
            select(PlaylistSong.playlist_id).where(PlaylistSong.song_id == song_id)
        )
        return related_ids(*result.scalars().all())
