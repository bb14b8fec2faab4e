"""Album repository. Caches album:<id> (album plus its songs)."""

from __future__ import annotations

from dataclasses import asdict
from typing import Any

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.album import AlbumCreate, AlbumResult
from app.application.dtos.cache import CachedResult
from app.application.dtos.song import SongSummary
from app.core.constants import ID_PREFIX_ALBUM
from app.domain.exceptions import AlbumNotFoundError, InvariantException
from app.infrastructure.cache.cache_protocol import CacheProtocol
from app.infrastructure.cache.invalidation import (
    ALBUM_POLICY,
    CacheInvalidator,
    InvalidationContext,
    Mutation,
)
from app.infrastructure.cache.keys import album_key, is_valid_key_component
from app.infrastructure.persistence.models.album import Album
from app.infrastructure.persistence.models.song import Song
from app.infrastructure.persistence.repositories.base import (
    BaseRepository,
    related_ids,
)
from app.shared.utils.generators import generate_id


def _album_from_cached(data: dict[str, Any]) -> AlbumResult:
    songs = [SongSummary(**song) for song in data.get("songs", [])]
    return AlbumResult(
        id=data["id"],
        name=data["name"],
        year=data["year"],
        cover_url=data.get("cover_url"),
        songs=songs,
    )


class AlbumRepository(BaseRepository[Album]):
    """Albums. The cached album view embeds song summaries, so song writes clear it too."""

    def __init__(
        self,
        db: AsyncSession,
        cache: CacheProtocol | None = None,
        *,
        cache_ttl: int | None = None,
        invalidator: CacheInvalidator | None = None,
    ) -> None:
        super().__init__(
            db, Album, cache, cache_ttl=cache_ttl, invalidator=invalidator
        )

    async def add_album(self, data: AlbumCreate) -> str:
        """Insert an album and return its id. A new id has no cache entry to clear."""
        album_id = generate_id(ID_PREFIX_ALBUM)
        result = await self.db.execute(
            insert(Album)
            .values(id=album_id, name=data.name, year=data.year)
            .returning(Album.id)
        )
        created_id = result.scalar_one_or_none()
        if created_id is None:
            await self.db.rollback()
            raise InvariantException("Album could not be added")
        await self.db.commit()
        return created_id

    async def get_album_by_id(self, album_id: str) -> CachedResult[AlbumResult]:
        """Get an album with its songs, from cache if present. Raises AlbumNotFoundError."""
        if not is_valid_key_component(album_id):
            raise AlbumNotFoundError(album_id)

        async def load() -> AlbumResult:
            album = await self.get_by_id(album_id)
            if album is None:
                raise AlbumNotFoundError(album_id)
            songs = await self.db.execute(
                select(Song.id, Song.title, Song.performer).where(
                    Song.album_id == album_id
                )
            )
            return AlbumResult(
                id=album.id,
                name=album.name,
                year=album.year,
                cover_url=album.cover,
                songs=[
                    SongSummary(id=row.id, title=row.title, performer=row.performer)
                    for row in songs.all()
                ],
            )

        return await self.reader.fetch(
            album_key(album_id),
            load,
            encode=asdict,
            decode=_album_from_cached,
        )

    async def edit_album(self, album_id: str, data: AlbumCreate) -> None:
        """Update name and year. Raises AlbumNotFoundError."""
        await self._update(
            album_id, Mutation.ALBUM_EDITED, name=data.name, year=data.year
        )

    async def update_album_cover(self, album_id: str, cover_url: str) -> None:
        """Store the uploaded cover URL. Raises AlbumNotFoundError."""
        await self._update(album_id, Mutation.ALBUM_COVER_UPDATED, cover=cover_url)

    async def _update(self, album_id: str, mutation: Mutation, **values: Any) -> None:
        result = await self.db.execute(
            update(Album)
            .where(Album.id == album_id)
            .values(**values)
            .returning(Album.id)
            .execution_options(synchronize_session=False)
        )
        if result.scalar_one_or_none() is None:
            await self.db.rollback()
            raise AlbumNotFoundError(album_id)
        await self._commit_and_invalidate(
            ALBUM_POLICY, mutation, InvalidationContext(entity_id=album_id)
        )

    async def delete_album(self, album_id: str) -> None:
        """Delete an album; its songs stay with album_id cleared. Raises AlbumNotFoundError."""
        songs = await self.db.execute(select(Song.id).where(Song.album_id == album_id))
        song_ids = related_ids(*songs.scalars().all())
        result = await self.db.execute(
            delete(Album)
            .where(Album.id == album_id)
            .returning(Album.id)
            .execution_options(synchronize_session=False)
        )
        if result.scalar_one_or_none() is None:
            await self.db.rollback()
            raise AlbumNotFoundError(album_id)
        await self._commit_and_invalidate(
            ALBUM_POLICY,
            Mutation.ALBUM_DELETED,
            InvalidationContext(entity_id=album_id, song_ids=song_ids),
        )

    async def verify_album_exists(self, album_id: str) -> None:
        """Raise AlbumNotFoundError if the album does not exist."""
        if not await self.exists(album_id):
            raise AlbumNotFoundError(album_id)
