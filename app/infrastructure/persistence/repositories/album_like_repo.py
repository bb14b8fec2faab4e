"""Album like repository. Caches the like count as album_likes:<albumId>."""

from __future__ import annotations

from sqlalchemy import delete, func, insert, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.cache import CachedResult
from app.core.constants import ID_PREFIX_LIKE
from app.domain.exceptions import (
    AlbumAlreadyLikedError,
    AlbumLikeNotFoundError,
    AlbumNotFoundError,
)
from app.infrastructure.cache.cache_protocol import CacheProtocol
from app.infrastructure.cache.invalidation import (
    ALBUM_LIKE_POLICY,
    CacheInvalidator,
    InvalidationContext,
    Mutation,
)
from app.infrastructure.cache.keys import album_likes_key, is_valid_key_component
from app.infrastructure.persistence.models.album import Album
from app.infrastructure.persistence.models.album_like import UserAlbumLike
from app.infrastructure.persistence.repositories.base import BaseRepository
from app.shared.utils.generators import generate_id


class AlbumLikeRepository(BaseRepository[UserAlbumLike]):
    """Likes of albums by users. One like per (user, album)."""

    def __init__(
        self,
        db: AsyncSession,
        cache: CacheProtocol | None = None,
        *,
        cache_ttl: int | None = None,
        invalidator: CacheInvalidator | None = None,
    ) -> None:
        super().__init__(
            db, UserAlbumLike, cache, cache_ttl=cache_ttl, invalidator=invalidator
        )

    async def add_like(self, user_id: str, album_id: str) -> str:
        """Like an album; returns the like id.

        Raises:
            AlbumNotFoundError: Album does not exist.
            AlbumAlreadyLikedError: User already likes the album.
        """
        await self._verify_album_exists(album_id)
        existing = await self.db.execute(
            select(UserAlbumLike.id).where(
                UserAlbumLike.user_id == user_id,
                UserAlbumLike.album_id == album_id,
            )
        )
        if existing.scalar_one_or_none() is not None:
            raise AlbumAlreadyLikedError(user_id, album_id)
        like_id = generate_id(ID_PREFIX_LIKE)
        try:
            await self.db.execute(
                insert(UserAlbumLike).values(
                    id=like_id, user_id=user_id, album_id=album_id
                )
            )
        except IntegrityError as e:
            # Concurrent like of the same album by the same user.
            await self.db.rollback()
            raise AlbumAlreadyLikedError(user_id, album_id) from e
        await self._commit_and_invalidate(
            ALBUM_LIKE_POLICY,
            Mutation.ALBUM_LIKE_ADDED,
            InvalidationContext(entity_id=album_id),
        )
        return like_id

    async def remove_like(self, user_id: str, album_id: str) -> None:
        """Remove a like. Raises AlbumLikeNotFoundError when there was none."""
        result = await self.db.execute(
            delete(UserAlbumLike)
            .where(
                UserAlbumLike.user_id == user_id,
                UserAlbumLike.album_id == album_id,
            )
            .returning(UserAlbumLike.id)
            .execution_options(synchronize_session=False)
        )
        if result.scalar_one_or_none() is None:
            await self.db.rollback()
            raise AlbumLikeNotFoundError(user_id, album_id)
        await self._commit_and_invalidate(
            ALBUM_LIKE_POLICY,
            Mutation.ALBUM_LIKE_REMOVED,
            InvalidationContext(entity_id=album_id),
        )

    async def get_like_count(self, album_id: str) -> CachedResult[int]:
        """Number of likes for an album, from cache if present. Raises AlbumNotFoundError."""
        if not is_valid_key_component(album_id):
            raise AlbumNotFoundError(album_id)

        async def load() -> int:
            await self._verify_album_exists(album_id)
            result = await self.db.execute(
                select(func.count(UserAlbumLike.id)).where(
                    UserAlbumLike.album_id == album_id
                )
            )
            return int(result.scalar_one())

        return await self.reader.fetch(
            album_likes_key(album_id), load, encode=int, decode=int
        )

    async def _verify_album_exists(self, album_id: str) -> None:
        result = await self.db.execute(select(Album.id).where(Album.id == album_id))
        if result.scalar_one_or_none() is None:
            raise AlbumNotFoundError(album_id)
