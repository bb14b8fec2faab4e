"""Collaboration repository: users with owner-equivalent access to a playlist."""

from __future__ import annotations

from sqlalchemy import delete, insert, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.constants import ID_PREFIX_COLLABORATION
from app.domain.exceptions import CollaborationNotFoundError, InvariantException
from app.infrastructure.cache.cache_protocol import CacheProtocol
from app.infrastructure.cache.invalidation import (
    COLLABORATION_POLICY,
    CacheInvalidator,
    InvalidationContext,
    Mutation,
)
from app.infrastructure.persistence.models.collaboration import Collaboration
from app.infrastructure.persistence.repositories.base import BaseRepository
from app.shared.utils.generators import generate_id


class CollaborationRepository(BaseRepository[Collaboration]):
    """Collaborations. A change alters the collaborator's playlists:<userId> listing."""

    def __init__(
        self,
        db: AsyncSession,
        cache: CacheProtocol | None = None,
        *,
        invalidator: CacheInvalidator | None = None,
    ) -> None:
        super().__init__(db, Collaboration, cache, invalidator=invalidator)

    async def add_collaboration(self, playlist_id: str, user_id: str) -> str:
        """Grant user_id access to playlist_id. Raises InvariantException on duplicate."""
        collaboration_id = generate_id(ID_PREFIX_COLLABORATION)
        try:
            result = await self.db.execute(
                insert(Collaboration)
                .values(id=collaboration_id, playlist_id=playlist_id, user_id=user_id)
                .returning(Collaboration.id)
            )
        except IntegrityError as e:
            await self.db.rollback()
            raise InvariantException(
                "Collaboration could not be added",
                {"playlist_id": playlist_id, "user_id": user_id},
            ) from e
        if result.scalar_one_or_none() is None:
            await self.db.rollback()
            raise InvariantException("Collaboration could not be added")
        await self._commit_and_invalidate(
            COLLABORATION_POLICY,
            Mutation.COLLABORATION_ADDED,
            InvalidationContext(entity_id=playlist_id, user_ids=(user_id,)),
        )
        return collaboration_id

    async def delete_collaboration(self, playlist_id: str, user_id: str) -> None:
        """Revoke access. Raises InvariantException when no such collaboration exists."""
        result = await self.db.execute(
            delete(Collaboration)
            .where(
                Collaboration.playlist_id == playlist_id,
                Collaboration.user_id == user_id,
            )
            .returning(Collaboration.id)
            .execution_options(synchronize_session=False)
        )
        if result.scalar_one_or_none() is None:
            await self.db.rollback()
            raise InvariantException(
                "Collaboration could not be deleted",
                {"playlist_id": playlist_id, "user_id": user_id},
            )
        await self._commit_and_invalidate(
            COLLABORATION_POLICY,
            Mutation.COLLABORATION_DELETED,
            InvalidationContext(entity_id=playlist_id, user_ids=(user_id,)),
        )

    async def is_collaborator(self, playlist_id: str, user_id: str) -> bool:
        """Return True if user_id collaborates on playlist_id."""
        result = await self.db.execute(
            select(Collaboration.id).where(
                Collaboration.playlist_id == playlist_id,
                Collaboration.user_id == user_id,
            )
        )
        return result.scalar_one_or_none() is not None

    async def verify_collaborator(self, playlist_id: str, user_id: str) -> None:
        """Raise CollaborationNotFoundError if user_id does not collaborate on playlist_id."""
        if not await self.is_collaborator(playlist_id, user_id):
            raise CollaborationNotFoundError(playlist_id, user_id)
