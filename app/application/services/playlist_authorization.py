"""Playlist authorization: owner check, then collaborator check.

Both checks return plain decisions. Callers that need errors use
require_access / require_owner, which map a denial to PlaylistNotFoundError
(404) or the single PlaylistAccessDeniedError (403).
"""

from __future__ import annotations

from app.application.dtos.access import AccessResult
from app.application.interfaces.repositories import (
    ICollaboratorLookup,
    IPlaylistOwnerLookup,
)
from app.domain.enums import AccessDecision, AccessPath
from app.domain.exceptions import (
    CollaborationNotFoundError,
    PlaylistAccessDeniedError,
    PlaylistNotFoundError,
)
from app.shared.logging import get_logger

logger = get_logger(__name__)

NOT_FOUND = AccessResult(AccessDecision.DENIED_NOT_FOUND)
FORBIDDEN = AccessResult(AccessDecision.DENIED_FORBIDDEN)


class PlaylistAuthorizationResolver:
    """Resolve whether a user may act on a playlist."""

    def __init__(
        self,
        owner_lookup: IPlaylistOwnerLookup,
        collaborator_lookup: ICollaboratorLookup,
    ) -> None:
        self.owner_lookup = owner_lookup
        self.collaborator_lookup = collaborator_lookup

    async def resolve_owner(self, playlist_id: str, user_id: str) -> AccessResult:
        """Owner-only decision. Never consults collaborators."""
        owner = await self.owner_lookup.get_owner(playlist_id)
        if owner is None:
            return NOT_FOUND
        if owner == user_id:
            return AccessResult(AccessDecision.GRANTED, AccessPath.OWNER)
        return FORBIDDEN

    async def resolve(self, playlist_id: str, user_id: str) -> AccessResult:
        """Owner-or-collaborator decision.

        A missing playlist ends resolution with DENIED_NOT_FOUND. The
        collaborator lookup runs only on an ownership mismatch; a negative
        answer and a failed lookup both yield DENIED_FORBIDDEN.
        """
        result = await self.resolve_owner(playlist_id, user_id)
        if result.decision is not AccessDecision.DENIED_FORBIDDEN:
            return result
        try:
            await self.collaborator_lookup.verify_collaborator(playlist_id, user_id)
        except CollaborationNotFoundError:
            return FORBIDDEN
        except Exception as e:
            logger.warning(
                "Collaborator lookup failed for playlist %s user %s: %s",
                playlist_id,
                user_id,
                e,
            )
            return FORBIDDEN
        return AccessResult(AccessDecision.GRANTED, AccessPath.COLLABORATOR)

    async def require_access(self, playlist_id: str, user_id: str) -> None:
        """Raise unless user_id owns or collaborates on the playlist."""
        self._raise_unless_granted(
            playlist_id, await self.resolve(playlist_id, user_id)
        )

    async def require_owner(self, playlist_id: str, user_id: str) -> None:
        """Raise unless user_id owns the playlist."""
        self._raise_unless_granted(
            playlist_id, await self.resolve_owner(playlist_id, user_id)
        )

    @staticmethod
    def _raise_unless_granted(playlist_id: str, result: AccessResult) -> None:
        if result.decision is AccessDecision.DENIED_NOT_FOUND:
            raise PlaylistNotFoundError(playlist_id)
        if result.decision is AccessDecision.DENIED_FORBIDDEN:
            raise PlaylistAccessDeniedError(playlist_id)
