"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs only; no infrastructure imports.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.application.dtos.cache import CachedResult
    from app.application.dtos.playlist import (
        PlaylistActivity,
        PlaylistDetail,
        PlaylistSummary,
    )
    from app.domain.enums import PlaylistActivityAction


# Playlist owner lookup (first tier of playlist authorization)
class IPlaylistOwnerLookup(Protocol):
    """Protocol for reading a playlist's owner straight from the persistent store."""

    async def get_owner(self, playlist_id: str) -> str | None:
        """Return the owner id, or None when the playlist does not exist."""


# Collaborator lookup (second tier of playlist authorization)
class ICollaboratorLookup(Protocol):
    """Protocol for the collaborator-verification capability."""

    async def verify_collaborator(self, playlist_id: str, user_id: str) -> None:
        """Return normally if user_id collaborates on playlist_id; raise otherwise."""


# Playlist repository interface
class IPlaylistRepository(IPlaylistOwnerLookup, Protocol):
    """Protocol for playlist repository (DIP)."""

    async def add_playlist(self, name: str, owner: str) -> str:
        """Create a playlist and return its id."""

    async def get_playlists(self, user_id: str) -> CachedResult[list[PlaylistSummary]]:
        """Playlists the user owns or collaborates on."""

    async def delete_playlist(self, playlist_id: str) -> None:
        """Delete a playlist and clear every cached view of it."""

    async def add_playlist_song(self, playlist_id: str, song_id: str) -> str:
        """Add a song to a playlist."""

    async def get_playlist_songs(self, playlist_id: str) -> CachedResult[PlaylistDetail]:
        """Playlist with its songs."""

    async def delete_playlist_song(self, playlist_id: str, song_id: str) -> None:
        """Remove a song from a playlist."""

    async def add_activity(
        self,
        playlist_id: str,
        song_id: str,
        user_id: str,
        action: PlaylistActivityAction,
    ) -> str:
        """Record an add/delete entry in the activity log."""

    async def get_activities(self, playlist_id: str) -> list[PlaylistActivity]:
        """Activity log of a playlist."""


# Collaboration repository interface
class ICollaborationRepository(ICollaboratorLookup, Protocol):
    """Protocol for collaboration repository (DIP)."""

    async def add_collaboration(self, playlist_id: str, user_id: str) -> str:
        """Grant a user access to a playlist."""

    async def delete_collaboration(self, playlist_id: str, user_id: str) -> None:
        """Revoke a user's access to a playlist."""


# Existence checks used by use cases before writing
class ISongExistence(Protocol):
    """Protocol for verifying a song exists."""

    async def verify_song_exists(self, song_id: str) -> None:
        """Raise SongNotFoundError if the song does not exist."""


class IUserExistence(Protocol):
    """Protocol for verifying a user exists."""

    async def verify_user_exists(self, user_id: str) -> None:
        """Raise UserNotFoundError if the user does not exist."""
