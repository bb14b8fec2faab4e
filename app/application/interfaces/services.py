"""Service interfaces (ports) for the application layer.

Protocols define contracts for application services (DIP).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from app.application.dtos.access import AccessResult


# Message producer interface
class IExportProducer(Protocol):
    """Protocol for fire-and-forget job dispatch to a named queue."""

    async def send_message(self, queue: str, message: dict[str, Any]) -> None:
        """Enqueue message on queue. Durability is the broker's concern."""


# Playlist authorization interface
class IPlaylistAuthorization(Protocol):
    """Protocol for playlist access resolution."""

    async def resolve(self, playlist_id: str, user_id: str) -> AccessResult:
        """Owner-or-collaborator decision."""

    async def resolve_owner(self, playlist_id: str, user_id: str) -> AccessResult:
        """Owner-only decision."""

    async def require_access(self, playlist_id: str, user_id: str) -> None:
        """Raise PlaylistNotFoundError or PlaylistAccessDeniedError unless granted."""

    async def require_owner(self, playlist_id: str, user_id: str) -> None:
        """Raise PlaylistNotFoundError or PlaylistAccessDeniedError unless owner."""
