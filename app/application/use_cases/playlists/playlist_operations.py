"""Playlist operations: authorization first, then delegate to repositories."""

from __future__ import annotations

from app.application.dtos.cache import CachedResult
from app.application.dtos.playlist import (
    PlaylistActivity,
    PlaylistDetail,
    PlaylistSummary,
)
from app.application.interfaces.repositories import (
    ICollaborationRepository,
    IPlaylistRepository,
    ISongExistence,
    IUserExistence,
)
from app.application.interfaces.services import IPlaylistAuthorization
from app.domain.enums import PlaylistActivityAction
from app.shared.logging import get_logger

logger = get_logger(__name__)


class PlaylistService:
    """Playlist workflows for an authenticated caller.

    Reads and song edits need owner or collaborator access; deleting the
    playlist and managing collaborators need ownership.
    """

    def __init__(
        self,
        playlist_repo: IPlaylistRepository,
        collaboration_repo: ICollaborationRepository,
        song_repo: ISongExistence,
        user_repo: IUserExistence,
        authorization: IPlaylistAuthorization,
    ) -> None:
        self.playlist_repo = playlist_repo
        self.collaboration_repo = collaboration_repo
        self.song_repo = song_repo
        self.user_repo = user_repo
        self.authorization = authorization

    async def add_playlist(self, name: str, owner: str) -> str:
        return await self.playlist_repo.add_playlist(name, owner)

    async def get_playlists(self, user_id: str) -> CachedResult[list[PlaylistSummary]]:
        return await self.playlist_repo.get_playlists(user_id)

    async def delete_playlist(self, playlist_id: str, user_id: str) -> None:
        await self.authorization.require_owner(playlist_id, user_id)
        await self.playlist_repo.delete_playlist(playlist_id)
        logger.info("Playlist %s deleted by %s", playlist_id, user_id)

    async def add_song(self, playlist_id: str, song_id: str, user_id: str) -> None:
        """Add a song and record an 'add' activity. Raises SongNotFoundError for unknown songs."""
        await self.authorization.require_access(playlist_id, user_id)
        await self.song_repo.verify_song_exists(song_id)
        await self.playlist_repo.add_playlist_song(playlist_id, song_id)
        await self.playlist_repo.add_activity(
            playlist_id, song_id, user_id, PlaylistActivityAction.ADD
        )

    async def get_songs(
        self, playlist_id: str, user_id: str
    ) -> CachedResult[PlaylistDetail]:
        await self.authorization.require_access(playlist_id, user_id)
        return await self.playlist_repo.get_playlist_songs(playlist_id)

    async def delete_song(self, playlist_id: str, song_id: str, user_id: str) -> None:
        """Remove a song and record a 'delete' activity."""
        await self.authorization.require_access(playlist_id, user_id)
        await self.playlist_repo.delete_playlist_song(playlist_id, song_id)
        await self.playlist_repo.add_activity(
            playlist_id, song_id, user_id, PlaylistActivityAction.DELETE
        )

    async def get_activities(
        self, playlist_id: str, user_id: str
    ) -> list[PlaylistActivity]:
        await self.authorization.require_access(playlist_id, user_id)
        return await self.playlist_repo.get_activities(playlist_id)

    async def add_collaborator(
        self, playlist_id: str, collaborator_id: str, user_id: str
    ) -> str:
        """Owner grants collaborator_id access; returns the collaboration id."""
        await self.authorization.require_owner(playlist_id, user_id)
        await self.user_repo.verify_user_exists(collaborator_id)
        return await self.collaboration_repo.add_collaboration(
            playlist_id, collaborator_id
        )

    async def delete_collaborator(
        self, playlist_id: str, collaborator_id: str, user_id: str
    ) -> None:
        await self.authorization.require_owner(playlist_id, user_id)
        await self.collaboration_repo.delete_collaboration(playlist_id, collaborator_id)
