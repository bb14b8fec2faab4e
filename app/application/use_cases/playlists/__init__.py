"""Playlist use cases."""

from app.application.use_cases.playlists.playlist_operations import PlaylistService

__all__ = ["PlaylistService"]
