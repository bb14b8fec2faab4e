"""Application services: playlist authorization."""

from app.application.services.playlist_authorization import (
    PlaylistAuthorizationResolver,
)

__all__ = ["PlaylistAuthorizationResolver"]
