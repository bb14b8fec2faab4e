"""Application layer: interfaces, services, use cases.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the interfaces (repositories, cache, producer).
"""

from app.application.interfaces import (
    ICollaborationRepository,
    ICollaboratorLookup,
    IExportProducer,
    IPlaylistAuthorization,
    IPlaylistOwnerLookup,
    IPlaylistRepository,
)
from app.application.services.playlist_authorization import (
    PlaylistAuthorizationResolver,
)
from app.application.use_cases.exports import ExportService
from app.application.use_cases.playlists import PlaylistService

__all__ = [
    "ExportService",
    "ICollaborationRepository",
    "ICollaboratorLookup",
    "IExportProducer",
    "IPlaylistAuthorization",
    "IPlaylistOwnerLookup",
    "IPlaylistRepository",
    "PlaylistAuthorizationResolver",
    "PlaylistService",
]
