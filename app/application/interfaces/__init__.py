"""Application interfaces (ports): repository and service protocols.

Define contracts for infrastructure implementations (DIP).
No runtime imports from app.infrastructure or app.api.
"""

from app.application.interfaces.repositories import (
    ICollaborationRepository,
    ICollaboratorLookup,
    IPlaylistOwnerLookup,
    IPlaylistRepository,
    ISongExistence,
    IUserExistence,
)
from app.application.interfaces.services import (
    IExportProducer,
    IPlaylistAuthorization,
)

__all__ = [
    "ICollaborationRepository",
    "ICollaboratorLookup",
    "IExportProducer",
    "IPlaylistAuthorization",
    "IPlaylistOwnerLookup",
    "IPlaylistRepository",
    "ISongExistence",
    "IUserExistence",
]
