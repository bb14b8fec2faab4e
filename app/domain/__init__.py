"""Domain layer: enums and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from app.domain.enums import AccessDecision, AccessPath, PlaylistActivityAction
from app.domain.exceptions import (
    AlbumAlreadyLikedError,
    AlbumLikeNotFoundError,
    AlbumNotFoundError,
    AuthenticationException,
    AuthorizationException,
    CacheInvalidationError,
    CatalogException,
    CollaborationNotFoundError,
    InvariantException,
    PlaylistAccessDeniedError,
    PlaylistNotFoundError,
    ResourceNotFoundException,
    SongNotFoundError,
    UserNotFoundError,
)

__all__ = [
    "AccessDecision",
    "AccessPath",
    "AlbumAlreadyLikedError",
    "AlbumLikeNotFoundError",
    "AlbumNotFoundError",
    "AuthenticationException",
    "AuthorizationException",
    "CacheInvalidationError",
    "CatalogException",
    "CollaborationNotFoundError",
    "InvariantException",
    "PlaylistAccessDeniedError",
    "PlaylistActivityAction",
    "PlaylistNotFoundError",
    "ResourceNotFoundException",
    "SongNotFoundError",
    "UserNotFoundError",
]
