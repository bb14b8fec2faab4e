"""Domain exceptions for the catalog service.

Defines domain-level exceptions that represent business rule violations.
These exceptions are independent of infrastructure concerns. Presentation
layer maps them to HTTP responses in exception handlers.

Taxonomy: NotFound (ResourceNotFoundException), InvariantError
(InvariantException), AuthorizationError (AuthorizationException). Cache
backend outages are not part of it; see app.infrastructure.exceptions.
"""

from collections.abc import Sequence
from typing import Any


class CatalogException(Exception):
    """Base exception for all catalog errors.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. resource_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON error responses."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ResourceNotFoundException(CatalogException):
    """Raised when a referenced entity does not exist. Never cached, never retried."""

    def __init__(self, resource_type: str, resource_id: str) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'song', 'playlist').
            resource_id: The ID that was not found.
        """
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class SongNotFoundError(ResourceNotFoundException):
    def __init__(self, song_id: str) -> None:
        super().__init__("song", song_id)


class AlbumNotFoundError(ResourceNotFoundException):
    def __init__(self, album_id: str) -> None:
        super().__init__("album", album_id)


class PlaylistNotFoundError(ResourceNotFoundException):
    def __init__(self, playlist_id: str) -> None:
        super().__init__("playlist", playlist_id)


class UserNotFoundError(ResourceNotFoundException):
    def __init__(self, user_id: str) -> None:
        super().__init__("user", user_id)


class CollaborationNotFoundError(ResourceNotFoundException):
    """Raised when (playlist_id, user_id) has no collaboration record."""

    def __init__(self, playlist_id: str, user_id: str) -> None:
        super().__init__("collaboration", f"{playlist_id}/{user_id}")
        self.details.update({"playlist_id": playlist_id, "user_id": user_id})


class AlbumLikeNotFoundError(ResourceNotFoundException):
    """Raised when unliking an album the user has not liked (or that does not exist)."""

    def __init__(self, user_id: str, album_id: str) -> None:
        super().__init__("album_like", f"{user_id}/{album_id}")
        self.details.update({"user_id": user_id, "album_id": album_id})


class InvariantException(CatalogException):
    """Raised on a business-rule violation (duplicate, zero-row mutation, failed insert)."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message, "INVARIANT_ERROR", details)


class AlbumAlreadyLikedError(InvariantException):
    """Raised when a user likes an album twice."""

    def __init__(self, user_id: str, album_id: str) -> None:
        super().__init__(
            "Album already liked",
            {"user_id": user_id, "album_id": album_id},
        )


class AuthenticationException(CatalogException):
    """Raised when authentication fails (missing, invalid or expired token)."""

    def __init__(self, message: str = "Authentication failed") -> None:
        super().__init__(message, "AUTHENTICATION_ERROR")


class AuthorizationException(CatalogException):
    """Raised when the caller lacks the relation required for the operation."""

    def __init__(
        self,
        message: str = "Permission denied",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, "AUTHORIZATION_ERROR", details)


class PlaylistAccessDeniedError(AuthorizationException):
    """The single "not authorized" error for playlists.

    Raised whether the owner check alone failed or the collaborator fallback
    also failed, so callers see one stable error identity.
    """

    def __init__(self, playlist_id: str) -> None:
        super().__init__(
            "You are not allowed to access this playlist",
            {"playlist_id": playlist_id},
        )


class CacheInvalidationError(CatalogException):
    """Raised when a committed write could not clear every dependent cache key.

    This is an operational fault: the listed keys may now serve data that
    predates the write until they expire or are invalidated again.
    """

    def __init__(self, keys: Sequence[str]) -> None:
        super().__init__(
            "Cache invalidation failed after a committed write",
            "CACHE_INVALIDATION_FAILED",
            {"keys": list(keys)},
        )
