"""Domain enumerations for the catalog service."""

from enum import Enum


class AccessDecision(str, Enum):
    """Outcome of a playlist access check.

    DENIED_NOT_FOUND maps to 404 and DENIED_FORBIDDEN to 403 at the HTTP layer.
    """

    GRANTED = "granted"
    DENIED_NOT_FOUND = "denied_not_found"
    DENIED_FORBIDDEN = "denied_forbidden"


class AccessPath(str, Enum):
    """Relation through which playlist access was granted."""

    OWNER = "owner"
    COLLABORATOR = "collaborator"


class PlaylistActivityAction(str, Enum):
    """Action recorded in the playlist song activity log."""

    ADD = "add"
    DELETE = "delete"

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid action values as strings."""
        return [action.value for action in cls]
