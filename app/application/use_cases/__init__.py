"""Application use cases: one entry point per workflow."""

from app.application.use_cases.exports import ExportService
from app.application.use_cases.playlists import PlaylistService

__all__ = [
    "ExportService",
    "PlaylistService",
]
