"""API v1 router aggregation.

Includes all endpoint modules with consistent prefix and tags. All routes
use dependencies from app.api.v1.dependencies (no manual repo/service construction).
"""

from fastapi import APIRouter

from app.api.v1.endpoints import (
    albums,
    collaborations,
    exports,
    health,
    playlists,
    songs,
)

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(songs.router, prefix="/songs", tags=["songs"])
api_router.include_router(albums.router, prefix="/albums", tags=["albums"])
api_router.include_router(playlists.router, prefix="/playlists", tags=["playlists"])
api_router.include_router(
    collaborations.router, prefix="/collaborations", tags=["collaborations"]
)
api_router.include_router(exports.router, prefix="/export", tags=["export"])
