"""Repository and use case dependencies (composition root).

Routes depend only on these; repositories share the request session, the
process-wide cache store and one invalidator per request.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.v1.dependencies.db import get_cache, get_db, get_invalidator
from app.application.services.playlist_authorization import (
    PlaylistAuthorizationResolver,
)
from app.application.use_cases.exports import ExportService
from app.application.use_cases.playlists import PlaylistService
from app.core.config import Settings, get_settings
from app.infrastructure.cache.cache_protocol import CacheProtocol
from app.infrastructure.cache.invalidation import CacheInvalidator
from app.infrastructure.messaging.export_producer import RedisQueueProducer
from app.infrastructure.persistence.repositories import (
    AlbumLikeRepository,
    AlbumRepository,
    CollaborationRepository,
    PlaylistRepository,
    SongRepository,
    UserRepository,
)

Db = Annotated[AsyncSession, Depends(get_db)]
Cache = Annotated[CacheProtocol | None, Depends(get_cache)]
Invalidator = Annotated[CacheInvalidator, Depends(get_invalidator)]
AppSettings = Annotated[Settings, Depends(get_settings)]


async def get_song_repo(
    db: Db, cache: Cache, invalidator: Invalidator, settings: AppSettings
) -> SongRepository:
    return SongRepository(
        db, cache, cache_ttl=settings.cache_ttl, invalidator=invalidator
    )


async def get_album_repo(
    db: Db, cache: Cache, invalidator: Invalidator, settings: AppSettings
) -> AlbumRepository:
    return AlbumRepository(
        db, cache, cache_ttl=settings.cache_ttl, invalidator=invalidator
    )


async def get_album_like_repo(
    db: Db, cache: Cache, invalidator: Invalidator, settings: AppSettings
) -> AlbumLikeRepository:
    return AlbumLikeRepository(
        db, cache, cache_ttl=settings.cache_ttl, invalidator=invalidator
    )


async def get_playlist_repo(
    db: Db, cache: Cache, invalidator: Invalidator, settings: AppSettings
) -> PlaylistRepository:
    return PlaylistRepository(
        db, cache, cache_ttl=settings.cache_ttl, invalidator=invalidator
    )


async def get_collaboration_repo(
    db: Db, cache: Cache, invalidator: Invalidator
) -> CollaborationRepository:
    return CollaborationRepository(db, cache, invalidator=invalidator)


async def get_user_repo(db: Db) -> UserRepository:
    return UserRepository(db)


async def get_playlist_authorization(
    playlist_repo: Annotated[PlaylistRepository, Depends(get_playlist_repo)],
    collaboration_repo: Annotated[
        CollaborationRepository, Depends(get_collaboration_repo)
    ],
) -> PlaylistAuthorizationResolver:
    """Owner lookup from playlists, collaborator lookup from collaborations."""
    return PlaylistAuthorizationResolver(playlist_repo, collaboration_repo)


async def get_playlist_service(
    playlist_repo: Annotated[PlaylistRepository, Depends(get_playlist_repo)],
    collaboration_repo: Annotated[
        CollaborationRepository, Depends(get_collaboration_repo)
    ],
    song_repo: Annotated[SongRepository, Depends(get_song_repo)],
    user_repo: Annotated[UserRepository, Depends(get_user_repo)],
    authorization: Annotated[
        PlaylistAuthorizationResolver, Depends(get_playlist_authorization)
    ],
) -> PlaylistService:
    return PlaylistService(
        playlist_repo=playlist_repo,
        collaboration_repo=collaboration_repo,
        song_repo=song_repo,
        user_repo=user_repo,
        authorization=authorization,
    )


def get_export_producer(request: Request) -> RedisQueueProducer:
    """Process-wide export producer created by the lifespan."""
    return request.app.state.export_producer


async def get_export_service(
    producer: Annotated[RedisQueueProducer, Depends(get_export_producer)],
    authorization: Annotated[
        PlaylistAuthorizationResolver, Depends(get_playlist_authorization)
    ],
    settings: AppSettings,
) -> ExportService:
    return ExportService(
        producer=producer,
        authorization=authorization,
        queue_name=settings.export_queue_name,
    )
