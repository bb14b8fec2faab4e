"""Album API: albums, covers and likes."""

from typing import Annotated

from fastapi import APIRouter, Depends, Response

from app.api.v1.dependencies import (
    get_album_like_repo,
    get_album_repo,
    get_current_user_id,
    mark_data_source,
)
from app.application.dtos.album import AlbumCreate
from app.infrastructure.persistence.repositories import (
    AlbumLikeRepository,
    AlbumRepository,
)
from app.schemas.album import (
    AlbumCoverRequest,
    AlbumCreatedResponse,
    AlbumLikesResponse,
    AlbumRequest,
    AlbumResponse,
)
from app.schemas.common import MessageResponse

router = APIRouter()


@router.post("", response_model=AlbumCreatedResponse, status_code=201)
async def add_album(
    body: AlbumRequest,
    repo: Annotated[AlbumRepository, Depends(get_album_repo)],
):
    album_id = await repo.add_album(AlbumCreate(name=body.name, year=body.year))
    return AlbumCreatedResponse(album_id=album_id)


@router.get("/{album_id}", response_model=AlbumResponse)
async def get_album(
    album_id: str,
    response: Response,
    repo: Annotated[AlbumRepository, Depends(get_album_repo)],
):
    """Album with its songs."""
    result = await repo.get_album_by_id(album_id)
    return AlbumResponse.model_validate(mark_data_source(response, result))


@router.put("/{album_id}", response_model=MessageResponse)
async def edit_album(
    album_id: str,
    body: AlbumRequest,
    repo: Annotated[AlbumRepository, Depends(get_album_repo)],
):
    await repo.edit_album(album_id, AlbumCreate(name=body.name, year=body.year))
    return MessageResponse(message="Album updated")


@router.delete("/{album_id}", response_model=MessageResponse)
async def delete_album(
    album_id: str,
    repo: Annotated[AlbumRepository, Depends(get_album_repo)],
):
    await repo.delete_album(album_id)
    return MessageResponse(message="Album deleted")


@router.put("/{album_id}/cover", response_model=MessageResponse)
async def update_album_cover(
    album_id: str,
    body: AlbumCoverRequest,
    repo: Annotated[AlbumRepository, Depends(get_album_repo)],
):
    """Record the URL of an already uploaded cover image."""
    await repo.update_album_cover(album_id, body.cover_url)
    return MessageResponse(message="Cover updated")


@router.post("/{album_id}/likes", response_model=MessageResponse, status_code=201)
async def like_album(
    album_id: str,
    user_id: Annotated[str, Depends(get_current_user_id)],
    repo: Annotated[AlbumLikeRepository, Depends(get_album_like_repo)],
):
    await repo.add_like(user_id, album_id)
    return MessageResponse(message="Album liked")


@router.delete("/{album_id}/likes", response_model=MessageResponse)
async def unlike_album(
    album_id: str,
    user_id: Annotated[str, Depends(get_current_user_id)],
    repo: Annotated[AlbumLikeRepository, Depends(get_album_like_repo)],
):
    await repo.remove_like(user_id, album_id)
    return MessageResponse(message="Album unliked")


@router.get("/{album_id}/likes", response_model=AlbumLikesResponse)
async def get_album_likes(
    album_id: str,
    response: Response,
    repo: Annotated[AlbumLikeRepository, Depends(get_album_like_repo)],
):
    result = await repo.get_like_count(album_id)
    return AlbumLikesResponse(likes=mark_data_source(response, result))
