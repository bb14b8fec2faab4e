"""Song API: thin routes delegating to the song repository."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Response

from app.api.v1.dependencies import get_song_repo, mark_data_source
from app.application.dtos.song import SongCreate
from app.infrastructure.persistence.repositories import SongRepository
from app.schemas.common import MessageResponse
from app.schemas.song import (
    SongCreatedResponse,
    SongListItem,
    SongRequest,
    SongResponse,
)

router = APIRouter()


def _to_create(body: SongRequest) -> SongCreate:
    return SongCreate(**body.model_dump())


@router.post("", response_model=SongCreatedResponse, status_code=201)
async def add_song(
    body: SongRequest,
    repo: Annotated[SongRepository, Depends(get_song_repo)],
):
    song_id = await repo.add_song(_to_create(body))
    return SongCreatedResponse(song_id=song_id)


@router.get("", response_model=list[SongListItem])
async def list_songs(
    response: Response,
    repo: Annotated[SongRepository, Depends(get_song_repo)],
    title: str | None = Query(None, max_length=255),
    performer: str | None = Query(None, max_length=255),
):
    """List songs. Filtered searches are never served from cache."""
    result = await repo.get_songs(title=title, performer=performer)
    songs = mark_data_source(response, result)
    return [SongListItem.model_validate(s) for s in songs]


@router.get("/{song_id}", response_model=SongResponse)
async def get_song(
    song_id: str,
    response: Response,
    repo: Annotated[SongRepository, Depends(get_song_repo)],
):
    result = await repo.get_song_by_id(song_id)
    return SongResponse.model_validate(mark_data_source(response, result))


@router.put("/{song_id}", response_model=MessageResponse)
async def edit_song(
    song_id: str,
    body: SongRequest,
    repo: Annotated[SongRepository, Depends(get_song_repo)],
):
    await repo.edit_song(song_id, _to_create(body))
    return MessageResponse(message="Song updated")


@router.delete("/{song_id}", response_model=MessageResponse)
async def delete_song(
    song_id: str,
    repo: Annotated[SongRepository, Depends(get_song_repo)],
):
    await repo.delete_song(song_id)
    return MessageResponse(message="Song deleted")
