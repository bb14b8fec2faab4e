"""Playlist API: every route acts as the authenticated caller."""

from typing import Annotated

from fastapi import APIRouter, Depends, Response

from app.api.v1.dependencies import (
    get_current_user_id,
    get_playlist_service,
    mark_data_source,
)
from app.application.use_cases.playlists import PlaylistService
from app.schemas.common import MessageResponse
from app.schemas.playlist import (
    PlaylistActivitiesResponse,
    PlaylistActivityItem,
    PlaylistCreatedResponse,
    PlaylistListItem,
    PlaylistRequest,
    PlaylistSongRequest,
    PlaylistSongsResponse,
)

router = APIRouter()

CurrentUser = Annotated[str, Depends(get_current_user_id)]
Playlists = Annotated[PlaylistService, Depends(get_playlist_service)]


@router.post("", response_model=PlaylistCreatedResponse, status_code=201)
async def add_playlist(body: PlaylistRequest, user_id: CurrentUser, service: Playlists):
    playlist_id = await service.add_playlist(body.name, user_id)
    return PlaylistCreatedResponse(playlist_id=playlist_id)


@router.get("", response_model=list[PlaylistListItem])
async def list_playlists(response: Response, user_id: CurrentUser, service: Playlists):
    """Playlists the caller owns or collaborates on."""
    result = await service.get_playlists(user_id)
    return [
        PlaylistListItem.model_validate(p) for p in mark_data_source(response, result)
    ]


@router.delete("/{playlist_id}", response_model=MessageResponse)
async def delete_playlist(playlist_id: str, user_id: CurrentUser, service: Playlists):
    """Owner only."""
    await service.delete_playlist(playlist_id, user_id)
    return MessageResponse(message="Playlist deleted")


@router.post("/{playlist_id}/songs", response_model=MessageResponse, status_code=201)
async def add_playlist_song(
    playlist_id: str,
    body: PlaylistSongRequest,
    user_id: CurrentUser,
    service: Playlists,
):
    await service.add_song(playlist_id, body.song_id, user_id)
    return MessageResponse(message="Song added to playlist")


@router.get("/{playlist_id}/songs", response_model=PlaylistSongsResponse)
async def get_playlist_songs(
    playlist_id: str,
    response: Response,
    user_id: CurrentUser,
    service: Playlists,
):
    result = await service.get_songs(playlist_id, user_id)
    return PlaylistSongsResponse.model_validate(mark_data_source(response, result))


@router.delete("/{playlist_id}/songs", response_model=MessageResponse)
async def delete_playlist_song(
    playlist_id: str,
    body: PlaylistSongRequest,
    user_id: CurrentUser,
    service: Playlists,
):
    await service.delete_song(playlist_id, body.song_id, user_id)
    return MessageResponse(message="Song removed from playlist")


@router.get("/{playlist_id}/activities", response_model=PlaylistActivitiesResponse)
async def get_playlist_activities(
    playlist_id: str, user_id: CurrentUser, service: Playlists
):
    activities = await service.get_activities(playlist_id, user_id)
    return PlaylistActivitiesResponse(
        playlist_id=playlist_id,
        activities=[PlaylistActivityItem.model_validate(a) for a in activities],
    )
