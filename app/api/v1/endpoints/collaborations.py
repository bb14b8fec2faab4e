"""Collaboration API: playlist owners grant and revoke access."""

from typing import Annotated

from fastapi import APIRouter, Depends

from app.api.v1.dependencies import get_current_user_id, get_playlist_service
from app.application.use_cases.playlists import PlaylistService
from app.schemas.common import MessageResponse
from app.schemas.playlist import CollaborationCreatedResponse, CollaborationRequest

router = APIRouter()


@router.post("", response_model=CollaborationCreatedResponse, status_code=201)
async def add_collaboration(
    body: CollaborationRequest,
    user_id: Annotated[str, Depends(get_current_user_id)],
    service: Annotated[PlaylistService, Depends(get_playlist_service)],
):
    collaboration_id = await service.add_collaborator(
        body.playlist_id, body.user_id, user_id
    )
    return CollaborationCreatedResponse(collaboration_id=collaboration_id)


@router.delete("", response_model=MessageResponse)
async def delete_collaboration(
    body: CollaborationRequest,
    user_id: Annotated[str, Depends(get_current_user_id)],
    service: Annotated[PlaylistService, Depends(get_playlist_service)],
):
    await service.delete_collaborator(body.playlist_id, body.user_id, user_id)
    return MessageResponse(message="Collaboration deleted")
