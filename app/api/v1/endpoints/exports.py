"""Export API: queue a playlist export for the owner."""

from typing import Annotated

from fastapi import APIRouter, Depends

from app.api.v1.dependencies import get_current_user_id, get_export_service
from app.application.use_cases.exports import ExportService
from app.schemas.export import ExportQueuedResponse, PlaylistExportRequest

router = APIRouter()


@router.post("/playlists/{playlist_id}", response_model=ExportQueuedResponse, status_code=201)
async def export_playlist(
    playlist_id: str,
    body: PlaylistExportRequest,
    user_id: Annotated[str, Depends(get_current_user_id)],
    service: Annotated[ExportService, Depends(get_export_service)],
):
    """Fire-and-forget; the worker emails the export to target_email."""
    await service.export_playlist(playlist_id, user_id, str(body.target_email))
    return ExportQueuedResponse()
