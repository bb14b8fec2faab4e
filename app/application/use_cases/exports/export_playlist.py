"""Playlist export: owner check, then hand the job to the message broker."""

from __future__ import annotations

from app.application.dtos.export import PlaylistExportJob
from app.application.interfaces.services import (
    IExportProducer,
    IPlaylistAuthorization,
)
from app.shared.logging import get_logger

logger = get_logger(__name__)


class ExportService:
    """Queues playlist exports. Only the owner may export a playlist."""

    def __init__(
        self,
        producer: IExportProducer,
        authorization: IPlaylistAuthorization,
        queue_name: str,
    ) -> None:
        self.producer = producer
        self.authorization = authorization
        self.queue_name = queue_name

    async def export_playlist(
        self, playlist_id: str, user_id: str, target_email: str
    ) -> PlaylistExportJob:
        await self.authorization.require_owner(playlist_id, user_id)
        job = PlaylistExportJob(playlist_id=playlist_id, target_email=target_email)
        await self.producer.send_message(self.queue_name, job.to_message())
        logger.info("Export of playlist %s queued on %s", playlist_id, self.queue_name)
        return job
