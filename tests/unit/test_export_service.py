"""Tests for ExportService."""

from unittest.mock import AsyncMock

import pytest

from app.application.use_cases.exports.export_playlist import ExportService
from app.domain.exceptions import PlaylistAccessDeniedError, PlaylistNotFoundError
from app.infrastructure.exceptions import QueuePublishError


def _service(authorization: AsyncMock, producer: AsyncMock) -> ExportService:
    return ExportService(producer, authorization, "export:playlists")


async def test_owner_export_is_queued() -> None:
    authorization, producer = AsyncMock(), AsyncMock()
    job = await _service(authorization, producer).export_playlist(
        "p1", "u1", "ana@example.com"
    )
    authorization.require_owner.assert_awaited_once_with("p1", "u1")
    producer.send_message.assert_awaited_once_with(
        "export:playlists", {"playlistId": "p1", "targetEmail": "ana@example.com"}
    )
    assert job.playlist_id == "p1"


@pytest.mark.parametrize(
    "denial", [PlaylistNotFoundError("p1"), PlaylistAccessDeniedError("p1")]
)
async def test_denied_export_is_not_queued(denial: Exception) -> None:
    authorization, producer = AsyncMock(), AsyncMock()
    authorization.require_owner.side_effect = denial
    with pytest.raises(type(denial)):
        await _service(authorization, producer).export_playlist("p1", "u2", "x@example.com")
    producer.send_message.assert_not_awaited()


async def test_broker_failure_propagates() -> None:
    authorization, producer = AsyncMock(), AsyncMock()
    producer.send_message.side_effect = QueuePublishError("export:playlists", "down")
    with pytest.raises(QueuePublishError):
        await _service(authorization, producer).export_playlist("p1", "u1", "x@example.com")
