"""Tests for RedisQueueProducer."""

import json
from unittest.mock import AsyncMock

import pytest
import redis.asyncio as redis

from app.core.config import get_settings
from app.infrastructure.exceptions import QueuePublishError
from app.infrastructure.messaging.export_producer import RedisQueueProducer


async def test_send_message_pushes_json() -> None:
    client = AsyncMock()
    producer = RedisQueueProducer(redis_client=client, settings=get_settings())
    await producer.send_message(
        "export:playlists", {"playlistId": "p1", "targetEmail": "a@example.com"}
    )
    client.rpush.assert_awaited_once()
    queue, payload = client.rpush.await_args.args
    assert queue == "export:playlists"
    assert json.loads(payload) == {"playlistId": "p1", "targetEmail": "a@example.com"}


async def test_redis_error_raises_queue_publish_error() -> None:
    client = AsyncMock()
    client.rpush.side_effect = redis.ConnectionError("refused")
    producer = RedisQueueProducer(redis_client=client, settings=get_settings())
    with pytest.raises(QueuePublishError) as exc_info:
        await producer.send_message("export:playlists", {})
    assert exc_info.value.details["queue"] == "export:playlists"


async def test_unconnected_producer_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    producer = RedisQueueProducer(settings=get_settings())
    monkeypatch.setattr(producer, "connect", AsyncMock())
    with pytest.raises(QueuePublishError):
        await producer.send_message("export:playlists", {})
    producer.connect.assert_awaited_once()


async def test_disconnect_closes_client() -> None:
    client = AsyncMock()
    producer = RedisQueueProducer(redis_client=client, settings=get_settings())
    await producer.disconnect()
    client.aclose.assert_awaited_once()
    assert not producer.is_available()
