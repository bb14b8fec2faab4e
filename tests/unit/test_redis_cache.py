"""Tests for RedisCacheStore against a mocked redis.asyncio client."""

import asyncio
from unittest.mock import AsyncMock

import pytest
import redis.asyncio as redis

from app.core.config import get_settings
from app.infrastructure.cache.cache_protocol import MISS
from app.infrastructure.cache.redis_cache import RedisCacheStore
from app.infrastructure.exceptions import CacheUnavailableError


@pytest.fixture
def redis_client() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def store(redis_client: AsyncMock) -> RedisCacheStore:
    return RedisCacheStore(redis_client=redis_client, settings=get_settings())


async def test_get_returns_value(store: RedisCacheStore, redis_client: AsyncMock) -> None:
    redis_client.get.return_value = '{"id": "s1"}'
    assert await store.get("song:s1") == '{"id": "s1"}'
    redis_client.get.assert_awaited_once_with("song:s1")


async def test_get_absent_key_returns_miss(store: RedisCacheStore, redis_client: AsyncMock) -> None:
    redis_client.get.return_value = None
    assert await store.get("song:s1") is MISS


async def test_empty_string_is_a_hit(store: RedisCacheStore, redis_client: AsyncMock) -> None:
    redis_client.get.return_value = ""
    assert await store.get("k") == ""


async def test_set_passes_ttl(store: RedisCacheStore, redis_client: AsyncMock) -> None:
    await store.set("songs:all", "[]", ttl=1800)
    redis_client.set.assert_awaited_once_with("songs:all", "[]", ex=1800)


async def test_delete(store: RedisCacheStore, redis_client: AsyncMock) -> None:
    await store.delete("album:a1")
    redis_client.delete.assert_awaited_once_with("album:a1")


async def test_timeout_raises_unavailable_when_reconnect_fails(
    store: RedisCacheStore,
    redis_client: AsyncMock,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    redis_client.get.side_effect = redis.TimeoutError("timed out")
    monkeypatch.setattr(store, "_reconnect", AsyncMock(return_value=False))
    with pytest.raises(CacheUnavailableError) as exc_info:
        await store.get("song:s1")
    assert exc_info.value.details["operation"] == "get"
    assert exc_info.value.details["key"] == "song:s1"


async def test_connection_error_retries_once_after_reconnect(
    store: RedisCacheStore,
    redis_client: AsyncMock,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    redis_client.delete.side_effect = [redis.ConnectionError("reset"), 1]
    monkeypatch.setattr(store, "_reconnect", AsyncMock(return_value=True))
    await store.delete("album:a1")
    assert redis_client.delete.await_count == 2


async def test_other_redis_error_raises_unavailable(
    store: RedisCacheStore, redis_client: AsyncMock
) -> None:
    redis_client.set.side_effect = redis.ResponseError("WRONGTYPE")
    with pytest.raises(CacheUnavailableError):
        await store.set("k", "v")


async def test_disconnected_store_raises_unavailable(monkeypatch: pytest.MonkeyPatch) -> None:
    store = RedisCacheStore(settings=get_settings())
    monkeypatch.setattr(store, "_reconnect", AsyncMock(return_value=False))
    assert not store.is_available()
    with pytest.raises(CacheUnavailableError):
        await store.get("k")


async def test_disconnect_closes_client(store: RedisCacheStore, redis_client: AsyncMock) -> None:
    await store.disconnect()
    redis_client.aclose.assert_awaited_once()
    assert not store.is_available()


def _client_factory(created: list[AsyncMock]):
    async def slow_ping() -> bool:
        await asyncio.sleep(0)
        return True

    def factory(**kwargs) -> AsyncMock:
        client = AsyncMock()
        client.ping.side_effect = slow_ping
        created.append(client)
        return client

    return factory


async def test_concurrent_reconnects_share_one_client(monkeypatch: pytest.MonkeyPatch) -> None:
    created: list[AsyncMock] = []
    monkeypatch.setattr(redis, "Redis", _client_factory(created))
    broken = AsyncMock()
    store = RedisCacheStore(redis_client=broken, settings=get_settings())

    results = await asyncio.gather(store._reconnect(), store._reconnect())

    assert results == [True, True]
    assert len(created) == 1
    assert store.redis is created[0]
    broken.aclose.assert_awaited_once()


async def test_connect_discards_client_when_already_connected(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    created: list[AsyncMock] = []
    monkeypatch.setattr(redis, "Redis", _client_factory(created))
    store = RedisCacheStore(settings=get_settings())

    await asyncio.gather(store.connect(), store.connect())

    assert len(created) == 2
    assert store.redis is created[0]
    created[1].aclose.assert_awaited_once()
    created[0].aclose.assert_not_awaited()
