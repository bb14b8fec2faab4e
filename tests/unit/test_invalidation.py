"""Tests for invalidation tables and CacheInvalidator."""

import logging

import pytest

from app.domain.exceptions import CacheInvalidationError
from app.infrastructure.cache.invalidation import (
    ALBUM_LIKE_POLICY,
    ALBUM_POLICY,
    COLLABORATION_POLICY,
    PLAYLIST_POLICY,
    SONG_POLICY,
    CacheInvalidator,
    InvalidationContext,
    Mutation,
)
from tests.conftest import InMemoryCache


def test_song_added_clears_listing_and_album() -> None:
    keys = SONG_POLICY.keys_for(
        Mutation.SONG_ADDED, InvalidationContext(entity_id="s1", album_ids=("a1",))
    )
    assert keys == ["songs:all", "album:a1"]


def test_song_edited_clears_old_and_new_album_and_playlists() -> None:
    keys = SONG_POLICY.keys_for(
        Mutation.SONG_EDITED,
        InvalidationContext(
            entity_id="s1", album_ids=("a1", "a2"), playlist_ids=("p1",)
        ),
    )
    assert keys == ["song:s1", "songs:all", "album:a1", "album:a2", "playlist:p1"]


def test_album_deleted_clears_album_likes_and_songs() -> None:
    keys = ALBUM_POLICY.keys_for(
        Mutation.ALBUM_DELETED, InvalidationContext(entity_id="a1", song_ids=("s1",))
    )
    assert keys == ["album:a1", "album_likes:a1", "song:s1"]


def test_playlist_deleted_clears_owner_and_collaborator_listings() -> None:
    keys = PLAYLIST_POLICY.keys_for(
        Mutation.PLAYLIST_DELETED,
        InvalidationContext(entity_id="p1", owner_id="u1", user_ids=("u2", "u1")),
    )
    assert keys == ["playlists:u1", "playlist:p1", "playlists:u2"]


def test_collaboration_change_clears_collaborator_listing() -> None:
    for mutation in (Mutation.COLLABORATION_ADDED, Mutation.COLLABORATION_DELETED):
        keys = COLLABORATION_POLICY.keys_for(
            mutation, InvalidationContext(entity_id="p1", user_ids=("u2",))
        )
        assert keys == ["playlists:u2"]


def test_like_change_clears_count() -> None:
    keys = ALBUM_LIKE_POLICY.keys_for(
        Mutation.ALBUM_LIKE_ADDED, InvalidationContext(entity_id="a1")
    )
    assert keys == ["album_likes:a1"]


def test_unknown_mutation_for_family_raises_key_error() -> None:
    assert not ALBUM_LIKE_POLICY.handles(Mutation.SONG_ADDED)
    with pytest.raises(KeyError):
        ALBUM_LIKE_POLICY.keys_for(Mutation.SONG_ADDED, InvalidationContext())


async def test_invalidate_deletes_every_key(memory_cache: InMemoryCache) -> None:
    memory_cache.store.update({"song:s1": "{}", "songs:all": "[]", "album:a1": "{}"})
    invalidator = CacheInvalidator(memory_cache)
    keys = await invalidator.invalidate(
        SONG_POLICY,
        Mutation.SONG_DELETED,
        InvalidationContext(entity_id="s1", album_ids=("a1",)),
    )
    assert keys == ["song:s1", "songs:all", "album:a1"]
    assert memory_cache.store == {}


async def test_deleting_absent_keys_is_not_an_error(memory_cache: InMemoryCache) -> None:
    invalidator = CacheInvalidator(memory_cache)
    await invalidator.delete_keys(["song:missing"])
    await invalidator.delete_keys(["song:missing"])
    assert memory_cache.deleted() == ["song:missing", "song:missing"]


async def test_failed_delete_is_retried(memory_cache: InMemoryCache) -> None:
    memory_cache.store["album:a1"] = "{}"
    memory_cache.fail_delete["album:a1"] = 2
    invalidator = CacheInvalidator(memory_cache, attempts=3, backoff_seconds=0)
    await invalidator.delete_keys(["album:a1"])
    assert memory_cache.deleted() == ["album:a1"] * 3
    assert "album:a1" not in memory_cache.store


async def test_each_retry_is_logged_before_waiting(
    memory_cache: InMemoryCache, caplog: pytest.LogCaptureFixture
) -> None:
    memory_cache.fail_delete["album:a1"] = 2
    invalidator = CacheInvalidator(memory_cache, attempts=3, backoff_seconds=0)
    with caplog.at_level(logging.WARNING):
        await invalidator.delete_keys(["album:a1"])
    retries = [r for r in caplog.records if "retrying" in r.getMessage()]
    assert len(retries) == 2
    assert "1/3" in retries[0].getMessage()
    assert not any(record.levelno == logging.CRITICAL for record in caplog.records)


async def test_exhausted_retries_raise_and_log_critical(
    memory_cache: InMemoryCache, caplog: pytest.LogCaptureFixture
) -> None:
    memory_cache.fail_delete["album:a1"] = 10
    invalidator = CacheInvalidator(memory_cache, attempts=2, backoff_seconds=0)
    with caplog.at_level(logging.WARNING), pytest.raises(CacheInvalidationError) as exc_info:
        await invalidator.delete_keys(["songs:all", "album:a1"])
    assert exc_info.value.details["keys"] == ["album:a1"]
    assert any(record.levelno == logging.CRITICAL for record in caplog.records)
    # the healthy key was still deleted
    assert "songs:all" in memory_cache.deleted()


async def test_no_cache_is_noop() -> None:
    invalidator = CacheInvalidator(None)
    keys = await invalidator.invalidate(
        ALBUM_POLICY, Mutation.ALBUM_EDITED, InvalidationContext(entity_id="a1")
    )
    assert keys == ["album:a1"]


def test_attempts_must_be_positive() -> None:
    with pytest.raises(ValueError):
        CacheInvalidator(None, attempts=0)
