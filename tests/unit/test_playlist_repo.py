"""Tests for PlaylistRepository."""

from datetime import UTC, datetime
from types import SimpleNamespace

import pytest

from app.domain.enums import PlaylistActivityAction
from app.domain.exceptions import InvariantException, PlaylistNotFoundError
from app.infrastructure.cache.invalidation import CacheInvalidator
from app.infrastructure.persistence.repositories.playlist_repo import (
    PlaylistRepository,
)
from tests.conftest import InMemoryCache, db_result, mock_session


def _repo(session, cache: InMemoryCache | None) -> PlaylistRepository:
    return PlaylistRepository(
        session, cache, invalidator=CacheInvalidator(cache, backoff_seconds=0)
    )


async def test_add_playlist_clears_owner_listing(memory_cache: InMemoryCache) -> None:
    memory_cache.store["playlists:u1"] = "[]"
    session = mock_session(db_result(scalar="p1"))
    playlist_id = await _repo(session, memory_cache).add_playlist("Road trip", "u1")
    assert playlist_id == "p1"
    assert memory_cache.deleted() == ["playlists:u1"]


async def test_get_playlists_cached_per_user(memory_cache: InMemoryCache) -> None:
    session = mock_session(
        db_result(rows=[SimpleNamespace(id="p1", name="Road trip", username="ana")])
    )
    repo = _repo(session, memory_cache)

    await repo.get_playlists("u1")
    hit = await repo.get_playlists("u1")

    assert hit.from_cache is True
    assert hit.value[0].username == "ana"
    assert session.execute.await_count == 1
    assert "playlists:u1" in memory_cache.store


async def test_owner_deletes_playlist_clears_every_listing(memory_cache: InMemoryCache) -> None:
    """Owner and collaborator listings plus the song list are invalidated."""
    memory_cache.store.update(
        {"playlists:u1": "[]", "playlists:u2": "[]", "playlist:p1": "{}"}
    )
    session = mock_session(
        db_result(scalar="u1"),
        db_result(scalars=["u2"]),
        db_result(scalar="p1"),
    )

    await _repo(session, memory_cache).delete_playlist("p1")

    assert memory_cache.deleted() == ["playlists:u1", "playlist:p1", "playlists:u2"]
    assert memory_cache.store == {}


async def test_delete_missing_playlist_raises(memory_cache: InMemoryCache) -> None:
    session = mock_session(db_result(scalar=None))
    with pytest.raises(PlaylistNotFoundError):
        await _repo(session, memory_cache).delete_playlist("p404")
    session.commit.assert_not_awaited()


async def test_get_playlist_songs_miss_then_hit(memory_cache: InMemoryCache) -> None:
    session = mock_session(
        db_result(one=SimpleNamespace(id="p1", name="Road trip", username="ana")),
        db_result(rows=[SimpleNamespace(id="s1", title="Blue", performer="Ana")]),
    )
    repo = _repo(session, memory_cache)

    first = await repo.get_playlist_songs("p1")
    second = await repo.get_playlist_songs("p1")

    assert first.value == second.value
    assert second.from_cache is True
    assert [s.title for s in second.value.songs] == ["Blue"]


async def test_get_songs_of_missing_playlist_raises(memory_cache: InMemoryCache) -> None:
    session = mock_session(db_result(one=None))
    with pytest.raises(PlaylistNotFoundError):
        await _repo(session, memory_cache).get_playlist_songs("p404")
    assert memory_cache.store == {}


async def test_playlist_song_changes_clear_playlist_key(memory_cache: InMemoryCache) -> None:
    session = mock_session(db_result(scalar="entry-1"), db_result(scalar="entry-1"))
    repo = _repo(session, memory_cache)
    await repo.add_playlist_song("p1", "s1")
    await repo.delete_playlist_song("p1", "s1")
    assert memory_cache.deleted() == ["playlist:p1", "playlist:p1"]


async def test_delete_absent_playlist_song_raises(memory_cache: InMemoryCache) -> None:
    session = mock_session(db_result(scalar=None))
    with pytest.raises(InvariantException):
        await _repo(session, memory_cache).delete_playlist_song("p1", "s9")
    session.rollback.assert_awaited_once()


async def test_activities_are_not_cached(memory_cache: InMemoryCache) -> None:
    when = datetime(2026, 1, 1, tzinfo=UTC)
    session = mock_session(
        db_result(scalar="activity-1"),
        db_result(
            rows=[SimpleNamespace(username="ana", title="Blue", action="add", time=when)]
        ),
    )
    repo = _repo(session, memory_cache)

    await repo.add_activity("p1", "s1", "u1", PlaylistActivityAction.ADD)
    activities = await repo.get_activities("p1")

    assert activities[0].action == "add"
    assert activities[0].time == when
    assert memory_cache.calls == []


async def test_ids_with_key_separator_are_never_looked_up(memory_cache: InMemoryCache) -> None:
    session = mock_session()
    repo = _repo(session, memory_cache)

    with pytest.raises(PlaylistNotFoundError):
        await repo.get_playlist_songs("p:1")
    listing = await repo.get_playlists("u:1")

    assert listing.value == []
    assert listing.from_cache is False
    session.execute.assert_not_awaited()
    assert memory_cache.calls == []
