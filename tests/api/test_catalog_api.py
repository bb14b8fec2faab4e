"""HTTP tests for catalog routes.

The ASGI transport does not run the lifespan, so repositories and services
are overridden with instances over a mocked session or mocked collaborators.
"""

from types import SimpleNamespace
from unittest.mock import AsyncMock

from httpx import AsyncClient
from sqlalchemy.exc import IntegrityError

from app.api.v1.dependencies import (
    get_album_like_repo,
    get_export_service,
    get_playlist_service,
    get_song_repo,
)
from app.application.dtos.cache import CachedResult
from app.application.dtos.playlist import PlaylistDetail
from app.application.dtos.song import SongSummary
from app.application.use_cases.exports import ExportService
from app.domain.exceptions import (
    CacheInvalidationError,
    PlaylistAccessDeniedError,
    PlaylistNotFoundError,
)
from app.infrastructure.cache.invalidation import CacheInvalidator
from app.infrastructure.persistence.repositories import (
    AlbumLikeRepository,
    SongRepository,
)
from app.main import app
from tests.conftest import InMemoryCache, bearer, db_result, mock_session


def _song_row() -> SimpleNamespace:
    return SimpleNamespace(
        id="s1",
        title="Blue",
        year=2020,
        genre="Pop",
        performer="Ana",
        duration=180,
        album_id=None,
    )


async def test_song_read_reports_cache_hit(client: AsyncClient) -> None:
    cache = InMemoryCache()
    session = mock_session(db_result(scalar=_song_row()))
    repo = SongRepository(session, cache, invalidator=CacheInvalidator(cache))
    app.dependency_overrides[get_song_repo] = lambda: repo

    first = await client.get("/api/v1/songs/s1")
    second = await client.get("/api/v1/songs/s1")

    assert first.status_code == second.status_code == 200
    assert "X-Data-Source" not in first.headers
    assert second.headers["X-Data-Source"] == "cache"
    assert first.json() == second.json()
    assert second.json()["title"] == "Blue"


async def test_missing_song_is_404(client: AsyncClient) -> None:
    repo = SongRepository(mock_session(db_result(scalar=None)), None)
    app.dependency_overrides[get_song_repo] = lambda: repo

    response = await client.get("/api/v1/songs/s404")

    assert response.status_code == 404
    assert response.json()["error"] == "RESOURCE_NOT_FOUND"
    assert response.json()["request_id"] == response.headers["X-Request-ID"]


async def test_song_id_with_key_separator_is_404(client: AsyncClient) -> None:
    repo = SongRepository(mock_session(), InMemoryCache())
    app.dependency_overrides[get_song_repo] = lambda: repo

    response = await client.get("/api/v1/songs/a:b")

    assert response.status_code == 404
    assert response.json()["error"] == "RESOURCE_NOT_FOUND"


async def test_edit_song_with_unknown_album_is_400(client: AsyncClient) -> None:
    session = mock_session(
        db_result(one=SimpleNamespace(album_id=None)),
        db_result(scalars=[]),
        IntegrityError("UPDATE songs", {}, Exception("album_id fk")),
    )
    repo = SongRepository(session, None)
    app.dependency_overrides[get_song_repo] = lambda: repo

    response = await client.put(
        "/api/v1/songs/s1",
        json={
            "title": "Blue",
            "year": 2020,
            "genre": "Pop",
            "performer": "Ana",
            "album_id": "a404",
        },
    )

    assert response.status_code == 400
    assert response.json()["error"] == "INVARIANT_ERROR"


async def test_add_song_returns_201(client: AsyncClient) -> None:
    repo = SongRepository(mock_session(db_result(scalar="s1")), None)
    app.dependency_overrides[get_song_repo] = lambda: repo

    response = await client.post(
        "/api/v1/songs",
        json={"title": "Blue", "year": 2020, "genre": "Pop", "performer": "Ana"},
    )

    assert response.status_code == 201
    assert response.json() == {"song_id": "s1"}


async def test_invalid_song_body_is_422(client: AsyncClient) -> None:
    app.dependency_overrides[get_song_repo] = lambda: SongRepository(mock_session(), None)
    response = await client.post("/api/v1/songs", json={"title": "Blue"})
    assert response.status_code == 422
    assert response.json()["error"] == "VALIDATION_ERROR"


async def test_failed_invalidation_is_500(client: AsyncClient) -> None:
    repo = AsyncMock()
    repo.delete_song.side_effect = CacheInvalidationError(["song:s1"])
    app.dependency_overrides[get_song_repo] = lambda: repo

    response = await client.delete("/api/v1/songs/s1")

    assert response.status_code == 500
    assert response.json()["error"] == "CACHE_INVALIDATION_FAILED"


async def test_like_requires_token(client: AsyncClient) -> None:
    app.dependency_overrides[get_album_like_repo] = lambda: AsyncMock()
    response = await client.post("/api/v1/albums/a1/likes")
    assert response.status_code == 401
    assert response.headers["WWW-Authenticate"] == "Bearer"


async def test_invalid_token_is_401(client: AsyncClient) -> None:
    app.dependency_overrides[get_album_like_repo] = lambda: AsyncMock()
    response = await client.post(
        "/api/v1/albums/a1/likes", headers={"Authorization": "Bearer not-a-jwt"}
    )
    assert response.status_code == 401


async def test_like_count_reports_cache_hit(client: AsyncClient) -> None:
    cache = InMemoryCache()
    cache.store["album_likes:a1"] = "3"
    repo = AlbumLikeRepository(mock_session(), cache)
    app.dependency_overrides[get_album_like_repo] = lambda: repo

    response = await client.get("/api/v1/albums/a1/likes")

    assert response.status_code == 200
    assert response.json() == {"likes": 3}
    assert response.headers["X-Data-Source"] == "cache"


async def test_playlist_songs_for_caller(client: AsyncClient) -> None:
    service = AsyncMock()
    service.get_songs.return_value = CachedResult(
        PlaylistDetail(
            id="p1",
            name="Road trip",
            username="ana",
            songs=[SongSummary(id="s1", title="Blue", performer="Ana")],
        )
    )
    app.dependency_overrides[get_playlist_service] = lambda: service

    response = await client.get("/api/v1/playlists/p1/songs", headers=bearer("u1"))

    assert response.status_code == 200
    assert response.json()["songs"][0]["id"] == "s1"
    assert "X-Data-Source" not in response.headers
    service.get_songs.assert_awaited_once_with("p1", "u1")


async def test_playlist_denial_is_403(client: AsyncClient) -> None:
    service = AsyncMock()
    service.get_songs.side_effect = PlaylistAccessDeniedError("p1")
    app.dependency_overrides[get_playlist_service] = lambda: service

    response = await client.get("/api/v1/playlists/p1/songs", headers=bearer("u3"))

    assert response.status_code == 403
    assert response.json()["error"] == "AUTHORIZATION_ERROR"


async def test_missing_playlist_is_404(client: AsyncClient) -> None:
    service = AsyncMock()
    service.delete_playlist.side_effect = PlaylistNotFoundError("p404")
    app.dependency_overrides[get_playlist_service] = lambda: service

    response = await client.delete("/api/v1/playlists/p404", headers=bearer("u1"))

    assert response.status_code == 404


async def test_remove_playlist_song_reads_json_body(client: AsyncClient) -> None:
    service = AsyncMock()
    app.dependency_overrides[get_playlist_service] = lambda: service

    response = await client.request(
        "DELETE",
        "/api/v1/playlists/p1/songs",
        json={"song_id": "s1"},
        headers=bearer("u1"),
    )

    assert response.status_code == 200
    service.delete_song.assert_awaited_once_with("p1", "s1", "u1")


async def test_add_collaboration(client: AsyncClient) -> None:
    service = AsyncMock()
    service.add_collaborator.return_value = "collab-1"
    app.dependency_overrides[get_playlist_service] = lambda: service

    response = await client.post(
        "/api/v1/collaborations",
        json={"playlist_id": "p1", "user_id": "u2"},
        headers=bearer("u1"),
    )

    assert response.status_code == 201
    assert response.json() == {"collaboration_id": "collab-1"}
    service.add_collaborator.assert_awaited_once_with("p1", "u2", "u1")


async def test_export_queues_job(client: AsyncClient) -> None:
    producer, authorization = AsyncMock(), AsyncMock()
    service = ExportService(producer, authorization, "export:playlists")
    app.dependency_overrides[get_export_service] = lambda: service

    response = await client.post(
        "/api/v1/export/playlists/p1",
        json={"target_email": "ana@example.com"},
        headers=bearer("u1"),
    )

    assert response.status_code == 201
    producer.send_message.assert_awaited_once_with(
        "export:playlists", {"playlistId": "p1", "targetEmail": "ana@example.com"}
    )


async def test_export_rejects_invalid_email(client: AsyncClient) -> None:
    app.dependency_overrides[get_export_service] = lambda: AsyncMock()
    response = await client.post(
        "/api/v1/export/playlists/p1",
        json={"target_email": "not-an-email"},
        headers=bearer("u1"),
    )
    assert response.status_code == 422
