"""Tests for PlaylistService (authorization before repository work)."""

from unittest.mock import AsyncMock

import pytest

from app.application.dtos.cache import CachedResult
from app.application.dtos.playlist import PlaylistDetail
from app.application.services.playlist_authorization import (
    PlaylistAuthorizationResolver,
)
from app.application.use_cases.playlists.playlist_operations import PlaylistService
from app.domain.enums import PlaylistActivityAction
from app.domain.exceptions import (
    CollaborationNotFoundError,
    PlaylistAccessDeniedError,
    PlaylistNotFoundError,
    SongNotFoundError,
    UserNotFoundError,
)


class _Fixture:
    def __init__(self, owner: str | None = "u1", collaborators: tuple[str, ...] = ()) -> None:
        self.playlist_repo = AsyncMock()
        self.playlist_repo.get_owner.return_value = owner
        self.collaboration_repo = AsyncMock()

        async def verify(playlist_id: str, user_id: str) -> None:
            if user_id not in collaborators:
                raise CollaborationNotFoundError(playlist_id, user_id)

        self.collaboration_repo.verify_collaborator.side_effect = verify
        self.song_repo = AsyncMock()
        self.user_repo = AsyncMock()
        self.service = PlaylistService(
            self.playlist_repo,
            self.collaboration_repo,
            self.song_repo,
            self.user_repo,
            PlaylistAuthorizationResolver(self.playlist_repo, self.collaboration_repo),
        )


async def test_collaborator_adds_song_and_activity_is_recorded() -> None:
    f = _Fixture(collaborators=("u2",))
    await f.service.add_song("p1", "s1", "u2")
    f.song_repo.verify_song_exists.assert_awaited_once_with("s1")
    f.playlist_repo.add_playlist_song.assert_awaited_once_with("p1", "s1")
    f.playlist_repo.add_activity.assert_awaited_once_with(
        "p1", "s1", "u2", PlaylistActivityAction.ADD
    )


async def test_stranger_cannot_add_song() -> None:
    f = _Fixture()
    with pytest.raises(PlaylistAccessDeniedError):
        await f.service.add_song("p1", "s1", "u3")
    f.playlist_repo.add_playlist_song.assert_not_awaited()


async def test_unknown_song_is_not_added() -> None:
    f = _Fixture()
    f.song_repo.verify_song_exists.side_effect = SongNotFoundError("s404")
    with pytest.raises(SongNotFoundError):
        await f.service.add_song("p1", "s404", "u1")
    f.playlist_repo.add_playlist_song.assert_not_awaited()


async def test_get_songs_of_missing_playlist_is_not_found() -> None:
    f = _Fixture(owner=None)
    with pytest.raises(PlaylistNotFoundError):
        await f.service.get_songs("p404", "u1")
    f.collaboration_repo.verify_collaborator.assert_not_awaited()


async def test_get_songs_returns_repository_result() -> None:
    f = _Fixture()
    cached = CachedResult(PlaylistDetail(id="p1", name="Road trip", username="ana"), True)
    f.playlist_repo.get_playlist_songs.return_value = cached
    assert await f.service.get_songs("p1", "u1") is cached


async def test_delete_song_records_delete_activity() -> None:
    f = _Fixture()
    await f.service.delete_song("p1", "s1", "u1")
    f.playlist_repo.delete_playlist_song.assert_awaited_once_with("p1", "s1")
    f.playlist_repo.add_activity.assert_awaited_once_with(
        "p1", "s1", "u1", PlaylistActivityAction.DELETE
    )


async def test_collaborator_cannot_delete_playlist() -> None:
    f = _Fixture(collaborators=("u2",))
    with pytest.raises(PlaylistAccessDeniedError):
        await f.service.delete_playlist("p1", "u2")
    f.playlist_repo.delete_playlist.assert_not_awaited()
    f.collaboration_repo.verify_collaborator.assert_not_awaited()


async def test_owner_deletes_playlist() -> None:
    f = _Fixture()
    await f.service.delete_playlist("p1", "u1")
    f.playlist_repo.delete_playlist.assert_awaited_once_with("p1")


async def test_owner_adds_collaborator_after_user_check() -> None:
    f = _Fixture()
    f.collaboration_repo.add_collaboration.return_value = "collab-1"
    assert await f.service.add_collaborator("p1", "u2", "u1") == "collab-1"
    f.user_repo.verify_user_exists.assert_awaited_once_with("u2")


async def test_add_unknown_collaborator_raises() -> None:
    f = _Fixture()
    f.user_repo.verify_user_exists.side_effect = UserNotFoundError("u404")
    with pytest.raises(UserNotFoundError):
        await f.service.add_collaborator("p1", "u404", "u1")
    f.collaboration_repo.add_collaboration.assert_not_awaited()


async def test_collaborator_cannot_manage_collaborators() -> None:
    f = _Fixture(collaborators=("u2",))
    with pytest.raises(PlaylistAccessDeniedError):
        await f.service.delete_collaborator("p1", "u2", "u2")


async def test_activities_require_access() -> None:
    f = _Fixture(collaborators=("u2",))
    f.playlist_repo.get_activities.return_value = []
    assert await f.service.get_activities("p1", "u2") == []
    with pytest.raises(PlaylistAccessDeniedError):
        await f.service.get_activities("p1", "u3")
