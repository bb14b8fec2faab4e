"""Invalidation tables: which cache keys each committed mutation must clear.

One static table per entity family maps a Mutation to key rules. A rule
reads the InvalidationContext gathered by the repository (ids known before
and after the write) and yields keys. Per-entity and collection keys are
independent entries, so tables name both when both are affected.

CacheInvalidator runs after the database commit and before the write
returns. Every key must be deleted; keys still failing after the configured
attempts raise CacheInvalidationError.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass
from enum import Enum

from tenacity import (
    AsyncRetrying,
    RetryError,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from app.domain.exceptions import CacheInvalidationError
from app.infrastructure.cache.cache_protocol import CacheProtocol
from app.infrastructure.cache.keys import (
    album_key,
    album_likes_key,
    playlist_key,
    playlists_key,
    song_key,
    songs_all_key,
)
from app.infrastructure.exceptions import CacheUnavailableError

logger = logging.getLogger(__name__)

MAX_BACKOFF_SECONDS = 1.0


class Mutation(str, Enum):
    """Committed write kinds that affect cached reads."""

    SONG_ADDED = "song_added"
    SONG_EDITED = "song_edited"
    SONG_DELETED = "song_deleted"
    ALBUM_EDITED = "album_edited"
    ALBUM_COVER_UPDATED = "album_cover_updated"
    ALBUM_DELETED = "album_deleted"
    PLAYLIST_ADDED = "playlist_added"
    PLAYLIST_DELETED = "playlist_deleted"
    PLAYLIST_SONG_ADDED = "playlist_song_added"
    PLAYLIST_SONG_DELETED = "playlist_song_deleted"
    COLLABORATION_ADDED = "collaboration_added"
    COLLABORATION_DELETED = "collaboration_deleted"
    ALBUM_LIKE_ADDED = "album_like_added"
    ALBUM_LIKE_REMOVED = "album_like_removed"


@dataclass(frozen=True)
class InvalidationContext:
    """Identifiers touched by one mutation.

    entity_id is the mutated entity; the tuples list related entities whose
    cached views embed it (e.g. playlists containing an edited song).
    """

    entity_id: str | None = None
    owner_id: str | None = None
    album_ids: tuple[str, ...] = ()
    playlist_ids: tuple[str, ...] = ()
    user_ids: tuple[str, ...] = ()
    song_ids: tuple[str, ...] = ()


type KeyRule = Callable[[InvalidationContext], Iterable[str]]


def _entity(build: Callable[[str], str]) -> KeyRule:
    def rule(ctx: InvalidationContext) -> Iterable[str]:
        if ctx.entity_id:
            yield build(ctx.entity_id)

    return rule


def _owner(build: Callable[[str], str]) -> KeyRule:
    def rule(ctx: InvalidationContext) -> Iterable[str]:
        if ctx.owner_id:
            yield build(ctx.owner_id)

    return rule


def _each(field_name: str, build: Callable[[str], str]) -> KeyRule:
    def rule(ctx: InvalidationContext) -> Iterable[str]:
        for value in getattr(ctx, field_name):
            if value:
                yield build(value)

    return rule


def _constant(key: str) -> KeyRule:
    def rule(ctx: InvalidationContext) -> Iterable[str]:
        yield key

    return rule


class InvalidationPolicy:
    """Static mutation -> key rules table for one entity family."""

    def __init__(self, name: str, table: Mapping[Mutation, Sequence[KeyRule]]) -> None:
        self.name = name
        self._table = dict(table)

    def handles(self, mutation: Mutation) -> bool:
        return mutation in self._table

    def keys_for(self, mutation: Mutation, context: InvalidationContext) -> list[str]:
        """Return the ordered, de-duplicated keys to delete for mutation.

        Raises:
            KeyError: mutation is not in this family's table.
        """
        if mutation not in self._table:
            raise KeyError(f"{self.name} policy has no entry for {mutation.value}")
        keys: list[str] = []
        for rule in self._table[mutation]:
            for key in rule(context):
                if key not in keys:
                    keys.append(key)
        return keys


_song_rules: list[KeyRule] = [
    _entity(song_key),
    _constant(songs_all_key()),
    _each("album_ids", album_key),
    _each("playlist_ids", playlist_key),
]

SONG_POLICY = InvalidationPolicy(
    "song",
    {
        Mutation.SONG_ADDED: [_constant(songs_all_key()), _each("album_ids", album_key)],
        Mutation.SONG_EDITED: _song_rules,
        Mutation.SONG_DELETED: _song_rules,
    },
)

ALBUM_POLICY = InvalidationPolicy(
    "album",
    {
        Mutation.ALBUM_EDITED: [_entity(album_key)],
        Mutation.ALBUM_COVER_UPDATED: [_entity(album_key)],
        Mutation.ALBUM_DELETED: [
            _entity(album_key),
            _entity(album_likes_key),
            _each("song_ids", song_key),
        ],
    },
)

PLAYLIST_POLICY = InvalidationPolicy(
    "playlist",
    {
        Mutation.PLAYLIST_ADDED: [_owner(playlists_key)],
        Mutation.PLAYLIST_DELETED: [
            _owner(playlists_key),
            _entity(playlist_key),
            _each("user_ids", playlists_key),
        ],
        Mutation.PLAYLIST_SONG_ADDED: [_entity(playlist_key)],
        Mutation.PLAYLIST_SONG_DELETED: [_entity(playlist_key)],
    },
)

COLLABORATION_POLICY = InvalidationPolicy(
    "collaboration",
    {
        Mutation.COLLABORATION_ADDED: [_each("user_ids", playlists_key)],
        Mutation.COLLABORATION_DELETED: [_each("user_ids", playlists_key)],
    },
)

ALBUM_LIKE_POLICY = InvalidationPolicy(
    "album_like",
    {
        Mutation.ALBUM_LIKE_ADDED: [_entity(album_likes_key)],
        Mutation.ALBUM_LIKE_REMOVED: [_entity(album_likes_key)],
    },
)


class CacheInvalidator:
    """Deletes the keys a policy names, retrying each failed delete.

    With no cache configured there is nothing to keep coherent and every call
    is a no-op.
    """

    def __init__(
        self,
        cache: CacheProtocol | None,
        *,
        attempts: int = 3,
        backoff_seconds: float = 0.05,
    ) -> None:
        if attempts < 1:
            raise ValueError("attempts must be at least 1")
        self.cache = cache
        self.attempts = attempts
        self.backoff_seconds = backoff_seconds

    async def invalidate(
        self,
        policy: InvalidationPolicy,
        mutation: Mutation,
        context: InvalidationContext,
    ) -> list[str]:
        """Delete every key policy names for mutation; return the keys.

        Raises:
            CacheInvalidationError: Some keys could not be deleted.
        """
        keys = policy.keys_for(mutation, context)
        await self.delete_keys(keys)
        return keys

    async def delete_keys(self, keys: Sequence[str]) -> None:
        """Delete all keys; raise CacheInvalidationError listing the ones that failed."""
        if self.cache is None or not keys:
            return
        failed = [key for key in keys if not await self._delete_with_retry(key)]
        if failed:
            logger.critical(
                "Cache invalidation failed after commit; stale entries possible for %s",
                failed,
            )
            raise CacheInvalidationError(failed)

    async def _delete_with_retry(self, key: str) -> bool:
        assert self.cache is not None
        try:
            async for attempt in AsyncRetrying(
                stop=stop_after_attempt(self.attempts),
                wait=wait_exponential(multiplier=self.backoff_seconds, max=MAX_BACKOFF_SECONDS),
                retry=retry_if_exception_type(CacheUnavailableError),
                before_sleep=lambda retry_state: logger.warning(
                    "Cache delete attempt %s/%s failed for %s; retrying in %.2fs",
                    retry_state.attempt_number,
                    self.attempts,
                    key,
                    retry_state.next_action.sleep if retry_state.next_action else 0.0,
                ),
            ):
                with attempt:
                    await self.cache.delete(key)
        except RetryError as e:
            logger.warning(
                "Cache delete for %s gave up after %s attempts: %s",
                key,
                self.attempts,
                e.last_attempt.exception(),
            )
            return False
        return True
