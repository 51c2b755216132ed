"""In-memory thread repository."""

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Optional

from threadline.domain.repository.thread import ThreadRepository
from threadline.domain.service import CommentStore
from threadline.domain.value import VideoId


class InMemoryThreadRepository(ThreadRepository):
    """In-memory implementation of ThreadRepository.

    Comment stores only live while a video's panel is open, so this is the
    production implementation as well as the test one.
    """

    def __init__(self) -> None:
        self._stores: dict[VideoId, CommentStore] = {}
        self._locks: dict[VideoId, asyncio.Lock] = {}
        self._lock_users: dict[VideoId, int] = {}

    async def find_by_video(self, video_id: VideoId) -> Optional[CommentStore]:
        """Find the open store for a video."""
        return self._stores.get(video_id)

    async def save(self, store: CommentStore) -> CommentStore:
        """Register a store under its video ID."""
        self._stores[store.video_id] = store
        return store

    async def delete(self, video_id: VideoId) -> bool:
        """Drop the store for a video."""
        return self._stores.pop(video_id, None) is not None

    @asynccontextmanager
    async def lock(self, video_id: VideoId) -> AsyncIterator[None]:
        """Hold the per-video lock, created on first use.

        The lock is dropped once nothing holds or awaits it and the video
        has no open store, so only open threads and in-flight commands
        keep one.
        """
        lock = self._locks.setdefault(video_id, asyncio.Lock())
        self._lock_users[video_id] = self._lock_users.get(video_id, 0) + 1
        try:
            async with lock:
                yield
        finally:
            self._lock_users[video_id] -= 1
            if not self._lock_users[video_id]:
                del self._lock_users[video_id]
                if video_id not in self._stores:
                    del self._locks[video_id]

    @property
    def lock_count(self) -> int:
        """Number of per-video locks currently kept."""
        return len(self._locks)
