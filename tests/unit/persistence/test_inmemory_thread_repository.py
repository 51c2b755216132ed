"""Unit tests for InMemoryThreadRepository."""

import asyncio

import pytest

from threadline.application.usecase.comment import (
    SubmitCommentRequest,
    SubmitCommentUseCase,
)
from threadline.domain.service import CommentStore
from threadline.domain.value import VideoId
from threadline.persistence.repository.inmemory import InMemoryThreadRepository


class TestInMemoryThreadRepository:
    """Tests for InMemoryThreadRepository."""

    @pytest.mark.asyncio
    async def test_save_and_find(self):
        # Arrange
        repository = InMemoryThreadRepository()
        store = CommentStore.empty(VideoId("v1"))

        # Act
        await repository.save(store)

        # Assert
        assert await repository.find_by_video(VideoId("v1")) is store
        assert await repository.find_by_video(VideoId("v2")) is None

    @pytest.mark.asyncio
    async def test_delete(self):
        # Arrange
        repository = InMemoryThreadRepository()
        await repository.save(CommentStore.empty(VideoId("v1")))

        # Act / Assert
        assert await repository.delete(VideoId("v1")) is True
        assert await repository.delete(VideoId("v1")) is False
        assert await repository.find_by_video(VideoId("v1")) is None

    @pytest.mark.asyncio
    async def test_lock_is_exclusive_per_video(self):
        """Each video has one lock, independent of other videos."""
        # Arrange
        repository = InMemoryThreadRepository()

        async def hold(video_id: str) -> None:
            async with repository.lock(VideoId(video_id)):
                pass

        # Act
        async with repository.lock(VideoId("v1")):
            same = asyncio.create_task(hold("v1"))
            other = asyncio.create_task(hold("v2"))
            for _ in range(5):
                await asyncio.sleep(0)

            # Assert
            assert other.done()
            assert not same.done()
        await same

    @pytest.mark.asyncio
    async def test_lock_dropped_once_thread_closed(self):
        """Only open threads and in-flight commands keep a lock."""
        # Arrange
        repository = InMemoryThreadRepository()
        await repository.save(CommentStore.empty(VideoId("v1")))

        # Act
        async with repository.lock(VideoId("v1")):
            pass
        kept = repository.lock_count
        async with repository.lock(VideoId("v1")):
            await repository.delete(VideoId("v1"))
        async with repository.lock(VideoId("never-opened")):
            pass

        # Assert
        assert kept == 1
        assert repository.lock_count == 0

    @pytest.mark.asyncio
    async def test_concurrent_submissions_are_serialized(self):
        """Interleaved commands on one video never lose an update."""
        # Arrange
        repository = InMemoryThreadRepository()
        await repository.save(CommentStore.empty(VideoId("v1")))
        use_case = SubmitCommentUseCase(thread_repository=repository)

        def request(n: int) -> SubmitCommentRequest:
            return SubmitCommentRequest(
                video_id="v1", text=f"comment {n}", author_id="u1", author_name="Ada"
            )

        # Act
        results = await asyncio.gather(
            *(use_case.execute(request(n)) for n in range(25))
        )

        # Assert
        assert all(result.is_ok for result in results)
        store = await repository.find_by_video(VideoId("v1"))
        assert store.total_count == 25
        assert len({r.value.comment_id for r in results}) == 25
