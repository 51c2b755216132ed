"""Thread snapshot shared by the comment use cases."""

from typing import Callable, Optional, TypeVar

from pydantic import BaseModel

from threadline.domain.error import NotFoundError
from threadline.domain.model import Comment, CommentThread
from threadline.domain.repository import ThreadRepository
from threadline.domain.result import Err, Ok, Result
from threadline.domain.service import CommentStore, sort_roots
from threadline.domain.value import SortOrder, VideoId

from ..base import BaseUseCase

T = TypeVar("T")


class ThreadSnapshot(BaseModel):
    """Immutable view of a video's comments handed to the UI."""

    video_id: str
    total_count: int
    comments: list[Comment]

    @classmethod
    def from_thread(
        cls,
        thread: CommentThread,
        sort: Optional[SortOrder] = None,
        pinned_first: bool = False,
    ) -> "ThreadSnapshot":
        """Build a snapshot, optionally ordering the root comments.

        Args:
            thread: Current thread state
            sort: Root ordering (None keeps store order)
            pinned_first: Move the pinned comment to the top

        Returns:
            Snapshot of the thread
        """
        roots = list(thread.roots)
        if sort is not None:
            roots = sort_roots(roots, by=sort, pinned_first=pinned_first)
        return cls(
            video_id=thread.video_id,
            total_count=thread.total_count,
            comments=roots,
        )


class ThreadCommandUseCase(BaseUseCase):
    """Base for use cases that run one command against an open thread."""

    def __init__(self, thread_repository: ThreadRepository) -> None:
        """Initialize thread command use case.

        Args:
            thread_repository: Registry of open comment stores
        """
        self.thread_repository = thread_repository

    async def _run(
        self, video_id: VideoId, command: Callable[[CommentStore], Result[T]]
    ) -> Result[tuple[T, CommentThread]]:
        """Run a command against the open store while holding the video lock.

        The store is looked up under the lock, so a command queued behind a
        reload or close sees whatever store is registered when it runs.

        Args:
            video_id: The video whose thread is targeted
            command: Store command to run

        Returns:
            Ok with the command's value and the resulting thread, or the
            command's Err, or Err(NotFoundError) if the thread isn't open
        """
        async with self.thread_repository.lock(video_id):
            store = await self.thread_repository.find_by_video(video_id)
            if store is None:
                return Err(NotFoundError("Thread", video_id))
            result = command(store)
            if isinstance(result, Err):
                return result
            return Ok((result.value, store.snapshot))
