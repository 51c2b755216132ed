"""Get thread use case."""

from typing import Optional

from pydantic import BaseModel

from threadline.config import ThreadSettings
from threadline.domain.error import NotFoundError
from threadline.domain.repository import ThreadRepository
from threadline.domain.result import Err, Ok, Result
from threadline.domain.value import SortOrder, VideoId

from .snapshot import ThreadCommandUseCase, ThreadSnapshot


class GetThreadRequest(BaseModel):
    """Get thread request."""

    video_id: str
    sort: Optional[SortOrder] = None  # Defaults to the configured order


class GetThreadUseCase(ThreadCommandUseCase):
    """Use case for reading the current snapshot of an open thread."""

    def __init__(
        self, thread_repository: ThreadRepository, thread_settings: ThreadSettings
    ) -> None:
        """Initialize get thread use case.

        Args:
            thread_repository: Registry of open comment stores
            thread_settings: Thread engine configuration
        """
        super().__init__(thread_repository)
        self.thread_settings = thread_settings

    async def execute(self, request: GetThreadRequest) -> Result[ThreadSnapshot]:
        """Execute get thread flow.

        Root comments are ordered by the requested sort; replies keep
        their most-recent-first order.

        Args:
            request: Get thread request

        Returns:
            Ok with the sorted snapshot, or Err(NotFoundError) if the
            thread isn't open
        """
        video_id = VideoId(request.video_id)
        store = await self.thread_repository.find_by_video(video_id)
        if store is None:
            return Err(NotFoundError("Thread", video_id))

        sort = request.sort or SortOrder(self.thread_settings.default_sort)
        return Ok(
            ThreadSnapshot.from_thread(
                store.snapshot,
                sort=sort,
                pinned_first=self.thread_settings.pinned_first,
            )
        )
