"""Open thread use case."""

import logfire
from pydantic import BaseModel

from threadline.adapter.normalizer import build_thread
from threadline.config import ThreadSettings
from threadline.domain.error import ValidationError
from threadline.domain.repository import CommentSource, ThreadRepository
from threadline.domain.result import Err, Ok, Result
from threadline.domain.service import CommentStore
from threadline.domain.value import VideoId

from ..base import BaseUseCase
from .snapshot import ThreadSnapshot


class OpenThreadRequest(BaseModel):
    """Open thread request."""

    video_id: str
    reload: bool = False  # Discard the open store and fetch again


class OpenThreadUseCase(BaseUseCase):
    """Use case for loading a video's comments into a new comment store."""

    def __init__(
        self,
        comment_source: CommentSource,
        thread_repository: ThreadRepository,
        thread_settings: ThreadSettings,
    ) -> None:
        """Initialize open thread use case.

        Args:
            comment_source: Fetch collaborator supplying raw comment records
            thread_repository: Registry of open comment stores
            thread_settings: Thread engine configuration
        """
        self.comment_source = comment_source
        self.thread_repository = thread_repository
        self.thread_settings = thread_settings

    async def execute(self, request: OpenThreadRequest) -> Result[ThreadSnapshot]:
        """Execute open thread flow.

        Steps:
        1. Reuse the open store unless a reload is requested
        2. Fetch raw records from the comment source
        3. Normalize them into a thread and register a new store under
           the video lock, after any command already queued on it

        Args:
            request: Open thread request

        Returns:
            Ok with the loaded snapshot, or Err(ValidationError) if the
            fetched records can't be normalized

        Raises:
            SourceError: If the comment source fails
        """
        video_id = VideoId(request.video_id)

        with logfire.span("open_thread", video_id=video_id, reload=request.reload):
            existing = await self.thread_repository.find_by_video(video_id)
            if existing is not None and not request.reload:
                return Ok(ThreadSnapshot.from_thread(existing.snapshot))

            records = await self.comment_source.fetch_comments(video_id)

            try:
                thread = build_thread(video_id, records)
            except ValidationError as e:
                logfire.warn(
                    "Comment records rejected", video_id=video_id, error=str(e)
                )
                return Err(e)

            store = CommentStore(
                thread,
                max_comment_length=self.thread_settings.max_comment_length,
                verify_invariants=self.thread_settings.verify_invariants,
            )
            async with self.thread_repository.lock(video_id):
                current = await self.thread_repository.find_by_video(video_id)
                if current is not None and not request.reload:
                    # Opened by a concurrent request while fetching
                    return Ok(ThreadSnapshot.from_thread(current.snapshot))
                await self.thread_repository.save(store)

            logfire.info(
                "Thread opened",
                video_id=video_id,
                records=len(records),
                total_count=thread.total_count,
            )
            return Ok(ThreadSnapshot.from_thread(thread))
