"""Close thread use case."""

import logfire
from pydantic import BaseModel

from threadline.domain.error import NotFoundError
from threadline.domain.result import Err, Ok, Result
from threadline.domain.value import VideoId

from .snapshot import ThreadCommandUseCase


class CloseThreadRequest(BaseModel):
    """Close thread request."""

    video_id: str


class CloseThreadUseCase(ThreadCommandUseCase):
    """Use case for dropping a video's comment store when its panel closes."""

    async def execute(self, request: CloseThreadRequest) -> Result[None]:
        """Execute close thread flow.

        Returns:
            Ok(None), or Err(NotFoundError) if the thread wasn't open
        """
        video_id = VideoId(request.video_id)
        async with self.thread_repository.lock(video_id):
            removed = await self.thread_repository.delete(video_id)
        if not removed:
            return Err(NotFoundError("Thread", video_id))

        logfire.info("Thread closed", video_id=video_id)
        return Ok(None)
