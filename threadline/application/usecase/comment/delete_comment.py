"""Delete comment use case."""

from pydantic import BaseModel

from threadline.domain.result import Err, Ok, Result
from threadline.domain.value import CommentId, VideoId

from .snapshot import ThreadCommandUseCase, ThreadSnapshot


class DeleteCommentRequest(BaseModel):
    """Delete comment request.

    Any confirmation step happens in the UI before this is sent.
    """

    video_id: str
    comment_id: str


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    removed_count: int  # The comment plus all of its replies
    thread: ThreadSnapshot


class DeleteCommentUseCase(ThreadCommandUseCase):
    """Use case for deleting a comment and its replies."""

    async def execute(
        self, request: DeleteCommentRequest
    ) -> Result[DeleteCommentResponse]:
        """Execute delete comment flow.

        Args:
            request: Delete comment request

        Returns:
            Ok with the number of removed comments and the new snapshot,
            or Err(NotFoundError)
        """
        comment_id = CommentId(request.comment_id)
        outcome = await self._run(
            VideoId(request.video_id), lambda store: store.delete(comment_id)
        )
        if isinstance(outcome, Err):
            return outcome

        removed_count, thread = outcome.value
        return Ok(
            DeleteCommentResponse(
                removed_count=removed_count,
                thread=ThreadSnapshot.from_thread(thread),
            )
        )
