"""Edit comment use case."""

from pydantic import BaseModel

from threadline.domain.result import Err, Ok, Result
from threadline.domain.value import CommentId, VideoId

from .snapshot import ThreadCommandUseCase, ThreadSnapshot


class EditCommentRequest(BaseModel):
    """Edit comment request."""

    video_id: str
    comment_id: str
    text: str  # New text content (cannot be blank)


class EditCommentUseCase(ThreadCommandUseCase):
    """Use case for updating a comment's text."""

    async def execute(self, request: EditCommentRequest) -> Result[ThreadSnapshot]:
        """Execute edit comment flow.

        Args:
            request: Edit comment request

        Returns:
            Ok with the updated snapshot, or Err with NotFoundError /
            ValidationError (the thread is unchanged on Err)
        """
        comment_id = CommentId(request.comment_id)
        outcome = await self._run(
            VideoId(request.video_id),
            lambda store: store.edit(comment_id, request.text),
        )
        if isinstance(outcome, Err):
            return outcome

        _, thread = outcome.value
        return Ok(ThreadSnapshot.from_thread(thread))
