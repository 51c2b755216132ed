"""React to comment use case."""

from pydantic import BaseModel

from threadline.domain.result import Err, Ok, Result
from threadline.domain.value import CommentId, Reaction, VideoId

from .snapshot import ThreadCommandUseCase, ThreadSnapshot


class ReactToCommentRequest(BaseModel):
    """React to comment request."""

    video_id: str
    comment_id: str
    reaction: Reaction


class ReactToCommentUseCase(ThreadCommandUseCase):
    """Use case for toggling the current user's like or dislike."""

    async def execute(self, request: ReactToCommentRequest) -> Result[ThreadSnapshot]:
        """Execute react to comment flow.

        Sending the same reaction twice returns the comment to its
        previous state.

        Args:
            request: React to comment request

        Returns:
            Ok with the updated snapshot, or Err(NotFoundError)
        """
        comment_id = CommentId(request.comment_id)
        outcome = await self._run(
            VideoId(request.video_id),
            lambda store: store.toggle_reaction(comment_id, request.reaction),
        )
        if isinstance(outcome, Err):
            return outcome

        _, thread = outcome.value
        return Ok(ThreadSnapshot.from_thread(thread))
