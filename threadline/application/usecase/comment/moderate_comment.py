"""Pin and heart use cases (creator moderation)."""

from pydantic import BaseModel

from threadline.domain.result import Err, Ok, Result
from threadline.domain.value import CommentId, VideoId

from .snapshot import ThreadCommandUseCase, ThreadSnapshot


class ModerateCommentRequest(BaseModel):
    """Pin or heart request."""

    video_id: str
    comment_id: str


class ModerateCommentResponse(BaseModel):
    """Pin or heart response."""

    comment_id: str
    enabled: bool  # New state of the toggled flag
    thread: ThreadSnapshot


class PinCommentUseCase(ThreadCommandUseCase):
    """Use case for pinning or unpinning a top-level comment."""

    async def execute(
        self, request: ModerateCommentRequest
    ) -> Result[ModerateCommentResponse]:
        """Execute pin comment flow.

        Returns:
            Ok with the new pin state, or Err with NotFoundError /
            ValidationError (replies cannot be pinned)
        """
        comment_id = CommentId(request.comment_id)
        outcome = await self._run(
            VideoId(request.video_id), lambda store: store.toggle_pin(comment_id)
        )
        if isinstance(outcome, Err):
            return outcome

        enabled, thread = outcome.value
        return Ok(
            ModerateCommentResponse(
                comment_id=request.comment_id,
                enabled=enabled,
                thread=ThreadSnapshot.from_thread(thread),
            )
        )


class HeartCommentUseCase(ThreadCommandUseCase):
    """Use case for toggling the creator heart on a comment."""

    async def execute(
        self, request: ModerateCommentRequest
    ) -> Result[ModerateCommentResponse]:
        """Execute heart comment flow.

        Returns:
            Ok with the new heart state, or Err(NotFoundError)
        """
        comment_id = CommentId(request.comment_id)
        outcome = await self._run(
            VideoId(request.video_id), lambda store: store.toggle_heart(comment_id)
        )
        if isinstance(outcome, Err):
            return outcome

        enabled, thread = outcome.value
        return Ok(
            ModerateCommentResponse(
                comment_id=request.comment_id,
                enabled=enabled,
                thread=ThreadSnapshot.from_thread(thread),
            )
        )
