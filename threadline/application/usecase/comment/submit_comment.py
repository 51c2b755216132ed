"""Submit comment use case."""

from typing import Optional

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from threadline.domain.error import ValidationError
from threadline.domain.result import Err, Ok, Result
from threadline.domain.value import AuthorInfo, CommentId, UserId, VideoId

from .snapshot import ThreadCommandUseCase, ThreadSnapshot


class SubmitCommentRequest(BaseModel):
    """Submit comment request."""

    video_id: str
    text: str
    author_id: str  # Current user, resolved by the caller
    author_name: str
    author_avatar_url: Optional[str] = None
    parent_id: Optional[str] = None  # Parent comment ID for replies


class SubmitCommentResponse(BaseModel):
    """Submit comment response."""

    comment_id: str
    thread: ThreadSnapshot


class SubmitCommentUseCase(ThreadCommandUseCase):
    """Use case for posting a comment or replying to another comment."""

    async def execute(
        self, request: SubmitCommentRequest
    ) -> Result[SubmitCommentResponse]:
        """Execute submit comment flow.

        Args:
            request: Submit comment request

        Returns:
            Ok with the new comment ID and snapshot, or Err with
            NotFoundError (thread or parent missing) or ValidationError
            (blank text or author name)
        """
        try:
            author = AuthorInfo(
                author_id=UserId(request.author_id),
                author_name=request.author_name,
                author_avatar_url=request.author_avatar_url,
            )
        except PydanticValidationError as e:
            return Err(ValidationError(f"Invalid author: {e}"))

        parent_id = None
        if request.parent_id is not None:
            parent_id = CommentId(request.parent_id)

        outcome = await self._run(
            VideoId(request.video_id),
            lambda store: store.insert(parent_id, author, request.text),
        )
        if isinstance(outcome, Err):
            return outcome

        comment_id, thread = outcome.value
        return Ok(
            SubmitCommentResponse(
                comment_id=comment_id,
                thread=ThreadSnapshot.from_thread(thread),
            )
        )
