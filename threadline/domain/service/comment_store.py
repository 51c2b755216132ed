"""Comment store: the owner of one video's comment forest."""

from collections.abc import Callable, Iterator
from datetime import datetime, timezone
from typing import Any, Optional, TypeVar

import logfire

from threadline.domain.error import DomainError
from threadline.domain.model import MAX_COMMENT_LENGTH, Comment, CommentThread
from threadline.domain.result import Err, Ok, Result
from threadline.domain.value import (
    AuthorInfo,
    CommentId,
    Reaction,
    VideoId,
    new_comment_id,
)

from . import mutation
from .base import Service
from .counts import check_invariants
from .query import find_by_id, flatten

T = TypeVar("T")


def utcnow() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


class CommentStore(Service):
    """Authoritative in-memory comment forest for one video.

    Holds the current CommentThread snapshot and applies commands to it.
    Each command either swaps in a new, consistent snapshot and returns
    Ok, or leaves the snapshot untouched and returns Err. Callers only
    ever see complete snapshots.
    """

    def __init__(
        self,
        thread: CommentThread,
        max_comment_length: int = MAX_COMMENT_LENGTH,
        verify_invariants: bool = True,
        clock: Callable[[], datetime] = utcnow,
        id_factory: Callable[[], CommentId] = new_comment_id,
    ) -> None:
        """Initialize comment store.

        Args:
            thread: Initial snapshot (already normalized)
            max_comment_length: Maximum length of comment text on write
            verify_invariants: Check the full forest after every command
            clock: Source of creation and edit timestamps
            id_factory: Generator for new comment IDs
        """
        self._thread = thread
        self.max_comment_length = max_comment_length
        self.verify_invariants = verify_invariants
        self._clock = clock
        self._id_factory = id_factory

    @classmethod
    def empty(cls, video_id: VideoId, **kwargs: Any) -> "CommentStore":
        """Create a store with no comments."""
        return cls(CommentThread(video_id=video_id), **kwargs)

    @property
    def video_id(self) -> VideoId:
        return self._thread.video_id

    @property
    def snapshot(self) -> CommentThread:
        """Current immutable snapshot."""
        return self._thread

    @property
    def total_count(self) -> int:
        return self._thread.total_count

    def find(self, comment_id: CommentId) -> Optional[Comment]:
        """Look up a comment in the current snapshot."""
        return find_by_id(self._thread.roots, comment_id)

    def flatten(self) -> Iterator[Comment]:
        """Iterate the current snapshot in pre-order."""
        return flatten(self._thread.roots)

    def _commit(
        self,
        command: str,
        apply: Callable[[CommentThread], tuple[CommentThread, T]],
    ) -> Result[T]:
        """Run a pure command and swap in its snapshot if it succeeds."""
        try:
            updated, value = apply(self._thread)
            if self.verify_invariants:
                check_invariants(updated)
        except DomainError as e:
            logfire.warn(
                "Comment command rejected",
                command=command,
                video_id=self.video_id,
                error=str(e),
                error_type=type(e).__name__,
            )
            return Err(e)

        self._thread = updated
        return Ok(value)

    def insert(
        self, parent_id: Optional[CommentId], author: AuthorInfo, text: str
    ) -> Result[CommentId]:
        """Add a top-level comment, or a reply when parent_id is set.

        Args:
            parent_id: Comment being replied to (None for top-level)
            author: Identity of the writer
            text: Comment text (trimmed before storing)

        Returns:
            Ok with the new comment ID, or Err with NotFoundError /
            ValidationError
        """
        with logfire.span(
            "comment_store.insert",
            video_id=self.video_id,
            parent_id=parent_id,
            author_id=author.author_id,
        ):
            comment_id = self._id_factory()
            result = self._commit(
                "insert",
                lambda thread: mutation.insert_comment(
                    thread,
                    parent_id,
                    author,
                    text,
                    comment_id=comment_id,
                    now=self._clock(),
                    max_length=self.max_comment_length,
                ),
            )
            if isinstance(result, Err):
                return result

            logfire.info(
                "Comment inserted",
                video_id=self.video_id,
                comment_id=comment_id,
                parent_id=parent_id,
                total_count=self.total_count,
            )
            return Ok(comment_id)

    def edit(self, comment_id: CommentId, text: str) -> Result[None]:
        """Replace the text of a comment and mark it edited.

        Returns:
            Ok(None), or Err with NotFoundError / ValidationError
        """
        with logfire.span(
            "comment_store.edit",
            video_id=self.video_id,
            comment_id=comment_id,
            text_length=len(text),
        ):
            result = self._commit(
                "edit",
                lambda thread: mutation.edit_comment(
                    thread,
                    comment_id,
                    text,
                    now=self._clock(),
                    max_length=self.max_comment_length,
                ),
            )
            if isinstance(result, Err):
                return result

            logfire.info(
                "Comment edited", video_id=self.video_id, comment_id=comment_id
            )
            return Ok(None)

    def delete(self, comment_id: CommentId) -> Result[int]:
        """Remove a comment and its entire subtree.

        Returns:
            Ok with the number of comments removed (1 + reply_count), or
            Err with NotFoundError
        """
        with logfire.span(
            "comment_store.delete", video_id=self.video_id, comment_id=comment_id
        ):
            result = self._commit(
                "delete", lambda thread: mutation.delete_comment(thread, comment_id)
            )
            if isinstance(result, Ok):
                logfire.info(
                    "Comment deleted",
                    video_id=self.video_id,
                    comment_id=comment_id,
                    removed=result.value,
                    total_count=self.total_count,
                )
            return result

    def toggle_reaction(
        self, comment_id: CommentId, reaction: Reaction
    ) -> Result[None]:
        """Toggle the current user's like or dislike on a comment.

        Returns:
            Ok(None), or Err with NotFoundError
        """
        with logfire.span(
            "comment_store.toggle_reaction",
            video_id=self.video_id,
            comment_id=comment_id,
            reaction=reaction.value,
        ):
            result = self._commit(
                "toggle_reaction",
                lambda thread: mutation.toggle_reaction(thread, comment_id, reaction),
            )
            if isinstance(result, Err):
                return result

            comment = result.value
            logfire.info(
                "Comment reaction toggled",
                video_id=self.video_id,
                comment_id=comment_id,
                state=comment.reaction_state.value,
                likes=comment.likes,
                dislikes=comment.dislikes,
            )
            return Ok(None)

    def toggle_pin(self, comment_id: CommentId) -> Result[bool]:
        """Pin or unpin a top-level comment.

        Returns:
            Ok with the new pin state, or Err with NotFoundError /
            ValidationError (replies cannot be pinned)
        """
        with logfire.span(
            "comment_store.toggle_pin", video_id=self.video_id, comment_id=comment_id
        ):
            result = self._commit(
                "toggle_pin", lambda thread: mutation.toggle_pin(thread, comment_id)
            )
            if isinstance(result, Err):
                return result
            return Ok(result.value.is_pinned)

    def toggle_heart(self, comment_id: CommentId) -> Result[bool]:
        """Toggle the creator heart on a comment.

        Returns:
            Ok with the new heart state, or Err with NotFoundError
        """
        with logfire.span(
            "comment_store.toggle_heart", video_id=self.video_id, comment_id=comment_id
        ):
            result = self._commit(
                "toggle_heart", lambda thread: mutation.toggle_heart(thread, comment_id)
            )
            if isinstance(result, Err):
                return result
            return Ok(result.value.is_hearted)
