"""Pure commands over a comment thread snapshot.

Every function takes a CommentThread and returns a new one; the input
snapshot is never modified. Only the nodes on the path from a root to the
touched comment are copied, the rest of the forest is shared.

These functions raise domain errors. CommentStore turns them into results.
"""

from collections.abc import Sequence
from datetime import datetime
from typing import Optional

from threadline.domain.error import (
    InvariantViolationError,
    NotFoundError,
    ValidationError,
)
from threadline.domain.model import MAX_COMMENT_LENGTH, Comment, CommentThread
from threadline.domain.value import AuthorInfo, CommentId, Reaction

from .counts import refresh_reply_count, total_count
from .query import count_comments, find_path
from .reaction import apply_reaction


def validate_text(text: str, max_length: int = MAX_COMMENT_LENGTH) -> str:
    """Validate comment text and return it trimmed.

    Raises:
        ValidationError: If the text is blank or longer than max_length
    """
    trimmed = text.strip()
    if not trimmed:
        raise ValidationError("Comment text must not be empty")
    if len(trimmed) > max_length:
        raise ValidationError(
            f"Comment text must be at most {max_length} characters "
            f"(got {len(trimmed)})"
        )
    return trimmed


def _require_path(thread: CommentThread, comment_id: CommentId) -> list[Comment]:
    path = find_path(thread.roots, comment_id)
    if path is None:
        raise NotFoundError("Comment", comment_id)

    # Every link on the chain must agree with the tree shape
    if path[0].parent_id is not None:
        raise InvariantViolationError(
            f"Root comment {path[0].id} has parent {path[0].parent_id}"
        )
    for parent, child in zip(path, path[1:]):
        if child.parent_id != parent.id:
            raise InvariantViolationError(
                f"Comment {child.id} is nested under {parent.id} "
                f"but points at {child.parent_id}"
            )
    return path


def _swap(
    siblings: Sequence[Comment],
    comment_id: CommentId,
    replacement: Optional[Comment],
) -> tuple[Comment, ...]:
    """Replace (or drop, when replacement is None) one sibling by id."""
    if replacement is None:
        return tuple(c for c in siblings if c.id != comment_id)
    return tuple(replacement if c.id == comment_id else c for c in siblings)


def _rebuild(
    thread: CommentThread,
    path: list[Comment],
    replacement: Optional[Comment],
) -> CommentThread:
    """Swap the last node of path and recount its ancestor chain.

    Args:
        thread: Current snapshot
        path: [root, ..., target] as returned by find_path
        replacement: New version of the target, or None to remove it

    Returns:
        New snapshot with recomputed reply counts and total count
    """
    current = replacement
    target_id = path[-1].id
    for parent in reversed(path[:-1]):
        children = _swap(parent.children, target_id, current)
        current = refresh_reply_count(
            parent.model_copy(update={"children": children})
        )
        target_id = parent.id

    roots = _swap(thread.roots, target_id, current)
    return thread.model_copy(
        update={"roots": roots, "total_count": total_count(roots)}
    )


def insert_comment(
    thread: CommentThread,
    parent_id: Optional[CommentId],
    author: AuthorInfo,
    text: str,
    *,
    comment_id: CommentId,
    now: datetime,
    max_length: int = MAX_COMMENT_LENGTH,
) -> tuple[CommentThread, Comment]:
    """Create a comment, or a reply when parent_id is given.

    The new comment is prepended so replies stay most-recent-first.

    Returns:
        (new snapshot, created comment)

    Raises:
        NotFoundError: If parent_id does not resolve to a comment
        ValidationError: If the text is blank or too long
        InvariantViolationError: If comment_id is already taken
    """
    path = _require_path(thread, parent_id) if parent_id is not None else None
    trimmed = validate_text(text, max_length)

    if find_path(thread.roots, comment_id) is not None:
        raise InvariantViolationError(f"Comment id already in use: {comment_id}")

    comment = Comment(
        id=comment_id,
        parent_id=parent_id,
        author_id=author.author_id,
        author_name=author.author_name,
        author_avatar_url=author.author_avatar_url,
        reply_to=path[-1].author_name if path else None,
        text=trimmed,
        created_at=now,
    )

    if path is None:
        roots = (comment, *thread.roots)
        updated = thread.model_copy(
            update={"roots": roots, "total_count": total_count(roots)}
        )
        return updated, comment

    parent = path[-1]
    parent = refresh_reply_count(
        parent.model_copy(update={"children": (comment, *parent.children)})
    )
    return _rebuild(thread, path, parent), comment


def edit_comment(
    thread: CommentThread,
    comment_id: CommentId,
    text: str,
    *,
    now: datetime,
    max_length: int = MAX_COMMENT_LENGTH,
) -> tuple[CommentThread, Comment]:
    """Replace a comment's text and mark it edited.

    Raises:
        NotFoundError: If the comment does not exist
        ValidationError: If the text is blank or too long
    """
    path = _require_path(thread, comment_id)
    trimmed = validate_text(text, max_length)

    edited = path[-1].model_copy(
        update={"text": trimmed, "is_edited": True, "edited_at": now}
    )
    return _rebuild(thread, path, edited), edited


def delete_comment(
    thread: CommentThread, comment_id: CommentId
) -> tuple[CommentThread, int]:
    """Remove a comment together with all of its replies.

    Returns:
        (new snapshot, number of comments removed)

    Raises:
        NotFoundError: If the comment does not exist
    """
    path = _require_path(thread, comment_id)
    removed = count_comments([path[-1]])

    updated = _rebuild(thread, path, None)
    if thread.total_count - updated.total_count != removed:
        raise InvariantViolationError(
            f"Deleting {comment_id} removed {removed} comments but total count "
            f"moved from {thread.total_count} to {updated.total_count}"
        )
    return updated, removed


def toggle_reaction(
    thread: CommentThread, comment_id: CommentId, reaction: Reaction
) -> tuple[CommentThread, Comment]:
    """Toggle the current user's like or dislike on a comment.

    Raises:
        NotFoundError: If the comment does not exist
    """
    path = _require_path(thread, comment_id)
    reacted = apply_reaction(path[-1], reaction)
    return _rebuild(thread, path, reacted), reacted


def toggle_pin(
    thread: CommentThread, comment_id: CommentId
) -> tuple[CommentThread, Comment]:
    """Pin or unpin a top-level comment.

    At most one comment per video is pinned: pinning a comment unpins the
    previously pinned one.

    Raises:
        NotFoundError: If the comment does not exist
        ValidationError: If the comment is a reply
    """
    path = _require_path(thread, comment_id)
    target = path[-1]
    if len(path) > 1:
        raise ValidationError("Only top-level comments can be pinned")

    pinned = not target.is_pinned
    roots: list[Comment] = []
    for root in thread.roots:
        if root.id == comment_id:
            root = root.model_copy(update={"is_pinned": pinned})
        elif pinned and root.is_pinned:
            root = root.model_copy(update={"is_pinned": False})
        roots.append(root)
    updated = thread.model_copy(update={"roots": tuple(roots)})
    return updated, next(r for r in roots if r.id == comment_id)


def toggle_heart(
    thread: CommentThread, comment_id: CommentId
) -> tuple[CommentThread, Comment]:
    """Toggle the creator heart on any comment.

    Raises:
        NotFoundError: If the comment does not exist
    """
    path = _require_path(thread, comment_id)
    hearted = path[-1].model_copy(update={"is_hearted": not path[-1].is_hearted})
    return _rebuild(thread, path, hearted), hearted
