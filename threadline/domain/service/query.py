"""Read-only traversal, lookup and ordering over a comment forest."""

from collections.abc import Iterator, Sequence
from typing import Optional

from threadline.domain.model import Comment
from threadline.domain.value import CommentId, SortOrder


def flatten(forest: Sequence[Comment]) -> Iterator[Comment]:
    """Yield every comment in pre-order (parent before its replies).

    Each call returns a fresh generator, so traversals can be restarted and
    never share cursor state.
    """
    stack = list(reversed(forest))
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


def count_comments(forest: Sequence[Comment]) -> int:
    """Count comments at all depths by walking the forest."""
    return sum(1 for _ in flatten(forest))


def find_by_id(forest: Sequence[Comment], comment_id: CommentId) -> Optional[Comment]:
    """Find a comment anywhere in the forest.

    Args:
        forest: Root comments
        comment_id: Comment to look up

    Returns:
        The comment if present, None otherwise
    """
    return next((c for c in flatten(forest) if c.id == comment_id), None)


def find_path(
    forest: Sequence[Comment], comment_id: CommentId
) -> Optional[list[Comment]]:
    """Find the chain of comments from a root down to the given comment.

    Args:
        forest: Root comments
        comment_id: Target comment

    Returns:
        [root, ..., target] if present, None otherwise
    """
    for root in forest:
        if root.id == comment_id:
            return [root]
        below = find_path(root.children, comment_id)
        if below is not None:
            return [root, *below]
    return None


def sort_roots(
    forest: Sequence[Comment],
    by: SortOrder = SortOrder.TOP,
    pinned_first: bool = False,
) -> list[Comment]:
    """Stable sort of the root list only.

    Replies keep their insertion order (most recent first) whatever the
    root ordering is.

    Args:
        forest: Root comments
        by: TOP (likes desc), NEWEST (created_at desc) or OLDEST (created_at asc)
        pinned_first: Move pinned comments ahead of the rest

    Returns:
        New list of root comments
    """
    if by is SortOrder.TOP:
        ordered = sorted(forest, key=lambda c: c.likes, reverse=True)
    elif by is SortOrder.NEWEST:
        ordered = sorted(forest, key=lambda c: c.created_at, reverse=True)
    else:
        ordered = sorted(forest, key=lambda c: c.created_at)

    if pinned_first:
        # sorted() is stable, so the chosen order survives within each group
        ordered.sort(key=lambda c: not c.is_pinned)
    return ordered
