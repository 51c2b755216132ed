"""Derived counter maintenance for comment forests.

reply_count is always recomputed from the tree shape. Nothing in
Threadline adjusts it by adding or subtracting deltas.
"""

from collections.abc import Sequence

from threadline.domain.error import InvariantViolationError
from threadline.domain.model import Comment, CommentThread
from threadline.domain.value import CommentId


def recompute_counts(node: Comment) -> tuple[Comment, int]:
    """Recompute reply counts for a whole subtree, bottom-up.

    Args:
        node: Subtree root

    Returns:
        (node with every reply_count in its subtree recomputed,
         number of descendants of node)
    """
    children: list[Comment] = []
    descendants = 0
    for child in node.children:
        rebuilt, child_descendants = recompute_counts(child)
        children.append(rebuilt)
        descendants += 1 + child_descendants

    unchanged = descendants == node.reply_count and all(
        new is old for new, old in zip(children, node.children)
    )
    if unchanged:
        return node, descendants
    return (
        node.model_copy(
            update={"children": tuple(children), "reply_count": descendants}
        ),
        descendants,
    )


def refresh_reply_count(node: Comment) -> Comment:
    """Recount a single node from its direct children.

    The children's own reply counts must already be consistent, which holds
    when walking an ancestor chain from the changed node upwards.
    """
    count = sum(1 + child.reply_count for child in node.children)
    if count == node.reply_count:
        return node
    return node.model_copy(update={"reply_count": count})


def total_count(roots: Sequence[Comment]) -> int:
    """Total number of comments in a forest with consistent reply counts."""
    return sum(1 + root.reply_count for root in roots)


def recompute_forest(roots: Sequence[Comment]) -> tuple[tuple[Comment, ...], int]:
    """Recompute every reply count in a forest.

    Returns:
        (rebuilt roots, total comment count)
    """
    rebuilt = tuple(recompute_counts(root)[0] for root in roots)
    return rebuilt, total_count(rebuilt)


def check_invariants(thread: CommentThread) -> None:
    """Verify a snapshot against the forest invariants.

    Checks that every reply_count equals the number of descendants, that
    total_count matches the forest size, that reaction flags are exclusive
    and counters non-negative, that ids are unique and that parent links
    match the tree shape.

    Raises:
        InvariantViolationError: On the first violation found
    """
    seen: set[CommentId] = set()

    def _walk(node: Comment, parent_id: CommentId | None) -> int:
        if node.id in seen:
            raise InvariantViolationError(f"Duplicate comment id: {node.id}")
        seen.add(node.id)
        if node.parent_id != parent_id:
            raise InvariantViolationError(
                f"Comment {node.id} has parent_id {node.parent_id}, "
                f"expected {parent_id}"
            )
        if node.is_liked_by_current_user and node.is_disliked_by_current_user:
            raise InvariantViolationError(
                f"Comment {node.id} is both liked and disliked"
            )
        if node.likes < 0 or node.dislikes < 0:
            raise InvariantViolationError(f"Comment {node.id} has a negative counter")

        descendants = sum(1 + _walk(child, node.id) for child in node.children)
        if descendants != node.reply_count:
            raise InvariantViolationError(
                f"Comment {node.id} has reply_count {node.reply_count}, "
                f"actual descendants {descendants}"
            )
        return descendants

    actual_total = sum(1 + _walk(root, None) for root in thread.roots)
    if actual_total != thread.total_count:
        raise InvariantViolationError(
            f"Thread {thread.video_id} has total_count {thread.total_count}, "
            f"actual {actual_total}"
        )
