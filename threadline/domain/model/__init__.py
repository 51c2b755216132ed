"""Domain model entities for Threadline."""

from threadline.domain.model.comment import MAX_COMMENT_LENGTH, Comment
from threadline.domain.model.thread import CommentThread

__all__ = [
    "Comment",
    "CommentThread",
    "MAX_COMMENT_LENGTH",
]
