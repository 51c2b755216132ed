"""Domain value objects for Threadline."""

from threadline.domain.value.identifiers import (
    CommentId,
    UserId,
    VideoId,
    new_comment_id,
)
from threadline.domain.value.types import (
    AuthorInfo,
    Reaction,
    ReactionState,
    SortOrder,
)

__all__ = [
    # Identifiers
    "CommentId",
    "UserId",
    "VideoId",
    "new_comment_id",
    # Types
    "AuthorInfo",
    "Reaction",
    "ReactionState",
    "SortOrder",
]
