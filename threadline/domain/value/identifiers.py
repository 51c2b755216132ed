"""Strongly typed identifiers for Threadline domain entities.

Identifiers are opaque strings supplied by the fetch collaborator
(e.g. "comment1", "reply-1700000000"), so they wrap str rather than UUID.
"""

from typing import NewType
from uuid import uuid4

CommentId = NewType("CommentId", str)
VideoId = NewType("VideoId", str)
UserId = NewType("UserId", str)


def new_comment_id() -> CommentId:
    """Generate an identifier for a locally created comment."""
    return CommentId(f"comment-{uuid4().hex}")
