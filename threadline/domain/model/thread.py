"""Comment thread snapshot."""

from pydantic import Field

from threadline.domain.model.comment import Comment
from threadline.domain.model.common import DomainModel
from threadline.domain.value import VideoId


class CommentThread(DomainModel):
    """Immutable snapshot of one video's comment forest.

    total_count is materialized so readers never have to walk the tree;
    it always equals the sum of (1 + reply_count) over the roots.
    """

    video_id: VideoId
    roots: tuple[Comment, ...] = ()
    total_count: int = Field(default=0, ge=0)
