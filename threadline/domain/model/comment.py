"""Comment entity.

Comments form a forest per video: top-level comments are roots and replies
are nested under their parent with unlimited depth. Nodes are immutable;
commands replace the nodes along the path they touch and share the rest.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator, model_validator

from threadline.domain.model.common import DomainModel
from threadline.domain.value import CommentId, ReactionState, UserId

MAX_COMMENT_LENGTH = 500


class Comment(DomainModel):
    """Comment entity.

    Represents a top-level comment on a video or a reply to another comment.

    Threading is managed through:
    - parent_id: Direct parent comment (None for top-level)
    - children: Replies, most recent first, owned by this comment
    - reply_count: Number of all descendants (recomputed, never patched)
    """

    id: CommentId
    parent_id: Optional[CommentId] = None
    author_id: UserId
    author_name: str
    author_avatar_url: Optional[str] = None
    reply_to: Optional[str] = None  # Parent author's display name
    text: str = Field(min_length=1)
    created_at: datetime
    edited_at: Optional[datetime] = None
    is_edited: bool = False
    likes: int = Field(default=0, ge=0)
    dislikes: int = Field(default=0, ge=0)
    is_liked_by_current_user: bool = False
    is_disliked_by_current_user: bool = False
    is_pinned: bool = False
    is_hearted: bool = False
    children: tuple["Comment", ...] = ()
    reply_count: int = Field(default=0, ge=0)

    @field_validator("text")
    @classmethod
    def validate_text(cls, v: str) -> str:
        """Validate text is not blank."""
        if not v.strip():
            raise ValueError("Comment text must not be blank")
        return v

    @model_validator(mode="after")
    def validate_reaction_flags(self) -> "Comment":
        """Liked and disliked by the current user are mutually exclusive."""
        if self.is_liked_by_current_user and self.is_disliked_by_current_user:
            raise ValueError("Comment cannot be both liked and disliked")
        return self

    @property
    def reaction_state(self) -> ReactionState:
        """Current user's reaction as a single state."""
        if self.is_liked_by_current_user:
            return ReactionState.LIKED
        if self.is_disliked_by_current_user:
            return ReactionState.DISLIKED
        return ReactionState.NEUTRAL

    @property
    def is_reply(self) -> bool:
        return self.parent_id is not None
