"""Domain value objects for Threadline.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum

from pydantic import field_validator

from threadline.domain.value.common import ValueObject
from threadline.domain.value.identifiers import UserId


class Reaction(str, Enum):
    """Reaction the current user can apply to a comment."""

    LIKE = "like"
    DISLIKE = "dislike"


class ReactionState(str, Enum):
    """Current user's reaction state on a single comment.

    Liked and disliked at the same time is not a reachable state.
    """

    NEUTRAL = "neutral"
    LIKED = "liked"
    DISLIKED = "disliked"

    @property
    def is_liked(self) -> bool:
        return self is ReactionState.LIKED

    @property
    def is_disliked(self) -> bool:
        return self is ReactionState.DISLIKED


class SortOrder(str, Enum):
    """Ordering applied to the root comment list."""

    TOP = "top"
    NEWEST = "newest"
    OLDEST = "oldest"


class AuthorInfo(ValueObject):
    """Identity of the user writing a comment.

    Supplied by the caller; authentication is handled elsewhere.
    """

    author_id: UserId
    author_name: str
    author_avatar_url: str | None = None

    @field_validator("author_name")
    @classmethod
    def validate_author_name(cls, v: str) -> str:
        """Validate author name is not blank."""
        if not v.strip():
            raise ValueError("Author name must not be blank")
        return v
