"""Like/dislike state machine for a single comment."""

from threadline.domain.error import InvariantViolationError
from threadline.domain.model import Comment
from threadline.domain.value import Reaction, ReactionState

# (current state, action) -> (next state, likes delta, dislikes delta)
TRANSITIONS: dict[
    tuple[ReactionState, Reaction], tuple[ReactionState, int, int]
] = {
    (ReactionState.NEUTRAL, Reaction.LIKE): (ReactionState.LIKED, 1, 0),
    (ReactionState.LIKED, Reaction.LIKE): (ReactionState.NEUTRAL, -1, 0),
    (ReactionState.NEUTRAL, Reaction.DISLIKE): (ReactionState.DISLIKED, 0, 1),
    (ReactionState.DISLIKED, Reaction.DISLIKE): (ReactionState.NEUTRAL, 0, -1),
    (ReactionState.LIKED, Reaction.DISLIKE): (ReactionState.DISLIKED, -1, 1),
    (ReactionState.DISLIKED, Reaction.LIKE): (ReactionState.LIKED, 1, -1),
}


def apply_reaction(comment: Comment, reaction: Reaction) -> Comment:
    """Apply the current user's reaction to a comment.

    Args:
        comment: Comment being reacted to
        reaction: LIKE or DISLIKE

    Returns:
        Copy of the comment in its next reaction state

    Raises:
        InvariantViolationError: If a counter would drop below zero, which
            means the flags and counters were already out of step
    """
    next_state, likes_delta, dislikes_delta = TRANSITIONS[
        (comment.reaction_state, reaction)
    ]
    likes = comment.likes + likes_delta
    dislikes = comment.dislikes + dislikes_delta
    if likes < 0 or dislikes < 0:
        raise InvariantViolationError(
            f"Reaction {reaction.value} on comment {comment.id} would make a "
            "counter negative"
        )

    return comment.model_copy(
        update={
            "likes": likes,
            "dislikes": dislikes,
            "is_liked_by_current_user": next_state.is_liked,
            "is_disliked_by_current_user": next_state.is_disliked,
        }
    )
