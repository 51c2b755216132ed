"""Unit tests for the Comment entity and AuthorInfo value."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from threadline.domain.value import AuthorInfo, ReactionState, UserId
from tests.conftest import make_comment


class TestComment:
    """Tests for Comment."""

    def test_is_immutable(self):
        """Comment nodes can't be changed in place."""
        # Arrange
        comment = make_comment("A")

        # Act / Assert
        with pytest.raises(PydanticValidationError):
            comment.text = "changed"

    def test_liked_and_disliked_is_rejected(self):
        with pytest.raises(PydanticValidationError, match="both liked and disliked"):
            make_comment(
                "A",
                likes=1,
                dislikes=1,
                is_liked_by_current_user=True,
                is_disliked_by_current_user=True,
            )

    def test_negative_counters_are_rejected(self):
        with pytest.raises(PydanticValidationError):
            make_comment("A", likes=-1)

    def test_empty_text_is_rejected(self):
        with pytest.raises(PydanticValidationError):
            make_comment("A", text="")

    def test_blank_text_is_rejected(self):
        with pytest.raises(PydanticValidationError, match="must not be blank"):
            make_comment("A", text="   ")

    @pytest.mark.parametrize(
        "fields, state",
        [
            ({}, ReactionState.NEUTRAL),
            ({"likes": 1, "is_liked_by_current_user": True}, ReactionState.LIKED),
            (
                {"dislikes": 1, "is_disliked_by_current_user": True},
                ReactionState.DISLIKED,
            ),
        ],
    )
    def test_reaction_state(self, fields, state):
        assert make_comment("A", **fields).reaction_state is state

    def test_is_reply(self):
        assert make_comment("B", parent_id="A").is_reply
        assert not make_comment("A").is_reply


class TestAuthorInfo:
    """Tests for AuthorInfo."""

    def test_blank_name_is_rejected(self):
        with pytest.raises(PydanticValidationError, match="blank"):
            AuthorInfo(author_id=UserId("user-1"), author_name="  ")

    def test_avatar_is_optional(self):
        # Act
        author = AuthorInfo(author_id=UserId("user-1"), author_name="Ada")

        # Assert
        assert author.author_avatar_url is None
