"""Unit tests for reply count maintenance and invariant checks."""

import pytest

from threadline.domain.error import InvariantViolationError
from threadline.domain.model import CommentThread
from threadline.domain.service import (
    check_invariants,
    count_comments,
    flatten,
    recompute_counts,
    recompute_forest,
    refresh_reply_count,
    total_count,
)
from threadline.domain.value import VideoId
from tests.conftest import make_comment, make_thread


class TestRecomputeCounts:
    """Tests for recompute_counts() and recompute_forest()."""

    def test_leaf_has_no_replies(self):
        """A comment without children has reply_count 0."""
        # Act
        node, descendants = recompute_counts(make_comment("A"))

        # Assert
        assert descendants == 0
        assert node.reply_count == 0

    def test_counts_all_depths(self, nested_thread):
        """reply_count includes replies to replies."""
        # Arrange
        a, e = nested_thread.roots
        b, d = a.children

        # Assert
        assert a.reply_count == 3
        assert b.reply_count == 1
        assert b.children[0].reply_count == 0
        assert d.reply_count == 0
        assert e.reply_count == 0
        assert nested_thread.total_count == 5

    def test_ignores_stale_counts(self):
        """Incoming reply counts are overwritten from the tree shape."""
        # Arrange
        stale = make_comment(
            "A", make_comment("B", parent_id="A"), reply_count=7
        )

        # Act
        node, descendants = recompute_counts(stale)

        # Assert
        assert descendants == 1
        assert node.reply_count == 1

    def test_returns_same_node_when_consistent(self, nested_thread):
        """An already consistent subtree is shared, not copied."""
        # Arrange
        root = nested_thread.roots[0]

        # Act
        node, _ = recompute_counts(root)

        # Assert
        assert node is root

    def test_forest_total_matches_flatten(self, nested_thread):
        """total_count equals the number of flattened comments."""
        # Act
        roots, total = recompute_forest(nested_thread.roots)

        # Assert
        assert total == count_comments(roots) == len(list(flatten(roots)))


class TestRefreshReplyCount:
    """Tests for refresh_reply_count()."""

    def test_sums_direct_children(self, nested_thread):
        """Recount uses 1 + reply_count of each direct child."""
        # Arrange
        a = nested_thread.roots[0]
        zeroed = a.model_copy(update={"reply_count": 0})

        # Act
        refreshed = refresh_reply_count(zeroed)

        # Assert
        assert refreshed.reply_count == 3

    def test_unchanged_node_is_returned(self, nested_thread):
        """No copy is made when the count is already right."""
        # Arrange
        a = nested_thread.roots[0]

        # Act / Assert
        assert refresh_reply_count(a) is a

    def test_total_count_of_empty_forest(self):
        """An empty forest has no comments."""
        assert total_count([]) == 0


class TestCheckInvariants:
    """Tests for check_invariants()."""

    def test_consistent_thread_passes(self, nested_thread):
        """A thread built by recompute_forest satisfies every invariant."""
        check_invariants(nested_thread)

    def test_wrong_reply_count_is_rejected(self):
        """A reply_count that disagrees with the tree is a violation."""
        # Arrange
        thread = CommentThread(
            video_id=VideoId("video-1"),
            roots=(make_comment("A", make_comment("B", parent_id="A")),),
            total_count=2,
        )

        # Act / Assert
        with pytest.raises(InvariantViolationError, match="reply_count"):
            check_invariants(thread)

    def test_wrong_total_is_rejected(self, nested_thread):
        """total_count must equal the forest size."""
        # Arrange
        thread = nested_thread.model_copy(update={"total_count": 4})

        # Act / Assert
        with pytest.raises(InvariantViolationError, match="total_count"):
            check_invariants(thread)

    def test_duplicate_ids_are_rejected(self):
        """Comment IDs are unique across the whole forest."""
        # Arrange
        thread = make_thread(make_comment("A"), make_comment("A"))

        # Act / Assert
        with pytest.raises(InvariantViolationError, match="Duplicate"):
            check_invariants(thread)

    def test_broken_parent_link_is_rejected(self):
        """A child's parent_id must name the node that contains it."""
        # Arrange
        thread = make_thread(make_comment("A", make_comment("B", parent_id="X")))

        # Act / Assert
        with pytest.raises(InvariantViolationError, match="parent_id"):
            check_invariants(thread)
