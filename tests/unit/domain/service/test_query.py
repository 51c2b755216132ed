"""Unit tests for forest traversal, lookup and ordering."""

from threadline.domain.service import find_by_id, find_path, flatten, sort_roots
from threadline.domain.value import CommentId, SortOrder
from tests.conftest import make_comment


class TestFlatten:
    """Tests for flatten()."""

    def test_pre_order(self, nested_thread):
        """Parents come before their replies, siblings keep their order."""
        # Act
        ids = [c.id for c in flatten(nested_thread.roots)]

        # Assert
        assert ids == ["A", "B", "C", "D", "E"]

    def test_empty_forest(self):
        """Flattening nothing yields nothing."""
        assert list(flatten([])) == []

    def test_traversals_are_independent(self, nested_thread):
        """Each call starts a fresh traversal."""
        # Arrange
        first = flatten(nested_thread.roots)
        next(first)

        # Act
        second = [c.id for c in flatten(nested_thread.roots)]

        # Assert
        assert second[0] == "A"
        assert next(first).id == "B"


class TestFind:
    """Tests for find_by_id() and find_path()."""

    def test_find_nested_comment(self, nested_thread):
        """Comments are found at any depth."""
        # Act
        found = find_by_id(nested_thread.roots, CommentId("C"))

        # Assert
        assert found is not None
        assert found.parent_id == "B"

    def test_find_missing_comment(self, nested_thread):
        """Unknown IDs return None."""
        assert find_by_id(nested_thread.roots, CommentId("missing")) is None

    def test_path_from_root(self, nested_thread):
        """find_path returns the ancestor chain ending at the target."""
        # Act
        path = find_path(nested_thread.roots, CommentId("C"))

        # Assert
        assert [c.id for c in path] == ["A", "B", "C"]

    def test_path_to_missing_comment(self, nested_thread):
        """find_path returns None for unknown IDs."""
        assert find_path(nested_thread.roots, CommentId("missing")) is None


class TestSortRoots:
    """Tests for sort_roots()."""

    def test_top_orders_by_likes(self):
        """TOP puts the most liked comments first, ties keep store order."""
        # Arrange
        roots = [
            make_comment("a", likes=1),
            make_comment("b", likes=9),
            make_comment("c", likes=1),
        ]

        # Act
        ordered = sort_roots(roots, by=SortOrder.TOP)

        # Assert
        assert [c.id for c in ordered] == ["b", "a", "c"]

    def test_newest_and_oldest(self):
        """NEWEST and OLDEST order by creation time."""
        # Arrange
        roots = [
            make_comment("mid", minutes=5),
            make_comment("old", minutes=0),
            make_comment("new", minutes=9),
        ]

        # Act
        newest = sort_roots(roots, by=SortOrder.NEWEST)
        oldest = sort_roots(roots, by=SortOrder.OLDEST)

        # Assert
        assert [c.id for c in newest] == ["new", "mid", "old"]
        assert [c.id for c in oldest] == ["old", "mid", "new"]

    def test_pinned_first(self):
        """A pinned comment leads regardless of the sort."""
        # Arrange
        roots = [
            make_comment("popular", likes=50),
            make_comment("pinned", likes=0, is_pinned=True),
        ]

        # Act
        ordered = sort_roots(roots, by=SortOrder.TOP, pinned_first=True)

        # Assert
        assert [c.id for c in ordered] == ["pinned", "popular"]

    def test_replies_are_not_reordered(self, nested_thread):
        """Only the root list is sorted."""
        # Act
        ordered = sort_roots(nested_thread.roots, by=SortOrder.OLDEST)

        # Assert
        assert [c.id for c in ordered[0].children] == ["B", "D"]

    def test_input_is_not_modified(self, nested_thread):
        """Sorting returns a new list."""
        # Arrange
        roots = list(nested_thread.roots)

        # Act
        sort_roots(roots, by=SortOrder.NEWEST)

        # Assert
        assert [c.id for c in roots] == ["A", "E"]
