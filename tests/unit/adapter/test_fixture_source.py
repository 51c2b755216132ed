"""Unit tests for InMemoryCommentSource."""

import json

import pytest

from threadline.adapter.error import SourceError
from threadline.adapter.fixture import InMemoryCommentSource
from threadline.domain.value import VideoId


class TestInMemoryCommentSource:
    """Tests for InMemoryCommentSource."""

    @pytest.mark.asyncio
    async def test_unknown_video_has_no_records(self):
        source = InMemoryCommentSource()
        assert await source.fetch_comments(VideoId("nope")) == []

    @pytest.mark.asyncio
    async def test_fetch_returns_copies(self):
        """Callers can't modify the seeded records."""
        # Arrange
        source = InMemoryCommentSource({"v": [{"id": "a", "text": "x"}]})

        # Act
        fetched = await source.fetch_comments(VideoId("v"))
        fetched[0]["text"] = "changed"

        # Assert
        assert (await source.fetch_comments(VideoId("v")))[0]["text"] == "x"

    @pytest.mark.asyncio
    async def test_add_replaces_records(self):
        # Arrange
        source = InMemoryCommentSource({"v": [{"id": "a", "text": "x"}]})

        # Act
        source.add("v", [{"id": "b", "text": "y"}])

        # Assert
        assert await source.fetch_comments(VideoId("v")) == [{"id": "b", "text": "y"}]

    @pytest.mark.asyncio
    async def test_from_json_file(self, tmp_path):
        # Arrange
        path = tmp_path / "comments.json"
        path.write_text(json.dumps({"v": [{"id": "a", "text": "x"}]}))

        # Act
        source = InMemoryCommentSource.from_json_file(path)

        # Assert
        assert await source.fetch_comments(VideoId("v")) == [{"id": "a", "text": "x"}]

    def test_missing_file(self, tmp_path):
        with pytest.raises(SourceError, match="Cannot load"):
            InMemoryCommentSource.from_json_file(tmp_path / "missing.json")

    def test_wrong_shape(self, tmp_path):
        # Arrange
        path = tmp_path / "comments.json"
        path.write_text(json.dumps([{"id": "a"}]))

        # Act / Assert
        with pytest.raises(SourceError, match="must map video IDs"):
            InMemoryCommentSource.from_json_file(path)
