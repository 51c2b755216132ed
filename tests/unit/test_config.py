"""Unit tests for application settings."""

import pytest

from threadline.config import Settings, ThreadSettings


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self, monkeypatch):
        # Arrange
        monkeypatch.delenv("THREADS__MAX_COMMENT_LENGTH", raising=False)

        # Act
        settings = Settings(_env_file=None)

        # Assert
        assert settings.threads.max_comment_length == 500
        assert settings.threads.default_sort == "top"
        assert settings.threads.pinned_first is True
        assert settings.source.fixture_path is None

    def test_nested_environment_variables(self, monkeypatch):
        # Arrange
        monkeypatch.setenv("THREADS__MAX_COMMENT_LENGTH", "1000")
        monkeypatch.setenv("THREADS__DEFAULT_SORT", "newest")
        monkeypatch.setenv("SOURCE__FIXTURE_PATH", "/data/comments.json")

        # Act
        settings = Settings(_env_file=None)

        # Assert
        assert settings.threads.max_comment_length == 1000
        assert settings.threads.default_sort == "newest"
        assert settings.source.fixture_path == "/data/comments.json"

    def test_invalid_sort_is_rejected(self):
        with pytest.raises(ValueError):
            ThreadSettings(default_sort="random")
