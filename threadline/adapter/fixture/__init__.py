"""In-memory comment source backed by fixture data."""

from .source import InMemoryCommentSource

__all__ = ["InMemoryCommentSource"]
