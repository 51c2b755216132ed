"""Repository interfaces for Threadline."""

from .source import CommentSource
from .thread import ThreadRepository

__all__ = [
    "CommentSource",
    "ThreadRepository",
]
