"""Domain services."""

from .base import Service
from .comment_store import CommentStore, utcnow
from .counts import (
    check_invariants,
    recompute_counts,
    recompute_forest,
    refresh_reply_count,
    total_count,
)
from .query import count_comments, find_by_id, find_path, flatten, sort_roots
from .reaction import TRANSITIONS, apply_reaction

__all__ = [
    "CommentStore",
    "Service",
    "TRANSITIONS",
    "apply_reaction",
    "check_invariants",
    "count_comments",
    "find_by_id",
    "find_path",
    "flatten",
    "recompute_counts",
    "recompute_forest",
    "refresh_reply_count",
    "sort_roots",
    "total_count",
    "utcnow",
]
