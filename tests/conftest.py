"""Test configuration and fixtures."""

from datetime import datetime, timedelta, timezone
from typing import Optional

import logfire
import pytest

from threadline.domain.model import Comment, CommentThread
from threadline.domain.service import CommentStore, recompute_forest
from threadline.domain.value import AuthorInfo, CommentId, UserId, VideoId

# Keep telemetry local and quiet during tests
logfire.configure(send_to_logfire=False, console=False)

BASE_TIME = datetime(2026, 10, 1, 12, 0, tzinfo=timezone.utc)


def make_author(name: str = "Ada") -> AuthorInfo:
    """Build an author whose ID is derived from the display name."""
    return AuthorInfo(author_id=UserId(f"user-{name.lower()}"), author_name=name)


def make_comment(
    comment_id: str,
    *children: Comment,
    parent_id: Optional[str] = None,
    text: Optional[str] = None,
    minutes: int = 0,
    **fields,
) -> Comment:
    """Build a comment node; children must already carry this node as parent.

    reply_count is left at 0; pass the result through make_thread to get
    consistent counts.
    """
    return Comment(
        id=CommentId(comment_id),
        parent_id=CommentId(parent_id) if parent_id else None,
        author_id=UserId("user-ada"),
        author_name="Ada",
        text=text if text is not None else f"Comment {comment_id}",
        created_at=BASE_TIME + timedelta(minutes=minutes),
        children=children,
        **fields,
    )


def make_thread(*roots: Comment, video_id: str = "video-1") -> CommentThread:
    """Build a thread snapshot with recomputed counts."""
    rebuilt, total = recompute_forest(roots)
    return CommentThread(video_id=VideoId(video_id), roots=rebuilt, total_count=total)


class FixedClock:
    """Deterministic clock advancing one minute per call."""

    def __init__(self, start: datetime = BASE_TIME) -> None:
        self.now = start

    def __call__(self) -> datetime:
        self.now = self.now + timedelta(minutes=1)
        return self.now


class SequentialIds:
    """Deterministic comment ID factory: new-1, new-2, ..."""

    def __init__(self) -> None:
        self.issued = 0

    def __call__(self) -> CommentId:
        self.issued += 1
        return CommentId(f"new-{self.issued}")


@pytest.fixture
def author() -> AuthorInfo:
    return make_author()


@pytest.fixture
def nested_thread() -> CommentThread:
    """A(B(C), D) plus E: five comments, A has three descendants."""
    c = make_comment("C", parent_id="B", minutes=3)
    b = make_comment("B", c, parent_id="A", minutes=2)
    d = make_comment("D", parent_id="A", minutes=1)
    a = make_comment("A", b, d, likes=5)
    e = make_comment("E", minutes=10, likes=1)
    return make_thread(a, e)


@pytest.fixture
def store(nested_thread: CommentThread) -> CommentStore:
    """Store over the nested thread with deterministic clock and IDs."""
    return CommentStore(nested_thread, clock=FixedClock(), id_factory=SequentialIds())


@pytest.fixture
def empty_store() -> CommentStore:
    return CommentStore.empty(
        VideoId("video-1"), clock=FixedClock(), id_factory=SequentialIds()
    )
