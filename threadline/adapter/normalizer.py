"""Normalizing adapter for raw comment records.

Comment payloads arrive with different field names depending on which
service produced them ("content" or "commentText", "authorName" or
"userName", nested "replies" or flat "parentId" links). They are resolved
here, once, into canonical Comment nodes.
"""

import logging
import re
from collections import defaultdict
from collections.abc import Iterable, Mapping
from datetime import datetime, timezone
from typing import Any, Optional

from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator
from pydantic import ValidationError as PydanticValidationError

from threadline.domain.error import ValidationError
from threadline.domain.model import Comment, CommentThread
from threadline.domain.service import count_comments, recompute_forest
from threadline.domain.value import CommentId, UserId, VideoId

logger = logging.getLogger(__name__)

UNKNOWN_AUTHOR = "Unknown"

_RELATIVE_TIME = re.compile(
    r"(\d+)\s+(second|minute|hour|day|week|month|year)s?\s+ago", re.IGNORECASE
)


class CommentRecord(BaseModel):
    """One raw comment record as supplied by a comment source.

    Field aliases are tried in order; a null value counts as absent.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: str = Field(min_length=1)
    parent_id: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("parentId", "parent_id")
    )
    author_id: str = Field(
        default="",
        validation_alias=AliasChoices("authorId", "author_id", "userId", "user_id"),
    )
    author_name: str = Field(
        default=UNKNOWN_AUTHOR,
        validation_alias=AliasChoices(
            "authorName", "author_name", "userName", "user_name"
        ),
    )
    author_avatar_url: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices(
            "authorAvatarUrl",
            "author_avatar_url",
            "authorAvatar",
            "userAvatarUrl",
        ),
    )
    reply_to: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("replyTo", "reply_to")
    )
    text: str = Field(
        default="", validation_alias=AliasChoices("text", "content", "commentText")
    )
    created_at: Optional[datetime] = Field(
        default=None, validation_alias=AliasChoices("createdAt", "created_at")
    )
    timestamp: Optional[str] = None  # Display time, e.g. "2 hours ago"
    edited_at: Optional[datetime] = Field(
        default=None, validation_alias=AliasChoices("editedAt", "edited_at")
    )
    is_edited: bool = Field(
        default=False, validation_alias=AliasChoices("isEdited", "is_edited")
    )
    likes: int = Field(default=0, ge=0)
    dislikes: int = Field(default=0, ge=0)
    is_liked_by_current_user: bool = Field(
        default=False,
        validation_alias=AliasChoices(
            "isLikedByCurrentUser", "is_liked_by_current_user", "isLiked"
        ),
    )
    is_disliked_by_current_user: bool = Field(
        default=False,
        validation_alias=AliasChoices(
            "isDislikedByCurrentUser", "is_disliked_by_current_user", "isDisliked"
        ),
    )
    is_pinned: bool = Field(
        default=False, validation_alias=AliasChoices("isPinned", "is_pinned")
    )
    is_hearted: bool = Field(
        default=False, validation_alias=AliasChoices("isHearted", "is_hearted")
    )
    replies: list["CommentRecord"] = Field(
        default_factory=list, validation_alias=AliasChoices("replies", "children")
    )

    @model_validator(mode="before")
    @classmethod
    def drop_null_fields(cls, data: Any) -> Any:
        """Treat null values as missing so the next alias can apply."""
        if isinstance(data, Mapping):
            return {key: value for key, value in data.items() if value is not None}
        return data


def parse_display_timestamp(value: str, now: datetime) -> Optional[datetime]:
    """Turn a display timestamp into an absolute time.

    Understands relative forms ("3 days ago", "Just now") and absolute
    dates in any format dateutil recognizes ("2024-01-15T10:30:00Z",
    "Jan 15, 2024").

    Args:
        value: Display timestamp
        now: Reference time for relative forms

    Returns:
        Parsed time, or None if the format is not recognized
    """
    lowered = value.strip().lower()
    if lowered.startswith("just now"):
        return now

    match = _RELATIVE_TIME.search(lowered)
    if match:
        amount, unit = match.groups()
        return now - relativedelta(**{unit + "s": int(amount)})

    try:
        return date_parser.parse(value.strip())
    except (ValueError, OverflowError):
        return None


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _resolve_created_at(record: CommentRecord, now: datetime) -> datetime:
    if record.created_at is not None:
        return _as_utc(record.created_at)
    if record.timestamp:
        parsed = parse_display_timestamp(record.timestamp, now)
        if parsed is not None:
            return _as_utc(parsed)
        logger.warning(
            f"Unrecognized timestamp {record.timestamp!r} on comment {record.id}, "
            "using load time"
        )
    return now


def _flatten_records(
    records: Iterable[CommentRecord],
) -> list[tuple[CommentRecord, Optional[str]]]:
    """Unnest replies, pairing each record with its resolved parent ID.

    A nested reply always belongs to the record that contains it.
    """
    flat: list[tuple[CommentRecord, Optional[str]]] = []

    def _visit(record: CommentRecord, container_id: Optional[str]) -> None:
        parent_id = container_id if container_id is not None else record.parent_id
        if container_id is not None and record.parent_id not in (None, container_id):
            logger.warning(
                f"Reply {record.id} nested under {container_id} "
                f"but points at {record.parent_id}; using container"
            )
        flat.append((record, parent_id))
        for reply in record.replies:
            _visit(reply, record.id)

    for record in records:
        _visit(record, None)
    return flat


def _validate_record(record: CommentRecord) -> None:
    if not record.text.strip():
        raise ValidationError(f"Comment {record.id} has empty text")
    if record.is_liked_by_current_user and record.is_disliked_by_current_user:
        raise ValidationError(f"Comment {record.id} is both liked and disliked")
    if record.is_liked_by_current_user and record.likes == 0:
        raise ValidationError(f"Comment {record.id} is liked but has no likes")
    if record.is_disliked_by_current_user and record.dislikes == 0:
        raise ValidationError(f"Comment {record.id} is disliked but has no dislikes")


def parse_records(raw_records: Iterable[Mapping[str, Any]]) -> list[CommentRecord]:
    """Parse raw payloads into CommentRecords.

    Raises:
        ValidationError: If any payload is malformed
    """
    records = []
    for index, raw in enumerate(raw_records):
        try:
            records.append(CommentRecord.model_validate(raw))
        except PydanticValidationError as e:
            raise ValidationError(f"Invalid comment record at index {index}: {e}")
    return records


def build_thread(
    video_id: VideoId,
    raw_records: Iterable[Mapping[str, Any]],
    now: Optional[datetime] = None,
) -> CommentThread:
    """Normalize raw comment records into a consistent comment thread.

    Accepts flat lists linked by parent IDs, nested reply lists, or a mix.
    Sibling order is kept as supplied. Incoming reply counts are ignored and
    recomputed from the resulting tree.

    Args:
        video_id: Video the comments belong to
        raw_records: Records from a comment source
        now: Reference time for relative display timestamps

    Returns:
        Thread snapshot with all derived counts computed

    Raises:
        ValidationError: On malformed records, duplicate IDs, parent cycles
            or inconsistent reaction flags
    """
    now = now or datetime.now(timezone.utc)
    flat = _flatten_records(parse_records(raw_records))

    by_id: dict[str, tuple[CommentRecord, Optional[str]]] = {}
    for record, parent_id in flat:
        if record.id in by_id:
            raise ValidationError(f"Duplicate comment id: {record.id}")
        _validate_record(record)
        by_id[record.id] = (record, parent_id)

    root_ids: list[str] = []
    children_of: dict[str, list[str]] = defaultdict(list)
    for record, parent_id in flat:
        if parent_id is None:
            root_ids.append(record.id)
        elif parent_id not in by_id:
            logger.warning(
                f"Comment {record.id} replies to missing comment {parent_id}; "
                "promoting to top level"
            )
            by_id[record.id] = (record, None)
            root_ids.append(record.id)
        else:
            children_of[parent_id].append(record.id)

    def _build(record_id: str) -> Comment:
        record, parent_id = by_id[record_id]
        return Comment(
            id=CommentId(record.id),
            parent_id=CommentId(parent_id) if parent_id is not None else None,
            author_id=UserId(record.author_id),
            author_name=record.author_name,
            author_avatar_url=record.author_avatar_url,
            reply_to=record.reply_to,
            text=record.text.strip(),
            created_at=_resolve_created_at(record, now),
            edited_at=_as_utc(record.edited_at) if record.edited_at else None,
            is_edited=record.is_edited,
            likes=record.likes,
            dislikes=record.dislikes,
            is_liked_by_current_user=record.is_liked_by_current_user,
            is_disliked_by_current_user=record.is_disliked_by_current_user,
            is_pinned=record.is_pinned,
            is_hearted=record.is_hearted,
            children=tuple(_build(child_id) for child_id in children_of[record_id]),
        )

    roots = [_build(record_id) for record_id in root_ids]

    # Records reachable from no root sit on a parent cycle
    placed = count_comments(roots)
    if placed != len(by_id):
        raise ValidationError(
            f"{len(by_id) - placed} comment(s) form a reply cycle and have no root"
        )

    rebuilt, total = recompute_forest(roots)
    return CommentThread(video_id=video_id, roots=rebuilt, total_count=total)
