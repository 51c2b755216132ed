"""In-memory comment source.

Stands in for the platform's comment service: records are seeded in code
or loaded from a JSON fixture file mapping video IDs to record lists.
"""

import copy
import json
import logging
from pathlib import Path
from typing import Any

from threadline.adapter.error import SourceError
from threadline.domain.repository.source import CommentSource
from threadline.domain.value import VideoId

logger = logging.getLogger(__name__)


class InMemoryCommentSource(CommentSource):
    """Comment source holding raw records per video in memory."""

    def __init__(self, records: dict[str, list[dict[str, Any]]] | None = None) -> None:
        self._records: dict[str, list[dict[str, Any]]] = dict(records or {})

    @classmethod
    def from_json_file(cls, path: str | Path) -> "InMemoryCommentSource":
        """Load fixture records from a JSON file.

        The file must contain an object mapping video IDs to lists of
        comment records.

        Raises:
            SourceError: If the file cannot be read or has the wrong shape
        """
        try:
            data = json.loads(Path(path).read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise SourceError(f"Cannot load comment fixtures from {path}: {e}")

        if not isinstance(data, dict) or not all(
            isinstance(records, list) for records in data.values()
        ):
            raise SourceError(
                f"Comment fixtures in {path} must map video IDs to record lists"
            )

        logger.info(f"Loaded comment fixtures for {len(data)} videos from {path}")
        return cls(data)

    def add(self, video_id: str, records: list[dict[str, Any]]) -> None:
        """Seed (or replace) the records of a video."""
        self._records[video_id] = records

    async def fetch_comments(self, video_id: VideoId) -> list[dict[str, Any]]:
        """Return a copy of the records seeded for a video."""
        return copy.deepcopy(self._records.get(video_id, []))
