"""Comment source interface."""

from abc import ABC, abstractmethod
from typing import Any

from threadline.domain.value import VideoId


class CommentSource(ABC):
    """Fetch collaborator supplying raw comment records for a video.

    Records are loosely shaped dictionaries (flat with parent IDs, or nested
    under "replies") and are normalized by the ingestion adapter.
    """

    @abstractmethod
    async def fetch_comments(self, video_id: VideoId) -> list[dict[str, Any]]:
        """Fetch the comment records of a video.

        Args:
            video_id: The video's identifier

        Returns:
            Raw comment records in display order (empty if none)
        """
        pass
