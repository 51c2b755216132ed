"""Thread repository interface."""

from abc import ABC, abstractmethod
from typing import AsyncContextManager, Optional

from threadline.domain.service.comment_store import CommentStore
from threadline.domain.value import VideoId


class ThreadRepository(ABC):
    """Registry of open comment stores, one per video.

    A store is registered when a video's comment panel is opened and
    dropped when it is closed. Nothing outlives the process.
    """

    @abstractmethod
    async def find_by_video(self, video_id: VideoId) -> Optional[CommentStore]:
        """Find the open store for a video.

        Args:
            video_id: The video's identifier

        Returns:
            The store if the thread is open, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, store: CommentStore) -> CommentStore:
        """Register a store under its video ID, replacing any previous one.

        Args:
            store: The store to register

        Returns:
            The registered store
        """
        pass

    @abstractmethod
    async def delete(self, video_id: VideoId) -> bool:
        """Drop the store for a video.

        Args:
            video_id: The video's identifier

        Returns:
            True if a store was removed, False if none was open
        """
        pass

    @abstractmethod
    def lock(self, video_id: VideoId) -> AsyncContextManager[None]:
        """Hold the exclusive lock on one video's thread.

        Commands, opens and closes look up or replace the store only while
        holding it. Locks are per video; a command never holds two of them.

        Args:
            video_id: The video's identifier

        Returns:
            Async context manager holding the lock for that video
        """
        pass
