"""Application layer DI providers."""

from dishka import Scope, provide

from threadline.application.usecase.comment import (
    CloseThreadUseCase,
    DeleteCommentUseCase,
    EditCommentUseCase,
    GetThreadUseCase,
    HeartCommentUseCase,
    OpenThreadUseCase,
    PinCommentUseCase,
    ReactToCommentUseCase,
    SubmitCommentUseCase,
)
from threadline.config import ThreadSettings
from threadline.domain.repository import CommentSource, ThreadRepository
from threadline.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Thread lifecycle
    @provide(scope=Scope.REQUEST)
    def get_open_thread_use_case(
        self,
        comment_source: CommentSource,
        thread_repository: ThreadRepository,
        thread_settings: ThreadSettings,
    ) -> OpenThreadUseCase:
        """Provide open thread use case."""
        return OpenThreadUseCase(
            comment_source=comment_source,
            thread_repository=thread_repository,
            thread_settings=thread_settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_thread_use_case(
        self, thread_repository: ThreadRepository, thread_settings: ThreadSettings
    ) -> GetThreadUseCase:
        """Provide get thread use case."""
        return GetThreadUseCase(
            thread_repository=thread_repository, thread_settings=thread_settings
        )

    @provide(scope=Scope.REQUEST)
    def get_close_thread_use_case(
        self, thread_repository: ThreadRepository
    ) -> CloseThreadUseCase:
        """Provide close thread use case."""
        return CloseThreadUseCase(thread_repository=thread_repository)

    # Comment commands
    @provide(scope=Scope.REQUEST)
    def get_submit_comment_use_case(
        self, thread_repository: ThreadRepository
    ) -> SubmitCommentUseCase:
        """Provide submit comment use case."""
        return SubmitCommentUseCase(thread_repository=thread_repository)

    @provide(scope=Scope.REQUEST)
    def get_edit_comment_use_case(
        self, thread_repository: ThreadRepository
    ) -> EditCommentUseCase:
        """Provide edit comment use case."""
        return EditCommentUseCase(thread_repository=thread_repository)

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self, thread_repository: ThreadRepository
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(thread_repository=thread_repository)

    @provide(scope=Scope.REQUEST)
    def get_react_to_comment_use_case(
        self, thread_repository: ThreadRepository
    ) -> ReactToCommentUseCase:
        """Provide react to comment use case."""
        return ReactToCommentUseCase(thread_repository=thread_repository)

    # Creator moderation
    @provide(scope=Scope.REQUEST)
    def get_pin_comment_use_case(
        self, thread_repository: ThreadRepository
    ) -> PinCommentUseCase:
        """Provide pin comment use case."""
        return PinCommentUseCase(thread_repository=thread_repository)

    @provide(scope=Scope.REQUEST)
    def get_heart_comment_use_case(
        self, thread_repository: ThreadRepository
    ) -> HeartCommentUseCase:
        """Provide heart comment use case."""
        return HeartCommentUseCase(thread_repository=thread_repository)
