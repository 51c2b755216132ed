"""Comment source infrastructure providers."""

from dishka import Scope, provide
import logfire

from threadline.adapter.fixture import InMemoryCommentSource
from threadline.config import Settings
from threadline.domain.repository import CommentSource
from threadline.util.di.base import ProviderBase


class SourceProvider(ProviderBase):
    """Comment source component base."""

    __mock_component__ = "source"


class ProdSourceProvider(SourceProvider):
    """Production comment source provider.

    Loads records from SOURCE__FIXTURE_PATH when set; otherwise every
    thread opens empty.
    """

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_comment_source(self, settings: Settings) -> CommentSource:
        """Provide comment source."""
        fixture_path = settings.source.fixture_path
        if fixture_path:
            return InMemoryCommentSource.from_json_file(fixture_path)

        logfire.info("No comment fixture configured, starting with empty source")
        return InMemoryCommentSource()
