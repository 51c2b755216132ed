"""Persistence infrastructure providers."""

from dishka import Scope, provide

from threadline.domain.repository import ThreadRepository
from threadline.persistence.repository.inmemory import InMemoryThreadRepository
from threadline.util.di.base import ProviderBase


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider.

    Open comment stores are process-local, so one registry lives for the
    lifetime of the app and is shared by every request.
    """

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_thread_repository(self) -> ThreadRepository:
        """Provide thread repository."""
        return InMemoryThreadRepository()
