"""Mock persistence providers for testing."""

from dishka import Scope, provide

from threadline.domain.repository import ThreadRepository
from threadline.persistence.repository.inmemory import InMemoryThreadRepository
from threadline.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using a fresh in-memory registry.

    APP scope keeps the registry alive across requests of one container;
    every test builds its own container, so tests stay isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_thread_repository(self) -> ThreadRepository:
        """Provide in-memory thread repository."""
        return InMemoryThreadRepository()
