"""Mock providers for testing."""

from .persistence import MockPersistenceProvider
from .source import SAMPLE_RECORDS, SAMPLE_VIDEO_ID, MockSourceProvider
from .container import build_test_container

__all__ = [
    "MockPersistenceProvider",
    "MockSourceProvider",
    "SAMPLE_RECORDS",
    "SAMPLE_VIDEO_ID",
    "build_test_container",
]
