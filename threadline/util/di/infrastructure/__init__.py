"""Infrastructure providers."""

# Import bases
from .persistence import PersistenceProvider
from .source import SourceProvider

# Import implementations (needed for __subclasses__())
from .persistence import ProdPersistenceProvider  # noqa: F401
from .source import ProdSourceProvider  # noqa: F401

__all__ = [
    "PersistenceProvider",
    "ProdPersistenceProvider",
    "ProdSourceProvider",
    "SourceProvider",
]
