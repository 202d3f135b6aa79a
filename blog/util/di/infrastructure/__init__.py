"""Infrastructure providers."""

# Import bases
from .persistence import PersistenceProvider
from .security import SecurityProvider

# Import implementations (needed for __subclasses__())
from .security import ProdSecurityProvider  # noqa: F401

__all__ = [
    "PersistenceProvider",
    "ProdSecurityProvider",
    "SecurityProvider",
]
