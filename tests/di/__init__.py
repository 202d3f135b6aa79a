"""Mock providers for testing."""

from .security import MockPasswordHasher, MockSecurityProvider
from .container import build_test_container

__all__ = [
    "MockPasswordHasher",
    "MockSecurityProvider",
    "build_test_container",
]
