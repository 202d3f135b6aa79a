"""Dependency injection wiring.

Every provider in PROVIDERS is either concrete (no subclasses, used as-is)
or a mockable component whose subclasses supply one production and one mock
implementation.
"""

from typing import Type

from blog.util.di.application import ProdApplicationProvider
from blog.util.di.base import Component, ProviderBase
from blog.util.di.core import ProdConfigProvider
from blog.util.di.domain import ProdDomainProvider
from blog.util.di.infrastructure import (
    PersistenceProvider,
    ProdSecurityProvider,
    SecurityProvider,
)
from blog.util.error import DependencyInjectionError

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
    SecurityProvider,  # mockable: "security"
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve a provider entry to the class that should be instantiated.

    Args:
        base: Entry from PROVIDERS
        use_mock: Pick the mock implementation of a mockable component

    Returns:
        The base itself when it is concrete, otherwise the matching subclass

    Raises:
        DependencyInjectionError: If the component has no implementation of
            the requested kind
    """
    implementations = {
        getattr(cls, "__is_mock__", False): cls for cls in base.__subclasses__()
    }
    if not implementations:
        return base

    if use_mock not in implementations:
        kind = "mock" if use_mock else "production"
        name = base.__mock_component__ or base.__name__
        raise DependencyInjectionError(f"No {kind} implementation for {name}")

    return implementations[use_mock]


__all__ = [
    "Component",
    "PROVIDERS",
    "PersistenceProvider",
    "ProdApplicationProvider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdSecurityProvider",
    "ProviderBase",
    "SecurityProvider",
    "get_provider",
]
