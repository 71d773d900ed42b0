"""Dependency injection module."""

from typing import Type

from blogtaxonomy.util.di.adapter import ProdAdapterProvider
from blogtaxonomy.util.di.application import ProdApplicationProvider
from blogtaxonomy.util.di.base import Component, ProviderBase
from blogtaxonomy.util.di.core import ProdConfigProvider
from blogtaxonomy.util.di.domain import ProdDomainProvider
from blogtaxonomy.util.di.infrastructure import (
    PersistenceProvider,
    ProdPersistenceProvider,
)
from blogtaxonomy.util.error import DependencyInjectionError

PROVIDERS: list[Type[ProviderBase]] = [
    # Fixed providers
    ProdConfigProvider,
    ProdAdapterProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    # Swappable components
    PersistenceProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Pick the provider class to instantiate for a PROVIDERS entry.

    Fixed providers are returned as-is. For a swappable component the
    implementation whose ``__is_mock__`` equals ``use_mock`` is chosen.

    Raises:
        DependencyInjectionError: If that implementation was never imported
    """
    if not base.is_swappable():
        return base

    for impl in base.implementations():
        if impl.__is_mock__ == use_mock:
            return impl

    raise DependencyInjectionError(
        component=base.__mock_component__ or base.__name__,
        kind="mock" if use_mock else "production",
    )


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    # Fixed providers
    "ProdAdapterProvider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    # Swappable components
    "PersistenceProvider",
    "ProdPersistenceProvider",
]
