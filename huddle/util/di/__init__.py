"""Dependency injection module."""

from typing import Type

from huddle.util.di.application import ProdApplicationProvider
from huddle.util.di.base import Component, ProviderBase
from huddle.util.di.core import ProdConfigProvider
from huddle.util.di.domain import ProdDomainProvider
from huddle.util.di.infrastructure import (
    PersistenceProvider,
    ProdPersistenceProvider,
    ProdStorageProvider,
    StorageProvider,
)

# Single list - all providers treated uniformly
PROVIDERS: list[Type[ProviderBase]] = [
    # Core providers (not mockable)
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    # Infrastructure components (mockable)
    PersistenceProvider,
    StorageProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Get the provider class to instantiate for a PROVIDERS entry.

    A base without subclasses is concrete and used as-is. A base with
    subclasses is a mockable component; the subclass whose __is_mock__
    flag matches use_mock is selected.

    Args:
        base: Provider base class
        use_mock: Whether to use mock implementation

    Returns:
        Provider class (not instantiated)

    Raises:
        ValueError: If requested implementation not found
    """
    subclasses = base.__subclasses__()

    if not subclasses:
        return base

    impl = next(
        (c for c in subclasses if getattr(c, "__is_mock__", False) == use_mock),
        None,
    )

    if not impl:
        kind = "mock" if use_mock else "production"
        component_name = getattr(base, "__mock_component__", base.__name__)
        raise ValueError(f"No {kind} implementation for {component_name}")

    return impl


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    # Core providers
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    # Infrastructure base classes
    "PersistenceProvider",
    "StorageProvider",
    # Infrastructure implementations
    "ProdPersistenceProvider",
    "ProdStorageProvider",
]
