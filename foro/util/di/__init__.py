"""Dependency injection wiring."""

from typing import Type

from foro.util.di.application import ProdApplicationProvider
from foro.util.di.base import Component, ProviderBase
from foro.util.di.core import ProdConfigProvider
from foro.util.di.infrastructure import (
    PersistenceProvider,
    ProdPersistenceProvider,
    ProdStorageProvider,
    StorageProvider,
)

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdApplicationProvider,
    PersistenceProvider,
    StorageProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Pick the provider class to instantiate for ``base``.

    Concrete providers (no subclasses) are returned unchanged. For a mockable
    component, the subclass whose ``__is_mock__`` equals ``use_mock`` is
    returned; mock subclasses only exist once the test package is imported.

    Raises:
        ValueError: If the component has no implementation of that kind
    """
    implementations = base.__subclasses__()
    if not implementations:
        return base

    for impl in implementations:
        if getattr(impl, "__is_mock__", False) == use_mock:
            return impl

    kind = "mock" if use_mock else "production"
    component = base.__mock_component__ or base.__name__
    raise ValueError(f"No {kind} implementation for {component}")


__all__ = [
    "Component",
    "PROVIDERS",
    "PersistenceProvider",
    "ProdApplicationProvider",
    "ProdConfigProvider",
    "ProdPersistenceProvider",
    "ProdStorageProvider",
    "ProviderBase",
    "StorageProvider",
    "get_provider",
]
