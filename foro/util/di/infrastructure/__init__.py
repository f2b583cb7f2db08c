"""Infrastructure component providers.

The production implementations are imported here so that
``get_provider`` can find them among each base's subclasses.
"""

from foro.util.di.infrastructure.persistence import (
    PersistenceProvider,
    ProdPersistenceProvider,
)
from foro.util.di.infrastructure.storage import ProdStorageProvider, StorageProvider

__all__ = [
    "PersistenceProvider",
    "ProdPersistenceProvider",
    "ProdStorageProvider",
    "StorageProvider",
]
