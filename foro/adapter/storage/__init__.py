"""Image storage adapters."""

from foro.adapter.storage.local import LocalImageStorage
from foro.adapter.storage.memory import InMemoryImageStorage

__all__ = ["LocalImageStorage", "InMemoryImageStorage"]
