"""Mock storage providers for testing."""

from dishka import Scope, provide

from foro.adapter.storage import InMemoryImageStorage
from foro.domain.storage import ImageStorage
from foro.util.di.infrastructure.storage import StorageProvider


class MockStorageProvider(StorageProvider):
    """Mock storage provider using in-memory image storage."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_image_storage(self) -> ImageStorage:
        """Provide in-memory image storage."""
        return InMemoryImageStorage()
