"""Image storage infrastructure providers."""

from dishka import Scope, provide

from foro.adapter.storage import LocalImageStorage
from foro.config import StorageSettings
from foro.domain.storage import ImageStorage
from foro.util.di.base import ProviderBase


class StorageProvider(ProviderBase):
    """Image storage component base."""

    __mock_component__ = "storage"


class ProdStorageProvider(StorageProvider):
    """Production storage provider using the local upload directory."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_image_storage(self, storage: StorageSettings) -> ImageStorage:
        """Provide local-disk image storage."""
        return LocalImageStorage(storage.upload_dir, storage.public_base_url)
