"""Settings providers."""

from dishka import Scope, provide

from foro.config import Settings, StorageSettings
from foro.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Settings read once per container from the environment and ``.env``."""

    scope = Scope.APP

    @provide
    def provide_settings(self) -> Settings:
        return Settings()

    @provide
    def provide_storage_settings(self, settings: Settings) -> StorageSettings:
        return settings.storage
