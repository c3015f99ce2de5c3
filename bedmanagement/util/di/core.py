"""Core DI providers."""

from dishka import Scope, provide

from bedmanagement.config import Settings, ValidationSettings
from bedmanagement.util.di.base import ProviderBase


class ConfigProvider(ProviderBase):
    """Config provider.

    Settings are loaded from environment variables and .env file automatically,
    unless an explicit Settings instance is given.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        super().__init__()
        self._settings = settings

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings."""
        return self._settings if self._settings is not None else Settings()

    @provide(scope=Scope.APP)
    def provide_validation_settings(self, settings: Settings) -> ValidationSettings:
        """Provide validation settings."""
        return settings.validation
