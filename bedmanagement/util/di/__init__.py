"""Dependency injection module."""

from bedmanagement.config import Settings
from bedmanagement.util.di.application import ApplicationProvider
from bedmanagement.util.di.base import ProviderBase
from bedmanagement.util.di.core import ConfigProvider
from bedmanagement.util.di.domain import DomainProvider
from bedmanagement.util.di.persistence import PersistenceProvider


def build_providers(settings: Settings | None = None) -> list[ProviderBase]:
    """Instantiate every provider the container needs.

    Args:
        settings: Explicit settings handed to the config provider

    Returns:
        Provider instances, config first
    """
    return [
        ConfigProvider(settings),
        PersistenceProvider(),
        DomainProvider(),
        ApplicationProvider(),
    ]


__all__ = [
    "ApplicationProvider",
    "ConfigProvider",
    "DomainProvider",
    "PersistenceProvider",
    "ProviderBase",
    "build_providers",
]
