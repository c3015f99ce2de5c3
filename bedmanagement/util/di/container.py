"""Dependency injection container."""

from dishka import AsyncContainer, make_async_container

from bedmanagement.config import Settings
from bedmanagement.util.di import build_providers


def create_container(settings: Settings | None = None) -> AsyncContainer:
    """Build the application container.

    Args:
        settings: Explicit settings; loaded from the environment when omitted

    Returns:
        Configured DI container
    """
    return make_async_container(*build_providers(settings))
