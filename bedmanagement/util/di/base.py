"""Base classes for dependency injection providers."""

from dishka import Provider


class ProviderBase(Provider):
    """Base for all bed management DI providers."""

    pass
