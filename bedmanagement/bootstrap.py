"""Application bootstrap: settings, logging, observability and DI."""

import logfire
from dishka import AsyncContainer
from pydantic import ValidationError

from bedmanagement.config import Settings
from bedmanagement.util.di.container import create_container
from bedmanagement.util.error import ConfigurationError
from bedmanagement.util.logging import setup_logging
from bedmanagement.util.observability import configure_logfire


def load_settings() -> Settings:
    """Load settings from the environment.

    Raises:
        ConfigurationError: If any setting is invalid
    """
    try:
        return Settings()
    except ValidationError as e:
        raise ConfigurationError(f"Invalid settings: {e}") from e


def bootstrap(settings: Settings | None = None) -> AsyncContainer:
    """Configure logging and Logfire, then build the DI container.

    Args:
        settings: Explicit settings; loaded from the environment when omitted

    Returns:
        Configured DI container
    """
    settings = settings or load_settings()

    setup_logging(settings)
    configure_logfire(settings)

    container = create_container(settings)
    logfire.info(
        "Bed management ready",
        environment=settings.environment,
        bed_tag_name_max_length=settings.validation.bed_tag_name_max_length,
        check_expired_candidates=settings.validation.check_expired_candidates,
    )
    return container
