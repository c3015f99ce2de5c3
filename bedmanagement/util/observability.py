"""Observability configuration using Logfire.

Validators, services and use cases emit spans and events directly:

    import logfire

    with logfire.span("bed_tag_validator.validate", bed_tag_id=str(tag.id)):
        logfire.info("Bed tag rejected", codes=errors.codes())
"""

import logfire

from bedmanagement.config import Settings


def should_send_to_logfire(settings: Settings) -> bool:
    """Decide whether telemetry goes to Logfire cloud.

    Priority: explicit setting > token presence > default (False)
    """
    if settings.observability.send_to_logfire is not None:
        return settings.observability.send_to_logfire
    return bool(settings.observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for observability.

    Args:
        settings: Application settings
    """
    send_to_logfire = should_send_to_logfire(settings)

    config_kwargs = {
        "service_name": "bedmanagement",
        "service_version": "0.1.0",
        "environment": settings.environment,
        "send_to_logfire": send_to_logfire,
        "console": logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    }

    if settings.observability.logfire_token:
        config_kwargs["token"] = settings.observability.logfire_token

    logfire.configure(**config_kwargs)

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        debug=settings.debug,
        send_to_logfire=send_to_logfire,
        has_token=bool(settings.observability.logfire_token),
    )
