"""Application configuration."""

from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ValidationSettings(BaseModel):
    """Bed tag validation configuration."""

    # Width of the bed tag name column
    bed_tag_name_max_length: int = Field(default=50, ge=1)

    # Whether an expired candidate is still checked for duplicate names
    # True: only the conflicting tag's expiration matters
    # False: a candidate that is itself expired never conflicts
    check_expired_candidates: bool = True


class ObservabilitySettings(BaseModel):
    """Observability configuration for Logfire."""

    # Logfire API token (optional - if not set, logs only go to console)
    # Can be set via OBSERVABILITY__LOGFIRE_TOKEN env var
    logfire_token: str | None = None

    # Whether to send telemetry to Logfire cloud
    # If None, will auto-determine: sends if token is present, otherwise console-only
    send_to_logfire: bool | None = None


class Settings(BaseSettings):
    """Application settings.

    Set environment variables to override, using ``__`` for nested values:

        ENVIRONMENT=production
        VALIDATION__BED_TAG_NAME_MAX_LENGTH=100
        VALIDATION__CHECK_EXPIRED_CANDIDATES=false
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",  # Allows VALIDATION__... syntax
    )

    environment: Literal["test", "development", "staging", "production"] = "development"
    debug: bool = False

    # Nested settings
    validation: ValidationSettings = ValidationSettings()
    observability: ObservabilitySettings = ObservabilitySettings()
