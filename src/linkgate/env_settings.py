"""Environment-based settings using pydantic-settings.

Environment variables override values from linkgate.yaml. A ``.env`` file in
the working directory is read as well.

Environment Variables:
    LINKGATE_LOG_LEVEL - Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    LINKGATE_MAX_WORKERS - Worker threads for loading and checking documents
    LINKGATE_FAIL_ON_LOAD_ERROR - Fail the run when a document cannot be loaded
    LINKGATE_FAIL_ON_RESOLVE_ERROR - Fail the run when a document cannot be checked
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class EnvSettings(BaseSettings):
    """linkgate settings from ``LINKGATE_*`` environment variables.

    Unset variables stay ``None`` so YAML values and defaults apply.
    """

    model_config = SettingsConfigDict(
        env_prefix="LINKGATE_",
        env_file=".env",
        extra="ignore",
    )

    log_level: str | None = Field(default=None, description="Logging level")
    max_workers: int | None = Field(default=None, ge=1, le=256, description="Worker threads")
    fail_on_load_error: bool | None = Field(default=None, description="Fail on load errors")
    fail_on_resolve_error: bool | None = Field(
        default=None, description="Fail on link traversal errors"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str | None) -> str | None:
        """Validate and normalize log level."""
        if v is None:
            return v
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"LINKGATE_LOG_LEVEL must be one of {valid_levels}, got: {v}")
        return upper


@lru_cache(maxsize=1)
def get_env_settings() -> EnvSettings:
    """Get cached environment settings."""
    return EnvSettings()


def clear_env_settings_cache() -> None:
    """Clear the cached environment settings.

    Useful for testing to ensure fresh settings are loaded.
    """
    get_env_settings.cache_clear()
