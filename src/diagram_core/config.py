"""diagram-core configuration using pydantic-settings.

All configuration is strongly typed and supports environment variables
and .env files.
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_FORMATS = ("console", "json")


class Settings(BaseSettings):
    """Library settings loaded from environment variables or .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
    )

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "console"  # "console" or "json"

    # Default naming for factory-built nodes
    PATH_NAME_PREFIX: str = "path"  # polygon/curve segments: path0, path1, ...
    CHILD_NAME_PREFIX: str = "child"  # combined children: child0, child1, ...

    @field_validator("LOG_FORMAT")
    @classmethod
    def _validate_log_format(cls, value: str) -> str:
        if value not in _LOG_FORMATS:
            raise ValueError(f"LOG_FORMAT must be one of {_LOG_FORMATS}, got {value!r}")
        return value

    @field_validator("PATH_NAME_PREFIX", "CHILD_NAME_PREFIX")
    @classmethod
    def _validate_prefix(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Name prefixes must be non-empty")
        return value


# Singleton instance for import convenience
settings = Settings()
