"""Core configuration module."""

import os

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Package settings."""

    model_config = SettingsConfigDict(
        env_file=(".env", "../.env"),
        case_sensitive=False,
        extra="ignore",
    )

    environment: str = os.getenv("ENVIRONMENT", "development")

    # Admin REST endpoints
    rest_url_prefix: str = "admin/"  # could be: http://www.yourdomain.com/admin/

    # Dotted location downstream generators import plugin handlers from
    plugins_namespace: str = "ngrest.plugins"

    # Logging
    log_level: str = "INFO"
    log_format: str | None = None  # "json", "console", or None (auto-detect based on environment)

    @field_validator("rest_url_prefix")
    @classmethod
    def require_trailing_slash(cls, value: str) -> str:
        """Endpoint suffixes are appended directly, so the prefix must end with '/'."""
        if value and not value.endswith("/"):
            raise ValueError(f"rest_url_prefix '{value}' must end with '/'")
        return value

    @field_validator("plugins_namespace")
    @classmethod
    def validate_plugins_namespace(cls, value: str) -> str:
        """Reject namespaces that cannot be a dotted import path."""
        parts = value.split(".")
        if not all(part.isidentifier() for part in parts):
            raise ValueError(f"plugins_namespace '{value}' is not a dotted module path")
        return value

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, value: str | None) -> str | None:
        if value in (None, ""):
            return None
        value = value.lower()
        if value not in ("json", "console"):
            raise ValueError("LOG_FORMAT must be 'json' or 'console'")
        return value


settings = Settings()
