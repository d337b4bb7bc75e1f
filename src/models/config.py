"""Application configuration model using pydantic-settings."""

from __future__ import annotations

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables and .env file.

    ``api_key`` and ``config_base_url`` are required to run a batch but
    optional here: the batch runner reports their absence as a
    ConfigurationError before touching the network.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    api_key: str | None = None
    config_base_url: str | None = Field(
        default=None,
        validation_alias=AliasChoices("config_base_url", "github_config_base"),
    )
    api_url: str | None = None
    allowed_role_ids: str = ""
    error_webhook_url: str | None = None
    request_timeout_seconds: float = 30.0
    history_capacity: int = 20
    log_level: str = "INFO"

    @field_validator("api_url", "error_webhook_url")
    @classmethod
    def validate_optional_url(cls, value: str | None) -> str | None:
        """Blank URLs count as unset."""
        if value is None or not value.strip():
            return None
        return value.strip()

    @field_validator("request_timeout_seconds")
    @classmethod
    def validate_request_timeout(cls, value: float) -> float:
        """Request timeout must be positive."""
        if value <= 0:
            msg = "request_timeout_seconds must be greater than 0"
            raise ValueError(msg)
        return value

    @field_validator("history_capacity")
    @classmethod
    def validate_history_capacity(cls, value: int) -> int:
        """History capacity must be between 1 and 1000."""
        if value < 1 or value > 1000:
            msg = "history_capacity must be between 1 and 1000"
            raise ValueError(msg)
        return value

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Log level must be a valid Python logging level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_value = value.upper()
        if upper_value not in valid_levels:
            msg = f"log_level must be one of {', '.join(sorted(valid_levels))}"
            raise ValueError(msg)
        return upper_value
