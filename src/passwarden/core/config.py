"""Configuration management for Passwarden.

This module uses Pydantic Settings to load and validate configuration from
environment variables and .env files. Configuration is loaded once and is
immutable afterwards; changing the policy means building a new validator
from a new Settings instance.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Password policy configuration settings.

    Settings are loaded from environment variables and .env files.
    All configuration values are validated at load time.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="PASSWARDEN_",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    # Application Settings
    app_name: str = "Passwarden"
    environment: Literal["development", "production", "testing"] = "development"

    # Logging Settings
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_format: Literal["json", "console"] = "json"

    # Length Policy
    min_length: int = Field(default=8, ge=0)
    max_length: int = Field(default=64, ge=1)

    # Character Policy
    min_characteristics: int = Field(
        default=3,
        ge=1,
        le=4,
        description="How many of lowercase/uppercase/digit/special must be present",
    )

    # Sequence Policy
    sequence_length: int = Field(default=5, ge=3)
    sequence_wrap: bool = False
    repeat_length: int = Field(default=4, ge=2)

    # Dictionary Policy
    dictionary_case_sensitive: bool = False
    dictionary_match_backwards: bool = True

    # Username / History Policy
    username_ignore_case: bool = True
    username_match_backwards: bool = True
    history_report_all: bool = True

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"

    @property
    def is_testing(self) -> bool:
        """Check if running in testing environment."""
        return self.environment == "testing"

    @model_validator(mode="after")
    def validate_length_bounds(self) -> "Settings":
        """Validate that the minimum length does not exceed the maximum."""
        if self.min_length > self.max_length:
            raise ValueError(
                f"min_length ({self.min_length}) must not exceed "
                f"max_length ({self.max_length})"
            )
        return self


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    This function caches the settings instance to avoid reloading
    configuration on every call.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()
