"""Configuration management for password_helper.

This module uses Pydantic Settings to load and validate configuration from
environment variables and .env files. Settings cover the ambient concerns of
the library (logging, generator limits); password policies themselves are
built from plain mappings.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library configuration settings.

    Settings are loaded from environment variables and .env files.
    All configuration values are validated on load.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="PASSWORD_HELPER_",
        case_sensitive=False,
        extra="ignore",
    )

    environment: Literal["development", "production", "testing"] = "development"

    # Logging Settings
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_format: Literal["json", "console"] = "json"

    # Generator Settings
    generator_max_attempts: int = Field(
        default=100,
        ge=1,
        description="Candidates tried before generation gives up",
    )
    generator_default_maximum_length: int = Field(
        default=20,
        ge=8,
        description="Upper length bound used when a policy has no maximum length",
    )

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
    def validate_console_in_production(self) -> "Settings":
        """Production deployments always emit JSON logs."""
        if self.is_production and self.log_format == "console":
            raise ValueError(
                "Console log format is not supported in production. "
                "Set PASSWORD_HELPER_LOG_FORMAT=json or change the environment."
            )
        return self


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()
