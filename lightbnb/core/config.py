"""
Configuration Settings.

This module defines the application configuration using Pydantic's BaseSettings.
It automatically loads all configuration from environment variables and .env file
without explicit dotenv loading.

Environment variables use double underscore (__) as delimiters for nested properties.
For example: DATABASE__HOST maps to settings.database.host
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

# =====================================================================
# Grouped Configuration Models
# =====================================================================


class DatabaseSettings(BaseModel):
    """Relational store connection configuration."""

    user: str = Field(default="vagrant", description="Database user")
    password: SecretStr = Field(default=SecretStr("123"), description="Database password")
    host: str = Field(default="localhost", description="Database host address")
    port: int = Field(default=5432, description="Database port number")
    name: str = Field(default="lightbnb", description="Database name")
    url: Optional[str] = Field(
        default=None,
        description="Full connection URL; overrides the individual connection fields when set",
    )
    echo: bool = Field(default=False, description="Echo every emitted SQL statement")
    pool_pre_ping: bool = Field(default=True, description="Test pooled connections before use")

    @property
    def connection_url(self) -> str:
        """Async connection URL for the application database."""
        if self.url:
            return self.url
        return (
            f"postgresql+asyncpg://{self.user}:{self.password.get_secret_value()}"
            f"@{self.host}:{self.port}/{self.name}"
        )


class LoggingSettings(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", description="Root logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)")
    format: str = Field(default="detailed", description="Log line format (simple, detailed, json)")
    enable_file: bool = Field(default=False, description="Also write logs to a file")
    file_dir: str = Field(default="logs", description="Directory for the log file")


# =====================================================================
# Main Settings Class
# =====================================================================


class Settings(BaseSettings):
    """
    Application settings model.

    All properties are automatically bound from environment variables and .env file.
    Pydantic's BaseSettings handles dotenv loading automatically via model_config.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_nested_delimiter="__",
    )

    database: DatabaseSettings = Field(
        default_factory=DatabaseSettings,
        description="Database connection configuration",
    )
    logging: LoggingSettings = Field(
        default_factory=LoggingSettings,
        description="Logging configuration",
    )
    default_result_limit: int = Field(
        default=10,
        gt=0,
        description="Row limit used by list queries when the caller gives none",
    )


_settings_instance: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the process-wide settings instance, creating it on first use."""
    global _settings_instance

    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance


settings = get_settings()
