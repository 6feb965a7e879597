"""Configuration management using Pydantic Settings."""

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Main configuration class."""

    # Application
    environment: str = Field(
        default="development",
        description="Environment: development, staging, production",
    )
    log_level: str = Field(default="INFO", description="Logging level")
    logfire_token: str = ""

    # MongoDB
    mongodb_uri: str = Field(default="", description="MongoDB connection string")
    mongodb_database: str = Field(default="evently", description="Database name")
    mongodb_server_selection_timeout_ms: int = 5000

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("mongodb_uri", mode="after")
    @classmethod
    def strip_uri(cls, v: str) -> str:
        """Treat a whitespace-only URI as unset."""
        return v.strip()

    @field_validator("log_level", mode="after")
    @classmethod
    def upper_log_level(cls, v: str) -> str:
        return v.upper()

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment.lower() == "development"


@lru_cache()
def get_settings() -> Settings:
    """Get singleton Settings instance."""
    return Settings()
