"""
Base configuration settings.

Common fields and .env handling inherited by every StudyEasier config
module. Each subclass adds its own env_prefix.

Dependencies: pydantic_settings
System role: Foundation for all configuration classes
"""

from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict
from pydantic import Field


class BaseSettings(PydanticBaseSettings):
    """Base configuration class with common settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    environment: str = Field(
        default="development",
        description="Deployment flavour of the client (development, production)",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode (also echoes local store SQL)",
    )
    log_level: str = Field(
        default="INFO",
        description="Root level passed to configure_logging by the host application",
    )
