"""
Content generation configuration settings.

Model selection and source limits for the Gemini-backed generator.

Dependencies: pydantic, pydantic_settings
System role: Content generation configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from studyeasier.configs.base import BaseSettings


class GenerationSettings(BaseSettings):
    """Gemini content generation configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="GENERATION_",
        case_sensitive=False,
        extra="ignore",
    )

    model_id: str = Field(
        default="gemini-3-flash-preview",
        description="Gemini model identifier for lecture processing and chat",
    )
    temperature: float = Field(default=0.2, description="Sampling temperature")
    max_source_bytes: int = Field(
        default=20 * 1024 * 1024,
        description="Largest inline source accepted (inline request limit)",
    )
    url_fetch_timeout: float = Field(
        default=20.0,
        description="Timeout in seconds when downloading URL sources",
    )
