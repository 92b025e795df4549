"""
Supabase configuration settings.

Connection parameters for the remote mirror and the identity provider,
both served by the same Supabase project.

Dependencies: pydantic, pydantic_settings
System role: Remote service configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from studyeasier.configs.base import BaseSettings


class SupabaseSettings(BaseSettings):
    """Supabase project configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="SUPABASE_",
        case_sensitive=False,
        extra="ignore",
    )

    url: str = Field(default="", description="Supabase project URL")
    key: str = Field(default="", description="Supabase anon/public API key")
    request_timeout: float = Field(
        default=10.0,
        description="Upper bound in seconds for a single remote mirror call",
    )

    @property
    def is_configured(self) -> bool:
        """Whether both URL and key are present."""
        return bool(self.url and self.key)
