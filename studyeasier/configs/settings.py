"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides a cached factory used when wiring the application container.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from studyeasier.configs.base import BaseSettings
from studyeasier.configs.generation import GenerationSettings
from studyeasier.configs.local_store import LocalStoreSettings
from studyeasier.configs.supabase import SupabaseSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    # Aggregated settings
    local_store: LocalStoreSettings = LocalStoreSettings()
    supabase: SupabaseSettings = SupabaseSettings()
    generation: GenerationSettings = GenerationSettings()


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from studyeasier.configs import get_settings
        settings = get_settings()
    """
    return Settings()
