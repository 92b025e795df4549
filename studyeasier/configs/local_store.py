"""
Local store configuration settings.

Manages the on-device SQLite file that backs the offline-first store.

Dependencies: pydantic, pydantic_settings
System role: Local persistence configuration
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from studyeasier.configs.base import BaseSettings


class LocalStoreSettings(BaseSettings):
    """SQLite local store configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="LOCAL_STORE_",
        case_sensitive=False,
        extra="ignore",
    )

    path: str = Field(
        default=str(Path.home() / ".studyeasier" / "studyeasier.db"),
        description="SQLite database file path (':memory:' for an in-process store)",
    )
    echo_sql: bool = Field(default=False, description="Echo SQL statements to logs")

    @property
    def in_memory(self) -> bool:
        """Whether the store lives only for the lifetime of the process."""
        return self.path == ":memory:"

    @property
    def database_url(self) -> str:
        """
        Construct aiosqlite connection URL.

        Returns:
            str: SQLAlchemy async-compatible database URL
        """
        if self.in_memory:
            return "sqlite+aiosqlite:///:memory:"
        return f"sqlite+aiosqlite:///{Path(self.path).expanduser()}"
