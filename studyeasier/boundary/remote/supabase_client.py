"""
Supabase client provider.

Owns the single async Supabase client shared by the remote mirror and the
identity adapter.

Dependencies: supabase
System role: Remote service connection lifecycle
"""

import logging

from supabase import AsyncClient, acreate_client

from studyeasier.configs.supabase import SupabaseSettings

logger = logging.getLogger(__name__)


class SupabaseClientProvider:
    """Lazily created Supabase client with an explicit lifecycle."""

    def __init__(self, settings: SupabaseSettings) -> None:
        """
        Initialize provider (no network until init).

        Args:
            settings: Supabase project configuration
        """
        self._settings = settings
        self._client: AsyncClient | None = None

    @property
    def settings(self) -> SupabaseSettings:
        return self._settings

    @property
    def client(self) -> AsyncClient | None:
        """Connected client, or None when unconfigured or not initialized."""
        return self._client

    async def init(self) -> AsyncClient | None:
        """
        Create the async client if the project is configured.

        Returns:
            AsyncClient | None: Client instance, None when URL/key are missing
        """
        if self._client is not None:
            return self._client
        if not self._settings.is_configured:
            logger.warning(f"{__name__}:init - Supabase URL/key not set, remote features disabled")
            return None
        self._client = await acreate_client(self._settings.url, self._settings.key)
        logger.info(f"{__name__}:init - Supabase client created for {self._settings.url}")
        return self._client

    async def close(self) -> None:
        """Release the PostgREST HTTP session held by the client."""
        if self._client is None:
            return
        client, self._client = self._client, None
        try:
            await client.postgrest.aclose()
        except Exception as e:
            logger.debug(f"{__name__}:close - Ignoring close failure: {e}")
