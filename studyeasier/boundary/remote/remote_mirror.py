"""
Remote mirror client.

Best-effort replica of chats (with nested messages) and lab assets in the
Supabase Postgres database, scoped by owning user. Every call returns a
RemoteResult; nothing here raises because the remote is unreachable.

Dependencies: supabase, studyeasier.boundary.remote.row_mappers
System role: Cloud replica used for cross-device sync
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

from supabase import AsyncClient

from studyeasier.boundary.remote.row_mappers import (
    asset_to_row,
    chat_to_row,
    message_to_row,
    row_to_asset,
    row_to_chat,
)
from studyeasier.boundary.remote.supabase_client import SupabaseClientProvider
from studyeasier.models.asset import LabAsset
from studyeasier.models.chat import ChatSession
from studyeasier.models.common import RemoteResult
from studyeasier.observability.log_utils import log_degraded

logger = logging.getLogger(__name__)

T = TypeVar("T")

CHATS_TABLE = "chats"
MESSAGES_TABLE = "messages"
ASSETS_TABLE = "assets"


class RemoteMirror:
    """
    Narrow CRUD surface over the remote chats, messages and assets tables.

    No retry, no queue, no offline buffering: a failed call is logged and
    reported as unavailable.
    """

    def __init__(self, provider: SupabaseClientProvider, timeout: float | None = None) -> None:
        """
        Initialize remote mirror.

        Args:
            provider: Shared Supabase client provider
            timeout: Per-call timeout in seconds (defaults to provider settings)
        """
        self._provider = provider
        self._timeout = timeout if timeout is not None else provider.settings.request_timeout

    async def init(self) -> None:
        """Create the underlying client; failure leaves the mirror unavailable."""
        try:
            await self._provider.init()
        except Exception as e:
            log_degraded(logger, "init", e)

    async def close(self) -> None:
        await self._provider.close()

    async def _call(
        self,
        operation: str,
        request: Callable[[AsyncClient], Awaitable[T]],
        **context: Any,
    ) -> RemoteResult[T]:
        client = self._provider.client
        if client is None:
            return RemoteResult.unavailable("Remote mirror not configured", operation)
        try:
            data = await asyncio.wait_for(request(client), timeout=self._timeout)
        except asyncio.TimeoutError:
            error = f"Timed out after {self._timeout}s"
            log_degraded(logger, operation, error, **context)
            return RemoteResult.unavailable(error, operation)
        except Exception as e:
            log_degraded(logger, operation, e, **context)
            return RemoteResult.unavailable(f"{type(e).__name__}: {e}", operation)
        return RemoteResult.success(data, operation)

    async def fetch_chats(self, user_id: str) -> RemoteResult[list[ChatSession]]:
        """
        Fetch all chats of a user with their messages, newest-updated first.

        Args:
            user_id: Owning user identifier

        Returns:
            RemoteResult[list[ChatSession]]
        """

        async def request(client: AsyncClient) -> list[ChatSession]:
            response = await (
                client.table(CHATS_TABLE)
                .select("*, messages(*)")
                .eq("user_id", user_id)
                .order("updated_at", desc=True)
                .execute()
            )
            return [row_to_chat(row) for row in response.data or []]

        return await self._call("fetch_chats", request, user_id=user_id)

    async def fetch_assets(self, user_id: str) -> RemoteResult[list[LabAsset]]:
        """
        Fetch all assets of a user, newest-created first.

        Args:
            user_id: Owning user identifier

        Returns:
            RemoteResult[list[LabAsset]]
        """

        async def request(client: AsyncClient) -> list[LabAsset]:
            response = await (
                client.table(ASSETS_TABLE)
                .select("*")
                .eq("user_id", user_id)
                .order("created_at", desc=True)
                .execute()
            )
            return [row_to_asset(row) for row in response.data or []]

        return await self._call("fetch_assets", request, user_id=user_id)

    async def upsert_chat(self, chat: ChatSession) -> RemoteResult[None]:
        """Upsert chat metadata (title, mode, timestamps) by id."""

        async def request(client: AsyncClient) -> None:
            await client.table(CHATS_TABLE).upsert(chat_to_row(chat)).execute()

        return await self._call("upsert_chat", request, chat_id=chat.id)

    async def upsert_messages(self, chat: ChatSession) -> RemoteResult[None]:
        """Upsert every message of a chat into the child table by message id."""
        rows = [message_to_row(chat.id, m) for m in chat.messages]

        async def request(client: AsyncClient) -> None:
            if rows:
                await client.table(MESSAGES_TABLE).upsert(rows).execute()

        return await self._call("upsert_messages", request, chat_id=chat.id, count=len(rows))

    async def insert_chat(self, chat: ChatSession) -> RemoteResult[None]:
        """Insert a freshly created chat using its client-generated id."""

        async def request(client: AsyncClient) -> None:
            await client.table(CHATS_TABLE).insert(chat_to_row(chat)).execute()

        return await self._call("insert_chat", request, chat_id=chat.id)

    async def delete_chat(self, user_id: str, chat_id: str) -> RemoteResult[None]:
        """Delete a chat; its messages go with it via ON DELETE CASCADE."""

        async def request(client: AsyncClient) -> None:
            await (
                client.table(CHATS_TABLE)
                .delete()
                .eq("id", chat_id)
                .eq("user_id", user_id)
                .execute()
            )

        return await self._call("delete_chat", request, chat_id=chat_id)

    async def insert_asset(self, asset: LabAsset) -> RemoteResult[None]:
        async def request(client: AsyncClient) -> None:
            await client.table(ASSETS_TABLE).insert(asset_to_row(asset)).execute()

        return await self._call("insert_asset", request, asset_id=asset.id)

    async def delete_asset(self, user_id: str, asset_id: str) -> RemoteResult[None]:
        async def request(client: AsyncClient) -> None:
            await (
                client.table(ASSETS_TABLE)
                .delete()
                .eq("id", asset_id)
                .eq("user_id", user_id)
                .execute()
            )

        return await self._call("delete_asset", request, asset_id=asset_id)

    async def delete_all_assets_for_user(self, user_id: str) -> RemoteResult[None]:
        async def request(client: AsyncClient) -> None:
            await client.table(ASSETS_TABLE).delete().eq("user_id", user_id).execute()

        return await self._call("delete_all_assets_for_user", request, user_id=user_id)
