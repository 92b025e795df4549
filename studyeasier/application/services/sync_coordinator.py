"""
Sync coordinator.

Single read/write API over the local store and the remote mirror.

Precedence rules:
  - Writes are local-first: the local store is updated before the remote
    mirror is touched, and the remote leg never fails the operation.
  - Reads are remote-first-if-reachable: a successful remote read
    supersedes the local view; an unreachable remote falls back to it.

The coordinator holds no state of its own between calls.

Dependencies: studyeasier.boundary.db, studyeasier.boundary.remote
System role: Local-first data synchronization core
"""

import logging
from collections.abc import Awaitable
from typing import Any, TypeVar

from pydantic import ValidationError as PydanticValidationError

from studyeasier.boundary.db.local_store import LocalStore
from studyeasier.boundary.remote.remote_mirror import RemoteMirror
from studyeasier.core.exceptions import LocalStoreError, ValidationError
from studyeasier.models.asset import AssetDraft, LabAsset
from studyeasier.models.chat import AIMode, ChatSession
from studyeasier.models.common import RemoteResult, utc_now
from studyeasier.observability.log_utils import log_degraded

logger = logging.getLogger(__name__)

T = TypeVar("T")

CHATS = "chats"
ASSETS = "assets"


class SyncCoordinator:
    """Local-first dual-write coordinator for chats and lab assets."""

    def __init__(self, local_store: LocalStore, remote_mirror: RemoteMirror) -> None:
        """
        Initialize sync coordinator.

        Args:
            local_store: Device-local store (exclusively owned by the coordinator)
            remote_mirror: Best-effort cloud replica
        """
        self.local_store = local_store
        self.remote_mirror = remote_mirror

    # ------------------------------------------------------------------ helpers

    async def _remote(self, operation: str, call: Awaitable[RemoteResult[T]]) -> RemoteResult[T]:
        """Await a remote call, converting any escaping exception into unavailable."""
        try:
            return await call
        except Exception as e:
            log_degraded(logger, operation, e)
            return RemoteResult.unavailable(f"{type(e).__name__}: {e}", operation)

    async def _local_write(self, operation: str, write: Awaitable[None]) -> LocalStoreError | None:
        try:
            await write
        except LocalStoreError as e:
            logger.error(f"{__name__}:{operation} - Local write failed: {e}")
            return e
        return None

    @staticmethod
    def _settle(local_error: LocalStoreError | None, remote: RemoteResult) -> None:
        """
        Decide whether a failed local write must surface.

        When the remote leg landed the data is not lost, so the local failure
        is only logged. When both legs failed the local error propagates.
        """
        if local_error is None:
            return
        if remote.ok:
            logger.warning(
                f"{__name__}:{remote.operation} - Local write failed but remote succeeded, continuing"
            )
            return
        raise local_error

    @staticmethod
    def _check_owner(user_id: str, owner_id: str, kind: str) -> None:
        if owner_id != user_id:
            raise ValidationError(
                f"{kind} belongs to another user",
                field="user_id",
                details={"expected": user_id, "actual": owner_id},
            )

    async def _local_chats(self, user_id: str) -> list[ChatSession]:
        chats = []
        for record in await self.local_store.get_all(CHATS):
            if record.get("user_id") != user_id:
                continue
            try:
                chats.append(ChatSession.model_validate(record))
            except PydanticValidationError as e:
                logger.error(f"{__name__}:get_history - Skipping unreadable chat {record.get('id')}: {e}")
        return chats

    async def _local_assets(self, user_id: str) -> list[LabAsset]:
        assets = []
        for record in await self.local_store.get_all(ASSETS):
            if record.get("user_id") != user_id:
                continue
            try:
                assets.append(LabAsset.model_validate(record))
            except PydanticValidationError as e:
                logger.error(f"{__name__}:get_assets - Skipping unreadable asset {record.get('id')}: {e}")
        return assets

    async def _delete_owned(self, operation: str, table: str, user_id: str, id: str) -> LocalStoreError | None:
        """Delete a local record only if it belongs to user_id. Missing ids are a no-op."""
        record = await self.local_store.get(table, id)
        if record is None:
            return None
        if record.get("user_id") != user_id:
            logger.warning(f"{__name__}:{operation} - Skipping local delete of {id}, owned by another user")
            return None
        return await self._local_write(operation, self.local_store.delete(table, id))

    @staticmethod
    def _chat_record(chat: ChatSession) -> dict[str, Any]:
        return chat.model_dump(mode="json")

    # -------------------------------------------------------------------- chats

    async def save_chat(self, user_id: str, chat: ChatSession) -> ChatSession:
        """
        Persist a whole chat session locally, then mirror it remotely.

        Bumps updated_at and derives the title from the first user message
        while the title is still the default.

        Args:
            user_id: Owning user identifier
            chat: Full session to store (replaces any previous version)

        Returns:
            ChatSession: The session as stored

        Raises:
            ValidationError: If the chat belongs to another user
            LocalStoreError: If the local write failed and the remote was unavailable
        """
        self._check_owner(user_id, chat.user_id, "Chat")
        saved = chat.derive_title().model_copy(update={"updated_at": utc_now()})

        local_error = await self._local_write(
            "save_chat", self.local_store.put(CHATS, self._chat_record(saved))
        )

        remote = await self._remote("upsert_chat", self.remote_mirror.upsert_chat(saved))
        if remote.ok:
            remote = await self._remote("upsert_messages", self.remote_mirror.upsert_messages(saved))

        self._settle(local_error, remote)
        return saved

    async def get_history(self, user_id: str) -> list[ChatSession]:
        """
        Return the user's chats, newest-updated first.

        The local view is read first; a reachable remote supersedes it.

        Args:
            user_id: Owning user identifier

        Returns:
            list[ChatSession]: Chats owned by user_id
        """
        local_chats = await self._local_chats(user_id)

        remote = await self._remote("fetch_chats", self.remote_mirror.fetch_chats(user_id))
        if remote.ok and remote.data is not None:
            chats = [c for c in remote.data if c.user_id == user_id]
            logger.debug(f"{__name__}:get_history - Using remote view ({len(chats)} chats)")
        else:
            chats = local_chats
            logger.debug(f"{__name__}:get_history - Remote unavailable, using local view ({len(chats)} chats)")

        return sorted(chats, key=lambda c: c.updated_at, reverse=True)

    async def get_chat(self, user_id: str, chat_id: str) -> ChatSession | None:
        """Look up one chat of the user through the read path."""
        for chat in await self.get_history(user_id):
            if chat.id == chat_id:
                return chat
        return None

    async def create_new_chat(self, user_id: str, mode: AIMode = AIMode.STUDY) -> ChatSession:
        """
        Create an empty chat titled "New Discussion".

        The same client-generated id and timestamps are written to both
        stores, so no orphan local copy can appear.

        Callers must not issue concurrent creations for the same user.

        Args:
            user_id: Owning user identifier
            mode: Assistant mode for the new chat

        Returns:
            ChatSession: The new chat
        """
        chat = ChatSession(user_id=user_id, mode=mode)

        local_error = await self._local_write(
            "create_new_chat", self.local_store.put(CHATS, self._chat_record(chat))
        )
        remote = await self._remote("insert_chat", self.remote_mirror.insert_chat(chat))

        self._settle(local_error, remote)
        logger.info(f"{__name__}:create_new_chat - Created chat {chat.id} (mode={mode.value})")
        return chat

    async def delete_chat(self, user_id: str, chat_id: str) -> None:
        """
        Delete a chat locally, then remotely. Deleting twice is a no-op.

        A chat owned by another user is left untouched in both stores.

        Args:
            user_id: Owning user identifier
            chat_id: Chat to remove
        """
        local_error = await self._delete_owned("delete_chat", CHATS, user_id, chat_id)
        remote = await self._remote("delete_chat", self.remote_mirror.delete_chat(user_id, chat_id))
        self._settle(local_error, remote)

    # ------------------------------------------------------------------- assets

    async def get_assets(self, user_id: str) -> list[LabAsset]:
        """
        Return the user's lab assets, newest first.

        Args:
            user_id: Owning user identifier

        Returns:
            list[LabAsset]: Assets owned by user_id
        """
        local_assets = await self._local_assets(user_id)

        remote = await self._remote("fetch_assets", self.remote_mirror.fetch_assets(user_id))
        if remote.ok and remote.data is not None:
            assets = [a for a in remote.data if a.user_id == user_id]
        else:
            assets = local_assets

        return sorted(assets, key=lambda a: a.timestamp, reverse=True)

    async def save_asset(self, user_id: str, draft: AssetDraft) -> list[LabAsset]:
        """
        Store a newly generated asset and return the refreshed asset list.

        Assigns a fresh id and creation timestamp, writes locally, mirrors
        remotely, then re-runs the read path so the caller sees exactly
        what the next get_assets would return.

        Args:
            user_id: Owning user identifier
            draft: Asset content without identity

        Returns:
            list[LabAsset]: The user's assets after the save
        """
        asset = LabAsset.from_draft(user_id, draft)

        local_error = await self._local_write(
            "save_asset", self.local_store.put(ASSETS, asset.model_dump(mode="json"))
        )
        remote = await self._remote("insert_asset", self.remote_mirror.insert_asset(asset))
        self._settle(local_error, remote)

        logger.info(f"{__name__}:save_asset - Saved {asset.type.value} asset {asset.id}")
        return await self.get_assets(user_id)

    async def delete_asset(self, user_id: str, asset_id: str) -> None:
        """Delete one asset locally, then remotely. Deleting twice is a no-op."""
        local_error = await self._delete_owned("delete_asset", ASSETS, user_id, asset_id)
        remote = await self._remote("delete_asset", self.remote_mirror.delete_asset(user_id, asset_id))
        self._settle(local_error, remote)

    async def clear_all_assets(self, user_id: str) -> None:
        """
        Delete every asset owned by the user, locally then remotely.

        Args:
            user_id: Owning user identifier
        """
        local_error = None
        for record in await self.local_store.get_all(ASSETS):
            if record.get("user_id") != user_id:
                continue
            error = await self._local_write("clear_all_assets", self.local_store.delete(ASSETS, record["id"]))
            local_error = local_error or error

        remote = await self._remote(
            "delete_all_assets_for_user",
            self.remote_mirror.delete_all_assets_for_user(user_id),
        )
        self._settle(local_error, remote)
        logger.info(f"{__name__}:clear_all_assets - Cleared assets for user {user_id}")
