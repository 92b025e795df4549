"""
Local store: offline-first persistence on the user's device.

Durable CRUD over three logical tables (users, chats, assets) that works
with zero network connectivity. Records are plain JSON-compatible dicts
keyed by their own "id"; owner filtering and ordering are left to callers.

Dependencies: sqlalchemy, aiosqlite, studyeasier.configs
System role: Local source of immediate truth for the sync coordinator
"""

import asyncio
import logging
from typing import Any

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine, async_sessionmaker

from studyeasier.boundary.db.base import Base
from studyeasier.boundary.db.connection import get_async_engine, get_async_session_factory
from studyeasier.boundary.db.CRUD import TABLE_CRUDS, BaseCRUD
from studyeasier.configs.local_store import LocalStoreSettings
from studyeasier.core.exceptions import LocalStoreError

logger = logging.getLogger(__name__)

SCHEMA_VERSION = 1


class LocalStore:
    """
    Async SQLite-backed key-space with an explicit init/close lifecycle.

    Reads never raise: a storage failure on the read path degrades to an
    empty result. Writes raise LocalStoreError.
    """

    def __init__(self, settings: LocalStoreSettings) -> None:
        """
        Initialize local store (no I/O until init).

        Args:
            settings: Local store configuration
        """
        self._settings = settings
        self._engine: AsyncEngine | None = None
        self._session_factory: async_sessionmaker | None = None
        self._init_task: asyncio.Task | None = None

    @property
    def is_open(self) -> bool:
        """Whether init has completed successfully."""
        return self._session_factory is not None

    async def init(self) -> None:
        """
        Open the database and upgrade its schema.

        Idempotent. Concurrent callers await the same in-flight open, so
        only one physical open happens.

        Raises:
            LocalStoreError: If the database cannot be opened
        """
        if self._session_factory is not None:
            return
        if self._init_task is None:
            self._init_task = asyncio.ensure_future(self._open())
        task = self._init_task
        try:
            await asyncio.shield(task)
        except LocalStoreError:
            # Allow a later init() to retry the open
            if self._init_task is task:
                self._init_task = None
            raise

    async def _open(self) -> None:
        logger.info(f"{__name__}:init - Opening local store at {self._settings.path}")
        engine: AsyncEngine | None = None
        try:
            engine = get_async_engine(self._settings)
            async with engine.begin() as conn:
                await self._upgrade(conn)
        except (SQLAlchemyError, OSError) as e:
            if engine is not None:
                await engine.dispose()
            raise LocalStoreError(
                f"Local store failed to open: {e}",
                operation="init",
                details={"path": self._settings.path},
            ) from e

        self._engine = engine
        self._session_factory = get_async_session_factory(engine)
        logger.info(f"{__name__}:init - Local store ready (schema v{SCHEMA_VERSION})")

    async def _upgrade(self, conn: AsyncConnection) -> None:
        result = await conn.execute(text("PRAGMA user_version"))
        current = result.scalar() or 0
        if current >= SCHEMA_VERSION:
            return
        logger.info(f"{__name__}:init - Upgrading schema v{current} -> v{SCHEMA_VERSION}")
        await conn.run_sync(Base.metadata.create_all)
        await conn.execute(text(f"PRAGMA user_version = {SCHEMA_VERSION}"))

    async def close(self) -> None:
        """Dispose the engine. The store can be re-opened with init()."""
        if self._init_task is not None and not self._init_task.done():
            await asyncio.gather(self._init_task, return_exceptions=True)
        if self._engine is not None:
            await self._engine.dispose()
        self._engine = None
        self._session_factory = None
        self._init_task = None

    def _crud(self, table: str) -> BaseCRUD:
        try:
            return TABLE_CRUDS[table]
        except KeyError:
            raise ValueError(
                f"Unknown table '{table}'. Expected one of {sorted(TABLE_CRUDS)}"
            ) from None

    async def put(self, table: str, record: dict[str, Any]) -> None:
        """
        Upsert a whole record by its "id".

        Args:
            table: Logical table name (users, chats, assets)
            record: JSON-compatible record containing an "id" key

        Raises:
            ValueError: If table is unknown or record has no id
            LocalStoreError: If the write fails
        """
        crud = self._crud(table)
        record_id = record.get("id")
        if not record_id:
            raise ValueError("Record must have a non-empty 'id'")

        await self.init()
        try:
            async with self._session_factory() as session:
                async with session.begin():
                    await crud.upsert(session, str(record_id), record)
        except SQLAlchemyError as e:
            raise LocalStoreError(
                f"Failed to write record {record_id}: {e}",
                table=table,
                operation="put",
            ) from e

    async def get_all(self, table: str) -> list[dict[str, Any]]:
        """
        Return every record in a table.

        Args:
            table: Logical table name (users, chats, assets)

        Returns:
            list[dict]: All records, or an empty list if storage is unavailable

        Raises:
            ValueError: If table is unknown
        """
        crud = self._crud(table)
        try:
            await self.init()
            async with self._session_factory() as session:
                rows = await crud.get_all(session)
                return [dict(row.data) for row in rows]
        except (LocalStoreError, SQLAlchemyError) as e:
            logger.error(f"{__name__}:get_all - Read of '{table}' failed, returning empty: {e}")
            return []

    async def get(self, table: str, id: str) -> dict[str, Any] | None:
        """
        Return one record by id.

        Args:
            table: Logical table name (users, chats, assets)
            id: Record identifier

        Returns:
            dict | None: The record, or None if missing or storage is unavailable

        Raises:
            ValueError: If table is unknown
        """
        crud = self._crud(table)
        try:
            await self.init()
            async with self._session_factory() as session:
                row = await crud.get_by_id(session, id)
                return dict(row.data) if row is not None else None
        except (LocalStoreError, SQLAlchemyError) as e:
            logger.error(f"{__name__}:get - Read of '{table}/{id}' failed, returning None: {e}")
            return None

    async def delete(self, table: str, id: str) -> None:
        """
        Delete a record by id. Deleting a missing id is not an error.

        Args:
            table: Logical table name (users, chats, assets)
            id: Record identifier

        Raises:
            ValueError: If table is unknown
            LocalStoreError: If the delete fails
        """
        crud = self._crud(table)
        await self.init()
        try:
            async with self._session_factory() as session:
                async with session.begin():
                    await crud.delete_by_id(session, id)
        except SQLAlchemyError as e:
            raise LocalStoreError(
                f"Failed to delete record {id}: {e}",
                table=table,
                operation="delete",
            ) from e
