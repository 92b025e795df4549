"""
Test suite for BaseCRUD generic record operations.

Tests upsert, read (by ID and all) and delete against a mocked async
session to verify the calls issued to SQLAlchemy.

System role: Verification of generic local store CRUD foundation
"""

from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from studyeasier.boundary.db.CRUD import TABLE_CRUDS
from studyeasier.boundary.db.CRUD.base_crud import BaseCRUD
from studyeasier.boundary.db.models import AssetRecord, ChatRecord, UserRecord


@pytest.fixture
def base_crud() -> BaseCRUD:
    """Provide BaseCRUD instance for testing."""
    return BaseCRUD(ChatRecord)


@pytest.fixture
def mock_session() -> AsyncSession:
    """Provide mock async database session."""
    return AsyncMock(spec=AsyncSession)


class TestTableCruds:
    """Test suite for the per-table CRUD registry."""

    def test_registry_should_cover_three_logical_tables(self) -> None:
        """Test users, chats and assets each map to their record model."""
        assert TABLE_CRUDS["users"].model is UserRecord
        assert TABLE_CRUDS["chats"].model is ChatRecord
        assert TABLE_CRUDS["assets"].model is AssetRecord
        assert set(TABLE_CRUDS) == {"users", "chats", "assets"}


class TestBaseCRUDUpsert:
    """Test suite for BaseCRUD.upsert() method."""

    @pytest.mark.asyncio
    async def test_upsert_should_merge_then_flush(
        self, base_crud: BaseCRUD, mock_session: AsyncSession
    ) -> None:
        """Test upsert merges the record and flushes it."""
        # Arrange
        call_order = []

        async def merge_effect(obj: Any) -> Any:
            call_order.append("merge")
            return obj

        async def flush_effect() -> None:
            call_order.append("flush")

        mock_session.merge = AsyncMock(side_effect=merge_effect)
        mock_session.flush = AsyncMock(side_effect=flush_effect)

        # Act
        result = await base_crud.upsert(mock_session, "c1", {"id": "c1", "title": "T"})

        # Assert
        assert call_order == ["merge", "flush"]
        assert isinstance(result, ChatRecord)
        assert result.id == "c1"
        assert result.data == {"id": "c1", "title": "T"}


class TestBaseCRUDGetByID:
    """Test suite for BaseCRUD.get_by_id() method."""

    @pytest.mark.asyncio
    async def test_get_by_id_should_return_model_when_found(
        self, base_crud: BaseCRUD, mock_session: AsyncSession
    ) -> None:
        """Test get_by_id returns model instance when ID exists."""
        # Arrange
        mock_instance = MagicMock()
        mock_result = MagicMock()
        mock_result.scalar_one_or_none = MagicMock(return_value=mock_instance)
        mock_session.execute = AsyncMock(return_value=mock_result)

        # Act
        result = await base_crud.get_by_id(mock_session, "c1")

        # Assert
        assert result == mock_instance
        mock_session.execute.assert_called_once()

    @pytest.mark.asyncio
    async def test_get_by_id_should_return_none_when_not_found(
        self, base_crud: BaseCRUD, mock_session: AsyncSession
    ) -> None:
        """Test get_by_id returns None when ID doesn't exist."""
        # Arrange
        mock_result = MagicMock()
        mock_result.scalar_one_or_none = MagicMock(return_value=None)
        mock_session.execute = AsyncMock(return_value=mock_result)

        # Act
        result = await base_crud.get_by_id(mock_session, "missing")

        # Assert
        assert result is None


class TestBaseCRUDGetAll:
    """Test suite for BaseCRUD.get_all() method."""

    @pytest.mark.asyncio
    async def test_get_all_should_return_every_row(
        self, base_crud: BaseCRUD, mock_session: AsyncSession
    ) -> None:
        """Test get_all returns all scalars from the select."""
        # Arrange
        rows = [MagicMock(), MagicMock()]
        mock_result = MagicMock()
        mock_result.scalars.return_value.all.return_value = rows
        mock_session.execute = AsyncMock(return_value=mock_result)

        # Act
        result = await base_crud.get_all(mock_session)

        # Assert
        assert result == rows


class TestBaseCRUDDelete:
    """Test suite for BaseCRUD.delete_by_id() method."""

    @pytest.mark.asyncio
    async def test_delete_by_id_should_return_true_when_deleted(
        self, base_crud: BaseCRUD, mock_session: AsyncSession
    ) -> None:
        """Test delete_by_id reports a removed row."""
        # Arrange
        mock_result = MagicMock()
        mock_result.rowcount = 1
        mock_session.execute = AsyncMock(return_value=mock_result)

        # Act
        result = await base_crud.delete_by_id(mock_session, "c1")

        # Assert
        assert result is True

    @pytest.mark.asyncio
    async def test_delete_by_id_should_return_false_when_missing(
        self, base_crud: BaseCRUD, mock_session: AsyncSession
    ) -> None:
        """Test delete_by_id reports nothing removed for unknown ids."""
        # Arrange
        mock_result = MagicMock()
        mock_result.rowcount = 0
        mock_session.execute = AsyncMock(return_value=mock_result)

        # Act
        result = await base_crud.delete_by_id(mock_session, "missing")

        # Assert
        assert result is False
