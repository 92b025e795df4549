"""
Base CRUD operations for local store record models.

Provides generic upsert, read and delete operations shared by every
logical table of the local store.

Dependencies: sqlalchemy
System role: Foundation for all local store CRUD operations
"""

from typing import Any, Generic, Sequence, TypeVar

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from studyeasier.boundary.db.base import RecordMixin

ModelT = TypeVar("ModelT", bound=RecordMixin)


class BaseCRUD(Generic[ModelT]):
    """
    Generic base class for record CRUD operations.

    Provides standard database operations that work with any record model.
    Transactions are owned by the caller; these methods only flush.

    Type Parameters:
        ModelT: Record model class inheriting from Base and RecordMixin

    Attributes:
        model: The SQLAlchemy model class to operate on
    """

    def __init__(self, model: type[ModelT]) -> None:
        """
        Initialize CRUD with target model.

        Args:
            model: SQLAlchemy model class for database operations
        """
        self.model = model

    async def upsert(self, session: AsyncSession, id: str, data: dict[str, Any]) -> ModelT:
        """
        Insert or fully replace a record by primary key.

        Args:
            session: Async database session
            id: Record identifier
            data: JSON document replacing any existing payload

        Returns:
            Persistent model instance
        """
        instance = await session.merge(self.model(id=id, data=data))
        await session.flush()
        return instance

    async def get_by_id(self, session: AsyncSession, id: str) -> ModelT | None:
        """
        Retrieve a single record by primary key.

        Args:
            session: Async database session
            id: Record identifier

        Returns:
            Model instance if found, None otherwise
        """
        stmt = select(self.model).where(self.model.id == id)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_all(self, session: AsyncSession) -> Sequence[ModelT]:
        """
        Retrieve every record in the table.

        Args:
            session: Async database session

        Returns:
            Sequence of model instances
        """
        result = await session.execute(select(self.model))
        return result.scalars().all()

    async def delete_by_id(self, session: AsyncSession, id: str) -> bool:
        """
        Delete a record by primary key.

        Args:
            session: Async database session
            id: Record identifier

        Returns:
            True if record was deleted, False if not found
        """
        stmt = delete(self.model).where(self.model.id == id)
        result = await session.execute(stmt)
        return result.rowcount > 0
