"""
Database boundary layer: local store models, CRUD operations, and connection management.

Exports:
  - Base, RecordMixin: Model building blocks
  - get_async_engine(), get_async_session_factory(): Async connection management
  - UserRecord, ChatRecord, AssetRecord: Local tables
  - LocalStore: Offline-first store with init/close lifecycle

Dependencies: sqlalchemy, aiosqlite, studyeasier.configs
System role: Device-local persistence for users, chat sessions, and lab assets
"""

from studyeasier.boundary.db.base import Base, RecordMixin
from studyeasier.boundary.db.connection import get_async_engine, get_async_session_factory
from studyeasier.boundary.db.models import AssetRecord, ChatRecord, UserRecord, TABLE_MODELS
from studyeasier.boundary.db.CRUD import BaseCRUD, TABLE_CRUDS
from studyeasier.boundary.db.local_store import LocalStore, SCHEMA_VERSION

__all__ = [
    # Base classes
    "Base",
    "RecordMixin",
    # Connection
    "get_async_engine",
    "get_async_session_factory",
    # Models
    "AssetRecord",
    "ChatRecord",
    "UserRecord",
    "TABLE_MODELS",
    # CRUD
    "BaseCRUD",
    "TABLE_CRUDS",
    # Store
    "LocalStore",
    "SCHEMA_VERSION",
]
