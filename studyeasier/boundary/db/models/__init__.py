"""
Database models package.

Exports:
  - UserRecord, ChatRecord, AssetRecord: Local table models
  - TABLE_MODELS: Logical table name to model mapping

Dependencies: sqlalchemy, studyeasier.boundary.db.base
System role: Database model definitions for locally cached entities
"""

from studyeasier.boundary.db.models.record_models import (
    TABLE_MODELS,
    AssetRecord,
    ChatRecord,
    UserRecord,
)

__all__ = [
    "AssetRecord",
    "ChatRecord",
    "TABLE_MODELS",
    "UserRecord",
]
