"""
Local store ORM models.

One table per logical entity kind. Owner scoping and ordering happen in
application code after a full-table read, so no secondary indexes exist.

Dependencies: sqlalchemy, studyeasier.boundary.db.base
System role: Local table definitions
"""

from studyeasier.boundary.db.base import Base, RecordMixin


class UserRecord(Base, RecordMixin):
    """Cached identity provider user."""

    __tablename__ = "users"


class ChatRecord(Base, RecordMixin):
    """Whole chat session including its ordered messages."""

    __tablename__ = "chats"


class AssetRecord(Base, RecordMixin):
    """Generated lab asset."""

    __tablename__ = "assets"


TABLE_MODELS: dict[str, type[RecordMixin]] = {
    "users": UserRecord,
    "chats": ChatRecord,
    "assets": AssetRecord,
}
