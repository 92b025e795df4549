"""
Remote row mappers.

Translate between the remote relational schema (snake_case rows, ISO
timestamps, messages in a child table) and the domain models.

Dependencies: pydantic, studyeasier.models
System role: Remote schema translation
"""

from typing import Any

from studyeasier.models.asset import LabAsset
from studyeasier.models.chat import ChatSession, Message


def chat_to_row(chat: ChatSession) -> dict[str, Any]:
    """Chat metadata row (messages live in their own table)."""
    return {
        "id": chat.id,
        "user_id": chat.user_id,
        "title": chat.title,
        "mode": chat.mode.value,
        "created_at": chat.created_at.isoformat(),
        "updated_at": chat.updated_at.isoformat(),
    }


def message_to_row(chat_id: str, message: Message) -> dict[str, Any]:
    """Child row of the messages table."""
    return {
        "id": message.id,
        "chat_id": chat_id,
        "role": message.role.value,
        "content": message.content,
        "created_at": message.timestamp.isoformat(),
    }


def row_to_message(row: dict[str, Any]) -> Message:
    return Message(
        id=row["id"],
        role=row["role"],
        content=row.get("content") or "",
        timestamp=row["created_at"],
    )


def row_to_chat(row: dict[str, Any]) -> ChatSession:
    """
    Build a chat session from a row with nested "messages" rows.

    Messages are ordered oldest first to restore the transcript.
    """
    messages = sorted(
        (row_to_message(m) for m in row.get("messages") or []),
        key=lambda m: m.timestamp,
    )
    return ChatSession(
        id=row["id"],
        user_id=row["user_id"],
        title=row["title"],
        mode=row["mode"],
        messages=messages,
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def asset_to_row(asset: LabAsset) -> dict[str, Any]:
    """Asset row; content is stored as jsonb."""
    payload = asset.model_dump(mode="json")
    return {
        "id": asset.id,
        "user_id": asset.user_id,
        "title": asset.title,
        "type": asset.type.value,
        "content": payload["content"],
        "source_name": asset.source_name,
        "created_at": payload["timestamp"],
    }


def row_to_asset(row: dict[str, Any]) -> LabAsset:
    return LabAsset(
        id=row["id"],
        user_id=row["user_id"],
        title=row["title"],
        type=row["type"],
        content=row["content"],
        source_name=row.get("source_name") or "",
        timestamp=row["created_at"],
    )
