"""
Domain models and schemas.

Pydantic models shared by the stores, the sync coordinator and the
generation adapter.
"""

from studyeasier.models.asset import AssetDraft, LabAsset, LabTool, QuizQuestion, Slide
from studyeasier.models.chat import (
    DEFAULT_CHAT_TITLE,
    AIMode,
    ChatSession,
    Message,
    MessageRole,
)
from studyeasier.models.common import RemoteResult, new_id, utc_now
from studyeasier.models.generation import (
    Flashcard,
    QuizResult,
    SlidesResult,
    SourceMaterial,
    SummaryResult,
    ToolResult,
    UnifiedResult,
)
from studyeasier.models.user import AuthSession, Theme, User, UserPreferences

__all__ = [
    "AIMode",
    "AssetDraft",
    "AuthSession",
    "ChatSession",
    "DEFAULT_CHAT_TITLE",
    "Flashcard",
    "LabAsset",
    "LabTool",
    "Message",
    "MessageRole",
    "QuizQuestion",
    "QuizResult",
    "RemoteResult",
    "SlidesResult",
    "Slide",
    "SourceMaterial",
    "SummaryResult",
    "Theme",
    "ToolResult",
    "UnifiedResult",
    "User",
    "UserPreferences",
    "new_id",
    "utc_now",
]
