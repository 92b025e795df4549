"""
Chat domain models.

Chat sessions and their append-only message transcripts.

Dependencies: pydantic
System role: Chat persistence contracts
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from studyeasier.models.common import new_id, utc_now

DEFAULT_CHAT_TITLE = "New Discussion"
AUTO_TITLE_LENGTH = 30


class AIMode(str, Enum):
    """Assistant persona a chat session runs in."""

    STUDY = "study"
    CODING = "coding"
    WRITING = "writing"
    TUTOR = "tutor"
    RESEARCH = "research"


class MessageRole(str, Enum):
    """Author of a persisted message."""

    USER = "user"
    MODEL = "model"


class Message(BaseModel):
    """Single transcript entry; immutable once created."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=new_id)
    role: MessageRole
    content: str
    timestamp: datetime = Field(default_factory=utc_now)


class ChatSession(BaseModel):
    """
    Titled, moded conversation owned by one user.

    Messages keep insertion order and are never removed individually;
    storage always replaces the whole session.
    """

    id: str = Field(default_factory=new_id)
    user_id: str
    title: str = DEFAULT_CHAT_TITLE
    mode: AIMode = AIMode.STUDY
    messages: list[Message] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    def with_message(self, message: Message) -> "ChatSession":
        """Return a copy with message appended to the transcript."""
        return self.model_copy(update={"messages": [*self.messages, message]})

    def derive_title(self) -> "ChatSession":
        """
        Return a copy titled after the first user message.

        Only applies while the title is still the default one; a renamed
        chat keeps its title.
        """
        if self.title != DEFAULT_CHAT_TITLE:
            return self
        first = next((m for m in self.messages if m.role == MessageRole.USER), None)
        if first is None or not first.content.strip():
            return self
        text = first.content.strip()
        title = text[:AUTO_TITLE_LENGTH]
        if len(text) > AUTO_TITLE_LENGTH:
            title += "..."
        return self.model_copy(update={"title": title})
