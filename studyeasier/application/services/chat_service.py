"""
Chat service for conversational study sessions.

Orchestrates one chat turn: persist the user message, ask the model,
persist the reply. Persistence goes through the sync coordinator, so a
turn is never lost when the remote mirror is down.

Dependencies: studyeasier.core.content_generation, studyeasier.application.services.sync_coordinator
System role: Chat service orchestration layer
"""

import logging
from collections.abc import AsyncGenerator

from studyeasier.application.services.sync_coordinator import SyncCoordinator
from studyeasier.core.content_generation.content_generator import ContentGenerator
from studyeasier.core.exceptions import ValidationError
from studyeasier.models.chat import ChatSession, Message, MessageRole

logger = logging.getLogger(__name__)


class ChatService:
    """
    Chat service for multi-turn conversations.

    Coordinates message persistence and model invocation. Title
    auto-derivation happens when the coordinator saves the first turn.
    """

    def __init__(
        self,
        coordinator: SyncCoordinator,
        generator: ContentGenerator,
    ) -> None:
        """
        Initialize chat service.

        Args:
            coordinator: Sync coordinator for chat persistence
            generator: Content generator for model replies
        """
        self.coordinator = coordinator
        self.generator = generator

    @staticmethod
    def _validate_content(content: str) -> str:
        if not content or not content.strip():
            raise ValidationError("Message must not be empty", field="content")
        return content

    async def send_message(
        self,
        user_id: str,
        chat: ChatSession,
        content: str,
        context_window_size: int = 20,
    ) -> ChatSession:
        """
        Process a user message through a full chat turn.

        Flow:
        1. Append and save the user message
        2. Invoke the model with recent history
        3. Append and save the model reply

        Args:
            user_id: Owning user identifier
            chat: Current chat session
            content: User message text
            context_window_size: Number of prior messages sent as context

        Returns:
            ChatSession: Session including the model reply

        Raises:
            ValidationError: If the message is empty or the chat is not owned by user_id
            GenerationError: If the model call fails (the user message stays saved)
        """
        self._validate_content(content)
        history = chat.messages[-context_window_size:] if context_window_size > 0 else []

        pending = await self.coordinator.save_chat(
            user_id, chat.with_message(Message(role=MessageRole.USER, content=content))
        )

        reply = await self.generator.chat_turn(history, content, chat.mode)
        logger.info(f"{__name__}:send_message - chat={chat.id} reply_len={len(reply)}")

        return await self.coordinator.save_chat(
            user_id, pending.with_message(Message(role=MessageRole.MODEL, content=reply))
        )

    async def stream_message(
        self,
        user_id: str,
        chat: ChatSession,
        content: str,
        context_window_size: int = 20,
    ) -> AsyncGenerator[str | ChatSession, None]:
        """
        Streaming variant of send_message.

        Yields the accumulated reply text as it grows, then the saved
        ChatSession as the final item.

        Raises:
            ValidationError: If the message is empty or the chat is not owned by user_id
            GenerationError: If the stream fails (the user message stays saved)
        """
        self._validate_content(content)
        history = chat.messages[-context_window_size:] if context_window_size > 0 else []

        pending = await self.coordinator.save_chat(
            user_id, chat.with_message(Message(role=MessageRole.USER, content=content))
        )

        reply = ""
        async for accumulated in self.generator.stream_chat_turn(history, content, chat.mode):
            reply = accumulated
            yield accumulated

        yield await self.coordinator.save_chat(
            user_id, pending.with_message(Message(role=MessageRole.MODEL, content=reply))
        )

    async def rename_chat(self, user_id: str, chat: ChatSession, title: str) -> ChatSession:
        """
        Set an explicit title. Blank titles are ignored.

        Returns:
            ChatSession: Saved session (unchanged title when blank)
        """
        title = title.strip()
        if not title:
            return chat
        return await self.coordinator.save_chat(user_id, chat.model_copy(update={"title": title}))
