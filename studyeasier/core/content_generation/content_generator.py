"""
Content generation adapter.

Wraps Gemini (through LangChain) behind coarse operations that take raw
lecture material and return typed, structured results. Failures surface as
SourceUnreadableError (the input is the problem) or GenerationServiceError
(the service is the problem, retrying may help).

Dependencies: langchain_google_genai, langchain_core, studyeasier.models
System role: Content generation boundary for summaries, quizzes, slides and chat
"""

import logging
from collections.abc import AsyncIterator, Sequence
from typing import Any, TypeVar

from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.messages import AIMessage, BaseMessage, HumanMessage, SystemMessage
from langchain_google_genai import ChatGoogleGenerativeAI
from pydantic import BaseModel, ValidationError as PydanticValidationError

from studyeasier.configs.generation import GenerationSettings
from studyeasier.core.content_generation.generation_prompt import (
    TOOL_INSTRUCTIONS,
    UNIFIED_INSTRUCTIONS,
    URL_SOURCE_NOTE,
    get_system_prompt,
)
from studyeasier.core.content_generation.source_loader import SourceLoader, strip_extension
from studyeasier.core.exceptions import (
    GenerationError,
    GenerationServiceError,
    SourceUnreadableError,
)
from studyeasier.models.asset import LabTool
from studyeasier.models.chat import AIMode, Message, MessageRole
from studyeasier.models.generation import (
    QuizResult,
    SlidesResult,
    SourceMaterial,
    SummaryResult,
    ToolResult,
    UnifiedResult,
)

logger = logging.getLogger(__name__)

ResultT = TypeVar("ResultT", bound=BaseModel)

TRANSIENT_STATUS_CODES = {408, 429, 500, 502, 503, 504}
SOURCE_ERROR_MARKERS = (
    "invalid_argument",
    "unsupported",
    "payload size",
    "too large",
    "could not process",
    "unable to process",
)

TOOL_SCHEMAS: dict[LabTool, type[BaseModel]] = {
    LabTool.SUMMARY: SummaryResult,
    LabTool.QUIZ: QuizResult,
    LabTool.SLIDES: SlidesResult,
}


def message_text(content: Any) -> str:
    """Flatten LangChain message content (str or list of parts) into text."""
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        parts = []
        for part in content:
            if isinstance(part, str):
                parts.append(part)
            elif isinstance(part, dict) and part.get("type") == "text":
                parts.append(part.get("text", ""))
        return "".join(parts)
    return ""


def classify_error(exc: Exception, source_name: str | None = None) -> GenerationError:
    """
    Map a provider exception onto the generation error taxonomy.

    Explicit 4xx statuses (other than timeouts and rate limits) and
    invalid-input messages blame the source; everything else is treated
    as a transient service failure.
    """
    if isinstance(exc, GenerationError):
        return exc
    status = getattr(exc, "code", None) or getattr(exc, "status_code", None)
    text = str(exc).lower()
    details = {"error_type": type(exc).__name__}

    if isinstance(status, int) and status in TRANSIENT_STATUS_CODES:
        return GenerationServiceError(
            "The AI service is busy right now. Please try again.", details
        )
    if (isinstance(status, int) and 400 <= status < 500) or any(
        marker in text for marker in SOURCE_ERROR_MARKERS
    ):
        return SourceUnreadableError(
            "Failed to process lecture content. Please ensure the file is readable and try again.",
            source_name=source_name,
            details=details,
        )
    return GenerationServiceError(
        "The AI service failed to respond. Please try again.", details
    )


class ContentGenerator:
    """
    Gemini-backed generator for lab tools and chat turns.

    Usage:
        generator = ContentGenerator(get_settings().generation)
        result = await generator.summarize(SourceMaterial(data=pdf, mime_type="application/pdf", name="l1.pdf"))
    """

    def __init__(
        self,
        settings: GenerationSettings,
        model: BaseChatModel | None = None,
        source_loader: SourceLoader | None = None,
    ) -> None:
        """
        Initialize content generator.

        Args:
            settings: Generation configuration
            model: Chat model override (defaults to ChatGoogleGenerativeAI)
            source_loader: Source loader override
        """
        self._settings = settings
        self._model = model or ChatGoogleGenerativeAI(
            model=settings.model_id,
            temperature=settings.temperature,
        )
        self._source_loader = source_loader or SourceLoader(settings)
        logger.info(f"{__name__}:__init__ - Content generator using {settings.model_id}")

    # ------------------------------------------------------------ lab tools

    async def _build_messages(self, source: SourceMaterial, instructions: str) -> list[BaseMessage]:
        data, mime_type = await self._source_loader.load(source)
        text = instructions
        if source.url:
            text += "\n\n" + URL_SOURCE_NOTE.format(url=source.url)
        return [
            HumanMessage(
                content=[
                    {"type": "media", "mime_type": mime_type, "data": data},
                    {"type": "text", "text": text},
                ]
            )
        ]

    async def _structured(
        self,
        source: SourceMaterial,
        instructions: str,
        schema: type[ResultT],
    ) -> ResultT:
        messages = await self._build_messages(source, instructions)
        logger.info(
            f"{__name__}:_structured - START schema={schema.__name__} source={source.name}"
        )
        try:
            runnable = self._model.with_structured_output(schema)
            result = await runnable.ainvoke(messages)
        except Exception as e:
            error = classify_error(e, source.name)
            logger.error(
                f"{__name__}:_structured - FAILED schema={schema.__name__} - "
                f"{type(e).__name__}: {e}"
            )
            raise error from e

        if result is None:
            raise SourceUnreadableError(
                "The AI could not extract content from this source.",
                source_name=source.name,
            )
        if isinstance(result, dict):
            try:
                result = schema.model_validate(result)
            except PydanticValidationError as e:
                logger.error(
                    f"{__name__}:_structured - INVALID schema={schema.__name__} - {e.error_count()} errors"
                )
                raise SourceUnreadableError(
                    "The AI returned content that does not match the expected format.",
                    source_name=source.name,
                ) from e
        return self._finalize(result, source)

    @staticmethod
    def _finalize(result: ResultT, source: SourceMaterial) -> ResultT:
        """Fill in a fallback title and stable item ids."""
        updates: dict[str, Any] = {}
        if not getattr(result, "title", "").strip():
            updates["title"] = strip_extension(source.name)
        quiz = getattr(result, "quiz", None)
        if quiz is not None:
            updates["quiz"] = [q.model_copy(update={"id": f"q-{i}"}) for i, q in enumerate(quiz)]
        flashcards = getattr(result, "flashcards", None)
        if flashcards is not None:
            updates["flashcards"] = [
                f.model_copy(update={"id": f"fc-{i}"}) for i, f in enumerate(flashcards)
            ]
        return result.model_copy(update=updates) if updates else result

    async def summarize(self, source: SourceMaterial) -> SummaryResult:
        """Generate a titled point-wise markdown summary."""
        return await self._structured(source, TOOL_INSTRUCTIONS[LabTool.SUMMARY], SummaryResult)

    async def generate_quiz(self, source: SourceMaterial) -> QuizResult:
        """Generate a titled multiple-choice quiz."""
        return await self._structured(source, TOOL_INSTRUCTIONS[LabTool.QUIZ], QuizResult)

    async def generate_slides(self, source: SourceMaterial) -> SlidesResult:
        """Generate a titled slide deck."""
        return await self._structured(source, TOOL_INSTRUCTIONS[LabTool.SLIDES], SlidesResult)

    async def unified_generate(self, source: SourceMaterial) -> UnifiedResult:
        """Generate summary, quiz, slides and flashcards in one request."""
        return await self._structured(source, UNIFIED_INSTRUCTIONS, UnifiedResult)

    async def generate_for_tool(
        self, source: SourceMaterial, tool: LabTool
    ) -> ToolResult:
        """Dispatch to the generator matching a lab tool."""
        return await self._structured(source, TOOL_INSTRUCTIONS[tool], TOOL_SCHEMAS[tool])

    # ---------------------------------------------------------------- chat

    @staticmethod
    def _chat_messages(
        history: Sequence[Message], message: str, mode: AIMode
    ) -> list[BaseMessage]:
        messages: list[BaseMessage] = [SystemMessage(content=get_system_prompt(mode))]
        for past in history:
            if past.role == MessageRole.USER:
                messages.append(HumanMessage(content=past.content))
            else:
                messages.append(AIMessage(content=past.content))
        messages.append(HumanMessage(content=message))
        return messages

    async def chat_turn(self, history: Sequence[Message], message: str, mode: AIMode) -> str:
        """
        Produce the model reply for one chat turn.

        Args:
            history: Prior transcript (oldest first), excluding message
            message: New user message
            mode: Chat mode selecting the system prompt

        Returns:
            str: Model reply text

        Raises:
            GenerationServiceError: If the model call fails
        """
        try:
            response = await self._model.ainvoke(self._chat_messages(history, message, mode))
        except Exception as e:
            logger.error(f"{__name__}:chat_turn - FAILED - {type(e).__name__}: {e}")
            raise classify_error(e) from e
        return message_text(response.content)

    async def stream_chat_turn(
        self, history: Sequence[Message], message: str, mode: AIMode
    ) -> AsyncIterator[str]:
        """
        Stream one chat turn, yielding the accumulated reply after each chunk.

        Raises:
            GenerationServiceError: If the model call fails mid-stream
        """
        accumulated = ""
        try:
            async for chunk in self._model.astream(self._chat_messages(history, message, mode)):
                piece = message_text(chunk.content)
                if not piece:
                    continue
                accumulated += piece
                yield accumulated
        except Exception as e:
            logger.error(f"{__name__}:stream_chat_turn - FAILED - {type(e).__name__}: {e}")
            raise classify_error(e) from e
