"""
Test suite for domain models.

Tests title derivation, asset content validation, quiz answer bounds,
source material rules and remote row mapping.

System role: Verification of domain contracts
"""

from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from studyeasier.boundary.remote.row_mappers import (
    asset_to_row,
    chat_to_row,
    message_to_row,
    row_to_asset,
    row_to_chat,
)
from studyeasier.models.asset import AssetDraft, LabAsset, LabTool, QuizQuestion, Slide
from studyeasier.models.chat import DEFAULT_CHAT_TITLE, AIMode, ChatSession, Message, MessageRole
from studyeasier.models.common import RemoteResult
from studyeasier.models.generation import SourceMaterial


class TestDeriveTitle:
    """Test suite for ChatSession.derive_title()."""

    def test_short_message_should_become_title(self) -> None:
        chat = ChatSession(user_id="u1").with_message(
            Message(role=MessageRole.USER, content="  What is DNA?  ")
        )

        assert chat.derive_title().title == "What is DNA?"

    def test_long_message_should_be_truncated_with_ellipsis(self) -> None:
        content = "a" * 45
        chat = ChatSession(user_id="u1").with_message(Message(role=MessageRole.USER, content=content))

        assert chat.derive_title().title == "a" * 30 + "..."

    def test_custom_title_should_be_kept(self) -> None:
        chat = ChatSession(user_id="u1", title="Exam prep").with_message(
            Message(role=MessageRole.USER, content="Hello")
        )

        assert chat.derive_title().title == "Exam prep"

    def test_chat_without_user_message_should_keep_default(self) -> None:
        chat = ChatSession(user_id="u1").with_message(Message(role=MessageRole.MODEL, content="Hi"))

        assert chat.derive_title().title == DEFAULT_CHAT_TITLE

    def test_with_message_should_not_mutate_original(self) -> None:
        chat = ChatSession(user_id="u1")

        chat.with_message(Message(role=MessageRole.USER, content="x"))

        assert chat.messages == []


class TestAssetValidation:
    """Test suite for asset content shape checks."""

    def test_summary_requires_text(self) -> None:
        with pytest.raises(ValidationError):
            AssetDraft(
                title="T",
                type=LabTool.SUMMARY,
                content=[QuizQuestion(question="q", options=["a"], correct_answer=0)],
            )

    def test_quiz_requires_questions(self) -> None:
        with pytest.raises(ValidationError):
            AssetDraft(title="T", type=LabTool.QUIZ, content="text")

    def test_slides_content_should_parse_from_dicts(self) -> None:
        draft = AssetDraft(
            title="T",
            type=LabTool.SLIDES,
            content=[{"slide_title": "Intro", "bullets": ["a", "b"]}],
        )

        assert isinstance(draft.content[0], Slide)

    def test_correct_answer_must_index_options(self) -> None:
        with pytest.raises(ValidationError):
            QuizQuestion(question="q", options=["a", "b"], correct_answer=2)

    def test_from_draft_should_assign_identity(self) -> None:
        draft = AssetDraft(title="T", type=LabTool.SUMMARY, content="# x")

        first = LabAsset.from_draft("u1", draft)
        second = LabAsset.from_draft("u1", draft)

        assert first.id != second.id
        assert first.user_id == "u1"
        assert first.timestamp.tzinfo is not None


class TestSourceMaterial:
    """Test suite for SourceMaterial validation."""

    def test_requires_exactly_one_of_data_or_url(self) -> None:
        with pytest.raises(ValidationError):
            SourceMaterial()
        with pytest.raises(ValidationError):
            SourceMaterial(data=b"x", mime_type="text/plain", url="https://example.com/a.txt")

    def test_byte_source_requires_mime_type(self) -> None:
        with pytest.raises(ValidationError):
            SourceMaterial(data=b"x")

    def test_name_should_default_to_url_or_upload(self) -> None:
        assert SourceMaterial(url="https://example.com/a.pdf").name == "https://example.com/a.pdf"
        assert SourceMaterial(data=b"x", mime_type="text/plain").name == "upload"


class TestRemoteResult:
    """Test suite for RemoteResult factories."""

    def test_success_and_unavailable(self) -> None:
        ok = RemoteResult.success([1], "fetch_chats")
        down = RemoteResult.unavailable("offline", "fetch_chats")

        assert ok.ok and ok.data == [1] and ok.error is None
        assert not down.ok and down.data is None and down.error == "offline"


class TestRowMappers:
    """Test suite for remote row translation."""

    def test_chat_round_trip_should_preserve_fields(self) -> None:
        # Arrange
        start = datetime(2026, 3, 1, 9, 0, tzinfo=timezone.utc)
        first = Message(id="m1", role=MessageRole.USER, content="Hi", timestamp=start)
        second = Message(
            id="m2", role=MessageRole.MODEL, content="Hello", timestamp=start + timedelta(seconds=5)
        )
        chat = ChatSession(
            user_id="u1",
            title="Greetings",
            mode=AIMode.WRITING,
            messages=[first, second],
            created_at=start,
            updated_at=start,
        )

        # Act
        row = chat_to_row(chat)
        row["messages"] = [message_to_row(chat.id, m) for m in reversed(chat.messages)]
        restored = row_to_chat(row)

        # Assert
        assert "messages" not in chat_to_row(chat)
        assert restored == chat

    def test_asset_row_should_use_created_at(self) -> None:
        asset = LabAsset(
            user_id="u1",
            title="Quiz",
            type=LabTool.QUIZ,
            content=[QuizQuestion(id="q-0", question="q", options=["a", "b"], correct_answer=1)],
            source_name="lecture.pdf",
        )

        row = asset_to_row(asset)

        assert "timestamp" not in row
        assert row["content"][0]["correct_answer"] == 1
        assert row_to_asset(row) == asset
