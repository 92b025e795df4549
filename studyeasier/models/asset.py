"""
Lab asset domain models.

Generated study artifacts (summaries, quizzes, slide decks) kept in the vault.

Dependencies: pydantic
System role: Asset persistence contracts
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field, model_validator

from studyeasier.models.common import new_id, utc_now


class LabTool(str, Enum):
    """Kind of generated asset."""

    SUMMARY = "summary"
    QUIZ = "quiz"
    SLIDES = "slides"


class QuizQuestion(BaseModel):
    """Multiple-choice question with the index of its correct option."""

    id: str = Field(default="", description="Stable id within the quiz (q-0, q-1, ...)")
    question: str
    options: list[str]
    correct_answer: int = Field(ge=0, description="Index into options")
    explanation: str = ""

    @model_validator(mode="after")
    def check_answer_index(self) -> "QuizQuestion":
        if self.correct_answer >= len(self.options):
            raise ValueError(
                f"correct_answer {self.correct_answer} out of range for {len(self.options)} options"
            )
        return self


class Slide(BaseModel):
    """Single slide of a generated deck."""

    slide_title: str
    bullets: list[str] = Field(default_factory=list)
    speaker_notes: str = ""


AssetContent = str | list[QuizQuestion] | list[Slide]


class AssetDraft(BaseModel):
    """Asset content before it is given an identity and owner."""

    title: str
    type: LabTool
    content: AssetContent
    source_name: str = Field(default="", description="Original file name or URL")

    @model_validator(mode="after")
    def check_content_shape(self) -> "AssetDraft":
        expected = {
            LabTool.SUMMARY: str,
            LabTool.QUIZ: QuizQuestion,
            LabTool.SLIDES: Slide,
        }[self.type]
        if expected is str:
            valid = isinstance(self.content, str)
        else:
            valid = isinstance(self.content, list) and all(
                isinstance(item, expected) for item in self.content
            )
        if not valid:
            raise ValueError(f"content does not match asset type '{self.type.value}'")
        return self


class LabAsset(AssetDraft):
    """Persisted asset, immutable once created except for deletion."""

    id: str = Field(default_factory=new_id)
    user_id: str
    timestamp: datetime = Field(default_factory=utc_now)

    @classmethod
    def from_draft(cls, user_id: str, draft: AssetDraft) -> "LabAsset":
        """Assign a fresh id and creation timestamp to a draft."""
        return cls(user_id=user_id, **draft.model_dump())
