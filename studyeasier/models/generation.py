"""
Content generation schemas.

Source material accepted by the generator and the structured results it
returns. The result models double as structured-output schemas for the LLM.

Dependencies: pydantic
System role: Content generation contracts
"""

from pydantic import BaseModel, Field, model_validator

from studyeasier.models.asset import QuizQuestion, Slide


class SourceMaterial(BaseModel):
    """Lecture material given either as raw bytes or as a URL."""

    data: bytes | None = Field(default=None, description="Raw file bytes")
    mime_type: str | None = Field(default=None, description="MIME type of data")
    url: str | None = Field(default=None, description="Remote document URL")
    name: str = Field(default="", description="File name or URL used as provenance label")

    @model_validator(mode="after")
    def check_exactly_one_source(self) -> "SourceMaterial":
        if (self.data is None) == (self.url is None):
            raise ValueError("Provide exactly one of data or url")
        if self.data is not None and not self.mime_type:
            raise ValueError("mime_type is required for byte sources")
        if not self.name:
            self.name = self.url or "upload"
        return self


class Flashcard(BaseModel):
    """Front/back revision card."""

    id: str = ""
    front: str
    back: str


class SummaryResult(BaseModel):
    """Point-wise markdown summary of the source."""

    title: str = Field(default="", description="Clear academic title")
    summary: str = Field(description="Point-wise markdown summary")


class QuizResult(BaseModel):
    """Multiple-choice quiz over the source."""

    title: str = Field(default="", description="Clear academic title")
    quiz: list[QuizQuestion] = Field(default_factory=list)


class SlidesResult(BaseModel):
    """Slide deck outline of the source."""

    title: str = Field(default="", description="Clear academic title")
    slides: list[Slide] = Field(default_factory=list)


class UnifiedResult(BaseModel):
    """Complete learning package produced in a single request."""

    title: str = Field(default="", description="Clear academic title")
    summary: str = Field(description="Point-wise markdown summary")
    quiz: list[QuizQuestion] = Field(default_factory=list)
    slides: list[Slide] = Field(default_factory=list)
    flashcards: list[Flashcard] = Field(default_factory=list)


ToolResult = SummaryResult | QuizResult | SlidesResult
