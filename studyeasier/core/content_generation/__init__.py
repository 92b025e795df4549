"""
Content generation package.

Exports:
  - ContentGenerator: Gemini-backed summaries, quizzes, slides and chat turns
  - SourceLoader: Source validation and URL download
"""

from studyeasier.core.content_generation.content_generator import ContentGenerator, classify_error
from studyeasier.core.content_generation.source_loader import SourceLoader

__all__ = ["ContentGenerator", "SourceLoader", "classify_error"]
