"""
Test suite for LabService.

Tests the generate-then-save workflow with a mocked content generator and
an offline sync coordinator.

System role: Verification of knowledge lab orchestration
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from studyeasier.application.services.lab_service import LabService, filter_assets
from studyeasier.application.services.sync_coordinator import SyncCoordinator
from studyeasier.core.content_generation.content_generator import ContentGenerator
from studyeasier.core.exceptions import SourceUnreadableError
from studyeasier.models.asset import LabAsset, LabTool, QuizQuestion, Slide
from studyeasier.models.generation import QuizResult, SlidesResult, SourceMaterial, SummaryResult


@pytest.fixture
def mock_generator() -> MagicMock:
    generator = MagicMock(spec=ContentGenerator)
    generator.generate_for_tool = AsyncMock()
    return generator


@pytest.fixture
def lab_service(offline_coordinator: SyncCoordinator, mock_generator: MagicMock) -> LabService:
    return LabService(offline_coordinator, mock_generator)


class TestProcessSource:
    """Test suite for LabService.process_source()."""

    @pytest.mark.asyncio
    async def test_process_source_should_save_summary_asset(
        self,
        lab_service: LabService,
        mock_generator: MagicMock,
        pdf_source: SourceMaterial,
        user_id: str,
    ) -> None:
        """Test a summary result is filed with its title and provenance."""
        # Arrange
        mock_generator.generate_for_tool.return_value = SummaryResult(
            title="Cell Biology", summary="- Cells are units of life"
        )

        # Act
        result, assets = await lab_service.process_source(user_id, pdf_source, LabTool.SUMMARY)

        # Assert
        assert result.title == "Cell Biology"
        assert len(assets) == 1
        assert assets[0].title == "Cell Biology"
        assert assets[0].content == "- Cells are units of life"
        assert assets[0].source_name == "lecture.pdf"
        mock_generator.generate_for_tool.assert_awaited_once_with(pdf_source, LabTool.SUMMARY)

    @pytest.mark.asyncio
    async def test_process_source_should_save_quiz_questions(
        self,
        lab_service: LabService,
        mock_generator: MagicMock,
        pdf_source: SourceMaterial,
        user_id: str,
    ) -> None:
        # Arrange
        question = QuizQuestion(id="q-0", question="2+2?", options=["3", "4"], correct_answer=1)
        mock_generator.generate_for_tool.return_value = QuizResult(title="Math", quiz=[question])

        # Act
        _, assets = await lab_service.process_source(user_id, pdf_source, LabTool.QUIZ)

        # Assert
        assert assets[0].type == LabTool.QUIZ
        assert assets[0].content == [question]

    @pytest.mark.asyncio
    async def test_process_source_should_fall_back_to_source_name_for_title(
        self,
        lab_service: LabService,
        mock_generator: MagicMock,
        pdf_source: SourceMaterial,
        user_id: str,
    ) -> None:
        """Test an untitled result is filed under the source name."""
        # Arrange
        mock_generator.generate_for_tool.return_value = SlidesResult(
            slides=[Slide(slide_title="Intro", bullets=["a"])]
        )

        # Act
        _, assets = await lab_service.process_source(user_id, pdf_source, LabTool.SLIDES)

        # Assert
        assert assets[0].title == "lecture.pdf"

    @pytest.mark.asyncio
    async def test_process_source_should_not_save_when_generation_fails(
        self,
        lab_service: LabService,
        mock_generator: MagicMock,
        pdf_source: SourceMaterial,
        user_id: str,
    ) -> None:
        """Test nothing reaches the vault when the source is unreadable."""
        # Arrange
        mock_generator.generate_for_tool.side_effect = SourceUnreadableError(
            "unreadable", source_name="lecture.pdf"
        )

        # Act
        with pytest.raises(SourceUnreadableError):
            await lab_service.process_source(user_id, pdf_source, LabTool.SUMMARY)

        # Assert
        assert await lab_service.coordinator.get_assets(user_id) == []


class TestFilterAssets:
    """Test suite for the vault type filter."""

    def test_filter_assets_should_return_all_without_tool(self) -> None:
        assets = [
            LabAsset(user_id="u1", title="a", type=LabTool.SUMMARY, content="x"),
            LabAsset(user_id="u1", title="b", type=LabTool.SLIDES, content=[]),
        ]

        assert filter_assets(assets) == assets

    def test_filter_assets_should_keep_only_matching_type(self) -> None:
        summary = LabAsset(user_id="u1", title="a", type=LabTool.SUMMARY, content="x")
        slides = LabAsset(user_id="u1", title="b", type=LabTool.SLIDES, content=[])

        assert filter_assets([summary, slides], LabTool.SLIDES) == [slides]
