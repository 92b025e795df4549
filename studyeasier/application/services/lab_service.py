"""
Lab service for generating and filing study assets.

Runs a lab tool over uploaded material and files the result in the vault
through the sync coordinator.

Dependencies: studyeasier.core.content_generation, studyeasier.application.services.sync_coordinator
System role: Knowledge lab orchestration layer
"""

import logging

from studyeasier.application.services.sync_coordinator import SyncCoordinator
from studyeasier.core.content_generation.content_generator import ContentGenerator
from studyeasier.models.asset import AssetDraft, LabAsset, LabTool
from studyeasier.models.generation import SourceMaterial, ToolResult

logger = logging.getLogger(__name__)


CONTENT_FIELDS = {
    LabTool.SUMMARY: "summary",
    LabTool.QUIZ: "quiz",
    LabTool.SLIDES: "slides",
}


def result_content(result: ToolResult, tool: LabTool):
    """Extract the asset content field for a tool from a generation result."""
    return getattr(result, CONTENT_FIELDS[tool])


def filter_assets(assets: list[LabAsset], tool: LabTool | None = None) -> list[LabAsset]:
    """Vault filter: all assets, or only those of one type."""
    if tool is None:
        return list(assets)
    return [a for a in assets if a.type == tool]


class LabService:
    """Generate-then-save workflow for summaries, quizzes and slide decks."""

    def __init__(self, coordinator: SyncCoordinator, generator: ContentGenerator) -> None:
        """
        Initialize lab service.

        Args:
            coordinator: Sync coordinator for asset persistence
            generator: Content generator for lab tools
        """
        self.coordinator = coordinator
        self.generator = generator

    async def process_source(
        self,
        user_id: str,
        source: SourceMaterial,
        tool: LabTool,
    ) -> tuple[ToolResult, list[LabAsset]]:
        """
        Run a lab tool and auto-save the result to the vault.

        Args:
            user_id: Owning user identifier
            source: Uploaded bytes or URL
            tool: Lab tool to run

        Returns:
            tuple: (generation result, user's assets after the save)

        Raises:
            SourceUnreadableError: If the source cannot be processed
            GenerationServiceError: If the service fails transiently
        """
        result = await self.generator.generate_for_tool(source, tool)

        draft = AssetDraft(
            title=result.title or source.name,
            type=tool,
            content=result_content(result, tool),
            source_name=source.name,
        )
        assets = await self.coordinator.save_asset(user_id, draft)
        logger.info(f"{__name__}:process_source - {tool.value} saved for '{source.name}'")
        return result, assets
