"""
Source material loader.

Resolves a SourceMaterial into inline bytes and a MIME type the model
accepts, downloading URL sources over HTTP.

Dependencies: httpx, studyeasier.configs
System role: Input validation for content generation
"""

import logging
from pathlib import PurePosixPath
from urllib.parse import urlparse

import httpx

from studyeasier.configs.generation import GenerationSettings
from studyeasier.core.exceptions import GenerationServiceError, SourceUnreadableError
from studyeasier.models.generation import SourceMaterial

logger = logging.getLogger(__name__)

SUPPORTED_MIME_PREFIXES = ("application/pdf", "audio/", "image/", "text/", "video/")


def is_supported_mime_type(mime_type: str) -> bool:
    return mime_type.lower().startswith(SUPPORTED_MIME_PREFIXES)


def strip_extension(name: str) -> str:
    """Title fallback: file name (or URL path tail) without its extension."""
    tail = PurePosixPath(urlparse(name).path or name).name or name
    return PurePosixPath(tail).stem or tail


class SourceLoader:
    """Validate byte sources and fetch URL sources."""

    def __init__(
        self,
        settings: GenerationSettings,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """
        Initialize source loader.

        Args:
            settings: Generation configuration (size limit, fetch timeout)
            http_client: Optional shared HTTP client (created per call otherwise)
        """
        self._settings = settings
        self._http_client = http_client

    async def load(self, source: SourceMaterial) -> tuple[bytes, str]:
        """
        Return (bytes, mime_type) for a source.

        Raises:
            SourceUnreadableError: Empty, too large, unsupported or unreachable source
            GenerationServiceError: URL host answered with a transient error
        """
        if source.url is not None:
            data, mime_type = await self._fetch(source)
        else:
            data, mime_type = source.data or b"", source.mime_type or ""

        if not data:
            raise SourceUnreadableError("The source is empty.", source_name=source.name)
        if len(data) > self._settings.max_source_bytes:
            raise SourceUnreadableError(
                "The source is too large to process.",
                source_name=source.name,
                details={"size": len(data), "limit": self._settings.max_source_bytes},
            )
        if not is_supported_mime_type(mime_type):
            raise SourceUnreadableError(
                f"Unsupported file type: {mime_type or 'unknown'}",
                source_name=source.name,
            )
        return data, mime_type

    async def _fetch(self, source: SourceMaterial) -> tuple[bytes, str]:
        logger.info(f"{__name__}:_fetch - Downloading {source.url}")
        try:
            if self._http_client is not None:
                response = await self._http_client.get(source.url, follow_redirects=True)
            else:
                async with httpx.AsyncClient(timeout=self._settings.url_fetch_timeout) as client:
                    response = await client.get(source.url, follow_redirects=True)
        except httpx.TimeoutException as e:
            raise GenerationServiceError(
                f"Timed out downloading {source.url}", {"source_name": source.name}
            ) from e
        except httpx.HTTPError as e:
            raise SourceUnreadableError(
                f"Could not reach {source.url}", source_name=source.name
            ) from e

        if response.status_code >= 500 or response.status_code == 429:
            raise GenerationServiceError(
                f"{source.url} is temporarily unavailable (HTTP {response.status_code})",
                {"source_name": source.name},
            )
        if response.status_code >= 400:
            raise SourceUnreadableError(
                f"{source.url} returned HTTP {response.status_code}",
                source_name=source.name,
            )

        mime_type = response.headers.get("content-type", "").split(";")[0].strip()
        return response.content, mime_type
