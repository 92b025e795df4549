"""
Shared test fixtures and configuration for entire test suite.

Provides: in-memory local store, remote mirror fakes (reachable and
unreachable), sync coordinator wiring, sample users and sources.
Dependencies: pytest, pytest-asyncio, sqlalchemy, aiosqlite
System role: Test infrastructure and fixture management
"""

from unittest.mock import AsyncMock

import pytest

from studyeasier.application.services.sync_coordinator import SyncCoordinator
from studyeasier.boundary.db.local_store import LocalStore
from studyeasier.boundary.remote.remote_mirror import RemoteMirror
from studyeasier.configs.local_store import LocalStoreSettings
from studyeasier.models.common import RemoteResult
from studyeasier.models.generation import SourceMaterial

REMOTE_OPERATIONS = (
    "upsert_chat",
    "upsert_messages",
    "insert_chat",
    "delete_chat",
    "insert_asset",
    "delete_asset",
    "delete_all_assets_for_user",
)


def make_remote_mirror(available: bool = True) -> AsyncMock:
    """
    Build a RemoteMirror double with every operation configured.

    Args:
        available: True for a reachable (empty) remote, False for one whose
            every call reports unavailable

    Returns:
        AsyncMock: Mock with RemoteMirror's interface
    """
    mirror = AsyncMock(spec=RemoteMirror)
    if available:
        mirror.fetch_chats.return_value = RemoteResult.success([], "fetch_chats")
        mirror.fetch_assets.return_value = RemoteResult.success([], "fetch_assets")
        for name in REMOTE_OPERATIONS:
            getattr(mirror, name).return_value = RemoteResult.success(None, name)
    else:
        mirror.fetch_chats.return_value = RemoteResult.unavailable("offline", "fetch_chats")
        mirror.fetch_assets.return_value = RemoteResult.unavailable("offline", "fetch_assets")
        for name in REMOTE_OPERATIONS:
            getattr(mirror, name).return_value = RemoteResult.unavailable("offline", name)
    return mirror


@pytest.fixture
def local_settings() -> LocalStoreSettings:
    """In-memory local store settings."""
    return LocalStoreSettings(path=":memory:")


@pytest.fixture
async def local_store(local_settings: LocalStoreSettings):
    """
    Provide an opened in-memory local store.

    Yields:
        LocalStore: Store with schema created, closed after the test
    """
    store = LocalStore(local_settings)
    await store.init()
    yield store
    await store.close()


@pytest.fixture
def online_mirror() -> AsyncMock:
    """Reachable remote mirror with no data."""
    return make_remote_mirror(available=True)


@pytest.fixture
def offline_mirror() -> AsyncMock:
    """Remote mirror that reports every call as unavailable."""
    return make_remote_mirror(available=False)


@pytest.fixture
def offline_coordinator(local_store: LocalStore, offline_mirror: AsyncMock) -> SyncCoordinator:
    """Coordinator whose remote leg always fails."""
    return SyncCoordinator(local_store, offline_mirror)


@pytest.fixture
def online_coordinator(local_store: LocalStore, online_mirror: AsyncMock) -> SyncCoordinator:
    """Coordinator with a reachable remote leg."""
    return SyncCoordinator(local_store, online_mirror)


@pytest.fixture
def user_id() -> str:
    return "u1"


@pytest.fixture
def other_user_id() -> str:
    return "u2"


@pytest.fixture
def pdf_source() -> SourceMaterial:
    """Minimal PDF byte source."""
    return SourceMaterial(
        data=b"%PDF-1.4\n1 0 obj\n<< >>\nendobj\n",
        mime_type="application/pdf",
        name="lecture.pdf",
    )
