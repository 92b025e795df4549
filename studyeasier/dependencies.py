"""
Dependency injection container.

Builds every component explicitly from settings and owns their
init/close lifecycle, so nothing lives in module-level singletons and
tests can substitute fakes per case.

Dependencies: studyeasier.configs, studyeasier.application, studyeasier.boundary
System role: DI container for service injection
"""

import logging
from dataclasses import dataclass

from studyeasier.application.adapters.identity_adapter import IdentityAdapter
from studyeasier.application.services.chat_service import ChatService
from studyeasier.application.services.lab_service import LabService
from studyeasier.application.services.sync_coordinator import SyncCoordinator
from studyeasier.boundary.db.local_store import LocalStore
from studyeasier.boundary.remote.remote_mirror import RemoteMirror
from studyeasier.boundary.remote.supabase_client import SupabaseClientProvider
from studyeasier.configs import Settings, get_settings
from studyeasier.core.content_generation.content_generator import ContentGenerator

logger = logging.getLogger(__name__)


@dataclass
class AppContainer:
    """
    Wired application components.

    Usage:
        async with build_container() as app:
            chat = await app.coordinator.create_new_chat(user.id)
    """

    settings: Settings
    local_store: LocalStore
    remote_mirror: RemoteMirror
    identity: IdentityAdapter
    coordinator: SyncCoordinator
    generator: ContentGenerator
    chat_service: ChatService
    lab_service: LabService

    async def start(self) -> None:
        """Open the local store and create the remote client."""
        await self.local_store.init()
        await self.remote_mirror.init()
        logger.info(f"{__name__}:start - Application container started")

    async def close(self) -> None:
        """Release the remote client and the local database."""
        await self.remote_mirror.close()
        await self.local_store.close()
        logger.info(f"{__name__}:close - Application container closed")

    async def __aenter__(self) -> "AppContainer":
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()


def build_container(
    settings: Settings | None = None,
    generator: ContentGenerator | None = None,
) -> AppContainer:
    """
    Construct all components without performing any I/O.

    Args:
        settings: Settings override (defaults to get_settings())
        generator: Content generator override

    Returns:
        AppContainer: Unstarted container
    """
    settings = settings or get_settings()
    provider = SupabaseClientProvider(settings.supabase)
    local_store = LocalStore(settings.local_store)
    remote_mirror = RemoteMirror(provider)
    coordinator = SyncCoordinator(local_store, remote_mirror)
    generator = generator or ContentGenerator(settings.generation)

    return AppContainer(
        settings=settings,
        local_store=local_store,
        remote_mirror=remote_mirror,
        identity=IdentityAdapter(provider, local_store),
        coordinator=coordinator,
        generator=generator,
        chat_service=ChatService(coordinator, generator),
        lab_service=LabService(coordinator, generator),
    )
