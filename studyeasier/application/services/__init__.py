"""Service orchestrators."""

from .chat_service import ChatService
from .lab_service import LabService, filter_assets
from .sync_coordinator import SyncCoordinator

__all__ = [
    "ChatService",
    "LabService",
    "SyncCoordinator",
    "filter_assets",
]
