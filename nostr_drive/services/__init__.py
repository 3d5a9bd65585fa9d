"""
Drive and folder services.

Services combine the codec, the kind policy and an EventStore:

    >>> store = InMemoryEventStore()
    >>> drives, folders = create_services(store, DriveConfig.from_env())
    >>> folder = await folders.create(owner, "themes", title="Themes")
    >>> drive = await drives.create(owner, "main", roots=[folder.coordinate])
"""

from ..config import DriveConfig
from ..store import EventStore
from .base import AggregateService
from .drive_service import DriveService
from .folder_service import FolderService


def create_services(
    store: EventStore,
    config: DriveConfig | None = None,
) -> tuple[DriveService, FolderService]:
    """Build both services from one config.

    Logging is left alone; call config.configure_logging() to apply the
    configured level and format.
    """
    config = config or DriveConfig()
    return DriveService(store), FolderService.from_config(store, config)


__all__ = [
    "AggregateService",
    "DriveService",
    "FolderService",
    "create_services",
]
