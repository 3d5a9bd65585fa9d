"""
nostr-drive

Drives, folders and ordered membership on top of Nostr addressable events.

Provides:
- Coordinate addressing (kind:pubkey:identifier) for replaceable objects
- Drive and Folder aggregates with validated invariants
- A tag codec between aggregates and wire records
- Services that fetch, edit and publish through a pluggable EventStore

Usage:

    >>> from nostr_drive import Coordinate, FolderService, InMemoryEventStore
    >>> folders = FolderService(InMemoryEventStore())
    >>> folder = await folders.create(pubkey, "themes", title="Themes")
    >>> article = Coordinate(30023, pubkey, "hello-world")
    >>> await folders.add_entry(folder.coordinate, article, name_hint="Hello")

Configuration:

    # Allow-list and logging from NOSTR_DRIVE_* environment variables
    from nostr_drive import DriveConfig, create_services
    config = DriveConfig.from_env()
    config.configure_logging()
    drives, folders = create_services(store, config)
"""

from .codec import (
    decode_entry_tag,
    drive_to_record,
    encode_entry_tag,
    folder_to_record,
    record_to_drive,
    record_to_folder,
)
from .config import DriveConfig
from .domain import Address, Coordinate, Drive, Folder, FolderEntry

# Exceptions
from .exceptions import (
    DriveError,
    DuplicateEntryError,
    InvalidFormatError,
    InvalidKindError,
    InvalidValueError,
    NotFoundError,
    PublishError,
    ValidationError,
)
from .kinds import DRIVE_KIND, FOLDER_KIND, MEMBER_KINDS
from .records import EventRecord
from .services import DriveService, FolderService, create_services
from .store import EventStore, InMemoryEventStore
from .validation import KindValidator

__all__ = [
    # Domain
    "Address",
    "Coordinate",
    "Drive",
    "Folder",
    "FolderEntry",
    # Kinds
    "DRIVE_KIND",
    "FOLDER_KIND",
    "MEMBER_KINDS",
    "KindValidator",
    # Codec
    "EventRecord",
    "decode_entry_tag",
    "drive_to_record",
    "encode_entry_tag",
    "folder_to_record",
    "record_to_drive",
    "record_to_folder",
    # Store and services
    "EventStore",
    "InMemoryEventStore",
    "DriveService",
    "FolderService",
    "DriveConfig",
    "create_services",
    # Exceptions
    "DriveError",
    "InvalidFormatError",
    "InvalidValueError",
    "ValidationError",
    "InvalidKindError",
    "NotFoundError",
    "DuplicateEntryError",
    "PublishError",
]

__version__ = "0.1.0"
