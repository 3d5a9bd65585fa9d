"""Folder service: folder lifecycle and membership editing."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from ..codec import folder_to_record, record_to_folder
from ..config import DriveConfig
from ..domain.coordinate import Address, Coordinate
from ..domain.entry import FolderEntry
from ..domain.folder import Folder
from ..exceptions import DuplicateEntryError, NotFoundError, ValidationError
from ..kinds import FOLDER_KIND
from ..records import EventRecord
from ..store import EventStore
from ..validation import KindValidator
from .base import AggregateService, Clock, owner_pubkey


def _as_entry(item: FolderEntry | Coordinate) -> FolderEntry:
    return item if isinstance(item, FolderEntry) else FolderEntry(item)


class FolderService(AggregateService[Folder]):
    """Create folders and edit their ordered membership.

    Membership edits read the latest folder version, apply the change and
    publish a replacement. Edits are not guarded against concurrent writers:
    the last publish wins.
    """

    KIND = FOLDER_KIND
    LABEL = "folder"

    def __init__(
        self,
        store: EventStore,
        validator: KindValidator | None = None,
        clock: Clock | None = None,
    ):
        """Initialize the folder service.

        Args:
            store: Event store used for reads and publishes
            validator: Member kind policy. Defaults to KindValidator().
            clock: Source of created_at timestamps (unix seconds)
        """
        super().__init__(store, clock)
        self.validator = validator or KindValidator()

    @classmethod
    def from_config(cls, store: EventStore, config: DriveConfig) -> FolderService:
        return cls(store, validator=config.kind_validator())

    def _encode(self, aggregate: Folder) -> EventRecord:
        return folder_to_record(aggregate)

    def _decode(self, record: EventRecord) -> Folder:
        return record_to_folder(record)

    def _validate_entries(self, items: Iterable[FolderEntry | Coordinate]) -> list[FolderEntry]:
        entries = [_as_entry(item) for item in items]
        for entry in entries:
            self.validator.validate(entry.kind)
        return entries

    async def create(
        self,
        owner: Address | str,
        identifier: str,
        title: str | None = None,
        description: str | None = None,
        entries: Iterable[FolderEntry | Coordinate] = (),
    ) -> Folder:
        """Create and publish a new folder.

        Raises:
            ValidationError: If the identifier is empty
            InvalidValueError: If the owner pubkey is invalid
            InvalidKindError: If an entry kind is not allowed
            DuplicateEntryError: If entries repeat a coordinate
        """
        self._check_identifier(identifier)
        coordinate = Coordinate(FOLDER_KIND, owner_pubkey(owner), identifier)
        validated = self._validate_entries(entries)

        folder = Folder(coordinate, title=title, description=description)
        folder.set_entries(validated)

        await self._publish(folder)
        return folder

    async def add_entry(
        self,
        folder_coordinate: Coordinate,
        entry_coordinate: Coordinate,
        relay_hint: str | None = None,
        last_seen_event_id: str | None = None,
        name_hint: str | None = None,
    ) -> Folder:
        """Append a member to a folder.

        Raises:
            InvalidKindError: If the member kind is not allowed (before any
                store call)
            NotFoundError: If the folder does not exist
            DuplicateEntryError: If the member is already in the folder
        """
        self._check_kind(folder_coordinate)
        self.validator.validate(entry_coordinate.kind)

        folder = await self.get(folder_coordinate)
        folder.add_entry(
            FolderEntry(entry_coordinate, relay_hint, last_seen_event_id, name_hint)
        )
        await self._publish(folder)
        return folder

    async def remove_entry(self, folder_coordinate: Coordinate, entry_coordinate: Coordinate) -> Folder:
        """Remove a member. Removing a non-member is a no-op and publishes nothing."""
        folder = await self.get(folder_coordinate)
        if folder.remove_entry(entry_coordinate) is None:
            self._log.debug(
                "%s not in folder %s, nothing to remove", entry_coordinate, folder_coordinate,
                extra={"coordinate": str(folder_coordinate)},
            )
            return folder

        await self._publish(folder)
        return folder

    async def move_entry(
        self,
        source: Coordinate,
        destination: Coordinate,
        entry_coordinate: Coordinate,
    ) -> tuple[Folder, Folder]:
        """Move a member to the end of another folder, keeping its hints.

        The source is published before the destination. The two publishes
        are independent: if the second one fails the entry is left out of
        both folders.

        Raises:
            InvalidKindError: If the member kind is not allowed (before any
                store call)
            ValidationError: If source and destination are the same folder
            NotFoundError: If the entry is not in the source folder
            DuplicateEntryError: If the destination already holds the entry
        """
        self._check_kind(source)
        self._check_kind(destination)
        if source == destination:
            raise ValidationError(
                "Source and destination folders must differ", field="destination", value=str(destination)
            )
        self.validator.validate(entry_coordinate.kind)

        source_folder = await self.get(source)
        entry = source_folder.get_entry(entry_coordinate)
        if entry is None:
            raise NotFoundError(
                f"{entry_coordinate} is not a member of folder {source}", str(entry_coordinate)
            )

        destination_folder = await self.get(destination)
        if destination_folder.has_entry(entry_coordinate):
            raise DuplicateEntryError(str(destination), str(entry_coordinate))

        source_folder.remove_entry(entry_coordinate)
        destination_folder.add_entry(entry)

        await self._publish(source_folder)
        await self._publish(destination_folder)
        return source_folder, destination_folder

    async def reorder_entries(
        self,
        folder_coordinate: Coordinate,
        coordinates: Sequence[Coordinate],
    ) -> Folder:
        """Reorder all members of a folder.

        Raises:
            ValidationError: If coordinates is not a permutation of the members
        """
        folder = await self.get(folder_coordinate)
        folder.reorder_entries(coordinates)
        await self._publish(folder)
        return folder

    async def set_entries(
        self,
        folder_coordinate: Coordinate,
        entries: Iterable[FolderEntry | Coordinate],
    ) -> Folder:
        """Replace the whole membership of a folder.

        Raises:
            InvalidKindError: If an entry kind is not allowed (before any store call)
            DuplicateEntryError: If entries repeat a coordinate
        """
        self._check_kind(folder_coordinate)
        validated = self._validate_entries(entries)

        folder = await self.get(folder_coordinate)
        folder.set_entries(validated)
        await self._publish(folder)
        return folder

    async def update_entry_hints(
        self,
        folder_coordinate: Coordinate,
        entry_coordinate: Coordinate,
        relay_hint: str | None = None,
        last_seen_event_id: str | None = None,
        name_hint: str | None = None,
    ) -> Folder:
        """Update the cached hints of a member.

        Only provided values are updated; None values are left unchanged.

        Raises:
            NotFoundError: If the entry is not in the folder
        """
        folder = await self.get(folder_coordinate)
        entry = folder.get_entry(entry_coordinate)
        if entry is None:
            raise NotFoundError(
                f"{entry_coordinate} is not a member of folder {folder_coordinate}",
                str(entry_coordinate),
            )

        folder.replace_entry(entry.with_hints(relay_hint, last_seen_event_id, name_hint))
        await self._publish(folder)
        return folder
