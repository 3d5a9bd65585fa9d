"""Drive service: drive lifecycle and root folder editing."""

from __future__ import annotations

from collections.abc import Iterable

from ..codec import drive_to_record, record_to_drive, record_to_folder
from ..domain.coordinate import Address, Coordinate
from ..domain.drive import Drive
from ..domain.folder import Folder
from ..kinds import DRIVE_KIND
from ..records import EventRecord
from .base import AggregateService, owner_pubkey


class DriveService(AggregateService[Drive]):
    """Create drives and edit their root folders.

    Like FolderService, edits are read-modify-write without concurrency
    tokens; the last publish wins.
    """

    KIND = DRIVE_KIND
    LABEL = "drive"

    def _encode(self, aggregate: Drive) -> EventRecord:
        return drive_to_record(aggregate)

    def _decode(self, record: EventRecord) -> Drive:
        return record_to_drive(record)

    async def create(
        self,
        owner: Address | str,
        identifier: str,
        title: str | None = None,
        description: str | None = None,
        roots: Iterable[Coordinate] = (),
    ) -> Drive:
        """Create and publish a new drive.

        Raises:
            ValidationError: If the identifier is empty or a root is not a folder
            InvalidValueError: If the owner pubkey is invalid
            DuplicateEntryError: If roots repeat a coordinate
        """
        self._check_identifier(identifier)
        coordinate = Coordinate(DRIVE_KIND, owner_pubkey(owner), identifier)

        drive = Drive(coordinate, title=title, description=description)
        drive.set_roots(roots)

        await self._publish(drive)
        return drive

    async def set_roots(self, drive_coordinate: Coordinate, roots: Iterable[Coordinate]) -> Drive:
        """Replace the root folders of a drive."""
        new_roots = list(roots)
        drive = await self.get(drive_coordinate)
        drive.set_roots(new_roots)
        await self._publish(drive)
        return drive

    async def add_root(self, drive_coordinate: Coordinate, folder_coordinate: Coordinate) -> Drive:
        """Append a root folder.

        Raises:
            ValidationError: If the coordinate is not a folder
            DuplicateEntryError: If it is already a root
        """
        drive = await self.get(drive_coordinate)
        drive.add_root(folder_coordinate)
        await self._publish(drive)
        return drive

    async def remove_root(self, drive_coordinate: Coordinate, folder_coordinate: Coordinate) -> Drive:
        """Remove a root folder. Removing a non-root publishes nothing."""
        drive = await self.get(drive_coordinate)
        if drive.remove_root(folder_coordinate):
            await self._publish(drive)
        return drive

    async def get_root_folders(self, drive_coordinate: Coordinate) -> list[Folder]:
        """Resolve the root folders of a drive in root order.

        Roots the store has no record for are skipped.
        """
        drive = await self.get(drive_coordinate)
        if not drive.roots:
            return []

        records = await self.store.get_latest_by_coordinates(drive.roots)
        return [record_to_folder(records[root]) for root in drive.roots if root in records]
