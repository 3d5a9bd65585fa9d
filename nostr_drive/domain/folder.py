"""Folder aggregate (kind 30045)."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from ..exceptions import DuplicateEntryError, NotFoundError, ValidationError
from ..kinds import FOLDER_KIND
from .coordinate import Coordinate
from .entry import FolderEntry


@dataclass
class Folder:
    """An ordered collection of entries addressed by coordinate.

    Entry order is the canonical display order and is preserved on the
    wire. Mutators only change in-memory state; publishing is done by
    FolderService.

    Construction trusts the supplied entries (decoded records may carry
    duplicates); duplicate checks happen in add_entry and in the service.
    Kind policy for members is not enforced here, the service applies the
    configured KindValidator.
    """

    coordinate: Coordinate
    title: str | None = None
    description: str | None = None
    entries: list[FolderEntry] = field(default_factory=list)
    event_id: str | None = None
    created_at: int = 0
    archived: bool = False

    def __post_init__(self) -> None:
        if self.coordinate.kind != FOLDER_KIND:
            raise ValidationError(
                f"Folder coordinate must have kind {FOLDER_KIND}, got {self.coordinate.kind}",
                field="coordinate",
                value=str(self.coordinate),
            )
        self.entries = list(self.entries)

    @property
    def pubkey(self) -> str:
        return self.coordinate.pubkey

    @property
    def identifier(self) -> str:
        return self.coordinate.identifier

    def coordinates(self) -> list[Coordinate]:
        """Member coordinates in entry order."""
        return [entry.coordinate for entry in self.entries]

    def set_title(self, title: str | None) -> None:
        self.title = title

    def set_description(self, description: str | None) -> None:
        self.description = description

    def set_entries(self, entries: Iterable[FolderEntry]) -> None:
        """Replace all entries, rejecting duplicate coordinates."""
        new_entries = list(entries)
        seen: set[Coordinate] = set()
        for entry in new_entries:
            if entry.coordinate in seen:
                raise DuplicateEntryError(str(self.coordinate), str(entry.coordinate))
            seen.add(entry.coordinate)
        self.entries = new_entries

    def index_of(self, coordinate: Coordinate) -> int:
        """Position of a member, or -1 if absent."""
        for index, entry in enumerate(self.entries):
            if entry.coordinate == coordinate:
                return index
        return -1

    def has_entry(self, coordinate: Coordinate) -> bool:
        return self.index_of(coordinate) >= 0

    def get_entry(self, coordinate: Coordinate) -> FolderEntry | None:
        index = self.index_of(coordinate)
        return self.entries[index] if index >= 0 else None

    def add_entry(self, entry: FolderEntry) -> None:
        """Append an entry.

        Raises:
            DuplicateEntryError: If the coordinate is already a member
        """
        if self.has_entry(entry.coordinate):
            raise DuplicateEntryError(str(self.coordinate), str(entry.coordinate))
        self.entries.append(entry)

    def remove_entry(self, coordinate: Coordinate) -> FolderEntry | None:
        """Remove a member.

        Returns:
            The removed entry, or None if the coordinate was not a member
        """
        index = self.index_of(coordinate)
        if index < 0:
            return None
        return self.entries.pop(index)

    def replace_entry(self, entry: FolderEntry) -> None:
        """Swap in a new value for an existing member, keeping its position."""
        index = self.index_of(entry.coordinate)
        if index < 0:
            raise NotFoundError(
                f"{entry.coordinate} is not a member of {self.coordinate}",
                target=str(entry.coordinate),
            )
        self.entries[index] = entry

    def reorder_entries(self, coordinates: Sequence[Coordinate]) -> None:
        """Reorder entries to match a full permutation of the members.

        Partial orderings are rejected rather than merged.

        Raises:
            ValidationError: If the coordinates are not exactly the current members
        """
        if len(coordinates) != len(self.entries):
            raise ValidationError(
                f"Reorder requires all {len(self.entries)} entries, got {len(coordinates)}",
                field="coordinates",
            )

        by_coordinate = {entry.coordinate: entry for entry in self.entries}
        reordered: list[FolderEntry] = []
        for coordinate in coordinates:
            entry = by_coordinate.pop(coordinate, None)
            if entry is None:
                # Either not a member, or listed twice
                raise ValidationError(
                    f"{coordinate} is not a member of {self.coordinate} or is repeated",
                    field="coordinates",
                    value=str(coordinate),
                )
            reordered.append(entry)
        self.entries = reordered
