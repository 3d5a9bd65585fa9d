"""Folder membership entries."""

from __future__ import annotations

from dataclasses import dataclass, replace

from .coordinate import Coordinate


@dataclass(frozen=True, eq=False)
class FolderEntry:
    """One member of a folder.

    An entry is identified by its coordinate alone; the hints are caches
    that help clients fetch the target and never affect equality.

    Attributes:
        coordinate: Coordinate of the member event
        relay_hint: Relay where the member was last seen
        last_seen_event_id: Id of the member version last seen
        name_hint: Display name to show before the member is fetched
    """

    coordinate: Coordinate
    relay_hint: str | None = None
    last_seen_event_id: str | None = None
    name_hint: str | None = None

    @property
    def kind(self) -> int:
        return self.coordinate.kind

    def with_hints(
        self,
        relay_hint: str | None = None,
        last_seen_event_id: str | None = None,
        name_hint: str | None = None,
    ) -> FolderEntry:
        """Return a copy with updated hints.

        Only provided values are updated; None values keep the prior hint.
        """
        changes = {}
        if relay_hint is not None:
            changes["relay_hint"] = relay_hint
        if last_seen_event_id is not None:
            changes["last_seen_event_id"] = last_seen_event_id
        if name_hint is not None:
            changes["name_hint"] = name_hint
        return replace(self, **changes)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FolderEntry):
            return NotImplemented
        return self.coordinate == other.coordinate

    def __hash__(self) -> int:
        return hash(self.coordinate)
