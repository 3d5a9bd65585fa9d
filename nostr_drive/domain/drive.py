"""Drive aggregate (kind 30042)."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from ..exceptions import DuplicateEntryError, ValidationError
from ..kinds import DRIVE_KIND, FOLDER_KIND
from .coordinate import Coordinate


def _check_root(coordinate: Coordinate) -> None:
    if coordinate.kind != FOLDER_KIND:
        raise ValidationError(
            f"Drive roots must be folders (kind {FOLDER_KIND}), got kind {coordinate.kind}",
            field="roots",
            value=str(coordinate),
        )


@dataclass
class Drive:
    """Root of a namespace: an ordered list of top-level folder coordinates.

    Every root must be a folder coordinate; this is checked on construction
    and by each mutator.
    """

    coordinate: Coordinate
    title: str | None = None
    description: str | None = None
    roots: list[Coordinate] = field(default_factory=list)
    event_id: str | None = None
    created_at: int = 0
    archived: bool = False

    def __post_init__(self) -> None:
        if self.coordinate.kind != DRIVE_KIND:
            raise ValidationError(
                f"Drive coordinate must have kind {DRIVE_KIND}, got {self.coordinate.kind}",
                field="coordinate",
                value=str(self.coordinate),
            )
        self.roots = list(self.roots)
        for root in self.roots:
            _check_root(root)

    @property
    def pubkey(self) -> str:
        return self.coordinate.pubkey

    @property
    def identifier(self) -> str:
        return self.coordinate.identifier

    def set_title(self, title: str | None) -> None:
        self.title = title

    def set_description(self, description: str | None) -> None:
        self.description = description

    def set_roots(self, roots: Iterable[Coordinate]) -> None:
        """Replace all roots. Roots must be distinct folder coordinates."""
        new_roots = list(roots)
        seen: set[Coordinate] = set()
        for root in new_roots:
            _check_root(root)
            if root in seen:
                raise DuplicateEntryError(str(self.coordinate), str(root))
            seen.add(root)
        self.roots = new_roots

    def has_root(self, coordinate: Coordinate) -> bool:
        return coordinate in self.roots

    def add_root(self, coordinate: Coordinate) -> None:
        _check_root(coordinate)
        if self.has_root(coordinate):
            raise DuplicateEntryError(str(self.coordinate), str(coordinate))
        self.roots.append(coordinate)

    def remove_root(self, coordinate: Coordinate) -> bool:
        """Remove a root. Returns False if it was not present."""
        if not self.has_root(coordinate):
            return False
        self.roots.remove(coordinate)
        return True
