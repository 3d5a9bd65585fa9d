"""
Coordinate and address value types.

A coordinate (kind:pubkey:identifier) is the canonical identity of an
addressable event. Only the latest event published under a coordinate is
live, so drives and folders reference each other by coordinate rather than
by event id.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from ..exceptions import InvalidFormatError, InvalidValueError
from ..kinds import ADDRESSABLE_MAX_KIND, ADDRESSABLE_MIN_KIND

PUBKEY_PATTERN = re.compile(r"[0-9a-f]{64}", re.IGNORECASE)
_KIND_SEGMENT = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class Coordinate:
    """Identity of an addressable event.

    Equality is exact on all three fields. The pubkey is validated
    case-insensitively but never normalized.

    Attributes:
        kind: Event kind, within the addressable range
        pubkey: Owner public key, 64 hex characters
        identifier: Value of the d tag; may be empty
    """

    kind: int
    pubkey: str
    identifier: str

    def __post_init__(self) -> None:
        if isinstance(self.kind, bool) or not isinstance(self.kind, int):
            raise InvalidValueError("kind", "must be an integer", self.kind)

        if not self.is_addressable(self.kind):
            raise InvalidValueError(
                "kind",
                f"{self.kind} is not addressable "
                f"(must be {ADDRESSABLE_MIN_KIND}-{ADDRESSABLE_MAX_KIND})",
                self.kind,
            )

        if not self.pubkey:
            raise InvalidValueError("pubkey", "cannot be empty")

        if not isinstance(self.pubkey, str) or not PUBKEY_PATTERN.fullmatch(self.pubkey):
            raise InvalidValueError(
                "pubkey", "must be a valid 64-character hex string", self.pubkey
            )

        if not isinstance(self.identifier, str):
            raise InvalidValueError("identifier", "must be a string", self.identifier)

    @staticmethod
    def is_addressable(kind: int) -> bool:
        """Check whether a kind falls in the addressable range."""
        return ADDRESSABLE_MIN_KIND <= kind <= ADDRESSABLE_MAX_KIND

    @classmethod
    def parse(cls, value: str) -> Coordinate:
        """Parse a coordinate string (kind:pubkey:identifier).

        The identifier may itself contain colons; only the first two
        separate fields.

        Raises:
            InvalidFormatError: If there are fewer than three segments or
                the kind segment is not numeric
            InvalidValueError: If the parsed fields are invalid
        """
        parts = value.split(":", 2)

        if len(parts) != 3:
            raise InvalidFormatError(value, "expected 'kind:pubkey:identifier'")

        if not _KIND_SEGMENT.fullmatch(parts[0]):
            raise InvalidFormatError(value, "kind must be numeric")

        return cls(int(parts[0]), parts[1], parts[2])

    def with_identifier(self, identifier: str) -> Coordinate:
        """Coordinate of the same kind and owner under another identifier."""
        return Coordinate(self.kind, self.pubkey, identifier)

    def __str__(self) -> str:
        return f"{self.kind}:{self.pubkey}:{self.identifier}"


@dataclass(frozen=True)
class Address:
    """An owner public key plus optional relay hints.

    Used for lookups that are not coordinate based, and as the owner
    argument when creating drives and folders.
    """

    pubkey: str
    relays: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # Accept any iterable of relays but store a tuple
        if not isinstance(self.relays, tuple):
            object.__setattr__(self, "relays", tuple(self.relays))

    def coordinate(self, kind: int, identifier: str) -> Coordinate:
        """Coordinate of an object of this owner."""
        return Coordinate(kind, self.pubkey, identifier)

    def __str__(self) -> str:
        return self.pubkey
