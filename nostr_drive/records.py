"""
Wire record types.

Records use the NIP-01 event field names. Signing is the caller's concern;
records produced by this package carry no signature and, until a store
assigns one, no id.
"""

from __future__ import annotations

import hashlib
import json
from typing import TypedDict

from .domain.coordinate import Coordinate
from .exceptions import DriveError

Tag = list[str]


class EventRecord(TypedDict, total=False):
    """A published (or about to be published) event."""

    id: str | None
    kind: int
    pubkey: str
    created_at: int
    content: str
    tags: list[Tag]
    sig: str


def tag_value(tags: list[Tag], name: str) -> str | None:
    """Value of the first tag with the given name, or None if absent."""
    for tag in tags:
        if tag and tag[0] == name:
            return tag[1] if len(tag) > 1 else None
    return None


def record_coordinate(record: EventRecord) -> Coordinate | None:
    """Coordinate a record is published under.

    Returns None for records that are not addressable or carry an invalid
    pubkey.
    """
    try:
        return Coordinate(
            record["kind"],
            record["pubkey"],
            tag_value(record.get("tags", []), "d") or "",
        )
    except (KeyError, DriveError):
        return None


def compute_event_id(record: EventRecord) -> str:
    """NIP-01 event id: sha256 over the canonical serialization."""
    payload = [
        0,
        record["pubkey"],
        record["created_at"],
        record["kind"],
        record.get("tags", []),
        record.get("content", ""),
    ]
    serialized = json.dumps(payload, separators=(",", ":"), ensure_ascii=False)
    return hashlib.sha256(serialized.encode("utf-8")).hexdigest()
