"""
Event store contract and an in-memory implementation.

The services only need four operations from the relay layer. Transport,
signing, retries and relay selection all live behind this protocol.

Replacement semantics: for each coordinate only the record with the newest
created_at is live. The in-memory store breaks created_at ties in favour of
the later publish.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Iterable
from typing import Protocol

from .domain.coordinate import Coordinate
from .records import EventRecord, compute_event_id, record_coordinate

logger = logging.getLogger(__name__)


class EventStore(Protocol):
    """Protocol for the event store the services publish to and read from."""

    async def get_latest_by_coordinate(self, coordinate: Coordinate) -> EventRecord | None: ...

    async def get_latest_by_coordinates(
        self,
        coordinates: Iterable[Coordinate],
    ) -> dict[Coordinate, EventRecord]: ...

    async def get_by_id(self, event_id: str) -> EventRecord | None: ...

    async def publish(self, record: EventRecord) -> bool: ...


class InMemoryEventStore:
    """List-backed event store for tests and local development.

    Every published record is kept (append-only); lookups by coordinate
    return the live version. Returned records are copies.
    """

    def __init__(self) -> None:
        self._records: list[EventRecord] = []
        self._by_id: dict[str, EventRecord] = {}
        self._latest: dict[Coordinate, EventRecord] = {}

    @property
    def records(self) -> list[EventRecord]:
        """All published records in publish order."""
        return [copy.deepcopy(record) for record in self._records]

    async def get_latest_by_coordinate(self, coordinate: Coordinate) -> EventRecord | None:
        record = self._latest.get(coordinate)
        return copy.deepcopy(record) if record is not None else None

    async def get_latest_by_coordinates(
        self,
        coordinates: Iterable[Coordinate],
    ) -> dict[Coordinate, EventRecord]:
        found: dict[Coordinate, EventRecord] = {}
        for coordinate in coordinates:
            record = self._latest.get(coordinate)
            if record is not None:
                found[coordinate] = copy.deepcopy(record)
        return found

    async def get_by_id(self, event_id: str) -> EventRecord | None:
        record = self._by_id.get(event_id)
        return copy.deepcopy(record) if record is not None else None

    async def publish(self, record: EventRecord) -> bool:
        """Store a record.

        Records without an id get their NIP-01 id. Records missing the
        envelope fields are rejected.
        """
        if not all(key in record for key in ("kind", "pubkey", "created_at")):
            logger.warning("Rejecting record without kind/pubkey/created_at")
            return False

        stored: EventRecord = copy.deepcopy(record)
        stored.setdefault("content", "")
        stored.setdefault("tags", [])
        if not stored.get("id"):
            stored["id"] = compute_event_id(stored)

        self._records.append(stored)
        self._by_id[stored["id"]] = stored

        coordinate = record_coordinate(stored)
        if coordinate is not None:
            current = self._latest.get(coordinate)
            if current is None or stored["created_at"] >= current["created_at"]:
                self._latest[coordinate] = stored
            else:
                logger.debug(
                    "Stored outdated version of %s (created_at %s < %s)",
                    coordinate,
                    stored["created_at"],
                    current["created_at"],
                )
        return True

    def clear(self) -> None:
        """Drop everything. For tests."""
        self._records.clear()
        self._by_id.clear()
        self._latest.clear()
