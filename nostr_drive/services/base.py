"""
Shared plumbing for the drive and folder services.

Consistency model: every edit is fetch-latest, mutate, publish. There is no
compare-and-swap on the relay layer, so two editors racing on the same
coordinate can overwrite each other; the store keeps whichever version has
the newest created_at.
"""

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from typing import Generic, TypeVar

from ..domain.coordinate import Address, Coordinate
from ..domain.drive import Drive
from ..domain.folder import Folder
from ..exceptions import DriveError, NotFoundError, PublishError, ValidationError
from ..logging_utils import DriveLoggerAdapter
from ..records import EventRecord, compute_event_id
from ..store import EventStore

logger = logging.getLogger(__name__)

AggregateT = TypeVar("AggregateT", Drive, Folder)

Clock = Callable[[], int]


def unix_now() -> int:
    return int(time.time())


def owner_pubkey(owner: Address | str) -> str:
    """Pubkey of an owner given as an Address or a bare key."""
    return owner.pubkey if isinstance(owner, Address) else owner


class AggregateService(ABC, Generic[AggregateT]):
    """Read, publish and archive operations common to drives and folders."""

    KIND: int
    LABEL: str

    def __init__(self, store: EventStore, clock: Clock | None = None):
        """Initialize the service.

        Args:
            store: Event store used for reads and publishes
            clock: Source of created_at timestamps (unix seconds)
        """
        self.store = store
        self._clock = clock or unix_now
        self._log = DriveLoggerAdapter(logger, {"service": self.LABEL})

    @abstractmethod
    def _encode(self, aggregate: AggregateT) -> EventRecord: ...

    @abstractmethod
    def _decode(self, record: EventRecord) -> AggregateT: ...

    def _check_kind(self, coordinate: Coordinate) -> None:
        if coordinate.kind != self.KIND:
            raise ValidationError(
                f"Expected a {self.LABEL} coordinate (kind {self.KIND}), got kind {coordinate.kind}",
                field="coordinate",
                value=str(coordinate),
            )

    def _check_identifier(self, identifier: str) -> None:
        if not identifier:
            raise ValidationError(
                f"{self.LABEL.capitalize()} identifier cannot be empty", field="identifier"
            )

    async def get(self, coordinate: Coordinate) -> AggregateT:
        """Fetch the latest version.

        Raises:
            ValidationError: If the coordinate has the wrong kind (checked
                before the store is queried)
            NotFoundError: If the store has no record for the coordinate
        """
        self._check_kind(coordinate)

        record = await self.store.get_latest_by_coordinate(coordinate)
        if record is None:
            raise NotFoundError(f"{self.LABEL.capitalize()} not found: {coordinate}", str(coordinate))

        return self._decode(record)

    async def get_many(self, coordinates: Iterable[Coordinate]) -> dict[Coordinate, AggregateT]:
        """Fetch several in one store call.

        Returns found aggregates keyed by coordinate, in request order.
        Missing coordinates are left out.
        """
        requested = list(coordinates)
        for coordinate in requested:
            self._check_kind(coordinate)
        if not requested:
            return {}

        records = await self.store.get_latest_by_coordinates(requested)
        return {
            coordinate: self._decode(records[coordinate])
            for coordinate in requested
            if coordinate in records
        }

    async def get_by_id(self, event_id: str) -> AggregateT:
        """Fetch a specific version by event id.

        Raises:
            NotFoundError: If no record has that id, or it is of another kind
        """
        record = await self.store.get_by_id(event_id)
        if record is None or record.get("kind") != self.KIND:
            raise NotFoundError(f"{self.LABEL.capitalize()} not found with ID: {event_id}", event_id)
        return self._decode(record)

    async def update(self, aggregate: AggregateT) -> AggregateT:
        """Publish the current in-memory state as a new version."""
        await self._publish(aggregate)
        return aggregate

    async def archive(self, coordinate: Coordinate) -> AggregateT:
        """Mark the latest version archived and publish it.

        Archiving is advisory; nothing here ever clears the marker.
        """
        aggregate = await self.get(coordinate)
        aggregate.archived = True
        await self._publish(aggregate)
        return aggregate

    async def _publish(self, aggregate: AggregateT) -> None:
        """Stamp, encode and publish a new version.

        The aggregate gets the new created_at and event id only once the
        store accepts the record.
        """
        coordinate = aggregate.coordinate
        record = self._encode(aggregate)
        record["created_at"] = self._clock()
        record["id"] = compute_event_id(record)

        try:
            accepted = await self.store.publish(record)
        except DriveError:
            raise
        except Exception as e:
            self._log.error(
                "Publish of %s failed: %s", coordinate, e, extra={"coordinate": str(coordinate)}
            )
            raise PublishError(str(coordinate), cause=e) from e

        if not accepted:
            self._log.warning(
                "Event store rejected %s %s", self.LABEL, coordinate,
                extra={"coordinate": str(coordinate)},
            )
            raise PublishError(str(coordinate))

        aggregate.created_at = record["created_at"]
        aggregate.event_id = record["id"]
        self._log.info(
            "Published %s %s", self.LABEL, coordinate,
            extra={"coordinate": str(coordinate), "event_id": record["id"]},
        )
