"""
Tag codec for drives and folders.

Wire layout (all tag values are strings):

    ["d", identifier]                                   always first
    ["title", title]                                    only when set
    ["description", description]                        only when set
    ["a", coordinate, relay, last_seen_event_id, name]  one per entry, in order
    ["status", "archived"]                              only when archived

Relay and last-seen slots are always written (empty string when unknown) so
readers can index positionally; the trailing name slot is omitted when
unknown. On decode, empty hint slots read back as None, while an empty title
or description stays an empty string.

Decoding is lenient about membership: an "a" tag whose coordinate does not
parse is dropped so one corrupt entry cannot hide the rest of the folder.
Tags outside this vocabulary are dropped as well.
"""

from __future__ import annotations

import logging
from typing import NamedTuple

from .domain.coordinate import Coordinate
from .domain.drive import Drive
from .domain.entry import FolderEntry
from .domain.folder import Folder
from .exceptions import InvalidFormatError, InvalidValueError, ValidationError
from .kinds import ARCHIVED_STATUS, DRIVE_KIND, FOLDER_KIND
from .records import EventRecord, Tag

logger = logging.getLogger(__name__)


class _DecodedHeader(NamedTuple):
    coordinate: Coordinate
    title: str | None
    description: str | None
    archived: bool
    entries: list[FolderEntry]


# =============================================================================
# Membership tags
# =============================================================================


def encode_entry_tag(
    coordinate: Coordinate,
    relay_hint: str | None = None,
    last_seen_event_id: str | None = None,
    name_hint: str | None = None,
) -> Tag:
    """Build the "a" tag for one member."""
    tag = ["a", str(coordinate), relay_hint or "", last_seen_event_id or ""]
    if name_hint:
        tag.append(name_hint)
    return tag


def _hint(tag: Tag, index: int) -> str | None:
    if len(tag) > index and isinstance(tag[index], str) and tag[index]:
        return tag[index]
    return None


def decode_entry_tag(tag: Tag) -> FolderEntry | None:
    """Decode an "a" tag, or return None if its coordinate is unusable."""
    if len(tag) < 2 or not isinstance(tag[1], str):
        logger.debug("Dropping 'a' tag without coordinate: %r", tag)
        return None

    try:
        coordinate = Coordinate.parse(tag[1])
    except (InvalidFormatError, InvalidValueError) as e:
        logger.debug("Dropping 'a' tag with bad coordinate %r: %s", tag[1], e.message)
        return None

    return FolderEntry(
        coordinate=coordinate,
        relay_hint=_hint(tag, 2),
        last_seen_event_id=_hint(tag, 3),
        name_hint=_hint(tag, 4),
    )


# =============================================================================
# Shared header / trailer
# =============================================================================


def _header_tags(coordinate: Coordinate, title: str | None, description: str | None) -> list[Tag]:
    tags: list[Tag] = [["d", coordinate.identifier]]
    if title is not None:
        tags.append(["title", title])
    if description is not None:
        tags.append(["description", description])
    return tags


def _envelope(
    coordinate: Coordinate,
    event_id: str | None,
    created_at: int,
    tags: list[Tag],
) -> EventRecord:
    return {
        "id": event_id,
        "kind": coordinate.kind,
        "pubkey": coordinate.pubkey,
        "created_at": created_at,
        "content": "",
        "tags": tags,
    }


def _decode_header(record: EventRecord, expected_kind: int, label: str) -> _DecodedHeader:
    kind = record.get("kind")
    if kind != expected_kind:
        raise ValidationError(
            f"Expected a {label} record (kind {expected_kind}), got kind {kind}",
            field="kind",
            value=kind,
        )

    identifier = ""
    title: str | None = None
    description: str | None = None
    archived = False
    entries: list[FolderEntry] = []
    seen_identifier = False

    for tag in record.get("tags") or []:
        if not tag:
            continue
        name = tag[0]
        value = tag[1] if len(tag) > 1 else None
        if name == "d" and not seen_identifier:
            identifier = value or ""
            seen_identifier = True
        elif name == "title" and value is not None:
            title = value
        elif name == "description" and value is not None:
            description = value
        elif name == "a":
            entry = decode_entry_tag(tag)
            if entry is not None:
                entries.append(entry)
        elif name == "status" and value == ARCHIVED_STATUS:
            archived = True

    coordinate = Coordinate(expected_kind, record.get("pubkey", ""), identifier)
    return _DecodedHeader(coordinate, title, description, archived, entries)


# =============================================================================
# Folder
# =============================================================================


def folder_to_record(folder: Folder) -> EventRecord:
    """Encode a folder as an unsigned record."""
    tags = _header_tags(folder.coordinate, folder.title, folder.description)
    for entry in folder.entries:
        tags.append(
            encode_entry_tag(
                entry.coordinate,
                entry.relay_hint,
                entry.last_seen_event_id,
                entry.name_hint,
            )
        )
    if folder.archived:
        tags.append(["status", ARCHIVED_STATUS])
    return _envelope(folder.coordinate, folder.event_id, folder.created_at, tags)


def record_to_folder(record: EventRecord) -> Folder:
    """Decode a folder record.

    Raises:
        ValidationError: If the record is not a folder record
        InvalidValueError: If the record pubkey is not a valid key
    """
    header = _decode_header(record, FOLDER_KIND, "folder")
    return Folder(
        coordinate=header.coordinate,
        title=header.title,
        description=header.description,
        entries=header.entries,
        event_id=record.get("id"),
        created_at=record.get("created_at", 0),
        archived=header.archived,
    )


# =============================================================================
# Drive
# =============================================================================


def drive_to_record(drive: Drive) -> EventRecord:
    """Encode a drive as an unsigned record."""
    tags = _header_tags(drive.coordinate, drive.title, drive.description)
    for root in drive.roots:
        tags.append(encode_entry_tag(root))
    if drive.archived:
        tags.append(["status", ARCHIVED_STATUS])
    return _envelope(drive.coordinate, drive.event_id, drive.created_at, tags)


def record_to_drive(record: EventRecord) -> Drive:
    """Decode a drive record.

    Roots that are not folder coordinates are dropped like malformed tags.
    """
    header = _decode_header(record, DRIVE_KIND, "drive")
    roots = []
    for entry in header.entries:
        if entry.kind != FOLDER_KIND:
            logger.debug("Dropping drive root %s: not a folder", entry.coordinate)
            continue
        roots.append(entry.coordinate)

    return Drive(
        coordinate=header.coordinate,
        title=header.title,
        description=header.description,
        roots=roots,
        event_id=record.get("id"),
        created_at=record.get("created_at", 0),
        archived=header.archived,
    )
