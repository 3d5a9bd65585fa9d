"""
Tests for the drive/folder tag codec.
"""

import pytest

from nostr_drive import (
    Coordinate,
    Drive,
    Folder,
    FolderEntry,
    InvalidValueError,
    ValidationError,
    decode_entry_tag,
    drive_to_record,
    encode_entry_tag,
    folder_to_record,
    record_to_drive,
    record_to_folder,
)

PUBKEY = "0123456789abcdef0123456789abcdef0123456789abcdef0123456789abcdef"

FOLDER = Coordinate(30045, PUBKEY, "folder")
DRIVE = Coordinate(30042, PUBKEY, "drive")
C1 = Coordinate(30023, PUBKEY, "one")
C2 = Coordinate(30041, PUBKEY, "two")
C3 = Coordinate(31922, PUBKEY, "three")


def folder_record(tags, kind=30045):
    return {
        "id": "evt1",
        "kind": kind,
        "pubkey": PUBKEY,
        "created_at": 1700000000,
        "content": "",
        "tags": tags,
    }


class TestEntryTags:
    """Tests for single 'a' tag encoding."""

    def test_no_hints(self):
        assert encode_entry_tag(C1) == ["a", str(C1), "", ""]

    def test_all_hints(self):
        tag = encode_entry_tag(C1, "wss://relay", "evt", "One")
        assert tag == ["a", str(C1), "wss://relay", "evt", "One"]

    def test_positional_placeholders(self):
        assert encode_entry_tag(C1, name_hint="One") == ["a", str(C1), "", "", "One"]
        assert encode_entry_tag(C1, last_seen_event_id="evt") == ["a", str(C1), "", "evt"]

    def test_decode_empty_slots_are_none(self):
        entry = decode_entry_tag(["a", str(C1), "", "evt"])
        assert entry.coordinate == C1
        assert entry.relay_hint is None
        assert entry.last_seen_event_id == "evt"
        assert entry.name_hint is None

    def test_decode_bare(self):
        entry = decode_entry_tag(["a", str(C1)])
        assert entry == FolderEntry(C1)
        assert entry.relay_hint is None

    @pytest.mark.parametrize(
        "tag",
        [["a"], ["a", "garbage"], ["a", f"abc:{PUBKEY}:x"], ["a", "30023:nothex:x"], ["a", f"1:{PUBKEY}:x"]],
    )
    def test_decode_malformed_returns_none(self, tag):
        assert decode_entry_tag(tag) is None


class TestFolderEncoding:
    """Tests for folder_to_record."""

    def test_minimal(self):
        record = folder_to_record(Folder(FOLDER, created_at=5))
        assert record["kind"] == 30045
        assert record["pubkey"] == PUBKEY
        assert record["created_at"] == 5
        assert record["content"] == ""
        assert record["tags"] == [["d", "folder"]]

    def test_full(self):
        folder = Folder(
            FOLDER,
            title="Themes",
            description="",
            entries=[FolderEntry(C1, "wss://r"), FolderEntry(C2, name_hint="Two")],
        )
        assert folder_to_record(folder)["tags"] == [
            ["d", "folder"],
            ["title", "Themes"],
            ["description", ""],
            ["a", str(C1), "wss://r", ""],
            ["a", str(C2), "", "", "Two"],
        ]

    def test_d_tag_first(self):
        folder = Folder(FOLDER, title="T", entries=[FolderEntry(C1)], archived=True)
        tags = folder_to_record(folder)["tags"]
        assert tags[0] == ["d", "folder"]
        assert tags[-1] == ["status", "archived"]


class TestFolderDecoding:
    """Tests for record_to_folder."""

    def test_envelope_fields(self):
        folder = record_to_folder(folder_record([["d", "folder"]]))
        assert folder.coordinate == FOLDER
        assert folder.event_id == "evt1"
        assert folder.created_at == 1700000000
        assert folder.title is None
        assert folder.description is None

    def test_missing_d_tag_is_empty_identifier(self):
        assert record_to_folder(folder_record([])).identifier == ""

    def test_entry_order_preserved(self):
        tags = [["d", "folder"], ["a", str(C3)], ["a", str(C1)], ["a", str(C2)]]
        assert record_to_folder(folder_record(tags)).coordinates() == [C3, C1, C2]

    def test_malformed_entry_dropped(self):
        tags = [["d", "folder"], ["a", str(C1), "", ""], ["a", "not-a-coordinate"]]
        folder = record_to_folder(folder_record(tags))
        assert folder.coordinates() == [C1]

    def test_unknown_tags_dropped(self):
        tags = [["d", "folder"], ["name", "legacy"], ["e", "abc"], ["t", "topic"]]
        folder = record_to_folder(folder_record(tags))
        assert folder.title is None
        assert folder.entries == []

    def test_archived_status(self):
        folder = record_to_folder(folder_record([["d", "folder"], ["status", "archived"]]))
        assert folder.archived is True

    def test_other_status_ignored(self):
        folder = record_to_folder(folder_record([["d", "folder"], ["status", "active"]]))
        assert folder.archived is False

    def test_wrong_kind(self):
        with pytest.raises(ValidationError):
            record_to_folder(folder_record([["d", "folder"]], kind=30042))

    def test_bad_pubkey(self):
        record = folder_record([["d", "folder"]])
        record["pubkey"] = "bad"
        with pytest.raises(InvalidValueError):
            record_to_folder(record)

    def test_round_trip(self):
        folder = Folder(
            FOLDER,
            title="",
            description="Things",
            entries=[
                FolderEntry(C1, "wss://r", "evt", "One"),
                FolderEntry(C2),
                FolderEntry(C3, name_hint="Three"),
            ],
            created_at=42,
        )
        decoded = record_to_folder(folder_to_record(folder))
        assert decoded.coordinate == folder.coordinate
        assert decoded.title == ""
        assert decoded.description == "Things"
        assert decoded.coordinates() == [C1, C2, C3]
        assert decoded.entries[0].relay_hint == "wss://r"
        assert decoded.entries[0].last_seen_event_id == "evt"
        assert decoded.entries[0].name_hint == "One"
        assert decoded.entries[2].name_hint == "Three"
        assert decoded.created_at == 42


class TestDriveCodec:
    """Tests for drive encoding and decoding."""

    def test_encode(self):
        drive = Drive(DRIVE, title="Main", roots=[FOLDER])
        record = drive_to_record(drive)
        assert record["kind"] == 30042
        assert record["tags"] == [["d", "drive"], ["title", "Main"], ["a", str(FOLDER), "", ""]]

    def test_round_trip(self):
        other = FOLDER.with_identifier("other")
        drive = Drive(DRIVE, title="Main", description="", roots=[other, FOLDER], archived=True)
        decoded = record_to_drive(drive_to_record(drive))
        assert decoded.coordinate == DRIVE
        assert decoded.title == "Main"
        assert decoded.description == ""
        assert decoded.roots == [other, FOLDER]
        assert decoded.archived is True

    def test_non_folder_roots_dropped(self):
        record = folder_record(
            [["d", "drive"], ["a", str(C1)], ["a", str(FOLDER)], ["a", "junk"]], kind=30042
        )
        assert record_to_drive(record).roots == [FOLDER]

    def test_wrong_kind(self):
        with pytest.raises(ValidationError):
            record_to_drive(folder_record([["d", "x"]]))
