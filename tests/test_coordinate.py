"""
Tests for Coordinate and Address value types.
"""

import pytest

from nostr_drive import Address, Coordinate, InvalidFormatError, InvalidValueError

PUBKEY = "0123456789abcdef0123456789abcdef0123456789abcdef0123456789abcdef"


class TestCoordinateConstruction:
    """Tests for coordinate validation."""

    def test_valid(self):
        coord = Coordinate(30042, PUBKEY, "my-drive")
        assert coord.kind == 30042
        assert coord.pubkey == PUBKEY
        assert coord.identifier == "my-drive"

    def test_empty_identifier_allowed(self):
        assert Coordinate(30042, PUBKEY, "").identifier == ""

    def test_range_bounds_allowed(self):
        Coordinate(30000, PUBKEY, "x")
        Coordinate(39999, PUBKEY, "x")

    @pytest.mark.parametrize("kind", [29999, 40000, 1, -30042])
    def test_kind_out_of_range(self, kind):
        with pytest.raises(InvalidValueError) as exc_info:
            Coordinate(kind, PUBKEY, "x")
        assert exc_info.value.field == "kind"
        assert exc_info.value.value == kind

    def test_non_integer_kind(self):
        with pytest.raises(InvalidValueError):
            Coordinate("30042", PUBKEY, "x")  # type: ignore[arg-type]

    def test_empty_pubkey(self):
        with pytest.raises(InvalidValueError, match="cannot be empty"):
            Coordinate(30042, "", "x")

    def test_invalid_hex_pubkey(self):
        with pytest.raises(InvalidValueError, match="64-character hex"):
            Coordinate(30042, "zz" * 32, "x")

    def test_pubkey_with_trailing_newline(self):
        with pytest.raises(InvalidValueError, match="64-character hex"):
            Coordinate(30045, PUBKEY + "\n", "x")

    def test_short_pubkey(self):
        with pytest.raises(InvalidValueError):
            Coordinate(30042, PUBKEY[:-1], "x")

    def test_uppercase_pubkey_accepted_unchanged(self):
        coord = Coordinate(30042, PUBKEY.upper(), "x")
        assert coord.pubkey == PUBKEY.upper()

    def test_equality_is_exact(self):
        assert Coordinate(30042, PUBKEY, "a") == Coordinate(30042, PUBKEY, "a")
        assert Coordinate(30042, PUBKEY, "a") != Coordinate(30042, PUBKEY, "b")
        assert Coordinate(30042, PUBKEY, "a") != Coordinate(30045, PUBKEY, "a")
        assert Coordinate(30042, PUBKEY, "a") != Coordinate(30042, PUBKEY.upper(), "a")

    def test_hashable(self):
        coords = {Coordinate(30042, PUBKEY, "a"), Coordinate(30042, PUBKEY, "a")}
        assert len(coords) == 1

    def test_immutable(self):
        coord = Coordinate(30042, PUBKEY, "a")
        with pytest.raises(AttributeError):
            coord.identifier = "b"  # type: ignore[misc]

    def test_with_identifier(self):
        coord = Coordinate(30045, PUBKEY, "a").with_identifier("b")
        assert coord == Coordinate(30045, PUBKEY, "b")


class TestCoordinateString:
    """Tests for parse and str."""

    def test_str(self):
        coord = Coordinate(30042, PUBKEY, "my-drive")
        assert str(coord) == f"30042:{PUBKEY}:my-drive"

    def test_parse(self):
        coord = Coordinate.parse(f"30045:{PUBKEY}:themes")
        assert coord.kind == 30045
        assert coord.pubkey == PUBKEY
        assert coord.identifier == "themes"

    def test_parse_empty_identifier(self):
        assert Coordinate.parse(f"30042:{PUBKEY}:").identifier == ""

    def test_parse_identifier_with_colons(self):
        coord = Coordinate.parse(f"30023:{PUBKEY}:a:b:c")
        assert coord.identifier == "a:b:c"

    def test_parse_invalid_format(self):
        with pytest.raises(InvalidFormatError):
            Coordinate.parse("invalid:format")

    def test_parse_no_separator(self):
        with pytest.raises(InvalidFormatError):
            Coordinate.parse("nothing")

    def test_parse_non_numeric_kind(self):
        with pytest.raises(InvalidFormatError, match="numeric"):
            Coordinate.parse(f"abc:{PUBKEY}:test")

    def test_parse_out_of_range_kind(self):
        with pytest.raises(InvalidValueError):
            Coordinate.parse(f"1:{PUBKEY}:test")

    def test_parse_bad_pubkey(self):
        with pytest.raises(InvalidValueError):
            Coordinate.parse("30023:not-a-key:test")

    def test_parse_pubkey_with_trailing_newline(self):
        with pytest.raises(InvalidValueError):
            Coordinate.parse(f"30023:{PUBKEY}\n:x")

    @pytest.mark.parametrize("kind", ["30023\n", "٣٠٠٢٣"])
    def test_parse_kind_must_be_ascii_digits(self, kind):
        with pytest.raises(InvalidFormatError, match="numeric"):
            Coordinate.parse(f"{kind}:{PUBKEY}:x")

    @pytest.mark.parametrize(
        "kind,identifier",
        [(30000, ""), (30045, "themes"), (39999, "with:colons"), (31922, "unicode-ü")],
    )
    def test_round_trip(self, kind, identifier):
        coord = Coordinate(kind, PUBKEY, identifier)
        assert Coordinate.parse(str(coord)) == coord


class TestAddress:
    """Tests for Address."""

    def test_defaults(self):
        address = Address(PUBKEY)
        assert address.pubkey == PUBKEY
        assert address.relays == ()
        assert str(address) == PUBKEY

    def test_relays_stored_as_tuple(self):
        address = Address(PUBKEY, ["wss://relay.one", "wss://relay.two"])  # type: ignore[arg-type]
        assert address.relays == ("wss://relay.one", "wss://relay.two")

    def test_coordinate(self):
        assert Address(PUBKEY).coordinate(30045, "docs") == Coordinate(30045, PUBKEY, "docs")
