"""
Tests for the member kind allow-list.
"""

import pytest

from nostr_drive import FOLDER_KIND, MEMBER_KINDS, InvalidKindError, KindValidator, ValidationError


class TestKindValidator:
    """Tests for KindValidator."""

    @pytest.mark.parametrize("kind", [30040, 30041, 30024, 30023, 31924, 31923, 31922])
    def test_member_kinds_allowed(self, kind):
        assert KindValidator().is_allowed(kind)

    def test_nesting_allowed_by_default(self):
        assert KindValidator().is_allowed(FOLDER_KIND)

    def test_nesting_disabled(self):
        validator = KindValidator(allow_nesting=False)
        assert not validator.is_allowed(FOLDER_KIND)
        assert validator.allowed_kinds() == MEMBER_KINDS

    @pytest.mark.parametrize("kind", [1, 30042, 30000, 39999])
    def test_other_kinds_rejected(self, kind):
        assert not KindValidator().is_allowed(kind)

    def test_validate_raises(self):
        with pytest.raises(InvalidKindError) as exc_info:
            KindValidator().validate(1)
        error = exc_info.value
        assert error.kind == 1
        assert "30023" in error.message
        assert 30045 in error.details["allowed_kinds"]

    def test_invalid_kind_is_validation_error(self):
        with pytest.raises(ValidationError):
            KindValidator().validate(30042)

    def test_validate_passes(self):
        KindValidator().validate(30023)

    def test_allowed_kinds_order(self):
        assert KindValidator().allowed_kinds() == (*MEMBER_KINDS, FOLDER_KIND)

    def test_custom_allow_list(self):
        validator = KindValidator([30023, 30023, 30041], allow_nesting=False)
        assert validator.allowed_kinds() == (30023, 30041)
        assert not validator.is_allowed(30040)

    def test_explicit_list_taken_as_given(self):
        assert KindValidator([30023]).allowed_kinds() == (30023,)
        assert not KindValidator([30023]).is_allowed(FOLDER_KIND)

    def test_explicit_list_with_nesting(self):
        assert KindValidator([30023], allow_nesting=True).allowed_kinds() == (30023, FOLDER_KIND)

    def test_nesting_disabled_strips_folder_kind(self):
        validator = KindValidator([30023, FOLDER_KIND], allow_nesting=False)
        assert validator.allowed_kinds() == (30023,)

    def test_allowed_kinds_is_snapshot(self):
        validator = KindValidator()
        kinds = validator.allowed_kinds()
        assert isinstance(kinds, tuple)
        assert validator.allowed_kinds() == kinds
