"""Unit tests for FieldLengthPolicy."""

import pytest

from bedmanagement.domain.model.bed_tag import BedTag
from bedmanagement.domain.validation import ErrorCode, Errors, FieldLengthPolicy
from tests.conftest import make_bed_tag


class TestFieldLengthPolicy:
    """Tests for declared length limits."""

    def test_max_length_for_declared_field(self):
        policy = FieldLengthPolicy({BedTag: {"name": 50}})

        assert policy.max_length(BedTag, "name") == 50
        assert policy.max_length(BedTag, "void_reason") is None
        assert policy.max_length(str, "name") is None

    def test_subclass_inherits_limits(self):
        class WardTag(BedTag):
            pass

        policy = FieldLengthPolicy({BedTag: {"name": 20}})

        assert policy.max_length(WardTag, "name") == 20

    def test_non_positive_limit_rejected(self):
        with pytest.raises(ValueError, match="must be positive"):
            FieldLengthPolicy({BedTag: {"name": 0}})

    def test_check_lengths_rejects_long_value(self):
        """Values over the limit should get FIELD_TOO_LONG with the limit."""
        policy = FieldLengthPolicy({BedTag: {"name": 5}})
        errors = Errors("bedTag")

        policy.check_lengths(errors, make_bed_tag("Maternity"), "name")

        error = errors.get_field_errors("name")[0]
        assert error.code == ErrorCode.FIELD_TOO_LONG
        assert error.args == (5,)
        assert error.rejected_value == "Maternity"

    def test_check_lengths_skips_none_and_undeclared(self):
        policy = FieldLengthPolicy({BedTag: {"name": 5}})
        errors = Errors("bedTag")

        policy.check_lengths(errors, make_bed_tag(None), "name", "void_reason")
        policy.check_lengths(errors, "not a tag", "name")

        assert not errors.has_errors()
