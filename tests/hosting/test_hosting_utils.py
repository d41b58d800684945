"""
Hosting Utilities Tests

Tests cover:
1. ISO 8601 duration parsing
2. RFC 3339 timestamp parsing
3. Metadata validation rules
4. Read-only field guard
"""

from datetime import datetime, timezone

import pytest

from hosting.constants import Visibility
from hosting.interfaces.video_host_interface import ValidationError
from hosting.models.hosted_item import ItemMetadata
from hosting.utils.conversion_utils import iso8601_duration_to_seconds, parse_rfc3339
from hosting.utils.validation_utils import check_read_only_fields, validate_metadata


# =============================================================================
# DURATION TESTS
# =============================================================================


class TestIso8601Duration:
    @pytest.mark.parametrize(
        "value,expected",
        [
            ("PT12H30M5S", 45005),
            ("PT5S", 5),
            ("PT1M", 60),
            ("P1DT1H", 90000),
            ("PT1.9S", 1),
            ("12H30M5S", 45005),
        ],
    )
    def test_valid_durations(self, value, expected):
        assert iso8601_duration_to_seconds(value) == expected

    @pytest.mark.parametrize("value", ["", "PT", "P", "12 minutes", "PT5X"])
    def test_invalid_durations(self, value):
        with pytest.raises(ValueError):
            iso8601_duration_to_seconds(value)


# =============================================================================
# TIMESTAMP TESTS
# =============================================================================


class TestRfc3339:
    def test_utc_designator(self):
        assert parse_rfc3339("2018-08-25T11:12:35Z") == datetime(
            2018, 8, 25, 11, 12, 35, tzinfo=timezone.utc
        )

    @pytest.mark.parametrize(
        "value, microsecond",
        [
            ("2018-08-25T11:12:35.5Z", 500000),
            ("2018-08-25T11:12:35.12Z", 120000),
            ("2018-08-25T11:12:35.123456Z", 123456),
            ("2018-08-25T11:12:35.123456789Z", 123456),
        ],
    )
    def test_fractional_seconds_any_precision(self, value, microsecond):
        parsed = parse_rfc3339(value)

        assert parsed.microsecond == microsecond
        assert parsed.second == 35
        assert parsed.tzinfo == timezone.utc

    def test_fraction_with_offset(self):
        parsed = parse_rfc3339("2018-08-25T11:12:35.25+02:00")

        assert parsed.microsecond == 250000
        assert parsed.utcoffset().total_seconds() == 2 * 3600

    def test_empty_timestamp(self):
        with pytest.raises(ValueError):
            parse_rfc3339("")


# =============================================================================
# VALIDATION TESTS
# =============================================================================


class TestValidateMetadata:
    def test_valid_metadata(self):
        validate_metadata(ItemMetadata(title="Match", visibility="private"))

    def test_missing_metadata(self):
        with pytest.raises(ValidationError, match="no video metadata provided"):
            validate_metadata(None)

    def test_empty_title(self):
        with pytest.raises(ValidationError, match="title is required"):
            validate_metadata(ItemMetadata(title="", visibility="private"))

    def test_title_limit_is_in_characters(self):
        validate_metadata(ItemMetadata(title="é" * 100, visibility="private"))

        with pytest.raises(ValidationError, match="title is too long"):
            validate_metadata(ItemMetadata(title="a" * 101, visibility="private"))

    def test_description_limit_is_in_bytes(self):
        """500 two-byte characters fit, 501 don't"""
        validate_metadata(
            ItemMetadata(title="Match", visibility="private", description="é" * 500)
        )

        with pytest.raises(ValidationError, match="description is too long"):
            validate_metadata(
                ItemMetadata(title="Match", visibility="private", description="é" * 501)
            )

    def test_unknown_visibility_rejected_on_creation(self):
        with pytest.raises(ValueError):
            ItemMetadata(title="Match", visibility="secret")

    def test_validation_error_is_value_error(self):
        with pytest.raises(ValueError):
            validate_metadata(None)

    def test_visibility_coerced(self):
        assert ItemMetadata("Match", "unlisted").visibility == Visibility.UNLISTED


class TestCheckReadOnlyFields:
    created = datetime(2020, 1, 1, tzinfo=timezone.utc)

    def test_same_fields_pass(self):
        check_read_only_fields("v1", self.created, "v1", self.created)

    def test_other_id_rejected(self):
        with pytest.raises(ValidationError, match='either "id", or "createdAt"'):
            check_read_only_fields("v1", self.created, "v2", self.created)

    def test_other_created_at_rejected(self):
        with pytest.raises(ValidationError):
            check_read_only_fields(
                "v1", self.created, "v1", self.created.replace(year=2021)
            )
