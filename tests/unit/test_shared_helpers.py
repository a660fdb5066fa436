"""Tests for shared helper functions in ``imdf_validator.utils.helpers``."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta, timezone

import pytest

from imdf_validator.utils.helpers import is_integer, is_number, parse_timestamp


class TestParseTimestamp:
    """parse_timestamp() parses ISO 8601 or returns None."""

    def test_zulu(self) -> None:
        assert parse_timestamp("2024-01-01T00:00:00Z") == datetime(2024, 1, 1, tzinfo=UTC)

    def test_offset_preserved(self) -> None:
        parsed = parse_timestamp("2024-06-01T12:00:00+02:00")
        assert parsed is not None
        assert parsed.utcoffset() == timedelta(hours=2)
        assert parsed == datetime(2024, 6, 1, 10, 0, tzinfo=timezone.utc)

    def test_naive_is_utc(self) -> None:
        parsed = parse_timestamp("2024-01-01")
        assert parsed == datetime(2024, 1, 1, tzinfo=UTC)

    @pytest.mark.parametrize("value", ["", "not a date", None, 20240101, "2024-13-01"])
    def test_invalid(self, value: object) -> None:
        assert parse_timestamp(value) is None


class TestNumberPredicates:
    """JSON number predicates exclude booleans."""

    def test_is_number(self) -> None:
        assert is_number(1)
        assert is_number(1.5)
        assert not is_number(True)
        assert not is_number("1")

    def test_is_integer(self) -> None:
        assert is_integer(-3)
        assert not is_integer(3.0)
        assert not is_integer(False)
