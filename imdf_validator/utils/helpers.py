"""Shared helper functions used across the validation stages."""

from __future__ import annotations

import re
from datetime import UTC, datetime

# ISO 3166-1 alpha-2 country code, e.g. ``US``
COUNTRY_CODE_RE = re.compile(r"^[A-Z]{2}$")

# ISO 3166-2 subdivision code, e.g. ``US-CA``
SUBDIVISION_CODE_RE = re.compile(r"^[A-Z]{2}-[A-Z0-9]{1,3}$")


def parse_timestamp(timestamp: object) -> datetime | None:
    """Parse an ISO 8601 timestamp string.

    Args:
        timestamp: Candidate value read from a feature property.

    Returns:
        A timezone-aware ``datetime`` (naive input is taken as UTC), or
        ``None`` if the value is not a string or cannot be parsed.
    """
    if not isinstance(timestamp, str) or not timestamp:
        return None
    try:
        parsed = datetime.fromisoformat(timestamp)
    except (ValueError, TypeError):
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


def is_number(value: object) -> bool:
    """Whether *value* is a JSON number (``bool`` excluded)."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_integer(value: object) -> bool:
    """Whether *value* is a JSON integer (``bool`` excluded)."""
    return isinstance(value, int) and not isinstance(value, bool)
