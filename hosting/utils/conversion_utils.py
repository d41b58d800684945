"""
Conversion Utilities

Parsing helpers for the formats returned by hosting platforms.
"""

import re
from datetime import datetime

HOUR_IN_SECONDS = 3600
MINUTE_IN_SECONDS = 60
DAY_IN_SECONDS = 24 * HOUR_IN_SECONDS

# ISO 8601 duration as returned by YouTube (PT1H2M3S, P1DT2H, ...).
# The leading "P"/"T" designators are optional so "12H30M5S" is accepted too.
_ISO8601_DURATION = re.compile(
    r"^P?(?:(?P<days>\d+)D)?T?"
    r"(?:(?P<hours>\d+)H)?"
    r"(?:(?P<minutes>\d+)M)?"
    r"(?:(?P<seconds>\d+(?:\.\d+)?)S)?$"
)

# Fractional seconds of a timestamp, right after the seconds field
_RFC3339_FRACTION = re.compile(r"([T ]\d{2}:\d{2}:\d{2})\.(\d+)", re.IGNORECASE)


def iso8601_duration_to_seconds(value: str) -> int:
    """
    Convert an ISO 8601 duration to whole seconds.

    Args:
        value: Duration string, e.g. "PT12H30M5S"

    Returns:
        Total duration in seconds

    Raises:
        ValueError: If value is not a duration

    Example:
        iso8601_duration_to_seconds("PT12H30M5S")
        # Returns: 45005
    """
    match = _ISO8601_DURATION.match(value.strip().upper()) if value else None
    if not match or not any(match.groupdict().values()):
        raise ValueError(f"Invalid ISO 8601 duration: {value!r}")

    parts = match.groupdict()
    total = 0
    total += int(parts["days"] or 0) * DAY_IN_SECONDS
    total += int(parts["hours"] or 0) * HOUR_IN_SECONDS
    total += int(parts["minutes"] or 0) * MINUTE_IN_SECONDS
    total += int(float(parts["seconds"] or 0))
    return total


def parse_rfc3339(value: str) -> datetime:
    """
    Parse an RFC 3339 timestamp ("2018-08-25T11:12:35Z").

    Fractional seconds of any precision are accepted and kept to
    microseconds (extra digits are truncated).

    Raises:
        ValueError: If value is not a valid timestamp
    """
    if not value:
        raise ValueError("Empty timestamp")
    if value.endswith(("Z", "z")):
        value = value[:-1] + "+00:00"
    value = _RFC3339_FRACTION.sub(
        lambda m: f"{m.group(1)}.{m.group(2)[:6].ljust(6, '0')}", value, count=1
    )
    return datetime.fromisoformat(value)
