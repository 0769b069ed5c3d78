"""
Timestamp Utilities
===================

The device clock runs on UTC but sends its time without an offset:

    "2024-01-01T00:00:00"

We keep that string as-is and also store the same instant in full ISO-8601
with milliseconds and a Z suffix:

    "2024-01-01T00:00:00.000Z"

created_at and the /health timestamp use the same format.
"""

from datetime import datetime, timezone
from typing import Any, NamedTuple

from wastebin_api.errors import InvalidTimestampError


class NormalizedTimestamp(NamedTuple):
    utc: str
    iso: str


def to_iso_z(moment: datetime) -> str:
    """Format an aware datetime as YYYY-MM-DDTHH:MM:SS.mmmZ."""
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def utc_now_iso() -> str:
    return to_iso_z(datetime.now(timezone.utc))


def parse_utc(raw: Any) -> datetime:
    """
    Parse a device timestamp, treating it as UTC when it has no offset.

    Args:
        raw: Value of the "time" key

    Returns:
        An aware datetime in UTC

    Raises:
        InvalidTimestampError: If raw isn't a string or isn't a date/time
    """
    if not isinstance(raw, str):
        raise InvalidTimestampError()

    try:
        parsed = datetime.fromisoformat(raw.strip())
    except ValueError:
        raise InvalidTimestampError()

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)

    # Offsets can push the instant outside year 1..9999
    try:
        return parsed.astimezone(timezone.utc)
    except OverflowError:
        raise InvalidTimestampError()


def normalize_timestamp(raw: Any) -> NormalizedTimestamp:
    """
    Turn the device's time into (original string, ISO-8601 UTC string).

    Example:
        normalize_timestamp("2024-01-01T00:00:00")
        -> NormalizedTimestamp(utc="2024-01-01T00:00:00", iso="2024-01-01T00:00:00.000Z")
    """
    return NormalizedTimestamp(utc=raw, iso=to_iso_z(parse_utc(raw)))
