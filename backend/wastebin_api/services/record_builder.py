"""
Record Builder
==============

Turns a validated payload into the row we store.

NUMBER PARSING:
--------------
Devices send numbers as strings, and some firmware appends units or junk
("3.7V", "42%"). We read the leading number and ignore the rest:

    "3.7"   -> 3.7        "42"    -> 42
    "3.7V"  -> 3.7        "42.9"  -> 42
    "abc"   -> None       "abc"   -> None

A value with no leading number is stored as null rather than rejecting the
whole reading, so the rest of the data still lands in the database.
"""

import logging
import math
import re
from datetime import datetime, timezone
from typing import Any, Optional

from wastebin_api.models import SensorReading, SensorReadingPayload
from wastebin_api.utils.timestamps import normalize_timestamp, to_iso_z

logger = logging.getLogger(__name__)


_LEADING_FLOAT = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)", re.ASCII)
_LEADING_INT = re.compile(r"^\s*([+-]?\d+)", re.ASCII)


def parse_decimal(value: Any) -> Optional[float]:
    """Leading decimal number of value, or None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return None
    else:
        match = _LEADING_FLOAT.match(str(value))
        if not match:
            return None
        number = float(match.group(1))

    # inf/nan can't be sent as JSON
    return number if math.isfinite(number) else None


def parse_integer(value: Any) -> Optional[int]:
    """Leading integer of value, or None. Fractions are cut off, not rounded."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None

    match = _LEADING_INT.match(str(value))
    if not match:
        return None
    return int(match.group(1))


def build_sensor_reading(
    payload: SensorReadingPayload,
    now: Optional[datetime] = None,
) -> SensorReading:
    """
    Build the stored record from a payload that already passed validate_payload().

    Args:
        payload: The device payload
        now: Creation time (defaults to the current UTC time)

    Returns:
        A frozen SensorReading

    Raises:
        InvalidTimestampError: If "time" can't be read as a date/time
    """
    device_id = payload.device
    timestamp = normalize_timestamp(payload.time)

    battery_voltage = parse_decimal(payload.battery)
    if battery_voltage is None:
        logger.warning(f"[{device_id}] battery {payload.battery!r} is not a number, storing null")

    overflow_percentage = parse_integer(payload.data)
    if overflow_percentage is None:
        logger.warning(f"[{device_id}] data {payload.data!r} is not a number, storing null")

    created_at = to_iso_z(now or datetime.now(timezone.utc))

    return SensorReading(
        device_id=device_id,
        battery_voltage=battery_voltage,
        received_time_utc=timestamp.utc,
        received_time_iso=timestamp.iso,
        data_index=payload.d_index,
        overflow_percentage=overflow_percentage,
        command_type=payload.cmd,
        created_at=created_at,
    )
