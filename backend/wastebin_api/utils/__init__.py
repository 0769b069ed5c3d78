"""
Utility modules for the wastebin sensor API.
"""

from wastebin_api.utils.validation import (
    is_present,
    missing_fields,
    validate_command_type,
    validate_payload,
)
from wastebin_api.utils.timestamps import (
    NormalizedTimestamp,
    normalize_timestamp,
    parse_utc,
    to_iso_z,
    utc_now_iso,
)

__all__ = [
    "is_present",
    "missing_fields",
    "validate_command_type",
    "validate_payload",
    "NormalizedTimestamp",
    "normalize_timestamp",
    "parse_utc",
    "to_iso_z",
    "utc_now_iso",
]
