"""
Input Validation Utilities
===========================

Checks a device payload before anything gets built or stored.

All-or-nothing: if a check fails we raise, and nothing downstream runs.
"""

from typing import Any

from wastebin_api.errors import InvalidCommandError, MissingFieldsError
from wastebin_api.models import REPORT_COMMAND, SensorReadingPayload


# Attribute names on SensorReadingPayload (dIndex is stored as d_index)
REQUIRED_FIELDS = ("cmd", "device", "battery", "time", "d_index", "data")


def is_present(value: Any) -> bool:
    """
    Check if a field counts as "sent".

    Missing, null, "", 0, 0.0 and false all count as absent. JSON objects
    and arrays count as present even when empty.

    Args:
        value: Raw value from the payload

    Returns:
        True if present, False otherwise
    """
    if isinstance(value, (dict, list)):
        return True
    return bool(value)


def missing_fields(payload: SensorReadingPayload) -> list[str]:
    """
    List the required fields that are absent, using the device's key names.

    Example:
        {"cmd": "RP", "device": "D1"} -> ["battery", "time", "dIndex", "data"]
    """
    missing = []
    for name in REQUIRED_FIELDS:
        if not is_present(getattr(payload, name)):
            field = SensorReadingPayload.model_fields[name]
            missing.append(field.alias or name)
    return missing


def validate_command_type(cmd: Any) -> bool:
    """
    Validate the command type.

    Args:
        cmd: Value of the "cmd" key

    Returns:
        True if it is exactly "RP", False otherwise
    """
    return cmd == REPORT_COMMAND


def validate_payload(payload: SensorReadingPayload) -> None:
    """
    Run every check on a payload.

    Raises:
        MissingFieldsError: If any required field is absent
        InvalidCommandError: If cmd is not "RP"
    """
    if missing_fields(payload):
        raise MissingFieldsError()

    if not validate_command_type(payload.cmd):
        raise InvalidCommandError()
