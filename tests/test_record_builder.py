from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from wastebin_api.models import SensorReadingPayload
from wastebin_api.services.record_builder import (
    build_sensor_reading,
    parse_decimal,
    parse_integer,
)

from tests.conftest import VALID_PAYLOAD


@pytest.mark.parametrize(
    "value, expected",
    [("3.7", 3.7), (" 3.70V", 3.7), (".5", 0.5), ("-1e2", -100.0), (4, 4.0), (3.3, 3.3)],
)
def test_parse_decimal(value, expected):
    assert parse_decimal(value) == expected


@pytest.mark.parametrize(
    "value",
    ["abc", "V3.7", True, "1e999", {"v": 1}, 10 ** 400, "\u0663.\u0667"],
)
def test_parse_decimal_rejects_non_numbers(value):
    assert parse_decimal(value) is None


@pytest.mark.parametrize(
    "value, expected",
    [("42", 42), ("42.9", 42), ("42%", 42), ("-7", -7), (12, 12), (99.9, 99)],
)
def test_parse_integer(value, expected):
    assert parse_integer(value) == expected


@pytest.mark.parametrize("value", ["full", "%42", False, [1], "\u0664\u0662"])
def test_parse_integer_rejects_non_numbers(value):
    assert parse_integer(value) is None


def test_build_sensor_reading_maps_every_field():
    payload = SensorReadingPayload.model_validate(VALID_PAYLOAD)
    now = datetime(2024, 1, 1, 0, 0, 5, tzinfo=timezone.utc)

    reading = build_sensor_reading(payload, now=now)

    assert reading.model_dump() == {
        "device_id": "D1",
        "battery_voltage": 3.7,
        "received_time_utc": "2024-01-01T00:00:00",
        "received_time_iso": "2024-01-01T00:00:00.000Z",
        "data_index": "5",
        "overflow_percentage": 42,
        "command_type": "RP",
        "created_at": "2024-01-01T00:00:05.000Z",
    }


@pytest.mark.parametrize("device", [1001, True, {"serial": "A1"}])
def test_device_id_and_index_pass_through_unchanged(device):
    payload = SensorReadingPayload.model_validate({**VALID_PAYLOAD, "device": device, "dIndex": 7})

    reading = build_sensor_reading(payload)

    assert reading.device_id == device
    assert reading.data_index == 7


def test_reading_is_frozen():
    reading = build_sensor_reading(SensorReadingPayload.model_validate(VALID_PAYLOAD))

    with pytest.raises(ValidationError):
        reading.device_id = "D2"
