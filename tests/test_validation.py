import pytest

from wastebin_api.errors import InvalidCommandError, MissingFieldsError
from wastebin_api.models import SensorReadingPayload
from wastebin_api.utils.validation import is_present, missing_fields, validate_payload

from tests.conftest import VALID_PAYLOAD


@pytest.mark.parametrize("value", [None, "", 0, 0.0, False])
def test_falsy_values_are_absent(value):
    assert not is_present(value)


@pytest.mark.parametrize("value", ["0", "RP", 1, -1, 0.5, True, [], {}])
def test_other_values_are_present(value):
    assert is_present(value)


def test_missing_fields_uses_device_key_names():
    payload = SensorReadingPayload.model_validate({"cmd": "RP", "device": "D1"})

    assert missing_fields(payload) == ["battery", "time", "dIndex", "data"]


def test_valid_payload_passes():
    validate_payload(SensorReadingPayload.model_validate(VALID_PAYLOAD))


def test_missing_fields_checked_before_command():
    payload = SensorReadingPayload.model_validate({"cmd": "XX"})

    with pytest.raises(MissingFieldsError):
        validate_payload(payload)


def test_wrong_command_raises():
    payload = SensorReadingPayload.model_validate({**VALID_PAYLOAD, "cmd": "XX"})

    with pytest.raises(InvalidCommandError) as exc_info:
        validate_payload(payload)

    assert exc_info.value.status_code == 400


def test_python_field_name_does_not_count_as_dIndex():
    body = {key: value for key, value in VALID_PAYLOAD.items() if key != "dIndex"}
    payload = SensorReadingPayload.model_validate({**body, "d_index": "5"})

    assert payload.d_index is None
    with pytest.raises(MissingFieldsError):
        validate_payload(payload)
