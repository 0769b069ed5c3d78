"""
Reading Models
==============
Pydantic models for wastebin sensor readings.

This module defines all data structures used throughout the application:
- Request model: What the device sends to the backend
- Record model: The row that gets stored in Supabase
- Response models: What the backend returns

THE DEVICE PAYLOAD:
    The wastebin sensor sends short keys and everything as strings:

    {
        "cmd": "RP",
        "device": "D1",
        "battery": "3.7",
        "time": "2024-01-01T00:00:00",
        "dIndex": "5",
        "data": "42"
    }

Author: Wastebin Sensor API Team
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


# The only command type we accept ("RP" = report)
REPORT_COMMAND = "RP"

STATUS_OK = "01"
STATUS_FAILED = "00"


# =============================================================================
# REQUEST MODEL - What the device sends to the backend
# =============================================================================

class SensorReadingPayload(BaseModel):
    """
    Request body for POST /MagnetAPI.

    Every field is optional and untyped. Firmware versions differ
    in what they send (strings, numbers, nothing), and presence is checked
    later by validate_payload() so that the device always gets our own
    {"status": "00"} error instead of a schema error.

    Fields:
        cmd: Command type, must be "RP"
        device: Device identifier
        battery: Battery voltage (e.g. "3.7")
        time: UTC timestamp without offset (e.g. "2024-01-01T00:00:00")
        dIndex: Sequence index of the reading on the device
        data: Fill level / overflow percentage (e.g. "42")
    """
    model_config = ConfigDict(extra="ignore")

    cmd: Any = Field(None, description='Command type (must be "RP")', examples=["RP"])
    device: Any = Field(None, description="Device identifier", examples=["D1"])
    battery: Any = Field(None, description="Battery voltage in volts", examples=["3.7"])
    time: Any = Field(
        None,
        description="Reading time in UTC, no offset",
        examples=["2024-01-01T00:00:00"],
    )
    d_index: Any = Field(None, alias="dIndex", description="Sequence index", examples=["5"])
    data: Any = Field(None, description="Overflow percentage", examples=["42"])


# =============================================================================
# RECORD MODEL - What gets stored
# =============================================================================

class SensorReading(BaseModel):
    """
    One row in the wastebin_sensors table.

    Built once per accepted request and never changed afterwards (frozen).

    battery_voltage and overflow_percentage are None when the device sent
    something that doesn't start with a number.
    """
    model_config = ConfigDict(frozen=True)

    device_id: Any = Field(..., description="Device identifier, passed through")
    battery_voltage: Optional[float] = Field(None, description="Battery voltage in volts")
    received_time_utc: str = Field(..., description="Timestamp exactly as the device sent it")
    received_time_iso: str = Field(..., description="Same instant as ISO-8601 UTC")
    data_index: Any = Field(..., description="Sequence index, passed through")
    overflow_percentage: Optional[int] = Field(None, description="Fill level in percent")
    command_type: str = Field(..., description='Always "RP"')
    created_at: str = Field(..., description="When the server built this record")


# =============================================================================
# RESPONSE MODELS - What we send back
# =============================================================================

class IngestResponse(BaseModel):
    """
    Body of every /MagnetAPI response.

    status is "01" when the reading was stored and "00" for any failure.
    message is empty on success.
    """
    status: str = Field(..., description='"01" = accepted, "00" = failed')
    message: str = Field("", description="Error text (empty on success)")


class HealthResponse(BaseModel):
    status: str = "OK"
    timestamp: str


class EndpointsInfo(BaseModel):
    post_data: str
    health_check: str


class RootResponse(BaseModel):
    message: str
    endpoints: EndpointsInfo
