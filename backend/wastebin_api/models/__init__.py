"""
Models Package
==============

This is where all our data models live.
Import from here instead of the individual files.

Example:
    from wastebin_api.models import SensorReadingPayload, SensorReading
"""

from .reading import (
    # Constants shared by the validator and the responses
    REPORT_COMMAND,
    STATUS_OK,
    STATUS_FAILED,

    # What the device sends us
    SensorReadingPayload,

    # What we store
    SensorReading,

    # What we send back
    IngestResponse,
    HealthResponse,
    EndpointsInfo,
    RootResponse,
)

__all__ = [
    "REPORT_COMMAND",
    "STATUS_OK",
    "STATUS_FAILED",
    "SensorReadingPayload",
    "SensorReading",
    "IngestResponse",
    "HealthResponse",
    "EndpointsInfo",
    "RootResponse",
]
