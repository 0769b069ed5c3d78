"""
Magnet API Router
=================

The wastebin sensor wakes up, measures its fill level and battery, POSTs
one reading here, then goes back to sleep.

Endpoint:
  POST /MagnetAPI  - Report one reading; backend stores it in Supabase.

Auth: Headers `m` and `k` must match SECURITY_M and SECURITY_K.

Responses (always JSON):
  200 {"status": "01", "message": ""}               - stored
  401 {"status": "00", "message": "Unauthorized..."} - bad headers
  400 {"status": "00", "message": "..."}             - bad payload
  500 {"status": "00", "message": "..."}             - database/server error
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Request

from wastebin_api.errors import IngestError
from wastebin_api.models import STATUS_OK, IngestResponse, SensorReadingPayload
from wastebin_api.services import build_sensor_reading, require_security_headers
from wastebin_api.utils.validation import validate_payload

logger = logging.getLogger(__name__)

router = APIRouter(tags=["readings"])


# -----------------------------------------------------------------------------
# Dependency injection
# -----------------------------------------------------------------------------


def get_storage_gateway(request: Request):
    """
    The gateway set up by the app lifespan (or injected by tests).

    Raises:
        IngestError: If the app hasn't finished starting
    """
    gateway = getattr(request.app.state, "gateway", None)
    if gateway is None:
        raise IngestError("Server error: Server not fully started yet")
    return gateway


# -----------------------------------------------------------------------------
# Endpoint
# -----------------------------------------------------------------------------


@router.post(
    "/MagnetAPI",
    response_model=IngestResponse,
    dependencies=[Depends(require_security_headers)],
    summary="Report a sensor reading",
)
async def receive_reading(
    payload: Optional[SensorReadingPayload] = None,
    gateway=Depends(get_storage_gateway),
):
    """
    A wastebin sensor reports one reading.

    **Headers**
    - `m`, `k`: The two shared secrets.

    **Body (JSON)**
    - cmd (required): Must be "RP".
    - device (required): Device identifier.
    - battery (required): Battery voltage, e.g. "3.7".
    - time (required): UTC time without offset, e.g. "2024-01-01T00:00:00".
    - dIndex (required): Sequence index on the device.
    - data (required): Overflow percentage, e.g. "42".
    """
    payload = payload or SensorReadingPayload()

    try:
        validate_payload(payload)
        reading = build_sensor_reading(payload)
        await gateway.insert(reading)
    except IngestError:
        raise
    except Exception as e:
        logger.exception(f"[{payload.device}] Unexpected error while storing reading")
        raise IngestError(f"Server error: {e}") from e

    logger.info(
        f"[{reading.device_id}] reading #{reading.data_index} "
        f"battery={reading.battery_voltage} overflow={reading.overflow_percentage}% -> stored"
    )

    return IngestResponse(status=STATUS_OK, message="")
