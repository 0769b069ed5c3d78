"""
Supabase Storage Gateway
========================

Writes readings into the Supabase table.

HOW SUPABASE INSERTS WORK:
-------------------------
Every Supabase project exposes its tables over REST (PostgREST). To insert
one row into wastebin_sensors we POST a JSON array to:

    https://<project>.supabase.co/rest/v1/wastebin_sensors

with the project key in both the "apikey" and "Authorization: Bearer"
headers. "Prefer: return=minimal" tells Supabase not to send the row back,
since we never read it.

THE DATA FLOW:
-------------
    [SensorReading]
            |
            | POST /rest/v1/wastebin_sensors
            v
    [Supabase]  --> 201 Created      = stored
                --> 4xx/5xx + JSON   = StorageError(message from Supabase)
                --> network failure  = StorageError(what went wrong)

One attempt per reading. There is no retry and no dedup key, so sending the
same reading twice stores it twice.
"""

import logging
from typing import Optional

import httpx

from wastebin_api.errors import ConfigError, StorageError
from wastebin_api.models import SensorReading

logger = logging.getLogger(__name__)


class SupabaseGateway:
    """
    Inserts SensorReading rows into Supabase.

    HOW TO USE:
    ----------
    gateway = SupabaseGateway(url="https://xyz.supabase.co", key="...")

    try:
        await gateway.insert(reading)
    except StorageError as e:
        print("Insert failed:", e.detail)

    await gateway.close()
    """

    def __init__(
        self,
        url: Optional[str],
        key: Optional[str],
        table: str = "wastebin_sensors",
        request_timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Set up the gateway.

        Args:
            url: Supabase project URL
            key: Supabase API key
            table: Table to insert into
            request_timeout: How long to wait for Supabase (seconds)
            transport: Custom httpx transport (tests use httpx.MockTransport)

        Raises:
            ConfigError: If url or key is missing
        """
        if not url or not key:
            raise ConfigError("SUPABASE_URL and SUPABASE_KEY must be set")

        self.table = table
        self.insert_url = f"{url.rstrip('/')}/rest/v1/{table}"
        self.headers = {
            "apikey": key,
            "Authorization": f"Bearer {key}",
            "Content-Type": "application/json",
            "Prefer": "return=minimal",
        }
        # One client for the whole process so connections get reused
        self.http_client = httpx.AsyncClient(timeout=request_timeout, transport=transport)

    async def insert(self, reading: SensorReading) -> None:
        """
        Insert one reading.

        Raises:
            StorageError: If Supabase rejects the row or can't be reached
        """
        logger.debug(f"[{reading.device_id}] Inserting into {self.table}")

        try:
            response = await self.http_client.post(
                self.insert_url,
                headers=self.headers,
                json=[reading.model_dump()],
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            detail = _error_message(e.response)
            logger.error(
                f"[{reading.device_id}] Supabase insert failed - HTTP {e.response.status_code}\n"
                f"Response: {e.response.text[:500]}"
            )
            raise StorageError(detail) from e
        except httpx.RequestError as e:
            detail = str(e) or type(e).__name__
            logger.error(f"[{reading.device_id}] Supabase unreachable: {detail}")
            raise StorageError(detail) from e

        logger.debug(f"[{reading.device_id}] Insert OK - Status: {response.status_code}")

    async def close(self) -> None:
        await self.http_client.aclose()


def _error_message(response: httpx.Response) -> str:
    """
    Pull a readable message out of a Supabase error response.

    PostgREST errors look like:
        {"code": "23502", "message": "null value in column ...", "details": null, "hint": null}
    """
    try:
        body = response.json()
    except ValueError:
        body = None

    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])

    text = response.text.strip()
    return text[:200] if text else f"HTTP {response.status_code}"
