"""
Configuration
=============

Settings loaded once from environment variables (and a local .env file).

Environment Variables:
    SUPABASE_URL: Base URL of the Supabase project (e.g. https://xyz.supabase.co)
    SUPABASE_KEY: Supabase API key used for inserts
    SUPABASE_TABLE: Table the readings go into (default: wastebin_sensors)
    SUPABASE_TIMEOUT: Seconds to wait for the database (default: 30)
    SECURITY_M: Expected value of the "m" request header
    SECURITY_K: Expected value of the "k" request header
    HOST: Address to bind (default: 0.0.0.0)
    PORT: Port to listen on (default: 3000)
    LOG_LEVEL: Root log level (default: INFO)

If SECURITY_M or SECURITY_K is missing, every POST is rejected with 401.
"""

import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict

from wastebin_api.errors import ConfigError


DEFAULT_TABLE = "wastebin_sensors"
DEFAULT_PORT = 3000


class Settings(BaseModel):
    """Process-wide settings. Frozen, so nothing can change them after startup."""

    model_config = ConfigDict(frozen=True)

    supabase_url: Optional[str] = None
    supabase_key: Optional[str] = None
    supabase_table: str = DEFAULT_TABLE
    supabase_timeout: float = 30.0
    security_m: Optional[str] = None
    security_k: Optional[str] = None
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, load_env_file: bool = True) -> "Settings":
        """
        Build settings from the environment.

        Args:
            load_env_file: Read a .env file first (turned off in tests)

        Raises:
            ConfigError: If PORT or SUPABASE_TIMEOUT is not a number
        """
        if load_env_file:
            load_dotenv()

        return cls(
            supabase_url=os.getenv("SUPABASE_URL") or None,
            supabase_key=os.getenv("SUPABASE_KEY") or None,
            supabase_table=os.getenv("SUPABASE_TABLE", DEFAULT_TABLE),
            supabase_timeout=_number_from_env("SUPABASE_TIMEOUT", "30", float),
            security_m=os.getenv("SECURITY_M"),
            security_k=os.getenv("SECURITY_K"),
            host=os.getenv("HOST", "0.0.0.0"),
            port=_number_from_env("PORT", str(DEFAULT_PORT), int),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )


def _number_from_env(name: str, default: str, cast):
    raw = os.getenv(name) or default
    try:
        return cast(raw)
    except ValueError:
        raise ConfigError(f"{name} must be a number, got {raw!r}")
