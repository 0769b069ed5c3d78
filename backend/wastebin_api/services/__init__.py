"""
Services Package
================

These are the "workers" that do the actual work.

- HeaderAuthenticator: Checks the m/k security headers
- build_sensor_reading: Turns a payload into a stored row
- SupabaseGateway: Inserts rows into Supabase
"""

from .auth import HeaderAuthenticator, require_security_headers
from .record_builder import build_sensor_reading
from .storage_gateway import SupabaseGateway

__all__ = [
    "HeaderAuthenticator",
    "require_security_headers",
    "build_sensor_reading",
    "SupabaseGateway",
]
