"""
Routers Package
===============

Routers are like the reception desk - they direct incoming requests
to the right place.
"""

from .magnet import router as magnet_router, get_storage_gateway

__all__ = [
    "magnet_router",
    "get_storage_gateway",
]
