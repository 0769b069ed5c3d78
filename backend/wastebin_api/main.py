"""
Wastebin Sensor API - Backend
=============================
FastAPI application that receives wastebin sensor readings and stores them
in Supabase.

ARCHITECTURE:
    Sensors in the field POST their readings over the internet. This backend
    checks the security headers, validates the reading and inserts one row
    per reading into Supabase.

    [Wastebin Sensor] --HTTPS POST /MagnetAPI--> [This Backend]
                                                        |
                                                        v
                                           [Supabase: wastebin_sensors]

ENDPOINTS:
    POST /MagnetAPI - Report a reading (needs the m/k headers)
    GET  /health    - Health check
    GET  /          - API information

HOW TO RUN:
    # Install
    pip install -e .

    # Copy environment config
    cp env.example.txt .env
    # Edit .env with your Supabase and security settings

    # Run the server (PORT defaults to 3000)
    wastebin-api
    # or
    uvicorn wastebin_api.main:app --port 3000

API DOCUMENTATION:
    After starting the server, visit:
    - Swagger UI: http://localhost:3000/docs
    - ReDoc: http://localhost:3000/redoc

Author: Wastebin Sensor API Team
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from wastebin_api.config import Settings
from wastebin_api.errors import IngestError
from wastebin_api.models import (
    STATUS_FAILED,
    EndpointsInfo,
    HealthResponse,
    RootResponse,
)
from wastebin_api.routers import magnet_router
from wastebin_api.services import HeaderAuthenticator, SupabaseGateway
from wastebin_api.utils.timestamps import utc_now_iso

logger = logging.getLogger(__name__)


# =============================================================================
# APPLICATION LIFESPAN
# =============================================================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    STARTUP:
        1. Create the Supabase gateway (unless one was injected)
        2. Print startup information

    SHUTDOWN:
        1. Close the gateway's HTTP client
    """
    settings: Settings = app.state.settings

    # ========== STARTUP ==========
    owns_gateway = app.state.gateway is None
    if owns_gateway:
        app.state.gateway = SupabaseGateway(
            url=settings.supabase_url,
            key=settings.supabase_key,
            table=settings.supabase_table,
            request_timeout=settings.supabase_timeout,
        )

    print("=" * 60)
    print("WASTEBIN SENSOR API - Starting Backend")
    print("=" * 60)
    logger.info(f"Server running on port {settings.port}")
    logger.info("API endpoint: /MagnetAPI")
    logger.info(f"Supabase table: {settings.supabase_table}")
    if not app.state.authenticator.configured:
        logger.warning("SECURITY_M / SECURITY_K not set - every POST /MagnetAPI will get 401")
    print("=" * 60)

    yield  # Application runs here

    # ========== SHUTDOWN ==========
    if owns_gateway:
        await app.state.gateway.close()
        app.state.gateway = None
    logger.info("Shutdown complete")


# =============================================================================
# ERROR HANDLERS
# =============================================================================

async def ingest_error_handler(request: Request, exc: IngestError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"status": STATUS_FAILED, "message": exc.message},
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Body wasn't a JSON object. Answer in our own format, not FastAPI's."""
    logger.debug(f"Rejected request body: {exc.errors()}")
    return JSONResponse(
        status_code=400,
        content={"status": STATUS_FAILED, "message": "Invalid request body"},
    )


# =============================================================================
# CREATE FASTAPI APPLICATION
# =============================================================================

def create_app(settings: Optional[Settings] = None, gateway=None) -> FastAPI:
    """
    Build the application.

    Args:
        settings: Configuration (default: read from the environment)
        gateway: Anything with `async insert(reading)`; by default a
                 SupabaseGateway is created at startup

    Returns:
        The FastAPI app
    """
    settings = settings or Settings.from_env()

    logging.basicConfig(
        level=settings.log_level,
        format='[%(asctime)s] %(message)s',
        datefmt='%H:%M:%S',
        handlers=[logging.StreamHandler(sys.stderr)]
    )

    app = FastAPI(
        title="Wastebin Sensor API",
        description="Receives wastebin sensor readings and stores them in Supabase.",
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    app.state.settings = settings
    app.state.authenticator = HeaderAuthenticator(settings.security_m, settings.security_k)
    app.state.gateway = gateway

    app.add_exception_handler(IngestError, ingest_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    # Sensor reading endpoint
    app.include_router(magnet_router)

    # =========================================================================
    # ROOT ENDPOINTS
    # =========================================================================

    @app.get(
        "/",
        response_model=RootResponse,
        summary="API Information",
        description="Get basic API information and available endpoints."
    )
    async def root():
        return RootResponse(
            message="Wastebin Sensor API Service",
            endpoints=EndpointsInfo(post_data="/MagnetAPI", health_check="/health"),
        )

    @app.get(
        "/health",
        response_model=HealthResponse,
        summary="Health Check",
        description="Check if the backend is running."
    )
    async def health():
        """Health check endpoint."""
        return HealthResponse(status="OK", timestamp=utc_now_iso())

    return app


app = create_app()


def run():
    """Console entry point: serve the app with uvicorn on HOST:PORT."""
    settings: Settings = app.state.settings
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
