"""Service info and health endpoints."""

import logging
from datetime import datetime, timezone
from fastapi import APIRouter, Depends

from device_checkout import __version__
from device_checkout.database import Database
from device_checkout.dependencies import get_database
from device_checkout.repository import DeviceRepository
from device_checkout.schemas import HealthCheckResponse, ServiceInfoResponse
from device_checkout.service import CheckoutService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["status"])


@router.get("/", response_model=ServiceInfoResponse, include_in_schema=False)
async def root() -> ServiceInfoResponse:
    """Root endpoint."""
    return ServiceInfoResponse(
        service="Device Checkout Registry",
        version=__version__,
        endpoints={
            "docs": "/docs",
            "register": "POST /register",
            "list": "GET /devices",
            "inspect": "GET /devices/{serial_number}",
            "take": "POST /take",
            "return": "POST /return",
            "health": "GET /health",
        },
    )


@router.get("/health", response_model=HealthCheckResponse)
async def health_check(database: Database = Depends(get_database)) -> HealthCheckResponse:
    """
    Health check endpoint.

    Returns service status and device counts. Reports ``unhealthy``
    rather than failing when the database cannot be reached.
    """
    timestamp = datetime.now(timezone.utc).isoformat()
    try:
        async with database.session() as db:
            total, taken = await CheckoutService(DeviceRepository(db)).stats()
    except Exception as e:
        logger.error(f"Health check failed: {e}")
        return HealthCheckResponse(
            status="unhealthy",
            database="disconnected",
            timestamp=timestamp,
        )

    return HealthCheckResponse(
        status="healthy",
        database="connected",
        device_count=total,
        checked_out_count=taken,
        timestamp=timestamp,
    )
