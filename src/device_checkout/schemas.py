"""Pydantic schemas for API requests and responses."""

from typing import Dict, Literal, Optional
from pydantic import BaseModel, Field


# Request Models
#
# Fields are optional so that missing values reach the checkout service and
# come back as its 400 messages instead of a generic 422.


class RegisterRequest(BaseModel):
    """Register a new device."""

    device_name: Optional[str] = Field(None, description="Human-readable device label")
    serial_number: Optional[str] = Field(None, description="Unique serial number")


class TakeRequest(BaseModel):
    """Check a device out to a user."""

    user_name: Optional[str] = Field(None, description="User taking the device")
    serial_number: Optional[str] = None


class ReturnRequest(BaseModel):
    """Return a checked-out device."""

    serial_number: Optional[str] = None


# Response Models


class MessageResponse(BaseModel):
    """Successful state change."""

    message: str


class ErrorResponse(BaseModel):
    """Error response."""

    error: str


class DeviceListItem(BaseModel):
    """Device entry in the catalog listing."""

    device_name: str
    serial_number: str


class DeviceStatusResponse(BaseModel):
    """Current status of one device; ``holder`` is null when available."""

    device_name: str
    holder: Optional[str] = None


class HealthCheckResponse(BaseModel):
    """Health check response."""

    status: Literal["healthy", "unhealthy"]
    database: Literal["connected", "disconnected"]
    device_count: Optional[int] = None
    checked_out_count: Optional[int] = None
    timestamp: str


class ServiceInfoResponse(BaseModel):
    """Root endpoint response."""

    service: str
    version: str
    endpoints: Dict[str, str]
