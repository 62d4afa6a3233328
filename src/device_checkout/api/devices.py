"""Device registration and checkout endpoints."""

from typing import List, Optional
from fastapi import APIRouter, Depends

from device_checkout.dependencies import get_checkout_service
from device_checkout.schemas import (
    DeviceListItem,
    DeviceStatusResponse,
    ErrorResponse,
    MessageResponse,
    RegisterRequest,
    ReturnRequest,
    TakeRequest,
)
from device_checkout.service import CheckoutService

router = APIRouter(tags=["devices"])


@router.post(
    "/register",
    response_model=MessageResponse,
    responses={400: {"model": ErrorResponse}},
)
async def register_device(
    request: Optional[RegisterRequest] = None,
    service: CheckoutService = Depends(get_checkout_service),
) -> MessageResponse:
    """
    Register a new device.

    The device starts out available. Fails with 400 if either field is
    missing or the serial number is already registered.
    """
    request = request or RegisterRequest()
    await service.register(request.device_name, request.serial_number)
    return MessageResponse(message="Device registered successfully")


@router.get("/devices", response_model=List[DeviceListItem])
async def list_devices(
    service: CheckoutService = Depends(get_checkout_service),
) -> List[DeviceListItem]:
    """List all registered devices (name and serial number, unordered)."""
    devices = await service.list_devices()
    return [
        DeviceListItem(device_name=d.device_name, serial_number=d.serial_number)
        for d in devices
    ]


@router.post(
    "/take",
    response_model=MessageResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def take_device(
    request: Optional[TakeRequest] = None,
    service: CheckoutService = Depends(get_checkout_service),
) -> MessageResponse:
    """Check a device out to a user. Fails with 400 if it is already taken."""
    request = request or TakeRequest()
    await service.take(request.user_name, request.serial_number)
    return MessageResponse(message="Device taken successfully")


@router.get(
    "/devices/{serial_number:path}",
    response_model=DeviceStatusResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_device(
    serial_number: str,
    service: CheckoutService = Depends(get_checkout_service),
) -> DeviceStatusResponse:
    """Get a device's name and current holder."""
    device = await service.inspect(serial_number)
    return DeviceStatusResponse(device_name=device.device_name, holder=device.holder)


@router.post(
    "/return",
    response_model=MessageResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def return_device(
    request: Optional[ReturnRequest] = None,
    service: CheckoutService = Depends(get_checkout_service),
) -> MessageResponse:
    """Return a device. Returning an available device also succeeds."""
    request = request or ReturnRequest()
    await service.return_device(request.serial_number)
    return MessageResponse(message="Device returned successfully")
