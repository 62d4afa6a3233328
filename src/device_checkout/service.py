"""Checkout rules on top of the device repository."""

import logging
from typing import List, Optional

from device_checkout.domain import Available, Device, DeviceSummary
from device_checkout.exceptions import DeviceAlreadyTakenError, DeviceNotFoundError, ValidationError
from device_checkout.repository import DeviceRepository

logger = logging.getLogger(__name__)


def _is_missing(value: Optional[str]) -> bool:
    return value is None or value == ""


class CheckoutService:
    """
    Device checkout state machine.

    A device starts ``Available`` on registration. ``take`` moves it to
    ``CheckedOut`` and fails if anyone (including the same user) already
    holds it. ``return_device`` always leaves it ``Available``.
    """

    def __init__(self, repository: DeviceRepository):
        self.repository = repository

    async def register(self, device_name: Optional[str], serial_number: Optional[str]) -> Device:
        """
        Register a new device.

        Raises:
            ValidationError: name or serial number missing
            DeviceConflictError: serial number already registered
        """
        if _is_missing(device_name) or _is_missing(serial_number):
            raise ValidationError("Device name and serial number are required")

        device = await self.repository.create(device_name, serial_number)
        logger.info(f"Registered device {device.serial_number} ({device.device_name})")
        return device

    async def list_devices(self) -> List[DeviceSummary]:
        return await self.repository.list_all()

    async def inspect(self, serial_number: str) -> Device:
        device = await self.repository.find_by_serial(serial_number)
        if device is None:
            raise DeviceNotFoundError()
        return device

    async def take(self, user_name: Optional[str], serial_number: Optional[str]) -> None:
        """
        Check a device out to ``user_name``.

        Raises:
            ValidationError: user name or serial number missing
            DeviceNotFoundError: unknown serial number
            DeviceAlreadyTakenError: device already has a holder
        """
        if _is_missing(user_name) or _is_missing(serial_number):
            raise ValidationError("User name and serial number are required")

        if await self.repository.claim(serial_number, user_name):
            logger.info(f"Device {serial_number} taken by {user_name}")
            return

        # Claim failed: tell a missing device apart from a held one
        if await self.repository.find_by_serial(serial_number) is None:
            raise DeviceNotFoundError()
        raise DeviceAlreadyTakenError()

    async def return_device(self, serial_number: Optional[str]) -> None:
        """
        Return a device. Returning an available device is a no-op success.

        Raises:
            ValidationError: serial number missing
            DeviceNotFoundError: unknown serial number
        """
        if _is_missing(serial_number):
            raise ValidationError("Serial number is required")

        await self.repository.set_holder(serial_number, Available())
        logger.info(f"Device {serial_number} returned")

    async def stats(self) -> tuple[int, int]:
        """Return (total devices, checked-out devices)."""
        return await self.repository.count()
