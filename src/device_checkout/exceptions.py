"""Error taxonomy for the checkout registry.

``CheckoutError`` subclasses are expected outcomes of the checkout state
machine and map 1:1 onto HTTP status codes. ``StorageError`` is the only
unexpected failure and is always reported to clients as a generic 500.
"""

from typing import Optional

from fastapi import status


class CheckoutError(Exception):
    """Base class for domain errors raised by the checkout service."""

    status_code: int = status.HTTP_400_BAD_REQUEST
    default_message: str = "Bad request"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(CheckoutError):
    """A required field is missing or empty."""

    default_message = "Invalid request"


class DeviceConflictError(CheckoutError):
    """A device with the serial number is already registered."""

    default_message = "Device already exists"


class DeviceNotFoundError(CheckoutError):
    """No device is registered under the serial number."""

    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Device not found"


class DeviceAlreadyTakenError(CheckoutError):
    """The device is currently checked out."""

    default_message = "Device is already taken"


class StorageError(Exception):
    """The backing store is unreachable or a query failed."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
