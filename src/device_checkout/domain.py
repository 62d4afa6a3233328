"""Domain types for devices and their holder state.

A device is either ``Available`` or ``CheckedOut`` by exactly one holder.
The empty-string holder is not representable.
"""

from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class Available:
    """Device is not held by anyone."""


@dataclass(frozen=True)
class CheckedOut:
    """Device is held by ``holder``."""

    holder: str

    def __post_init__(self) -> None:
        if not self.holder:
            raise ValueError("Holder must be a non-empty user name")


HolderState = Union[Available, CheckedOut]


def state_from_holder(holder: Optional[str]) -> HolderState:
    """Build the holder state from a nullable stored column value."""
    if holder is None:
        return Available()
    return CheckedOut(holder=holder)


@dataclass(frozen=True)
class Device:
    """A registered device."""

    id: int
    device_name: str
    serial_number: str
    state: HolderState

    @property
    def holder(self) -> Optional[str]:
        if isinstance(self.state, CheckedOut):
            return self.state.holder
        return None

    @property
    def is_available(self) -> bool:
        return isinstance(self.state, Available)


@dataclass(frozen=True)
class DeviceSummary:
    """Listing entry: name and serial number only."""

    device_name: str
    serial_number: str
