"""SQLAlchemy database models for the Device Checkout Registry."""

from typing import Optional
from sqlalchemy import CheckConstraint, Integer, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all database models."""

    pass


class DeviceRecord(Base):
    """Registered devices and their current holder."""

    __tablename__ = "devices"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    device_name: Mapped[str] = mapped_column(String(255), nullable=False)
    serial_number: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)

    # NULL when the device is available
    holder: Mapped[Optional[str]] = mapped_column(String(255), nullable=True, default=None)

    __table_args__ = (
        CheckConstraint("holder IS NULL OR length(holder) > 0", name="check_holder_not_empty"),
    )

    def __repr__(self) -> str:
        return f"<DeviceRecord(serial_number={self.serial_number}, holder={self.holder})>"
