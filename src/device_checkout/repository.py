"""Device storage access."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, List, Optional

from sqlalchemy import func, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from device_checkout.domain import CheckedOut, Device, DeviceSummary, HolderState, state_from_holder
from device_checkout.exceptions import DeviceConflictError, DeviceNotFoundError, StorageError
from device_checkout.models import DeviceRecord

logger = logging.getLogger(__name__)


class DeviceRepository:
    """Reads and writes device records.

    Every call hits the database; nothing is cached. Writes commit
    immediately so each operation is one durable transaction.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    @asynccontextmanager
    async def _storage_errors(self, operation: str) -> AsyncGenerator[None, None]:
        try:
            yield
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Storage failure during {operation}: {e}", exc_info=True)
            raise StorageError(f"{operation} failed") from e

    async def create(self, device_name: str, serial_number: str) -> Device:
        """
        Insert a new available device.

        Raises:
            DeviceConflictError: serial number already registered
        """
        async with self._storage_errors("create"):
            record = DeviceRecord(device_name=device_name, serial_number=serial_number, holder=None)
            self.session.add(record)
            try:
                await self.session.commit()
            except IntegrityError:
                await self.session.rollback()
                raise DeviceConflictError()
            return self._to_device(record)

    async def find_by_serial(self, serial_number: str) -> Optional[Device]:
        async with self._storage_errors("find_by_serial"):
            stmt = (
                select(DeviceRecord)
                .where(DeviceRecord.serial_number == serial_number)
                .execution_options(populate_existing=True)
            )
            result = await self.session.execute(stmt)
            record = result.scalar_one_or_none()
            return self._to_device(record) if record else None

    async def list_all(self) -> List[DeviceSummary]:
        """Return name and serial of every device, in no particular order."""
        async with self._storage_errors("list_all"):
            stmt = select(DeviceRecord.device_name, DeviceRecord.serial_number)
            result = await self.session.execute(stmt)
            return [
                DeviceSummary(device_name=row.device_name, serial_number=row.serial_number)
                for row in result.all()
            ]

    async def set_holder(self, serial_number: str, state: HolderState) -> None:
        """
        Overwrite the holder state unconditionally.

        Raises:
            DeviceNotFoundError: no device with this serial number
        """
        holder = state.holder if isinstance(state, CheckedOut) else None
        async with self._storage_errors("set_holder"):
            stmt = (
                update(DeviceRecord)
                .where(DeviceRecord.serial_number == serial_number)
                .values(holder=holder)
                .execution_options(synchronize_session=False)
            )
            result = await self.session.execute(stmt)
            await self.session.commit()

        if result.rowcount == 0:
            raise DeviceNotFoundError()

    async def claim(self, serial_number: str, holder: str) -> bool:
        """
        Set the holder only if the device is currently available.

        Single conditional UPDATE, so concurrent claims on the same serial
        number are serialized by the database: at most one succeeds.

        Returns:
            True if this call checked the device out, False if the device
            does not exist or is already held.
        """
        state = CheckedOut(holder=holder)
        async with self._storage_errors("claim"):
            stmt = (
                update(DeviceRecord)
                .where(DeviceRecord.serial_number == serial_number)
                .where(DeviceRecord.holder.is_(None))
                .values(holder=state.holder)
                .execution_options(synchronize_session=False)
            )
            result = await self.session.execute(stmt)
            await self.session.commit()

        return result.rowcount == 1

    async def count(self) -> tuple[int, int]:
        """Return (total devices, checked-out devices)."""
        async with self._storage_errors("count"):
            total = await self.session.scalar(select(func.count()).select_from(DeviceRecord))
            taken = await self.session.scalar(
                select(func.count()).select_from(DeviceRecord).where(DeviceRecord.holder.is_not(None))
            )
            return total or 0, taken or 0

    @staticmethod
    def _to_device(record: DeviceRecord) -> Device:
        return Device(
            id=record.id,
            device_name=record.device_name,
            serial_number=record.serial_number,
            state=state_from_holder(record.holder),
        )
