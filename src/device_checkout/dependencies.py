"""FastAPI dependencies wiring a request to the checkout service."""

from typing import AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from device_checkout.database import Database
from device_checkout.repository import DeviceRepository
from device_checkout.service import CheckoutService


def get_database(request: Request) -> Database:
    """Database built by ``create_app`` and stored on the application state."""
    return request.app.state.database


async def get_db(database: Database = Depends(get_database)) -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency for FastAPI to get a request-scoped database session.

    Usage:
        @router.get("/endpoint")
        async def endpoint(db: AsyncSession = Depends(get_db)):
            ...
    """
    async with database.session() as session:
        yield session


def get_checkout_service(db: AsyncSession = Depends(get_db)) -> CheckoutService:
    return CheckoutService(DeviceRepository(db))
