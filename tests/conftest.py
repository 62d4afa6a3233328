"""Pytest configuration and fixtures."""

import pytest
from typing import AsyncGenerator
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from device_checkout.config import Settings
from device_checkout.database import Database
from device_checkout.main import create_app
from device_checkout.repository import DeviceRepository
from device_checkout.service import CheckoutService


@pytest.fixture
def test_settings() -> Settings:
    return Settings(log_level="WARNING", cors_origins="*")


@pytest.fixture
async def database(tmp_path) -> AsyncGenerator[Database, None]:
    """File-backed SQLite database so separate sessions share state."""
    db = Database(f"sqlite+aiosqlite:///{tmp_path / 'devices.db'}")
    await db.create_schema()

    yield db

    await db.dispose()


@pytest.fixture
async def test_db(database) -> AsyncGenerator[AsyncSession, None]:
    """Create test database session."""
    async with database.session() as session:
        yield session


@pytest.fixture
def repository(test_db) -> DeviceRepository:
    return DeviceRepository(test_db)


@pytest.fixture
def service(repository) -> CheckoutService:
    return CheckoutService(repository)


@pytest.fixture
async def client(database, test_settings) -> AsyncGenerator[AsyncClient, None]:
    """Create test client bound to the test database."""
    app = create_app(test_settings, database=database)

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest.fixture
async def broken_client(tmp_path, test_settings) -> AsyncGenerator[AsyncClient, None]:
    """Client whose database file cannot be opened."""
    database = Database(f"sqlite+aiosqlite:///{tmp_path / 'missing' / 'devices.db'}")
    app = create_app(test_settings, database=database)

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    await database.dispose()
