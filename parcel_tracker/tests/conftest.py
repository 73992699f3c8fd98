"""
Centralized Test Configuration.
"""

import pytest
from httpx import AsyncClient, ASGITransport

from parcel_tracker.app.main import app
from parcel_tracker.app.core.dependencies import get_manager
from parcel_tracker.app.services.manager import ParcelManager


@pytest.fixture
def manager():
    """Fresh in-memory manager for each test."""
    return ParcelManager()


@pytest.fixture
def make_parcel(manager):
    """Register a parcel with sensible defaults and return its ID."""
    def _register(parcel_id, weight=1.0, priority=3, recipient=None):
        return manager.register_parcel(
            parcel_id=parcel_id,
            sender="Ade",
            recipient=recipient or f"Recipient {parcel_id}",
            address="12-Marina-Lagos",
            weight=weight,
            priority=priority
        )
    return _register


@pytest.fixture(autouse=True)
def apply_overrides(manager):
    """Route every request to the per-test manager."""
    app.dependency_overrides[get_manager] = lambda: manager
    yield
    app.dependency_overrides = {}


@pytest.fixture
async def client():
    """Async client for testing."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
