"""
Centralized Test Configuration.
"""

import pytest
from datetime import datetime, timedelta, timezone
from httpx import AsyncClient, ASGITransport

from parceltrack.app.main import app
from parceltrack.app.models.customer import Customer
from parceltrack.app.models.hub import Hub
from parceltrack.app.models.parcel import Parcel
from parceltrack.app.services.registry import Registry, get_registry

CLOCK_START = datetime(2024, 3, 1, 9, 0, 0, tzinfo=timezone.utc)


class SteppingClock:
    """Deterministic clock: each reading is one minute after the previous one."""

    def __init__(self, start: datetime = CLOCK_START, step: timedelta = timedelta(minutes=1)):
        self.current = start
        self.step = step

    def __call__(self) -> datetime:
        now = self.current
        self.current = now + self.step
        return now


@pytest.fixture
def clock():
    return SteppingClock()


@pytest.fixture
def alice():
    return Customer("C001", "Alice", "12 Park Street, Chennai")


@pytest.fixture
def bob():
    return Customer("C002", "Bob", "45 Lake Road, Coimbatore")


@pytest.fixture
def chennai_hub():
    return Hub("H001", "Chennai Hub")


@pytest.fixture
def coimbatore_hub():
    return Hub("H002", "Coimbatore Hub")


@pytest.fixture
def parcel(alice, bob, clock):
    """Fresh parcel P001 from Alice to Bob."""
    return Parcel("P001", alice, bob, 1.2, clock=clock)


@pytest.fixture
def make_parcel(alice, bob, clock):
    def _make(parcel_id: str, weight_kg: float = 1.0) -> Parcel:
        return Parcel(parcel_id, alice, bob, weight_kg, clock=clock)
    return _make


@pytest.fixture
def registry(clock):
    """Empty registry driven by the stepping clock."""
    return Registry(clock=clock)


@pytest.fixture
def seeded_registry(registry):
    """Registry holding the sample customers, hubs, parcel P001 and shipment S001."""
    registry.bootstrap_sample_data()
    return registry


@pytest.fixture
async def client(seeded_registry):
    """Async client for testing, bound to the seeded registry."""
    app.dependency_overrides[get_registry] = lambda: seeded_registry
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
