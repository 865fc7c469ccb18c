"""Service test fixtures — fake Supabase client + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory FakeSupabaseClient
    - get_store_handle dependency overridden: the lifespan (and acreate_client) never runs
    - unconfigured_client serves a handle in the ERROR_CONFIG state

Design Decisions:
    - Override the dependency, not the module: StoreHandle is injected per request,
      so swapping it needs no monkeypatching of globals
"""

import pytest
from httpx import ASGITransport, AsyncClient

from empleados_api.core.domain_types import ConnectivityState
from empleados_api.infrastructure.employee_store import (
    EmployeeStore, StoreHandle, get_store_handle,
)
from empleados_api.main import app
from tests.services.mock_supabase import SEED_ROWS, FakeSupabaseClient


@pytest.fixture
def fake_supabase():
    return FakeSupabaseClient()


@pytest.fixture
def seeded_supabase():
    # Reverse order: list must sort by id_empleado, not insertion order
    return FakeSupabaseClient(rows=list(reversed(SEED_ROWS)))


@pytest.fixture
def connected_handle(fake_supabase):
    return StoreHandle(ConnectivityState.CONNECTED, EmployeeStore(fake_supabase))


async def _serve(handle: StoreHandle, raise_app_exceptions: bool = True):
    app.dependency_overrides[get_store_handle] = lambda: handle
    transport = ASGITransport(app=app, raise_app_exceptions=raise_app_exceptions)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
async def client(connected_handle):
    """Test client backed by an empty employee table."""
    async for c in _serve(connected_handle):
        yield c


@pytest.fixture
async def seeded_client(seeded_supabase):
    """Test client backed by the two SEED_ROWS employees."""
    handle = StoreHandle(
        ConnectivityState.CONNECTED, EmployeeStore(seeded_supabase),
    )
    async for c in _serve(handle):
        yield c


@pytest.fixture
async def unconfigured_client():
    """Test client whose store credentials were missing at startup."""
    async for c in _serve(StoreHandle(ConnectivityState.ERROR_CONFIG)):
        yield c


@pytest.fixture
async def lenient_client(connected_handle):
    """Test client that returns 500 responses instead of re-raising app errors."""
    async for c in _serve(connected_handle, raise_app_exceptions=False):
        yield c
