"""Employee Store — postgrest error mapping and query shapes.

Invariants:
    - PGRST116 on single-row fetch → NotFoundError carrying the id
    - Any other APIError → StoreError with store message and code
    - httpx transport failure → StoreError
    - update/delete filter by id_empleado equality
"""

import pytest

from empleados_api.core.domain_types import EmployeeId
from empleados_api.core.errors import NotFoundError, StoreError
from empleados_api.infrastructure.employee_store import EmployeeStore
from tests.services.mock_supabase import SEED_ROWS, FakeSupabaseClient


@pytest.fixture
def supabase():
    return FakeSupabaseClient(rows=SEED_ROWS)


@pytest.fixture
def store(supabase):
    return EmployeeStore(supabase)


async def test_get_by_id_returns_row_dict(store):
    row = await store.get_by_id(EmployeeId(1))
    assert row == SEED_ROWS[0]


async def test_get_by_id_missing_maps_pgrst116_to_not_found(store):
    with pytest.raises(NotFoundError) as exc_info:
        await store.get_by_id(EmployeeId(42))
    assert exc_info.value.employee_id == 42
    assert exc_info.value.http_status == 404


async def test_other_api_errors_map_to_store_error(store, supabase):
    supabase.error = {
        "message": "column empleados.foo does not exist",
        "code": "42703", "hint": None, "details": None,
    }
    with pytest.raises(StoreError) as exc_info:
        await store.list_all()
    err = exc_info.value
    assert err.store_code == "42703"
    assert err.details == "column empleados.foo does not exist"
    assert err.operation == "list"


async def test_pgrst116_outside_single_row_fetch_is_store_error(store, supabase):
    supabase.error = {
        "message": "JSON object requested, multiple (or no) rows returned",
        "code": "PGRST116", "hint": None, "details": None,
    }
    with pytest.raises(StoreError):
        await store.insert({"nombre": "Ana"})


async def test_transport_error_maps_to_store_error(store, supabase):
    supabase.transport_error = True
    with pytest.raises(StoreError) as exc_info:
        await store.ping()
    assert exc_info.value.operation == "status"


async def test_update_filters_by_id_and_returns_rows(store, supabase):
    rows = await store.update(EmployeeId(2), {"activo": True})
    assert rows[0]["activo"] is True
    call = supabase.calls[-1]
    assert call["op"] == "update"
    assert call["filters"] == [("id_empleado", 2)]


async def test_delete_of_missing_id_returns_empty_list(store):
    assert await store.delete(EmployeeId(99)) == []


async def test_insert_sends_single_row_list(store, supabase):
    await store.insert({"nombre": "Ana", "apellido": "Ruiz", "puesto": "Dev"})
    assert len(supabase.calls[-1]["payload"]) == 1


async def test_custom_table_name_is_used():
    supabase = FakeSupabaseClient(table="empleados_staging")
    store = EmployeeStore(supabase, table="empleados_staging")
    await store.list_all()
    assert supabase.calls[-1]["table"] == "empleados_staging"
