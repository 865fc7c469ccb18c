"""Employee Store — wraps the Supabase async client with per-operation error mapping.

Invariants:
    - One store round trip per method call (no retries, no multi-call transactions)
    - PostgREST PGRST116 on a single-row fetch → NotFoundError (core/errors.py)
    - Every other postgrest APIError or httpx transport failure → StoreError
    - StoreHandle is immutable and built once per process by connect_store()

Design Decisions:
    - Wrapper over raw client: services never see postgrest types (ADR: single responsibility)
    - Handle on app.state, served by a FastAPI dependency: no module-level client
      (ADR: no global import side effects, trivially overridable in tests)
    - Client construction failure degrades to ERROR_CONFIG instead of crashing:
      only failing to bind the port is fatal
"""

import logging
from dataclasses import dataclass

import httpx
from fastapi import Request
from postgrest.exceptions import APIError
from supabase import AsyncClient, acreate_client

from empleados_api.config import Settings
from empleados_api.core.domain_types import (
    ConnectivityState, EmployeeId, Operation,
    EMPLOYEE_TABLE, ID_COLUMN, LIST_COLUMNS,
)
from empleados_api.core.errors import NotFoundError, StoreError

logger = logging.getLogger(__name__)

# PostgREST: "JSON object requested, multiple (or no) rows returned"
SINGLE_ROW_NOT_FOUND = "PGRST116"


class EmployeeStore:
    """Query-builder calls against the employee table."""

    def __init__(self, client: AsyncClient, table: str = EMPLOYEE_TABLE):
        self.client = client
        self.table = table

    def _query(self):
        return self.client.table(self.table)

    async def ping(self) -> None:
        """Cheapest query that proves credentials and table access."""
        await self._execute(
            Operation.STATUS, self._query().select("*").limit(1),
        )

    async def list_all(self) -> list[dict]:
        return await self._execute(
            Operation.LIST,
            self._query().select(LIST_COLUMNS).order(ID_COLUMN, desc=False),
        )

    async def get_by_id(self, employee_id: EmployeeId) -> dict:
        return await self._execute(
            Operation.GET,
            self._query().select("*").eq(ID_COLUMN, employee_id).single(),
            employee_id,
        )

    async def insert(self, row: dict) -> list[dict]:
        return await self._execute(
            Operation.CREATE, self._query().insert([row]),
        )

    async def update(self, employee_id: EmployeeId, fields: dict) -> list[dict]:
        return await self._execute(
            Operation.UPDATE,
            self._query().update(fields).eq(ID_COLUMN, employee_id),
            employee_id,
        )

    async def delete(self, employee_id: EmployeeId) -> list[dict]:
        return await self._execute(
            Operation.DELETE,
            self._query().delete().eq(ID_COLUMN, employee_id),
            employee_id,
        )

    async def _execute(
        self, operation: Operation, query, employee_id: EmployeeId | None = None,
    ):
        """Run one query, mapping store failures to typed errors."""
        try:
            response = await query.execute()
        except APIError as e:
            if e.code == SINGLE_ROW_NOT_FOUND and employee_id is not None:
                raise NotFoundError(employee_id)
            logger.error(
                f"Store {operation.value} failed: {e.message}",
                extra={"operation": operation.value, "employee_id": employee_id},
            )
            raise StoreError(
                e.message or str(e), operation.value, code=e.code,
            )
        except httpx.HTTPError as e:
            logger.error(
                f"Store {operation.value} transport error: {e}",
                extra={"operation": operation.value, "employee_id": employee_id},
            )
            raise StoreError(str(e), operation.value)
        return response.data


@dataclass(frozen=True)
class StoreHandle:
    """Connectivity state plus the store, fixed at startup."""
    state: ConnectivityState
    store: EmployeeStore | None = None

    @property
    def connected(self) -> bool:
        return self.state is ConnectivityState.CONNECTED and self.store is not None


async def connect_store(settings: Settings) -> StoreHandle:
    """Build the process-wide StoreHandle from settings."""
    if not settings.has_store_credentials:
        logger.warning(
            "Supabase credentials missing; data routes will answer 500",
            extra={"connectivity": ConnectivityState.ERROR_CONFIG.value},
        )
        return StoreHandle(ConnectivityState.ERROR_CONFIG)
    try:
        client = await acreate_client(settings.supabase_url, settings.supabase_key)
    except Exception as e:
        logger.error(
            f"Supabase client construction failed: {e}",
            extra={"connectivity": ConnectivityState.ERROR_CONFIG.value},
        )
        return StoreHandle(ConnectivityState.ERROR_CONFIG)
    return StoreHandle(
        ConnectivityState.CONNECTED,
        EmployeeStore(client, settings.supabase_table),
    )


def get_store_handle(request: Request) -> StoreHandle:
    """FastAPI dependency for the startup-built StoreHandle."""
    handle = getattr(request.app.state, "store_handle", None)
    if handle is None or handle.state is ConnectivityState.NOT_INITIALIZED:
        raise RuntimeError("Store handle not initialized")
    return handle
