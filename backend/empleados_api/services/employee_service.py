"""Employee Service — connectivity check, validation, one store call, Outcome.

Invariants:
    - Connectivity is checked first: ERROR_CONFIG short-circuits before validation
      and before any store call
    - Validation failures never reach the store
    - EmpleadosError is caught here and returned as Failure; any other exception
      propagates to the global handler (InternalError, 500)
    - Single-entity results are unwrapped to one row; list results carry total

Design Decisions:
    - Plain async functions over a service class: the only state is the injected
      StoreHandle (ADR: stateless request-parallel model)
    - Empty update body → single-row fetch: PostgREST rejects/zeroes empty PATCHes,
      the unchanged row is the natural result of a no-op update
"""

import logging
from datetime import datetime, timezone

from empleados_api.core import messages
from empleados_api.core.domain_types import EmployeeId, Operation
from empleados_api.core.errors import (
    ConfigError, EmpleadosError, ErrorContext, StoreError,
)
from empleados_api.core.outcome import Failure, Outcome, Success, row_list, single_row
from empleados_api.core.validate_employee import (
    build_insert_row,
    build_update_fields,
    check_employee_id,
    check_required_fields,
    to_employee_id,
)
from empleados_api.infrastructure.employee_store import EmployeeStore, StoreHandle

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _require_store(handle: StoreHandle, operation: Operation) -> EmployeeStore:
    if not handle.connected:
        raise ConfigError(ErrorContext(operation=operation.value))
    return handle.store


def _fail(error: EmpleadosError, operation: Operation) -> Failure:
    """Record the failure and wrap it for the envelope."""
    if error.context.operation is None:
        error.context.operation = operation.value
    log = logger.warning if error.http_status < 500 else logger.error
    log(f"{operation.value} failed: {error.message}", extra=error.log_extra())
    return Failure(error)


async def check_status(handle: StoreHandle, now: datetime | None = None) -> Outcome:
    """Check the store with a one-row select."""
    try:
        store = _require_store(handle, Operation.STATUS)
        await store.ping()
    except EmpleadosError as e:
        return _fail(e, Operation.STATUS)
    return Success(
        message=messages.STATUS_OK,
        extra={"timestamp": (now or _utcnow()).isoformat()},
    )


async def list_employees(handle: StoreHandle) -> Outcome:
    try:
        store = _require_store(handle, Operation.LIST)
        rows = await store.list_all()
    except EmpleadosError as e:
        return _fail(e, Operation.LIST)
    return row_list(rows)


async def get_employee(handle: StoreHandle, raw_id: str | None) -> Outcome:
    try:
        store = _require_store(handle, Operation.GET)
        employee_id = _validated_id(raw_id)
        row = single_row(await store.get_by_id(employee_id), employee_id)
    except EmpleadosError as e:
        return _fail(e, Operation.GET)
    return Success(data=row)


async def create_employee(
    handle: StoreHandle, payload: dict, now: datetime | None = None,
) -> Outcome:
    """Insert one employee; hire date and active flag defaulted when absent."""
    try:
        store = _require_store(handle, Operation.CREATE)
        error = check_required_fields(payload)
        if error:
            raise error
        row = build_insert_row(payload, now or _utcnow())
        rows = await store.insert(row)
        if not rows:
            raise StoreError("insert returned no rows", Operation.CREATE.value)
        created = rows[0]
    except EmpleadosError as e:
        return _fail(e, Operation.CREATE)
    logger.info(
        "Employee created",
        extra={"operation": Operation.CREATE.value,
               "employee_id": created.get("id_empleado")},
    )
    return Success(
        data=created, message=messages.EMPLOYEE_CREATED, http_status=201,
    )


async def update_employee(
    handle: StoreHandle, raw_id: str | None, payload: dict,
) -> Outcome:
    try:
        store = _require_store(handle, Operation.UPDATE)
        employee_id = _validated_id(raw_id)
        fields = build_update_fields(payload)
        if fields:
            rows = await store.update(employee_id, fields)
        else:
            rows = await store.get_by_id(employee_id)
        updated = single_row(rows, employee_id)
    except EmpleadosError as e:
        return _fail(e, Operation.UPDATE)
    logger.info(
        "Employee updated",
        extra={"operation": Operation.UPDATE.value, "employee_id": employee_id},
    )
    return Success(data=updated, message=messages.EMPLOYEE_UPDATED)


async def delete_employee(handle: StoreHandle, raw_id: str | None) -> Outcome:
    try:
        store = _require_store(handle, Operation.DELETE)
        employee_id = _validated_id(raw_id)
        deleted = single_row(await store.delete(employee_id), employee_id)
    except EmpleadosError as e:
        return _fail(e, Operation.DELETE)
    logger.info(
        "Employee deleted",
        extra={"operation": Operation.DELETE.value, "employee_id": employee_id},
    )
    return Success(data=deleted, message=messages.EMPLOYEE_DELETED)


def _validated_id(raw_id: str | None) -> EmployeeId:
    error = check_employee_id(raw_id)
    if error:
        raise error
    return to_employee_id(raw_id)
