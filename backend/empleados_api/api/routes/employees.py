"""Employee Routes — CRUD over the empleados table.

Invariants:
    - Every handler returns the envelope built from a service Outcome
    - Path ids arrive as str; core/validate_employee decides what is a valid id
    - Bodies are optional: a missing body behaves like {}
"""

from fastapi import APIRouter, Depends

from empleados_api.api.responses import envelope_response
from empleados_api.infrastructure.employee_store import StoreHandle, get_store_handle
from empleados_api.schemas.employee import EmployeeCreate, EmployeeUpdate
from empleados_api.services import employee_service

router = APIRouter(prefix="/api/empleados", tags=["empleados"])


def _payload(body) -> dict:
    return body.model_dump(exclude_unset=True) if body else {}


@router.get("")
async def list_employees(handle: StoreHandle = Depends(get_store_handle)):
    """All employees ordered by id_empleado."""
    return envelope_response(await employee_service.list_employees(handle))


@router.get("/{employee_id}")
async def get_employee(
    employee_id: str, handle: StoreHandle = Depends(get_store_handle),
):
    return envelope_response(
        await employee_service.get_employee(handle, employee_id),
    )


@router.post("")
async def create_employee(
    body: EmployeeCreate | None = None,
    handle: StoreHandle = Depends(get_store_handle),
):
    """Create an employee; responds 201 with the inserted row."""
    return envelope_response(
        await employee_service.create_employee(handle, _payload(body)),
    )


@router.put("/{employee_id}")
async def update_employee(
    employee_id: str,
    body: EmployeeUpdate | None = None,
    handle: StoreHandle = Depends(get_store_handle),
):
    return envelope_response(
        await employee_service.update_employee(
            handle, employee_id, _payload(body),
        ),
    )


@router.delete("/{employee_id}")
async def delete_employee(
    employee_id: str, handle: StoreHandle = Depends(get_store_handle),
):
    return envelope_response(
        await employee_service.delete_employee(handle, employee_id),
    )
