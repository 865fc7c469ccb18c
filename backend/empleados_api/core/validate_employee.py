"""Employee Input Validation — pure checks and row builders run before any store access.

Invariants:
    - All functions are PURE: no IO, no async, no clock reads, no side effects
    - check_* return the error on violation, None on success (never raise)
    - A present but non-integer id is NotFoundError (404), never a store call
    - build_insert_row applies activo/fecha_ingreso defaults explicitly

Design Decisions:
    - Return errors (not raise): the service threads them into a Failure outcome,
      keeping the error path identical to the success path
    - `now` injected by caller: deterministic tests without freezing time
"""

import re
from datetime import datetime

from empleados_api.core import messages
from empleados_api.core.domain_types import (
    EmployeeId, REQUIRED_FIELDS, UPDATABLE_FIELDS,
)
from empleados_api.core.errors import EmpleadosError, NotFoundError, ValidationError

# ASCII digits with an optional minus sign; any other spelling matches no row
_INTEGER_ID = re.compile(r"-?[0-9]+")


def _is_blank(value: object) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def check_required_fields(payload: dict) -> ValidationError | None:
    """nombre, apellido and puesto must all be present and non-empty."""
    missing = [f for f in REQUIRED_FIELDS if _is_blank(payload.get(f))]
    if missing:
        return ValidationError(
            messages.REQUIRED_FIELDS, fields=missing,
            details={"missing": missing},
        )
    return None


def check_employee_id(raw: str | None) -> EmpleadosError | None:
    """Path identifier must be present; a non-integer one matches no row."""
    if raw is None or not str(raw).strip():
        return ValidationError(messages.ID_REQUIRED, fields=["id"])
    if not _INTEGER_ID.fullmatch(str(raw)):
        return NotFoundError(None)
    return None


def to_employee_id(raw: str) -> EmployeeId:
    """Convert a path identifier already accepted by check_employee_id."""
    return EmployeeId(int(raw))


def build_insert_row(payload: dict, now: datetime) -> dict:
    """Row for insert — hire date and active flag defaulted when absent."""
    fecha_ingreso = payload.get("fecha_ingreso")
    activo = payload.get("activo")
    return {
        "nombre": payload["nombre"],
        "apellido": payload["apellido"],
        "puesto": payload["puesto"],
        "fecha_ingreso": fecha_ingreso or now.isoformat(),
        "activo": True if activo is None else activo,
    }


def build_update_fields(payload: dict) -> dict:
    """Only the updatable fields the client actually sent."""
    return {k: payload[k] for k in UPDATABLE_FIELDS if k in payload}
