"""Employee Schemas — Pydantic request bodies for the employee routes.

Invariants:
    - Unknown fields are ignored (the original API accepted arbitrary JSON)
    - Type errors (e.g. activo: "maybe") surface as RequestValidationError → 400
    - Bodies are dumped with exclude_unset: absent and null stay distinguishable

Design Decisions:
    - Required-field presence is NOT enforced here: core/validate_employee owns that
      rule so the 400 carries the domain message
"""

from pydantic import BaseModel, ConfigDict, StrictBool


class EmployeeCreate(BaseModel):
    """POST /api/empleados body."""
    model_config = ConfigDict(extra="ignore")

    nombre: str | None = None
    apellido: str | None = None
    puesto: str | None = None
    fecha_ingreso: str | None = None
    activo: StrictBool | None = None


class EmployeeUpdate(BaseModel):
    """PUT /api/empleados/{id} body — any subset of the updatable fields."""
    model_config = ConfigDict(extra="ignore")

    nombre: str | None = None
    apellido: str | None = None
    puesto: str | None = None
    activo: StrictBool | None = None
