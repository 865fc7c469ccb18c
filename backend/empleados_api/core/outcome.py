"""Operation Outcomes — explicit success/failure results threaded through every operation.

Invariants:
    - Every service operation returns exactly one Success or Failure (never raises
      an EmpleadosError past its boundary)
    - Failure always wraps an EmpleadosError; its http_status decides the response code
    - Outcomes collapse to the JSON envelope only in envelope.build_envelope()

Design Decisions:
    - Frozen dataclasses over a Result library: two variants, isinstance dispatch
    - single_row() normalizes the two store signals of absence into NotFoundError
"""

from dataclasses import dataclass, field
from typing import Any, Union

from empleados_api.core.domain_types import EmployeeId
from empleados_api.core.errors import EmpleadosError, NotFoundError


@dataclass(frozen=True)
class Success:
    """Operation completed; data is a row, a row list, or None."""
    data: Any = None
    message: str | None = None
    http_status: int = 200
    total: int | None = None
    extra: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class Failure:
    """Operation failed with a typed error."""
    error: EmpleadosError

    @property
    def http_status(self) -> int:
        return self.error.http_status


Outcome = Union[Success, Failure]


def single_row(rows: list[dict] | dict | None, employee_id: EmployeeId) -> dict:
    """Unwrap the first row of a store result, or raise NotFoundError if empty."""
    if isinstance(rows, dict):
        return rows
    if not rows:
        raise NotFoundError(employee_id)
    return rows[0]


def row_list(rows: list[dict] | None) -> Success:
    """List result — total always equals the number of rows returned."""
    data = list(rows or [])
    return Success(data=data, total=len(data))
