"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - EmployeeId wraps int — the store's identity column is an integer
    - ConnectivityState.NOT_INITIALIZED never leaves the startup path
    - All valid states encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON and log without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

EmployeeId = NewType("EmployeeId", int)


# ─── Table Layout ────────────────────────────────────────────────

EMPLOYEE_TABLE = "empleados"
ID_COLUMN = "id_empleado"
LIST_COLUMNS = "id_empleado, nombre, apellido, puesto, fecha_ingreso, activo"
REQUIRED_FIELDS = ("nombre", "apellido", "puesto")
UPDATABLE_FIELDS = ("nombre", "apellido", "puesto", "activo")


# ─── Enums ───────────────────────────────────────────────────────

class ConnectivityState(str, Enum):
    """Store connectivity, decided once at process start."""
    NOT_INITIALIZED = "not-initialized"
    CONNECTED = "connected"
    ERROR_CONFIG = "error-config"


class Operation(str, Enum):
    """Logical operations served by the employee resource."""
    STATUS = "status"
    LIST = "list"
    GET = "get"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"
