"""User-facing strings for the employee API envelope.

Invariants:
    - Every message returned to clients is defined here (no inline literals in routes)
    - Strings are Spanish: existing clients match on them
"""

from empleados_api.core.domain_types import Operation

# ─── Success ─────────────────────────────────────────────────────

STATUS_OK = "Conexión exitosa con Supabase"
EMPLOYEE_CREATED = "Empleado creado exitosamente"
EMPLOYEE_UPDATED = "Empleado actualizado exitosamente"
EMPLOYEE_DELETED = "Empleado eliminado exitosamente"

# ─── Errors ──────────────────────────────────────────────────────

CONFIG_INCOMPLETE = "Configuración de Supabase incompleta"
CONFIG_MISSING_VARS = (
    "Faltan variables de entorno: SUPABASE_URL y/o SUPABASE_KEY"
)
REQUIRED_FIELDS = "Los campos nombre, apellido y puesto son obligatorios"
ID_REQUIRED = "El parámetro id es requerido"
INVALID_REQUEST = "Datos de la solicitud inválidos"
EMPLOYEE_NOT_FOUND = "Empleado no encontrado"
INTERNAL_ERROR = "Error interno del servidor"

_STORE_FAILURES = {
    Operation.STATUS: "Error al conectar con Supabase",
    Operation.LIST: "Error al obtener empleados",
    Operation.GET: "Error al obtener empleado",
    Operation.CREATE: "Error al crear empleado",
    Operation.UPDATE: "Error al actualizar empleado",
    Operation.DELETE: "Error al eliminar empleado",
}


def store_failure(operation: str) -> str:
    """Envelope message for a store error raised during `operation`."""
    try:
        return _STORE_FAILURES[Operation(operation)]
    except ValueError:
        return "Error en el servidor"
