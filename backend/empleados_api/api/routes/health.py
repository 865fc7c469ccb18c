"""Status Check — store connectivity check.

Invariants:
    - GET /api/status returns 200 only after a successful one-row select
    - Missing credentials answer 500 with the configuration message, no store call

Design Decisions:
    - The check queries the real table (not SELECT 1): proves key + table permissions
"""

from fastapi import APIRouter, Depends

from empleados_api.api.responses import envelope_response
from empleados_api.infrastructure.employee_store import StoreHandle, get_store_handle
from empleados_api.services.employee_service import check_status

router = APIRouter(prefix="/api", tags=["health"])


@router.get("/status")
async def status_check(handle: StoreHandle = Depends(get_store_handle)):
    """Connectivity check against the employee table."""
    return envelope_response(await check_status(handle))
