"""Error Handlers — global exception handlers for the employee API.

Invariants:
    - EmpleadosError → its own envelope and http_status
    - RequestValidationError (bad JSON, wrong field types) → 400 envelope with field details
    - Exception (catch-all) → InternalError envelope, 500, traceback logged
    - The catch-all 500 carries CORS headers for allowed origins: it is sent by
      Starlette's outermost middleware, which CORSMiddleware never wraps

Design Decisions:
    - Three-layer handler: domain (EmpleadosError), validation (Pydantic), catch-all (Exception)
    - Services already convert EmpleadosError to Failure; the domain handler covers
      errors raised outside a service boundary (dependencies, middleware)
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from empleados_api.config import get_settings
from empleados_api.core import messages
from empleados_api.core.errors import EmpleadosError, InternalError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:
    """Register employee domain/infrastructure error handler."""

    @app.exception_handler(EmpleadosError)
    async def domain_error_handler(request: Request, exc: EmpleadosError):
        logger.error(
            f"EmpleadosError: {exc.message}",
            extra={**exc.log_extra(), "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=InternalError(details=str(exc)).to_response(),
            headers=_cors_headers(request),
        )


def _cors_headers(request: Request) -> dict[str, str]:
    """CORS headers CORSMiddleware would have added for this request's origin."""
    origin = request.headers.get("origin")
    if not origin:
        return {}
    allowed = get_settings().cors_origins
    if "*" in allowed:
        return {"Access-Control-Allow-Origin": "*"}
    if origin in allowed:
        return {"Access-Control-Allow-Origin": origin, "Vary": "Origin"}
    return {}


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build the 400 envelope with one entry per offending field."""
    return {
        "status": "error",
        "message": messages.INVALID_REQUEST,
        "details": [
            {
                "field": ".".join(str(loc) for loc in e["loc"]),
                "message": e["msg"],
                "type": e["type"],
            }
            for e in exc.errors()
        ],
    }
