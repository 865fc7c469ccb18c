"""Empleados API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map EmpleadosError → uniform JSON envelope
    - CORS configured from settings (not hardcoded)
    - StoreHandle built exactly once in the lifespan, before the first request

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Graceful shutdown delegated to uvicorn: SIGTERM/SIGINT stop accepting,
      in-flight requests drain, forced exit after shutdown_grace_seconds
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from empleados_api.api.error_handlers import register_error_handlers
from empleados_api.api.routes import employees, health
from empleados_api.config import get_settings
from empleados_api.core.domain_types import ConnectivityState
from empleados_api.infrastructure.employee_store import StoreHandle, connect_store
from empleados_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    app.state.store_handle = StoreHandle(ConnectivityState.NOT_INITIALIZED)
    app.state.store_handle = await connect_store(settings)
    logger.info(
        f"Empleados API started on {settings.host}:{settings.port}",
        extra={"connectivity": app.state.store_handle.state.value},
    )
    yield
    logger.info("Empleados API shutting down")


app = FastAPI(title="Empleados API", version="1.0.0", lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(employees.router)

register_error_handlers(app)


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    uvicorn.run(
        "empleados_api.main:app",
        host=settings.host,
        port=settings.port,
        timeout_graceful_shutdown=settings.shutdown_grace_seconds,
        log_config=None,
    )


if __name__ == "__main__":
    run()
