"""Error Hierarchy — typed, categorized exceptions for every employee API failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors (400/404) are recoverable; config/store/internal errors (500) are critical
    - to_response() produces the uniform envelope: {status: "error", message, details?}
    - Store messages only travel in `details`, never in `message`

Design Decisions:
    - Single hierarchy with EmpleadosError base: FastAPI global handler catches all (ADR: uniform error shape)
    - ErrorContext as dataclass: rich observability without coupling to logging framework
    - Spanish user-facing messages: the API contract predates this service (ADR: client compatibility)
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone

from empleados_api.core import messages


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    CONFIGURATION = "configuration"
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    operation: str | None = None
    employee_id: int | None = None
    debug_info: dict[str, Any] | None = None


class EmpleadosError(Exception):
    """Base exception for all employee API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
        details: Any = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status
        self.details = details

    def to_response(self) -> dict:
        """Convert to the uniform error envelope."""
        body = {"status": "error", "message": self.message}
        if self.details is not None:
            body["details"] = self.details
        return body

    def log_extra(self) -> dict:
        """Fields surfaced by the JSON log formatter."""
        return {
            "error_code": self.code,
            "operation": self.context.operation,
            "employee_id": self.context.employee_id,
        }


# ─── Client Errors (400-level) ──────────────────────────────────

class ValidationError(EmpleadosError):
    """Request input rejected before any store access."""
    def __init__(
        self, message: str, fields: list[str] | None = None,
        details: Any = None, context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400, details,
        )
        self.fields = fields or []


class NotFoundError(EmpleadosError):
    """No employee row matched the requested identifier.

    Raised for both store signals of absence: the single-row fetch error
    and an empty result set from update/delete.
    """
    def __init__(
        self, employee_id: int | None, details: Any = None,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.employee_id = employee_id
        super().__init__(
            messages.EMPLOYEE_NOT_FOUND, "EMPLOYEE_NOT_FOUND",
            ErrorCategory.RESOURCE_NOT_FOUND, ErrorSeverity.WARNING,
            ctx, 404, details,
        )
        self.employee_id = employee_id


# ─── Server Errors (500-level) ──────────────────────────────────

class ConfigError(EmpleadosError):
    """Store credentials were missing at startup."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            messages.CONFIG_INCOMPLETE, "CONFIG_ERROR",
            ErrorCategory.CONFIGURATION, ErrorSeverity.CRITICAL,
            context, 500, messages.CONFIG_MISSING_VARS,
        )


class StoreError(EmpleadosError):
    """The external store reported a failure."""
    def __init__(
        self, store_message: str, operation: str,
        code: str | None = None, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.operation = operation
        if code:
            ctx.debug_info = {"store_code": code}
        super().__init__(
            messages.store_failure(operation), "STORE_ERROR",
            ErrorCategory.DATABASE, ErrorSeverity.CRITICAL,
            ctx, 500, store_message,
        )
        self.operation = operation
        self.store_code = code


class InternalError(EmpleadosError):
    """Unexpected fault inside the handler itself."""
    def __init__(self, details: Any = None, context: ErrorContext | None = None):
        super().__init__(
            messages.INTERNAL_ERROR, "INTERNAL_ERROR", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 500, details,
        )
