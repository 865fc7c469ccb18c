"""Envelope Responses — the single place an Outcome becomes an HTTP response."""

from fastapi.responses import JSONResponse

from empleados_api.core.envelope import build_envelope
from empleados_api.core.outcome import Outcome


def envelope_response(outcome: Outcome) -> JSONResponse:
    status_code, body = build_envelope(outcome)
    return JSONResponse(status_code=status_code, content=body)
