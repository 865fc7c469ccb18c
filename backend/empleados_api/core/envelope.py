"""Response Envelope — collapses an Outcome into (http_status, JSON body).

Invariants:
    - Success body: {status: "success", message?, total?, data?, **extra}
    - Failure body: EmpleadosError.to_response() — {status: "error", message, details?}
    - Keys with None values are omitted (message/total/data are optional)
"""

from empleados_api.core.outcome import Failure, Outcome, Success


def build_envelope(outcome: Outcome) -> tuple[int, dict]:
    """Map an outcome onto its HTTP status and envelope body."""
    if isinstance(outcome, Failure):
        return outcome.http_status, outcome.error.to_response()
    return outcome.http_status, _success_body(outcome)


def _success_body(outcome: Success) -> dict:
    body: dict = {"status": "success"}
    if outcome.message is not None:
        body["message"] = outcome.message
    if outcome.total is not None:
        body["total"] = outcome.total
    if outcome.data is not None or outcome.total is not None:
        body["data"] = outcome.data
    body.update(outcome.extra)
    return body
