"""Services Layer — one async function per employee operation.

Invariants:
    - Each operation makes at most one store call
    - Each operation returns an Outcome (Success | Failure), never raises EmpleadosError

Design Decisions:
    - Services orchestrate: connectivity check → pure validation → store call → outcome
"""
