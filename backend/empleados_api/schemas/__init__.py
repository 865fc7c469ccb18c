"""Pydantic Schemas — request body shapes for API endpoints.

Invariants:
    - Schemas check types at the system boundary; presence rules live in core/validate_employee

Design Decisions:
    - All body fields optional: missing required fields produce the domain 400 message,
      not a generic Pydantic error
"""
