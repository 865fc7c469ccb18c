"""Infrastructure Layer — store client wrapper and cross-cutting concerns.

Invariants:
    - Infrastructure never imports domain logic beyond core/errors and core/domain_types
    - Every store call is wrapped with error mapping (no raw postgrest errors escape)

Design Decisions:
    - Wrapper over raw client: isolates error mapping from services (ADR: single responsibility)
"""
