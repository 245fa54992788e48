"""Pydantic Schemas: request/response validation for API endpoints.

Invariants:
    - Schemas validate shape and types at the system boundary
    - Business rules (non-blank client, positive total) live in core/

Design Decisions:
    - Separate from domain types: schemas are API contracts, core.domain_types.Order is the record
"""
