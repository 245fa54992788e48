"""Core Layer: pure domain logic, no IO, no FastAPI, no pydantic.

Invariants:
    - No module in core/ imports from services/, api/, schemas/, or infrastructure/
    - All functions are pure and deterministic (id generation lives in services/)

Design Decisions:
    - Functional core separated from imperative shell
"""
