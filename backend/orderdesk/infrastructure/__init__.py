"""Infrastructure Layer: storage backends and cross-cutting concerns.

Invariants:
    - Storage implementations satisfy core.repository_protocols contracts
    - Storage failures surface as OrderDeskError subclasses

Design Decisions:
    - Backends are swappable through the get_order_repository dependency
"""
