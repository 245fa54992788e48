"""Boundary Protocols: contracts between core and shell.

Invariants:
    - Core NEVER imports from shell: dependency arrows point inward only
    - Every store operation reads or writes a full Order record
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: the in-memory store does no IO, but a persistent
      backend would, and handlers should not change when one is swapped in
"""

from typing import Protocol

from orderdesk.core.domain_types import Order, OrderId


class OrderRepository(Protocol):
    """Contract for order storage: implemented by shell."""

    async def list_all(self) -> list[Order]:
        """Snapshot of all orders in insertion order."""
        ...

    async def get(self, order_id: OrderId) -> Order | None:
        """First order with this id, or None."""
        ...

    async def insert(self, order: Order) -> None:
        """Store a new order. Raises OrderConflictError if the id exists."""
        ...

    async def replace(self, order: Order) -> None:
        """Overwrite the order with the same id. Raises ResourceNotFoundError if absent."""
        ...

    async def remove(self, order_id: OrderId) -> None:
        """Delete the order. Raises ResourceNotFoundError if absent."""
        ...

    async def count(self) -> int:
        """Number of stored orders."""
        ...
