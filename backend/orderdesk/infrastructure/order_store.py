"""In-Memory Order Store: process-lifetime list of orders behind OrderRepository.

Invariants:
    - Order ids are unique within the store
    - list_all returns a copy: callers never mutate the backing list
    - replace updates in place: an order keeps its position after an update
    - State is lost on restart (no persistence)

Design Decisions:
    - Plain list over dict: insertion order is the listing order, and lookups
      scan linearly (the store is small and unpaginated)
    - Singleton order_store initialized on startup: FastAPI lifespan manages lifecycle
      (no global import side effects)
    - No lock: handlers run on one event loop and no method awaits mid-mutation
"""

import logging

from orderdesk.core.domain_types import Order, OrderId
from orderdesk.core.errors import OrderConflictError, ResourceNotFoundError
from orderdesk.core.repository_protocols import OrderRepository

logger = logging.getLogger(__name__)


class InMemoryOrderStore:
    """Ordered in-memory collection of Order records."""

    def __init__(self, orders: list[Order] | None = None):
        self._orders: list[Order] = list(orders or [])

    def _index_of(self, order_id: OrderId) -> int | None:
        for i, order in enumerate(self._orders):
            if order.id == order_id:
                return i
        return None

    async def list_all(self) -> list[Order]:
        return list(self._orders)

    async def get(self, order_id: OrderId) -> Order | None:
        index = self._index_of(order_id)
        return None if index is None else self._orders[index]

    async def insert(self, order: Order) -> None:
        if self._index_of(order.id) is not None:
            raise OrderConflictError(str(order.id))
        self._orders.append(order)

    async def replace(self, order: Order) -> None:
        index = self._index_of(order.id)
        if index is None:
            raise ResourceNotFoundError("Order", str(order.id))
        self._orders[index] = order

    async def remove(self, order_id: OrderId) -> None:
        index = self._index_of(order_id)
        if index is None:
            raise ResourceNotFoundError("Order", str(order_id))
        del self._orders[index]

    async def count(self) -> int:
        return len(self._orders)


# Singleton (initialized on startup)
order_store: InMemoryOrderStore | None = None


def init_order_store() -> InMemoryOrderStore:
    global order_store
    order_store = InMemoryOrderStore()
    logger.info("In-memory order store initialized")
    return order_store


def get_order_repository() -> OrderRepository | None:
    """FastAPI dependency for the order repository. None until initialized."""
    return order_store
