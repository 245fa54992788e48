"""Order Service: validate, identify, and store orders.

Invariants:
    - Validation runs before any repository call (no partial mutation on 400)
    - Identity is generated here, once, with uuid4; updates never change it
    - Unparseable ids behave exactly like unknown ids (ResourceNotFoundError)

Design Decisions:
    - Service holds an OrderRepository, not a concrete store: routes build it
      from the injected dependency, tests hand it a fresh InMemoryOrderStore
    - Core returns error dicts; this shell converts them to OrderValidationError
"""

import logging
import uuid

from orderdesk.core.domain_types import Order, OrderId
from orderdesk.core.errors import OrderValidationError, ResourceNotFoundError
from orderdesk.core.order_rules import check_order_fields, parse_order_id
from orderdesk.core.repository_protocols import OrderRepository
from orderdesk.schemas.order import OrderCreate

logger = logging.getLogger(__name__)


class OrderService:
    """CRUD operations over an OrderRepository."""

    def __init__(self, repository: OrderRepository):
        self._repository = repository

    async def list_orders(self) -> list[Order]:
        return await self._repository.list_all()

    async def get_order(self, raw_id: str) -> Order:
        order_id = _require_order_id(raw_id)
        order = await self._repository.get(order_id)
        if order is None:
            raise ResourceNotFoundError("Order", raw_id)
        return order

    async def create_order(self, body: OrderCreate) -> Order:
        _validate(body)
        order = Order(
            id=OrderId(uuid.uuid4()),
            client=body.client, date=body.date, total=body.total,
        )
        await self._repository.insert(order)
        logger.info(f"Order {order.id} created", extra={"order_id": str(order.id)})
        return order

    async def update_order(self, raw_id: str, body: OrderCreate) -> Order:
        _validate(body)
        order_id = _require_order_id(raw_id)
        existing = await self._repository.get(order_id)
        if existing is None:
            raise ResourceNotFoundError("Order", raw_id)
        updated = existing.with_fields(body.client, body.date, body.total)
        await self._repository.replace(updated)
        logger.info(f"Order {order_id} updated", extra={"order_id": str(order_id)})
        return updated

    async def delete_order(self, raw_id: str) -> None:
        order_id = _require_order_id(raw_id)
        await self._repository.remove(order_id)
        logger.info(f"Order {order_id} deleted", extra={"order_id": str(order_id)})


def _validate(body: OrderCreate) -> None:
    error = check_order_fields(body.client, body.total)
    if error:
        raise OrderValidationError(error["message"], error["field"])


def _require_order_id(raw_id: str) -> OrderId:
    order_id = parse_order_id(raw_id)
    if order_id is None:
        raise ResourceNotFoundError("Order", raw_id)
    return order_id
