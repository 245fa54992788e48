"""Orders: CRUD routes over the injected order repository.

Invariants:
    - Request shape validated by Pydantic before reaching the route handler
    - Business validation and 404 mapping happen in OrderService
    - A missing store answers 503 before any handler runs
    - POST answers 201 with a Location header pointing at the new order
    - DELETE answers 204 with an empty body

Design Decisions:
    - order_id taken as str, not UUID: a malformed id is an unknown order (404),
      not a request validation failure (400)
    - Every route rooted at /orders with a leading slash
"""

import logging

from fastapi import APIRouter, Depends, Response, status

from orderdesk.core.errors import StoreUnavailableError
from orderdesk.core.repository_protocols import OrderRepository
from orderdesk.infrastructure.order_store import get_order_repository
from orderdesk.schemas.order import OrderCreate, OrderResponse
from orderdesk.services.order_service import OrderService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/orders", tags=["orders"])


def get_order_service(
    repository: OrderRepository | None = Depends(get_order_repository),
) -> OrderService:
    if repository is None:
        raise StoreUnavailableError()
    return OrderService(repository)


@router.get("", response_model=list[OrderResponse])
async def list_orders(service: OrderService = Depends(get_order_service)):
    """List every order in insertion order."""
    orders = await service.list_orders()
    return [OrderResponse.from_order(o) for o in orders]


@router.get("/{order_id}", response_model=OrderResponse)
async def get_order(
    order_id: str, service: OrderService = Depends(get_order_service),
):
    """Get a single order."""
    return OrderResponse.from_order(await service.get_order(order_id))


@router.post(
    "", response_model=OrderResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_order(
    body: OrderCreate,
    response: Response,
    service: OrderService = Depends(get_order_service),
):
    """Create an order with a server-generated id."""
    order = await service.create_order(body)
    response.headers["Location"] = f"/orders/{order.id}"
    return OrderResponse.from_order(order)


@router.put("/{order_id}", response_model=OrderResponse)
async def update_order(
    order_id: str,
    body: OrderCreate,
    service: OrderService = Depends(get_order_service),
):
    """Replace every field of an order except its id."""
    return OrderResponse.from_order(await service.update_order(order_id, body))


@router.delete("/{order_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_order(
    order_id: str, service: OrderService = Depends(get_order_service),
):
    """Delete an order."""
    await service.delete_order(order_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
