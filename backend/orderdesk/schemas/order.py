"""Order Schemas: Pydantic models for the /orders API boundary.

Invariants:
    - OrderCreate carries no id: identity is always generated server-side
    - date accepts only ISO datetimes and plain ISO dates (midnight of that day);
      numbers are rejected rather than read as epoch seconds
    - total is parsed to Decimal, limited to 15 significant digits, and emitted
      as a JSON number that converts back to the same Decimal
    - Business rules (blank client, total <= 0) are NOT enforced here:
      they are reported by core.order_rules with the {"error": ...} envelope

Design Decisions:
    - PlainSerializer on total: Decimal otherwise serializes as a JSON string,
      which the frontend would have to parse back
    - field_validator(mode="before") for date-only input: explicit, independent
      of pydantic's lax datetime parsing
"""

from datetime import date as date_type, datetime
from decimal import Decimal
from typing import Annotated
from uuid import UUID

from pydantic import BaseModel, Field, PlainSerializer, field_validator

from orderdesk.core.domain_types import Order

JsonDecimal = Annotated[
    Decimal, PlainSerializer(float, return_type=float, when_used="json"),
]

# Up to 15 significant digits survive the float conversion on the way out
FLOAT_SAFE_DIGITS = 15


class OrderCreate(BaseModel):
    """Order creation/update request: all fields except identity."""
    client: str
    date: datetime
    total: Annotated[JsonDecimal, Field(max_digits=FLOAT_SAFE_DIGITS)]

    @field_validator("date", mode="before")
    @classmethod
    def expand_plain_date(cls, v):
        if not isinstance(v, (str, datetime)):
            raise ValueError("date must be an ISO-8601 string")
        if isinstance(v, str) and len(v) == 10:
            try:
                return datetime.combine(date_type.fromisoformat(v), datetime.min.time())
            except ValueError:
                return v
        return v


class OrderResponse(BaseModel):
    """Order response: public-facing order data."""
    id: UUID
    client: str
    date: datetime
    total: JsonDecimal

    @classmethod
    def from_order(cls, order: Order) -> "OrderResponse":
        return cls(
            id=order.id, client=order.client,
            date=order.date, total=order.total,
        )
