"""Domain Types: the Order record and its identity type.

Invariants:
    - OrderId wraps a UUID: never use a bare str id in domain logic
    - Order is immutable; updates produce a new Order with the same id
    - total is a Decimal, never a float

Design Decisions:
    - NewType for identity: zero runtime cost, full type-checker support
    - Frozen dataclass over pydantic model: core stays free of boundary concerns
"""

from dataclasses import dataclass, replace
from datetime import datetime
from decimal import Decimal
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

OrderId = NewType("OrderId", UUID)


# ─── Records ─────────────────────────────────────────────────────

@dataclass(frozen=True)
class Order:
    """A purchase record owned by the order store."""
    id: OrderId
    client: str
    date: datetime
    total: Decimal

    def with_fields(self, client: str, date: datetime, total: Decimal) -> "Order":
        """Full replacement of every field except identity."""
        return replace(self, client=client, date=date, total=total)
