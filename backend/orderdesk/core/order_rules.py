"""Order Rules: pure validation for order requests and identifiers.

Invariants:
    - check_order_fields returns None when valid, error dict when invalid
    - client is checked before total (first failing field is reported)
    - parse_order_id never raises; unparseable ids return None

Design Decisions:
    - Error dicts over exceptions in core: the service decides how to fail
"""

from decimal import Decimal
from uuid import UUID

from orderdesk.core.domain_types import OrderId

CLIENT_REQUIRED_MESSAGE = "Please provide a client name"
TOTAL_NOT_POSITIVE_MESSAGE = "The total must be greater than 0"


def check_client(client: str) -> dict | None:
    """Client must contain at least one non-whitespace character."""
    if not client or not client.strip():
        return {
            "error_code": "VALIDATION_ERROR",
            "field": "client",
            "message": CLIENT_REQUIRED_MESSAGE,
        }
    return None


def check_total(total: Decimal) -> dict | None:
    """Total must be strictly positive."""
    if total <= 0:
        return {
            "error_code": "VALIDATION_ERROR",
            "field": "total",
            "message": TOTAL_NOT_POSITIVE_MESSAGE,
        }
    return None


def check_order_fields(client: str, total: Decimal) -> dict | None:
    """Run every order rule. Returns the first failure, or None."""
    return check_client(client) or check_total(total)


def parse_order_id(raw: str) -> OrderId | None:
    """Parse a path segment into an OrderId. None if it is not a UUID."""
    try:
        return OrderId(UUID(raw))
    except (ValueError, TypeError):
        return None
