"""Order Rules: tests for pure request validation and id parsing.

Tests cover:
    - check_client rejects empty and whitespace-only names
    - check_total rejects zero and negative totals
    - check_order_fields reports client before total
    - parse_order_id returns None for anything that is not a UUID
"""

from decimal import Decimal
from uuid import uuid4

import pytest

from orderdesk.core.order_rules import (
    CLIENT_REQUIRED_MESSAGE,
    TOTAL_NOT_POSITIVE_MESSAGE,
    check_client,
    check_total,
    check_order_fields,
    parse_order_id,
)


# ─── check_client ────────────────────────────────────────────────

@pytest.mark.parametrize("client", ["", " ", "\t\n"])
def test_check_client_rejects_blank(client):
    error = check_client(client)
    assert error is not None
    assert error["field"] == "client"
    assert error["message"] == CLIENT_REQUIRED_MESSAGE


def test_check_client_accepts_name():
    assert check_client("Acme") is None


# ─── check_total ─────────────────────────────────────────────────

@pytest.mark.parametrize("total", [Decimal("0"), Decimal("-0.01"), Decimal("-100")])
def test_check_total_rejects_non_positive(total):
    error = check_total(total)
    assert error is not None
    assert error["field"] == "total"
    assert error["message"] == TOTAL_NOT_POSITIVE_MESSAGE


def test_check_total_accepts_smallest_positive():
    assert check_total(Decimal("0.01")) is None


# ─── check_order_fields ──────────────────────────────────────────

def test_check_order_fields_reports_client_first():
    error = check_order_fields("", Decimal("0"))
    assert error["field"] == "client"


def test_check_order_fields_returns_none_when_valid():
    assert check_order_fields("Acme", Decimal("10.5")) is None


# ─── parse_order_id ──────────────────────────────────────────────

def test_parse_order_id_accepts_uuid_string():
    uid = uuid4()
    assert parse_order_id(str(uid)) == uid


@pytest.mark.parametrize("raw", ["", "42", "not-a-uuid"])
def test_parse_order_id_returns_none_for_garbage(raw):
    assert parse_order_id(raw) is None
