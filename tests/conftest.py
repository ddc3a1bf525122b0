"""
Shared pytest fixtures for all tests.

Provides settings isolation, a controllable clock, and raw backend payloads
in both shapes the order backend serves.
"""

import os
from datetime import UTC, datetime, timedelta
from decimal import Decimal
from typing import Any

import pytest

from printflow.config.settings import reset_settings
from printflow.core.container import reset_container
from printflow.domains.orders.domain.entities import Order

# Ensure test environment
os.environ["ENVIRONMENT"] = "test"


# ============================================================================
# SETTINGS / CONTAINER ISOLATION
# ============================================================================


@pytest.fixture(autouse=True)
def isolated_settings():
    """Fresh settings and container for every test."""
    reset_settings()
    reset_container()
    yield
    reset_settings()
    reset_container()


# ============================================================================
# CLOCK
# ============================================================================


class FixedClock:
    """Clock returning a fixed instant, advanced manually."""

    def __init__(self, at: datetime):
        self.at = at

    def now(self) -> datetime:
        return self.at

    def advance(self, **kwargs: float) -> None:
        self.at = self.at + timedelta(**kwargs)


@pytest.fixture
def fixed_time() -> datetime:
    return datetime(2024, 3, 15, 14, 30, tzinfo=UTC)


@pytest.fixture
def clock(fixed_time: datetime) -> FixedClock:
    return FixedClock(fixed_time)


# ============================================================================
# ORDERS
# ============================================================================


@pytest.fixture
def quote_order() -> Order:
    """Order sitting in the initial QUOTE status with no history."""
    return Order(
        id=1042,
        order_number="1042",
        nickname="Spring league tees",
        total_amount=Decimal("1485.00"),
        amount_outstanding=Decimal("485.00"),
    )


@pytest.fixture
def backend_order_detail() -> dict[str, Any]:
    """`GET /api/orders/:id` payload (camelCase, nested sizes)."""
    return {
        "id": 1042,
        "orderNumber": "1042",
        "orderNickname": "Spring league tees",
        "status": "quote",
        "printavoStatusName": "ART - In Progress",
        "totalAmount": 1485.0,
        "amountOutstanding": 485.0,
        "dueDate": "2024-04-01T00:00:00Z",
        "customerDueDate": "2024-04-03",
        "statusHistory": [
            {
                "status": "ART - In Progress",
                "previous_status": "QUOTE - Approved",
                "changed_by": "maria",
                "changed_at": "2024-03-10T09:00:00Z",
            },
            {
                "status": "QUOTE - Approved",
                "previous_status": "QUOTE",
                "changed_by": "maria",
                "changed_at": "2024-03-08T16:45:00Z",
            },
        ],
        "customer": {
            "id": 77,
            "name": "Riverside Youth League",
            "email": "orders@riverside.example",
            "phone": "555-0100",
            "company": "Riverside YL",
        },
        "lineItems": [
            {
                "id": 9001,
                "styleNumber": "G500",
                "description": "Heavy Cotton Tee",
                "color": "Navy",
                "category": "T-Shirts",
                "unitCost": 14.85,
                "totalQuantity": 100,
                "totalCost": 1485.0,
                "sizes": {"xs": 0, "s": 20, "m": 40, "l": 30, "xl": 10, "xxl": 0},
            }
        ],
    }


@pytest.fixture
def backend_order_row() -> dict[str, Any]:
    """`GET /api/orders` row (legacy snake_case, flat size columns, string money)."""
    return {
        "id": 2001,
        "order_number": "2001",
        "order_nickname": None,
        "status": "EMB - Digitizing",
        "printavo_status_name": None,
        "total_amount": "640.50",
        "amount_outstanding": "0.00",
        "due_date": "2024-04-10",
        "customer_name": "Harbor Cafe",
        "status_history": ["EMB - Digitizing"],
        "line_items": [
            {
                "id": 1,
                "style_number": "PC61",
                "style_description": "Essential Tee",
                "color": "Black",
                "category": "T-Shirts",
                "total_quantity": 30,
                "unit_cost": "21.35",
                "total_cost": "640.50",
                "size_xs": 0,
                "size_s": 5,
                "size_m": 10,
                "size_l": 10,
                "size_xl": 3,
                "size_2_xl": 2,
                "size_3_xl": 0,
                "size_4_xl": 0,
                "size_5_xl": 0,
                "size_other": 0,
            }
        ],
    }
