"""
Orders API Schemas

Pydantic schemas for API request/response validation.
"""

from typing import Any

from pydantic import BaseModel, Field


class StatusChangeRequest(BaseModel):
    """Status change request schema."""

    status: str = Field(..., min_length=1, examples=["SP - In Production"])


class SizeResponse(BaseModel):
    label: str
    count: int


class CustomerResponse(BaseModel):
    id: str | None = None
    name: str
    email: str = ""
    phone: str = ""
    company: str = ""


class LineItemResponse(BaseModel):
    id: str
    description: str
    style_number: str
    color: str
    category: str
    quantity: int
    unit_price: float
    total_cost: float
    sizes: list[SizeResponse]


class OrderResponse(BaseModel):
    """Order detail response schema."""

    id: int | str
    order_number: str
    nickname: str
    status: str
    phase: str
    category: str
    status_color: str
    status_history: list[dict[str, Any]]
    total_amount: float
    amount_paid: float
    amount_outstanding: float
    due_date: str | None = None
    customer_due_date: str | None = None
    created_at: str
    customer: CustomerResponse | None = None
    line_items: list[LineItemResponse]


class OrderSummaryResponse(BaseModel):
    id: int | str
    order_number: str
    nickname: str
    status: str
    phase: str
    category: str
    status_color: str
    customer_name: str
    total_amount: float
    amount_outstanding: float
    due_date: str | None = None
    total_quantity: int


class OrderListResponse(BaseModel):
    total: int
    page: int
    limit: int
    orders: list[OrderSummaryResponse]


class WorkflowPhaseResponse(BaseModel):
    phase: str
    label: str
    color: str
    statuses: list[str]
