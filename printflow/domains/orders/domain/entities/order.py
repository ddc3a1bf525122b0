"""
Order Entity for the Orders Domain

A customer order (or quote) moving through the production workflow. Orders
are created and persisted by the backend; this core only changes their
status and appends to their status history.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from decimal import Decimal
from typing import Any

from printflow.core.domain import ValidationException, round_money

from ..value_objects.status_change import StatusChange
from ..value_objects.workflow_status import (
    DEFAULT_STATUS,
    StatusCategory,
    WorkflowPhase,
    WorkflowStatus,
    classify,
)

OrderId = int | str

# Display order of size columns
SIZE_LABELS: tuple[str, ...] = ("XS", "S", "M", "L", "XL", "2XL", "3XL", "4XL", "5XL", "Other")


@dataclass(frozen=True)
class SizeQuantity:
    """Pieces ordered in one size."""

    label: str
    count: int


@dataclass
class CustomerRef:
    """
    Reference to the ordering customer.

    The order holds the reference only; customer lifecycle is managed elsewhere.
    """

    id: str | None = None
    name: str = "Unknown"
    email: str = ""
    phone: str = ""
    company: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
            "company": self.company,
        }


@dataclass
class LineItem:
    """
    Garment line of an order, owned exclusively by its order.

    total_cost is expected to equal quantity * unit_price within rounding.
    """

    id: str
    description: str = ""
    style_number: str = ""
    color: str = ""
    category: str = ""
    quantity: int = 0
    unit_price: Decimal = Decimal("0")
    total_cost: Decimal = Decimal("0")
    sizes: list[SizeQuantity] = field(default_factory=list)

    def __post_init__(self):
        self.unit_price = round_money(self.unit_price)
        self.total_cost = round_money(self.total_cost)
        if self.quantity < 0:
            raise ValidationException("Line item quantity cannot be negative", field="quantity")
        if self.unit_price < 0:
            raise ValidationException("Line item unit price cannot be negative", field="unit_price")

    @property
    def sized_quantity(self) -> int:
        """Sum of the per-size breakdown."""
        return sum(size.count for size in self.sizes)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "description": self.description,
            "style_number": self.style_number,
            "color": self.color,
            "category": self.category,
            "quantity": self.quantity,
            "unit_price": float(self.unit_price),
            "total_cost": float(self.total_cost),
            "sizes": [{"label": size.label, "count": size.count} for size in self.sizes],
        }


@dataclass
class Order:
    """
    Order aggregate root for the production workflow.

    `version` counts status changes applied through this core and
    `updated_at` is the time of the latest one.

    Invariants:
        - status is a catalog status
        - amount_outstanding is within [0, total_amount]
        - status_history is chronological and its last `to_status` equals
          `status` (or the history is empty)

    Example:
        ```python
        order = Order(id=1042, total_amount=Decimal("1485.00"))
        order.record_status_change(
            StatusChange("QUOTE", "SP - In Production", changed_at=now, changed_by="u1")
        )
        order.status        # WorkflowStatus.SP_IN_PRODUCTION
        len(order.status_history)  # 1
        ```
    """

    id: OrderId | None = None
    order_number: str = ""
    nickname: str = ""
    status: WorkflowStatus = DEFAULT_STATUS
    status_history: list[StatusChange] = field(default_factory=list)

    # Financials
    total_amount: Decimal = Decimal("0")
    amount_outstanding: Decimal = Decimal("0")

    due_date: datetime | None = None
    customer_due_date: datetime | None = None

    customer: CustomerRef | None = None
    line_items: list[LineItem] = field(default_factory=list)

    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    version: int = 0

    def __post_init__(self):
        self.status = WorkflowStatus(self.status)
        self.total_amount = round_money(self.total_amount)
        self.amount_outstanding = round_money(self.amount_outstanding)
        if not self.order_number and self.id is not None:
            self.order_number = f"#{self.id}"
        if self.total_amount < 0:
            raise ValidationException("Order total cannot be negative", field="total_amount")
        if self.amount_outstanding < 0 or self.amount_outstanding > self.total_amount:
            raise ValidationException(
                f"Outstanding amount {self.amount_outstanding} outside [0, {self.total_amount}]",
                field="amount_outstanding",
            )

    # Derived values

    @property
    def amount_paid(self) -> Decimal:
        return self.total_amount - self.amount_outstanding

    @property
    def phase(self) -> WorkflowPhase:
        return self.status.phase

    @property
    def category(self) -> StatusCategory:
        return classify(self.status)

    @property
    def last_change(self) -> StatusChange | None:
        return self.status_history[-1] if self.status_history else None

    @property
    def total_quantity(self) -> int:
        return sum(item.quantity for item in self.line_items)

    # Workflow

    def record_status_change(self, change: StatusChange) -> None:
        """
        Set the status and append its audit entry in one step.

        Args:
            change: Transition from the current status

        Raises:
            ValidationException: If the change does not start at the current
                status or predates the last recorded change
        """
        new_status = WorkflowStatus(change.to_status)
        if change.from_status != self.status:
            raise ValidationException(
                f"Change starts at '{change.from_status}' but order is '{self.status.value}'",
                field="from_status",
            )
        last = self.last_change
        if last is not None and change.changed_at < last.changed_at:
            raise ValidationException("Status history must stay chronological", field="changed_at")

        self.status_history.append(change)
        self.status = new_status
        self.updated_at = change.changed_at
        self.version += 1

    def to_dict(self) -> dict[str, Any]:
        """Serialize for API responses."""
        return {
            "id": self.id,
            "order_number": self.order_number,
            "nickname": self.nickname,
            "status": self.status.value,
            "phase": self.phase.value,
            "category": self.category.value,
            "status_color": self.category.color,
            "status_history": [change.to_dict() for change in self.status_history],
            "total_amount": float(self.total_amount),
            "amount_paid": float(self.amount_paid),
            "amount_outstanding": float(self.amount_outstanding),
            "due_date": self.due_date.isoformat() if self.due_date else None,
            "customer_due_date": self.customer_due_date.isoformat() if self.customer_due_date else None,
            "created_at": self.created_at.isoformat(),
            "customer": self.customer.to_dict() if self.customer else None,
            "line_items": [item.to_dict() for item in self.line_items],
        }


@dataclass
class OrderSummary:
    """Row of the order list, as shown on production boards."""

    id: OrderId
    order_number: str
    nickname: str
    status: WorkflowStatus
    customer_name: str
    total_amount: Decimal
    amount_outstanding: Decimal
    due_date: datetime | None = None
    total_quantity: int = 0

    @property
    def phase(self) -> WorkflowPhase:
        return self.status.phase

    @property
    def category(self) -> StatusCategory:
        return classify(self.status)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "order_number": self.order_number,
            "nickname": self.nickname,
            "status": self.status.value,
            "phase": self.phase.value,
            "category": self.category.value,
            "status_color": self.category.color,
            "customer_name": self.customer_name,
            "total_amount": float(self.total_amount),
            "amount_outstanding": float(self.amount_outstanding),
            "due_date": self.due_date.isoformat() if self.due_date else None,
            "total_quantity": self.total_quantity,
        }
