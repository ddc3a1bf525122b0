"""
Order Aggregator

Reshapes raw backend orders into `Order` / `OrderSummary` entities. No
business rules live here; every absent field gets an explicit default so the
rest of the core never sees a missing value.
"""

import logging
from dataclasses import dataclass, field
from datetime import UTC, datetime
from decimal import Decimal
from typing import Any

from printflow.core.domain import UnknownStatusException
from printflow.domains.orders.application.ports import Clock, IOrderSource
from printflow.domains.orders.domain.entities import (
    SIZE_LABELS,
    CustomerRef,
    LineItem,
    Order,
    OrderId,
    OrderSummary,
    SizeQuantity,
)
from printflow.domains.orders.domain.value_objects import (
    DEFAULT_STATUS,
    StatusChange,
    WorkflowStatus,
    resolve_status,
)
from printflow.models.order_api import BackendLineItem, BackendOrder, BackendSizes

logger = logging.getLogger(__name__)

UNKNOWN_ACTOR = "unknown"
UNKNOWN_CUSTOMER = "Unknown"


@dataclass
class OrderPage:
    """One page of order summaries."""

    total: int = 0
    page: int = 1
    limit: int = 0
    orders: list[OrderSummary] = field(default_factory=list)


def _parse_timestamp(value: str | None) -> datetime | None:
    """ISO-8601 timestamp as an aware datetime (naive values are taken as UTC)."""
    if not value:
        return None
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        logger.warning(f"Unparseable timestamp from backend: {value!r}")
        return None
    return parsed if parsed.tzinfo else parsed.replace(tzinfo=UTC)


def _canonical_status(value: str) -> str:
    """Catalog spelling of a status name; unknown names are kept as given."""
    try:
        return resolve_status(value).value
    except UnknownStatusException:
        return value


class OrderAggregator:
    """
    Backend order reshaping plus the single remote fetch that feeds it.

    Example:
        ```python
        aggregator = OrderAggregator(source=OrderApiClient())
        order = await aggregator.fetch(1042)
        order.amount_paid  # total_amount - amount_outstanding
        ```
    """

    def __init__(self, source: IOrderSource, clock: Clock | None = None):
        self.source = source
        self.clock = clock

    def _now(self) -> datetime:
        return self.clock.now() if self.clock else datetime.now(UTC)

    # Remote

    async def fetch(self, order_id: OrderId) -> Order | None:
        """Fetch and map one order (None if the backend does not know it)."""
        raw = await self.source.get_order(order_id)
        if raw is None:
            return None
        return self.map_order(raw)

    async def fetch_orders(
        self,
        status: str | None = None,
        search: str | None = None,
        page: int | None = None,
        limit: int | None = None,
    ) -> OrderPage:
        """Fetch and map a page of order summaries."""
        raw_page = await self.source.list_orders(status=status, search=search, page=page, limit=limit)
        return OrderPage(
            total=raw_page.total,
            page=raw_page.page,
            limit=raw_page.limit,
            orders=[self.map_summary(raw) for raw in raw_page.orders],
        )

    # Mapping

    def map_order(self, raw: BackendOrder | dict[str, Any]) -> Order:
        """Map a raw backend order (either payload shape) to an Order."""
        if not isinstance(raw, BackendOrder):
            raw = BackendOrder.model_validate(raw)

        total, outstanding = self._amounts(raw)
        due_date = _parse_timestamp(raw.due_date)
        now = self._now()
        status = self._status(raw)
        history = self._reconcile_history(raw, status, self._history(raw, now), now)

        return Order(
            id=raw.id,
            order_number=raw.order_number or f"#{raw.id}",
            nickname=raw.order_nickname,
            status=status,
            status_history=history,
            total_amount=total,
            amount_outstanding=outstanding,
            due_date=due_date,
            customer_due_date=_parse_timestamp(raw.customer_due_date),
            customer=self._customer(raw),
            line_items=[self._line_item(item, index) for index, item in enumerate(raw.line_items, start=1)],
            created_at=due_date or now,
            updated_at=now,
        )

    def map_summary(self, raw: BackendOrder | dict[str, Any]) -> OrderSummary:
        """Map a raw backend order (usually a list row) to an OrderSummary."""
        if not isinstance(raw, BackendOrder):
            raw = BackendOrder.model_validate(raw)

        total, outstanding = self._amounts(raw)
        return OrderSummary(
            id=raw.id,
            order_number=raw.order_number or f"#{raw.id}",
            nickname=raw.order_nickname,
            status=self._status(raw),
            customer_name=raw.display_customer_name or UNKNOWN_CUSTOMER,
            total_amount=total,
            amount_outstanding=outstanding,
            due_date=_parse_timestamp(raw.due_date),
            total_quantity=sum(item.total_quantity for item in raw.line_items),
        )

    def _status(self, raw: BackendOrder) -> WorkflowStatus:
        value = raw.display_status
        if not value:
            return DEFAULT_STATUS
        try:
            return resolve_status(value)
        except UnknownStatusException:
            logger.warning(f"Order {raw.id} has unknown status {value!r}, treating as {DEFAULT_STATUS.value}")
            return DEFAULT_STATUS

    @staticmethod
    def _reconcile_history(
        raw: BackendOrder, status: WorkflowStatus, history: list[StatusChange], now: datetime
    ) -> list[StatusChange]:
        """
        History ending at the current status.

        When the last recorded change does not lead to the status the backend
        reports, an entry bridging the two is appended.
        """
        if not history or history[-1].to_status == status.value:
            return history
        last = history[-1]
        logger.warning(
            f"Order {raw.id} status {status.value!r} disagrees with last history entry "
            f"{last.to_status!r}, recording the difference"
        )
        bridge = StatusChange(
            from_status=last.to_status,
            to_status=status.value,
            changed_at=max(now, last.changed_at),
            changed_by=UNKNOWN_ACTOR,
        )
        return [*history, bridge]

    @staticmethod
    def _amounts(raw: BackendOrder) -> tuple[Decimal, Decimal]:
        """Total and outstanding, with outstanding clamped to [0, total]."""
        total = max(raw.total_amount, Decimal("0"))
        outstanding = raw.amount_outstanding if raw.amount_outstanding is not None else Decimal("0")
        return total, min(max(outstanding, Decimal("0")), total)

    @staticmethod
    def _history(raw: BackendOrder, now: datetime) -> list[StatusChange]:
        changes = [
            StatusChange(
                from_status=entry.previous_status or "",
                to_status=_canonical_status(entry.status),
                changed_at=_parse_timestamp(entry.changed_at) or now,
                changed_by=entry.changed_by or UNKNOWN_ACTOR,
            )
            for entry in raw.status_history
            if entry.status
        ]
        return sorted(changes, key=lambda change: change.changed_at)

    @staticmethod
    def _customer(raw: BackendOrder) -> CustomerRef | None:
        if raw.customer is not None:
            customer = raw.customer
            return CustomerRef(
                id=str(customer.id) if customer.id is not None else None,
                name=customer.name or UNKNOWN_CUSTOMER,
                email=customer.email,
                phone=customer.phone,
                company=customer.company,
            )
        if raw.customer_name:
            return CustomerRef(name=raw.customer_name)
        return None

    @staticmethod
    def _line_item(raw: BackendLineItem, index: int) -> LineItem:
        return LineItem(
            id=str(raw.id) if raw.id is not None else str(index),
            description=raw.description,
            style_number=raw.style_number,
            color=raw.color,
            category=raw.category,
            quantity=max(raw.total_quantity, 0),
            unit_price=max(raw.unit_cost, Decimal("0")),
            total_cost=raw.total_cost,
            sizes=size_breakdown(raw.sizes),
        )


def size_breakdown(sizes: BackendSizes) -> list[SizeQuantity]:
    """Ordered per-size quantities, dropping sizes with no pieces."""
    counts = (
        sizes.xs,
        sizes.s,
        sizes.m,
        sizes.l,
        sizes.xl,
        sizes.xxl,
        sizes.xxxl,
        sizes.xxxxl,
        sizes.xxxxxl,
        sizes.other,
    )
    return [SizeQuantity(label, count) for label, count in zip(SIZE_LABELS, counts, strict=True) if count > 0]
