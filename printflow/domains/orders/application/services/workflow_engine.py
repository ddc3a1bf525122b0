"""
Order Workflow Engine

Applies status changes to orders. The engine keeps the books (status plus
audit trail) and does not gatekeep: any catalog status may follow any other.
"""

import asyncio
from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from datetime import UTC, datetime

from printflow.core.domain import PersistenceException
from printflow.core.shared import get_service_logger
from printflow.domains.orders.application.ports import Clock, IOrderStatusWriter
from printflow.domains.orders.domain.entities import Order, OrderId
from printflow.domains.orders.domain.value_objects import (
    ActorId,
    StatusChange,
    WorkflowStatus,
    resolve_status,
)

logger = get_service_logger("workflow_engine")


class SystemClock:
    """Wall clock in UTC."""

    def now(self) -> datetime:
        return datetime.now(UTC)


@dataclass
class _OrderLock:
    """Per-order lock plus the number of callers holding or awaiting it."""

    lock: asyncio.Lock = field(default_factory=asyncio.Lock)
    users: int = 0


class OrderWorkflowEngine:
    """
    Status bookkeeping for orders.

    Changes to the same order are serialized in the order they were issued.
    When a status writer is configured, the change is persisted first and
    applied locally only after the backend accepted it.

    Example:
        ```python
        engine = OrderWorkflowEngine(writer=OrderApiClient())
        order = await engine.apply_status(order, "SP - In Production", actor="u1")
        order.status_history[-1].to_status  # "SP - In Production"
        ```
    """

    def __init__(self, writer: IOrderStatusWriter | None = None, clock: Clock | None = None):
        """
        Initialize engine.

        Args:
            writer: Backend persistence for status changes (None keeps changes local)
            clock: Default time source for audit entries
        """
        self.writer = writer
        self.clock = clock or SystemClock()
        self._locks: dict[OrderId | int, _OrderLock] = {}

    @asynccontextmanager
    async def locked(self, key: OrderId | int) -> AsyncIterator[None]:
        """
        Hold the lock of one order.

        Waiters are admitted first come, first served. The entry is dropped as
        soon as no caller holds or awaits it.
        """
        entry = self._locks.get(key)
        if entry is None:
            entry = self._locks[key] = _OrderLock()
        entry.users += 1
        try:
            async with entry.lock:
                yield
        finally:
            entry.users -= 1
            if entry.users == 0:
                del self._locks[key]

    async def apply_status(
        self,
        order: Order,
        new_status: WorkflowStatus | str,
        actor: ActorId,
        clock: Clock | None = None,
    ) -> Order:
        """
        Move an order to a new status.

        Args:
            order: Order to update (mutated in place and returned)
            new_status: Target catalog status
            actor: Who made the change
            clock: Time source overriding the engine default

        Returns:
            The order; unchanged if it already was in `new_status`

        Raises:
            UnknownStatusException: If `new_status` is not a catalog status
            PersistenceException: If the backend rejected the change; the
                order is left untouched
        """
        target = resolve_status(new_status)

        async with self.locked(order.id if order.id is not None else id(order)):
            return await self._apply(order, target, actor, clock)

    async def change_status(
        self,
        order_id: OrderId,
        load: Callable[[], Awaitable[Order]],
        new_status: WorkflowStatus | str,
        actor: ActorId,
        clock: Clock | None = None,
    ) -> Order:
        """
        Load an order and move it to a new status under the order's lock.

        The order is read only once earlier changes to it have been applied,
        so the change always starts from the latest status.

        Raises:
            UnknownStatusException: If `new_status` is not a catalog status
            PersistenceException: If the backend rejected the change
        """
        target = resolve_status(new_status)

        async with self.locked(order_id):
            order = await load()
            return await self._apply(order, target, actor, clock)

    async def _apply(
        self,
        order: Order,
        target: WorkflowStatus,
        actor: ActorId,
        clock: Clock | None,
    ) -> Order:
        if target == order.status:
            logger.debug(f"Order {order.id} already in '{target.value}', nothing to apply")
            return order

        change = StatusChange(
            from_status=order.status.value,
            to_status=target.value,
            changed_at=self._timestamp(order, clock or self.clock),
            changed_by=actor,
        )

        if self.writer is not None:
            await self._persist(order, target)

        order.record_status_change(change)
        logger.with_context(order_id=str(order.id), actor=actor).info(
            f"Order {order.id} status changed: '{change.from_status}' -> '{change.to_status}'"
        )
        return order

    async def _persist(self, order: Order, target: WorkflowStatus) -> None:
        try:
            await self.writer.update_order_status(order.id, target.value)
        except PersistenceException:
            raise
        except Exception as e:
            logger.with_context(order_id=str(order.id), status=target.value).error(
                f"Backend rejected status change for order {order.id}: {e}"
            )
            raise PersistenceException(order.id, target.value, reason=str(e)) from e

    def _timestamp(self, order: Order, clock: Clock) -> datetime:
        """Clock reading, kept monotonic with respect to the order's history."""
        changed_at = clock.now()
        if changed_at.tzinfo is None:
            changed_at = changed_at.replace(tzinfo=UTC)

        last = order.last_change
        if last is not None and changed_at < last.changed_at:
            logger.warning(
                f"Clock reading {changed_at.isoformat()} precedes last change "
                f"{last.changed_at.isoformat()} for order {order.id}; using the latter"
            )
            return last.changed_at
        return changed_at
