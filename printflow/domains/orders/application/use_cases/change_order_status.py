"""
Change Order Status Use Case

Loads the order under the workflow engine's per-order lock, so changes to
one order are applied in the order they were issued, each starting from the
latest status. The engine persists the change before applying it locally.
"""

import logging
from dataclasses import dataclass

from printflow.domains.orders.application.services import OrderWorkflowEngine
from printflow.domains.orders.application.use_cases.get_order_detail import (
    GetOrderDetailRequest,
    GetOrderDetailUseCase,
)
from printflow.domains.orders.domain.entities import Order, OrderId
from printflow.domains.orders.domain.value_objects import ActorId, resolve_status

logger = logging.getLogger(__name__)


@dataclass
class ChangeOrderStatusRequest:
    order_id: OrderId
    status: str
    actor: ActorId


class ChangeOrderStatusUseCase:
    """
    Use Case: Change Order Status

    Responsibilities:
    - Reject statuses outside the catalog before any I/O
    - Load the current order once earlier changes to it have been applied
    - Apply the change through the workflow engine
    """

    def __init__(self, get_order: GetOrderDetailUseCase, engine: OrderWorkflowEngine):
        self.get_order = get_order
        self.engine = engine

    async def execute(self, request: ChangeOrderStatusRequest) -> Order:
        """
        Raises:
            UnknownStatusException: Status not in the catalog
            EntityNotFoundException: Order unknown to the backend
            IntegrationException: Backend unreachable while loading
            PersistenceException: Backend rejected the change
        """
        target = resolve_status(request.status)
        return await self.engine.change_status(
            request.order_id,
            load=lambda: self.get_order.execute(GetOrderDetailRequest(order_id=request.order_id)),
            new_status=target,
            actor=request.actor,
        )
