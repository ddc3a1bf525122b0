"""
Unit Tests for Orders Use Cases

Aggregator and engine collaborators are mocked.
"""

import asyncio
from decimal import Decimal
from unittest.mock import AsyncMock

import pytest

from printflow.clients.order_api_client import OrderApiConnectionError
from printflow.core.domain import EntityNotFoundException, IntegrationException, UnknownStatusException
from printflow.domains.orders.application.services import OrderPage, OrderWorkflowEngine
from printflow.domains.orders.application.use_cases import (
    ChangeOrderStatusRequest,
    ChangeOrderStatusUseCase,
    GetOrderDetailRequest,
    GetOrderDetailUseCase,
    GetWorkflowCatalogUseCase,
    ListOrdersRequest,
    ListOrdersUseCase,
)
from printflow.domains.orders.domain.entities import Order, OrderSummary
from printflow.domains.orders.domain.value_objects import WorkflowPhase, WorkflowStatus


@pytest.fixture
def aggregator():
    return AsyncMock()


class StoredOrder:
    """Backend double serving one order; reads and writes both yield to the loop."""

    def __init__(self, status: WorkflowStatus):
        self.status = status
        self.writes: list[str] = []

    async def fetch(self, order_id):
        await asyncio.sleep(0)
        return Order(id=order_id, status=self.status)

    async def update_order_status(self, order_id, status):
        await asyncio.sleep(0.01)
        self.writes.append(status)
        self.status = WorkflowStatus(status)
        return {"success": True}


def summary(order_id: int, status: WorkflowStatus) -> OrderSummary:
    return OrderSummary(
        id=order_id,
        order_number=str(order_id),
        nickname="",
        status=status,
        customer_name="Harbor Cafe",
        total_amount=Decimal("100"),
        amount_outstanding=Decimal("0"),
    )


class TestGetOrderDetailUseCase:
    """Tests for GetOrderDetailUseCase"""

    @pytest.mark.asyncio
    async def test_returns_order(self, aggregator, quote_order):
        aggregator.fetch.return_value = quote_order

        order = await GetOrderDetailUseCase(aggregator).execute(GetOrderDetailRequest(order_id=1042))

        assert order is quote_order
        aggregator.fetch.assert_awaited_once_with(1042)

    @pytest.mark.asyncio
    async def test_missing_order(self, aggregator):
        aggregator.fetch.return_value = None

        with pytest.raises(EntityNotFoundException) as exc_info:
            await GetOrderDetailUseCase(aggregator).execute(GetOrderDetailRequest(order_id=5))

        assert exc_info.value.entity_id == 5

    @pytest.mark.asyncio
    async def test_backend_failure(self, aggregator):
        aggregator.fetch.side_effect = OrderApiConnectionError("refused")

        with pytest.raises(IntegrationException) as exc_info:
            await GetOrderDetailUseCase(aggregator).execute(GetOrderDetailRequest(order_id=5))

        assert exc_info.value.service == "order_api"


class TestListOrdersUseCase:
    """Tests for ListOrdersUseCase"""

    @pytest.mark.asyncio
    async def test_groups_by_phase(self, aggregator):
        aggregator.fetch_orders.return_value = OrderPage(
            total=3,
            page=1,
            limit=50,
            orders=[
                summary(1, WorkflowStatus.DTG_QUEUE),
                summary(2, WorkflowStatus.QUOTE_SENT),
                summary(3, WorkflowStatus.DTG_PRINTING),
            ],
        )

        response = await ListOrdersUseCase(aggregator).execute(ListOrdersRequest(search="harbor"))

        aggregator.fetch_orders.assert_awaited_once_with(status=None, search="harbor", page=None, limit=None)
        assert response.total == 3
        assert [order.id for order in response.by_phase[WorkflowPhase.DTG]] == [1, 3]
        assert [order.id for order in response.by_phase[WorkflowPhase.QUOTES]] == [2]

    @pytest.mark.asyncio
    async def test_backend_failure(self, aggregator):
        aggregator.fetch_orders.side_effect = OrderApiConnectionError("refused")

        with pytest.raises(IntegrationException):
            await ListOrdersUseCase(aggregator).execute(ListOrdersRequest())


class TestChangeOrderStatusUseCase:
    """Tests for ChangeOrderStatusUseCase"""

    @pytest.mark.asyncio
    async def test_loads_then_applies(self, aggregator, quote_order, clock, fixed_time):
        aggregator.fetch.return_value = quote_order
        writer = AsyncMock()
        use_case = ChangeOrderStatusUseCase(
            get_order=GetOrderDetailUseCase(aggregator),
            engine=OrderWorkflowEngine(writer=writer, clock=clock),
        )

        request = ChangeOrderStatusRequest(order_id=1042, status="SP - In Production", actor="u1")
        order = await use_case.execute(request)

        assert order.status is WorkflowStatus.SP_IN_PRODUCTION
        assert order.last_change.changed_by == "u1"
        assert order.last_change.changed_at == fixed_time
        writer.update_order_status.assert_awaited_once_with(1042, "SP - In Production")

    @pytest.mark.asyncio
    async def test_unknown_status_skips_backend(self, aggregator):
        engine = AsyncMock()
        use_case = ChangeOrderStatusUseCase(get_order=GetOrderDetailUseCase(aggregator), engine=engine)

        with pytest.raises(UnknownStatusException):
            await use_case.execute(ChangeOrderStatusRequest(order_id=1042, status="Shipped?", actor="u1"))

        aggregator.fetch.assert_not_awaited()
        engine.change_status.assert_not_awaited()
        engine.apply_status.assert_not_awaited()


class TestGetWorkflowCatalogUseCase:
    """Tests for GetWorkflowCatalogUseCase"""

    def test_phases(self):
        views = GetWorkflowCatalogUseCase().execute()

        assert [view.phase for view in views] == list(WorkflowPhase)
        assert views[1].label == "Art & Design"
        assert views[1].color == "purple"
        assert views[6].statuses[-1] == "CANCELLED"


class TestConcurrentStatusChanges:
    """Changes to one order issued back to back"""

    @pytest.mark.asyncio
    async def test_quick_revert_is_applied(self, clock):
        backend = StoredOrder(WorkflowStatus.QUOTE)
        engine = OrderWorkflowEngine(writer=backend, clock=clock)
        use_case = ChangeOrderStatusUseCase(get_order=GetOrderDetailUseCase(backend), engine=engine)

        first, second = await asyncio.gather(
            use_case.execute(ChangeOrderStatusRequest(order_id=1042, status="ART - In Progress", actor="u1")),
            use_case.execute(ChangeOrderStatusRequest(order_id=1042, status="QUOTE", actor="u2")),
        )

        assert backend.writes == ["ART - In Progress", "QUOTE"]
        assert backend.status is WorkflowStatus.QUOTE
        assert first.status is WorkflowStatus.ART_IN_PROGRESS
        assert second.status is WorkflowStatus.QUOTE
        assert second.last_change.from_status == "ART - In Progress"
        assert second.last_change.changed_by == "u2"
        assert engine._locks == {}

    @pytest.mark.asyncio
    async def test_each_change_starts_from_latest_status(self, clock):
        backend = StoredOrder(WorkflowStatus.QUOTE)
        engine = OrderWorkflowEngine(writer=backend, clock=clock)
        use_case = ChangeOrderStatusUseCase(get_order=GetOrderDetailUseCase(backend), engine=engine)
        statuses = ["ART - In Progress", "ART - Approved", "SP - Screens Ready"]

        orders = await asyncio.gather(
            *(
                use_case.execute(ChangeOrderStatusRequest(order_id=1042, status=status, actor="u1"))
                for status in statuses
            )
        )

        assert backend.writes == statuses
        assert [order.last_change.from_status for order in orders] == ["QUOTE", *statuses[:-1]]
