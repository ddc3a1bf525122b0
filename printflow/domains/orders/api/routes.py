"""
Orders API Routes

FastAPI router for order detail, listing and workflow endpoints.
"""

from fastapi import APIRouter, Depends, Query

from printflow.api.dependencies import get_current_actor
from printflow.domains.orders.api.dependencies import (
    get_change_order_status_use_case,
    get_list_orders_use_case,
    get_order_detail_use_case,
    get_workflow_catalog_use_case,
)
from printflow.domains.orders.api.schemas import (
    OrderListResponse,
    OrderResponse,
    OrderSummaryResponse,
    StatusChangeRequest,
    WorkflowPhaseResponse,
)
from printflow.domains.orders.application.use_cases import (
    ChangeOrderStatusRequest,
    ChangeOrderStatusUseCase,
    GetOrderDetailRequest,
    GetOrderDetailUseCase,
    GetWorkflowCatalogUseCase,
    ListOrdersRequest,
    ListOrdersUseCase,
)

router = APIRouter(prefix="/orders", tags=["Orders"])


@router.get("/workflow", response_model=list[WorkflowPhaseResponse])
async def get_workflow(
    use_case: GetWorkflowCatalogUseCase = Depends(get_workflow_catalog_use_case),
):
    """Workflow phases and their statuses, in order."""
    return [
        WorkflowPhaseResponse(phase=view.phase.value, label=view.label, color=view.color, statuses=view.statuses)
        for view in use_case.execute()
    ]


@router.get("", response_model=OrderListResponse)
async def list_orders(
    status: str | None = None,
    search: str | None = None,
    page: int | None = Query(default=None, ge=1),
    limit: int | None = Query(default=None, ge=1, le=500),
    use_case: ListOrdersUseCase = Depends(get_list_orders_use_case),
):
    """Page through orders."""
    result = await use_case.execute(ListOrdersRequest(status=status, search=search, page=page, limit=limit))
    return OrderListResponse(
        total=result.total,
        page=result.page,
        limit=result.limit,
        orders=[OrderSummaryResponse.model_validate(summary.to_dict()) for summary in result.orders],
    )


@router.get("/{order_id}", response_model=OrderResponse)
async def get_order(
    order_id: int,
    use_case: GetOrderDetailUseCase = Depends(get_order_detail_use_case),
):
    """Order detail with line items and status history."""
    order = await use_case.execute(GetOrderDetailRequest(order_id=order_id))
    return OrderResponse.model_validate(order.to_dict())


@router.post("/{order_id}/status", response_model=OrderResponse)
async def change_order_status(
    order_id: int,
    request: StatusChangeRequest,
    actor: str = Depends(get_current_actor),
    use_case: ChangeOrderStatusUseCase = Depends(get_change_order_status_use_case),
):
    """Move an order to another workflow status."""
    order = await use_case.execute(ChangeOrderStatusRequest(order_id=order_id, status=request.status, actor=actor))
    return OrderResponse.model_validate(order.to_dict())
