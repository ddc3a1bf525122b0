"""
Orders Use Cases
"""

from printflow.domains.orders.application.use_cases.change_order_status import (
    ChangeOrderStatusRequest,
    ChangeOrderStatusUseCase,
)
from printflow.domains.orders.application.use_cases.get_order_detail import (
    GetOrderDetailRequest,
    GetOrderDetailUseCase,
)
from printflow.domains.orders.application.use_cases.get_workflow_catalog import (
    GetWorkflowCatalogUseCase,
    WorkflowPhaseView,
)
from printflow.domains.orders.application.use_cases.list_orders import (
    ListOrdersRequest,
    ListOrdersResponse,
    ListOrdersUseCase,
)

__all__ = [
    "ChangeOrderStatusRequest",
    "ChangeOrderStatusUseCase",
    "GetOrderDetailRequest",
    "GetOrderDetailUseCase",
    "GetWorkflowCatalogUseCase",
    "WorkflowPhaseView",
    "ListOrdersRequest",
    "ListOrdersResponse",
    "ListOrdersUseCase",
]
