"""
Orders API Dependencies

FastAPI dependencies for the orders domain.
"""

from fastapi import Depends

from printflow.api.dependencies import get_app_container
from printflow.core.container import DependencyContainer
from printflow.domains.orders.application.use_cases import (
    ChangeOrderStatusUseCase,
    GetOrderDetailUseCase,
    GetWorkflowCatalogUseCase,
    ListOrdersUseCase,
)


def get_order_detail_use_case(
    container: DependencyContainer = Depends(get_app_container),
) -> GetOrderDetailUseCase:
    """Get GetOrderDetailUseCase instance."""
    return container.create_get_order_detail_use_case()


def get_list_orders_use_case(
    container: DependencyContainer = Depends(get_app_container),
) -> ListOrdersUseCase:
    """Get ListOrdersUseCase instance."""
    return container.create_list_orders_use_case()


def get_change_order_status_use_case(
    container: DependencyContainer = Depends(get_app_container),
) -> ChangeOrderStatusUseCase:
    """Get ChangeOrderStatusUseCase instance."""
    return container.create_change_order_status_use_case()


def get_workflow_catalog_use_case(
    container: DependencyContainer = Depends(get_app_container),
) -> GetWorkflowCatalogUseCase:
    """Get GetWorkflowCatalogUseCase instance."""
    return container.create_get_workflow_catalog_use_case()


__all__ = [
    "get_order_detail_use_case",
    "get_list_orders_use_case",
    "get_change_order_status_use_case",
    "get_workflow_catalog_use_case",
]
