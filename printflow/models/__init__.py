"""
Wire models for the external services
"""

from .order_api import (
    BackendCustomer,
    BackendLineItem,
    BackendOrder,
    BackendOrdersPage,
    BackendSizes,
    BackendStatusHistoryEntry,
)
from .pricing_api import (
    PricingApiBreakdown,
    PricingApiErrorBody,
    PricingApiLineItem,
    PricingApiResponse,
)

__all__ = [
    # Order backend
    "BackendCustomer",
    "BackendLineItem",
    "BackendOrder",
    "BackendOrdersPage",
    "BackendSizes",
    "BackendStatusHistoryEntry",
    # Pricing service
    "PricingApiBreakdown",
    "PricingApiErrorBody",
    "PricingApiLineItem",
    "PricingApiResponse",
]
