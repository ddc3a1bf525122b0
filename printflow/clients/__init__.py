"""
Clients for external APIs
"""

from .order_api_client import OrderApiClient, OrderApiConnectionError, OrderApiError, OrderNotFoundError
from .pricing_api_client import (
    PricingApiClient,
    PricingInvalidResponseError,
    PricingNetworkError,
    PricingTransportError,
)

__all__ = [
    "OrderApiClient",
    "OrderApiConnectionError",
    "OrderApiError",
    "OrderNotFoundError",
    "PricingApiClient",
    "PricingInvalidResponseError",
    "PricingNetworkError",
    "PricingTransportError",
]
