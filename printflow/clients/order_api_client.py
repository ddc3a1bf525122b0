"""
Order API Client

Async client for the production dashboard backend, which owns order
persistence.

Connection Details:
    - Base URL: settings.ORDER_API_URL
    - Auth: none (internal network)

Endpoints:
    - GET /api/orders - Paginated order list (legacy snake_case rows)
    - GET /api/orders/{id} - Order detail with line items and status history
    - POST /api/orders/{id}/status - Persist a status change
"""

from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from printflow.config.settings import get_settings
from printflow.models.order_api import BackendOrder, BackendOrdersPage

logger = logging.getLogger(__name__)


class OrderApiError(Exception):
    """
    Base exception for order backend errors.

    Attributes:
        error_code: Machine-readable error code
        error_message: Human-readable error description
        status_code: HTTP status returned by the backend, if any
    """

    def __init__(self, error_code: str, error_message: str, status_code: int | None = None):
        self.error_code = error_code
        self.error_message = error_message
        self.status_code = status_code
        super().__init__(f"{error_code}: {error_message}")


class OrderApiConnectionError(OrderApiError):
    """Network connectivity issues."""

    def __init__(self, message: str):
        super().__init__("CONNECTION_ERROR", message)


class OrderNotFoundError(OrderApiError):
    """Order id unknown to the backend."""

    def __init__(self, order_id: int | str):
        self.order_id = order_id
        super().__init__("NOT_FOUND", f"Order {order_id} not found", status_code=404)


class OrderApiClient:
    """
    Async HTTP client for the order backend.

    Example:
        async with OrderApiClient() as client:
            order = await client.get_order(1042)
            await client.update_order_status(1042, "SP - In Production")
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        settings = get_settings()
        self.base_url = (base_url or settings.ORDER_API_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.ORDER_API_TIMEOUT
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> OrderApiClient:
        await self._get_client()
        return self

    async def __aexit__(self, *args) -> None:
        await self.close()

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                headers={"Content-Type": "application/json", "Accept": "application/json"},
                timeout=httpx.Timeout(self.timeout),
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
        self._client = None

    async def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        client = await self._get_client()
        try:
            return await client.request(method, path, **kwargs)

        except httpx.TimeoutException as e:
            logger.error(f"Order API timeout on {method} {path}: {e}")
            raise OrderApiConnectionError(f"Order backend request timed out: {e}") from e

        except httpx.TransportError as e:
            logger.error(f"Order API connection error on {method} {path}: {e}")
            raise OrderApiConnectionError(f"Could not connect to order backend: {e}") from e

    async def get_order(self, order_id: int | str) -> BackendOrder | None:
        """
        Get an order with line items and status history.

        Args:
            order_id: Backend order id

        Returns:
            Parsed order, or None if the backend answers 404

        Raises:
            OrderApiConnectionError: Backend unreachable
            OrderApiError: Any other non-2xx status or unparseable body
        """
        response = await self._request("GET", f"/api/orders/{order_id}")

        if response.status_code == 404:
            logger.info(f"Order {order_id} not found")
            return None

        if not response.is_success:
            raise OrderApiError("HTTP_ERROR", "Failed to fetch order", status_code=response.status_code)

        try:
            return BackendOrder.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise OrderApiError("INVALID_RESPONSE", f"Unexpected order payload: {e}") from e

    async def list_orders(
        self,
        status: str | None = None,
        search: str | None = None,
        page: int | None = None,
        limit: int | None = None,
    ) -> BackendOrdersPage:
        """
        Get orders with optional filters.

        Raises:
            OrderApiConnectionError: Backend unreachable
            OrderApiError: Non-2xx status or unparseable body
        """
        params: dict[str, Any] = {}
        if status:
            params["status"] = status
        if search:
            params["search"] = search
        if page:
            params["page"] = page
        if limit:
            params["limit"] = limit

        response = await self._request("GET", "/api/orders", params=params)

        if not response.is_success:
            raise OrderApiError("HTTP_ERROR", "Failed to fetch orders", status_code=response.status_code)

        try:
            return BackendOrdersPage.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise OrderApiError("INVALID_RESPONSE", f"Unexpected order list payload: {e}") from e

    async def update_order_status(self, order_id: int | str, status: str) -> dict[str, Any]:
        """
        Persist a status change.

        Args:
            order_id: Backend order id
            status: New workflow status

        Returns:
            Backend acknowledgement (e.g. {"success": true})

        Raises:
            OrderNotFoundError: Order id unknown to the backend
            OrderApiConnectionError: Backend unreachable
            OrderApiError: Backend rejected the update
        """
        logger.info(f"Persisting status for order {order_id}: {status}")
        response = await self._request("POST", f"/api/orders/{order_id}/status", json={"status": status})

        if response.status_code == 404:
            raise OrderNotFoundError(order_id)

        if not response.is_success:
            raise OrderApiError(
                "UPDATE_REJECTED",
                f"Failed to update order status ({response.status_code})",
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError:
            data = {}
        return data if isinstance(data, dict) else {"success": True}
