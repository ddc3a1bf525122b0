"""
Pricing API Client

Async client for the job estimator pricing service.

Connection Details:
    - Base URL: settings.PRICING_API_URL
    - Auth: none (internal network)

Endpoints:
    - POST /pricing/calculate - Price a decoration request
    - GET /health - Service availability
"""

from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from printflow.config.settings import get_settings
from printflow.models.pricing_api import PricingApiErrorBody, PricingApiResponse

logger = logging.getLogger(__name__)


class PricingTransportError(Exception):
    """
    Base exception for pricing service failures.

    Attributes:
        error_code: Machine-readable error code
        error_message: Human-readable error description
    """

    def __init__(self, error_code: str, error_message: str):
        self.error_code = error_code
        self.error_message = error_message
        super().__init__(f"{error_code}: {error_message}")


class PricingNetworkError(PricingTransportError):
    """Service unreachable (connection refused, timeout, broken transport)."""

    def __init__(self, message: str):
        super().__init__("NETWORK_ERROR", message)


class PricingInvalidResponseError(PricingTransportError):
    """Non-2xx status, non-JSON body or unexpected response schema."""

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__("INVALID_RESPONSE", message)


class PricingApiClient:
    """
    Async HTTP client for the pricing service.

    Example:
        async with PricingApiClient() as client:
            response = await client.calculate({"quantity": 100, "service": "screen"})
            response.total_price  # Decimal("1485.00")
    """

    CALCULATE_PATH = "/pricing/calculate"
    HEALTH_PATH = "/health"

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize the client.

        Args:
            base_url: Service URL (defaults to settings.PRICING_API_URL)
            timeout: Request timeout in seconds (defaults to settings.PRICING_API_TIMEOUT)
            transport: Optional httpx transport (tests use httpx.MockTransport)
        """
        settings = get_settings()
        self.base_url = (base_url or settings.PRICING_API_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.PRICING_API_TIMEOUT
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> PricingApiClient:
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

    async def calculate(self, payload: dict[str, Any]) -> PricingApiResponse:
        """
        Price a canonical decoration request.

        Args:
            payload: Request body in the service vocabulary

        Returns:
            Validated service response

        Raises:
            PricingNetworkError: Service unreachable or timed out
            PricingInvalidResponseError: Non-2xx status or unparseable body
        """
        client = await self._get_client()

        try:
            logger.debug(f"Pricing request: service={payload.get('service')}, quantity={payload.get('quantity')}")
            response = await client.post(self.CALCULATE_PATH, json=payload)

        except httpx.TimeoutException as e:
            logger.error(f"Pricing API timeout: {e}")
            raise PricingNetworkError(f"Pricing service timed out: {e}") from e

        except httpx.TransportError as e:
            logger.error(f"Pricing API connection error: {e}")
            raise PricingNetworkError(f"Could not connect to pricing service: {e}") from e

        if not response.is_success:
            message = self._error_message(response)
            logger.error(f"Pricing API error {response.status_code}: {message}")
            raise PricingInvalidResponseError(message, status_code=response.status_code)

        try:
            data = response.json()
        except ValueError as e:
            raise PricingInvalidResponseError(f"Pricing service returned non-JSON body: {e}") from e

        try:
            return PricingApiResponse.model_validate(data)
        except ValidationError as e:
            raise PricingInvalidResponseError(f"Unexpected pricing response schema: {e.error_count()} errors") from e

    async def health_check(self) -> bool:
        """
        Check service availability.

        Returns:
            True if `GET /health` answers 2xx, False otherwise
        """
        client = await self._get_client()

        try:
            response = await client.get(self.HEALTH_PATH)
            if not response.is_success:
                logger.warning(f"Pricing API unhealthy: status {response.status_code}")
            return response.is_success

        except httpx.HTTPError as e:
            logger.warning(f"Pricing API health check failed: {e}")
            return False

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        """Best-effort error message from a non-2xx response."""
        fallback = f"Pricing API error: {response.status_code}"
        try:
            body = PricingApiErrorBody.model_validate(response.json())
        except (ValueError, ValidationError):
            return fallback
        return body.message or body.error or fallback
