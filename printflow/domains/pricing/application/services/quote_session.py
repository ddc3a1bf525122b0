"""
Pricing Quote Session

Coalesces rapid quote requests from one editing session and guarantees that
a slow response to an older request never replaces the result of a newer one.
"""

import asyncio
from collections.abc import Awaitable, Callable

from printflow.core.shared import get_service_logger
from printflow.domains.pricing.application.ports import IPricingCalculator
from printflow.domains.pricing.domain.value_objects import DecorationRequest, PricingResult

logger = get_service_logger("quote_session")

DEFAULT_DEBOUNCE_SECONDS = 0.3


class PricingQuoteSession:
    """
    Debounced, last-request-wins front of a pricing calculator.

    Every submission is tagged with a monotonically increasing sequence
    number. A submission waits out the debounce window and is dropped if a
    newer one arrived meanwhile; a finished calculation is applied only if no
    newer submission has already been applied.

    Example:
        ```python
        session = PricingQuoteSession(calculator)
        await asyncio.gather(
            session.submit(DecorationRequest(method="dtg", quantity=10)),
            session.submit(DecorationRequest(method="dtg", quantity=50)),
        )
        session.current  # quote for 50 pieces
        ```
    """

    def __init__(
        self,
        calculator: IPricingCalculator,
        debounce_seconds: float = DEFAULT_DEBOUNCE_SECONDS,
        health_probe: Callable[[], Awaitable[bool]] | None = None,
    ):
        """
        Initialize session.

        Args:
            calculator: Never-raising quote calculator
            debounce_seconds: Coalescing window (0 disables debouncing)
            health_probe: Optional remote availability check
        """
        if debounce_seconds < 0:
            raise ValueError("debounce_seconds cannot be negative")
        self.calculator = calculator
        self.debounce_seconds = debounce_seconds
        self.health_probe = health_probe

        self._sequence = 0
        self._applied_sequence = 0
        self._current: PricingResult | None = None
        self._service_healthy: bool | None = None

    @property
    def current(self) -> PricingResult | None:
        """Most recently applied quote (None when there is nothing to price)."""
        return self._current

    @property
    def sequence(self) -> int:
        return self._sequence

    @property
    def applied_sequence(self) -> int:
        return self._applied_sequence

    @property
    def using_fallback(self) -> bool:
        """True when the service is known to be down or the current quote is a fallback."""
        if self._service_healthy is False:
            return True
        return self._current is not None and self._current.is_fallback

    async def submit(self, request: DecorationRequest) -> PricingResult | None:
        """
        Submit a request.

        Returns:
            The applied quote, or None if the request was superseded, its
            response went stale, or its quantity is not positive
        """
        self._sequence += 1
        sequence = self._sequence

        if self.debounce_seconds > 0:
            await asyncio.sleep(self.debounce_seconds)
            if sequence != self._sequence:
                logger.debug(f"Request #{sequence} superseded by #{self._sequence}")
                return None

        if not request.is_priceable:
            self._apply(sequence, None)
            return None

        result = await self.calculator.calculate(request)

        if sequence < self._applied_sequence:
            logger.debug(f"Discarding stale quote #{sequence} (applied #{self._applied_sequence})")
            return None

        self._apply(sequence, result)
        return result

    async def refresh_health(self) -> bool | None:
        """Probe the remote service, if a probe was configured."""
        if self.health_probe is None:
            return None
        self._service_healthy = await self.health_probe()
        if not self._service_healthy:
            logger.warning("Pricing service unhealthy, quotes will use fallback pricing")
        return self._service_healthy

    def _apply(self, sequence: int, result: PricingResult | None) -> None:
        self._applied_sequence = sequence
        self._current = result
