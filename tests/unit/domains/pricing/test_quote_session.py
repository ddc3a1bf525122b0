"""
Unit Tests for PricingQuoteSession

Covers debouncing and last-request-wins ordering of concurrent quotes.
"""

import asyncio
from decimal import Decimal
from unittest.mock import AsyncMock

import pytest

from printflow.domains.pricing.application.services import PricingQuoteSession
from printflow.domains.pricing.domain.value_objects import (
    DecorationRequest,
    PricingBreakdown,
    PricingResult,
    PricingSource,
)


def quote_for(quantity: int, source: PricingSource = PricingSource.REMOTE) -> PricingResult:
    total = Decimal(quantity) * Decimal("10")
    return PricingResult(
        unit_price=Decimal("10"),
        total_price=total,
        subtotal=total,
        margin_pct=Decimal("0"),
        breakdown=PricingBreakdown(base_cost=total),
        source=source,
    )


class ScriptedCalculator:
    """Calculator whose latency depends on the requested quantity."""

    def __init__(self, delays: dict[int, float] | None = None, source: PricingSource = PricingSource.REMOTE):
        self.delays = delays or {}
        self.source = source
        self.calls: list[int] = []

    async def calculate(self, request: DecorationRequest) -> PricingResult:
        self.calls.append(request.quantity)
        await asyncio.sleep(self.delays.get(request.quantity, 0))
        return quote_for(request.quantity, self.source)


def dtg(quantity: int) -> DecorationRequest:
    return DecorationRequest(method="dtg", quantity=quantity)


class TestLastRequestWins:
    """Out-of-order responses"""

    @pytest.mark.asyncio
    async def test_slow_older_response_is_discarded(self):
        """Quantity 10 answers after quantity 50; the 50-piece quote stays."""
        calculator = ScriptedCalculator(delays={10: 0.05, 50: 0})
        session = PricingQuoteSession(calculator, debounce_seconds=0)

        first = asyncio.create_task(session.submit(dtg(10)))
        await asyncio.sleep(0)
        second = asyncio.create_task(session.submit(dtg(50)))

        first_result, second_result = await asyncio.gather(first, second)

        assert first_result is None
        assert second_result == quote_for(50)
        assert session.current == quote_for(50)
        assert session.applied_sequence == 2
        assert calculator.calls == [10, 50]

    @pytest.mark.asyncio
    async def test_sequential_requests_apply_in_order(self):
        session = PricingQuoteSession(ScriptedCalculator(), debounce_seconds=0)

        await session.submit(dtg(10))
        await session.submit(dtg(20))

        assert session.current == quote_for(20)
        assert session.sequence == 2


class TestDebounce:
    """Coalescing rapid submissions"""

    @pytest.mark.asyncio
    async def test_only_last_submission_in_window_is_priced(self):
        calculator = ScriptedCalculator()
        session = PricingQuoteSession(calculator, debounce_seconds=0.02)

        results = await asyncio.gather(*(session.submit(dtg(qty)) for qty in (1, 2, 3)))

        assert results[:2] == [None, None]
        assert results[2] == quote_for(3)
        assert calculator.calls == [3]

    def test_rejects_negative_window(self):
        with pytest.raises(ValueError):
            PricingQuoteSession(ScriptedCalculator(), debounce_seconds=-1)


class TestNothingToPrice:
    """Non-positive quantities"""

    @pytest.mark.asyncio
    async def test_clears_current_quote(self):
        calculator = ScriptedCalculator()
        session = PricingQuoteSession(calculator, debounce_seconds=0)

        await session.submit(dtg(10))
        result = await session.submit(dtg(0))

        assert result is None
        assert session.current is None
        assert calculator.calls == [10]


class TestFallbackIndicator:
    """using_fallback"""

    @pytest.mark.asyncio
    async def test_reflects_current_quote_source(self):
        session = PricingQuoteSession(ScriptedCalculator(source=PricingSource.FALLBACK), debounce_seconds=0)
        assert session.using_fallback is False

        await session.submit(dtg(5))

        assert session.using_fallback is True

    @pytest.mark.asyncio
    async def test_reflects_health_probe(self):
        probe = AsyncMock(return_value=False)
        session = PricingQuoteSession(ScriptedCalculator(), debounce_seconds=0, health_probe=probe)

        assert await session.refresh_health() is False
        assert session.using_fallback is True

        probe.return_value = True
        await session.refresh_health()
        await session.submit(dtg(5))
        assert session.using_fallback is False

    @pytest.mark.asyncio
    async def test_without_probe(self):
        session = PricingQuoteSession(ScriptedCalculator(), debounce_seconds=0)
        assert await session.refresh_health() is None
