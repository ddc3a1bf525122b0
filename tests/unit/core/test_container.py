"""
Unit Tests for DependencyContainer wiring
"""

from decimal import Decimal

import pytest

from printflow.config.settings import Settings
from printflow.core.container import DependencyContainer, get_container, reset_container


@pytest.fixture
def container():
    return DependencyContainer(
        Settings(
            PRICING_API_URL="http://pricing.test",
            ORDER_API_URL="http://orders.test",
            PRICING_DEBOUNCE_MS=150,
            FALLBACK_MARGIN_PCT=20,
        )
    )


class TestDependencyContainer:
    """Tests for DependencyContainer"""

    def test_clients_are_singletons(self, container):
        assert container.get_pricing_client() is container.get_pricing_client()
        assert container.get_order_client() is container.get_order_client()
        assert container.get_pricing_client().base_url == "http://pricing.test"

    def test_workflow_engine_is_shared(self, container):
        first = container.create_change_order_status_use_case()
        second = container.create_change_order_status_use_case()

        assert first.engine is second.engine
        assert first.engine.writer is container.get_order_client()

    def test_fallback_uses_configured_margin(self, container):
        calculator = container.create_pricing_calculator()

        assert calculator.fallback.margin.value == Decimal("20")
        assert calculator.gateway is container.get_pricing_client()

    def test_quote_sessions_are_independent(self, container):
        first = container.create_quote_session()
        second = container.create_quote_session()

        assert first is not second
        assert first.debounce_seconds == 0.15
        assert first.health_probe is not None

    @pytest.mark.asyncio
    async def test_close_releases_clients(self, container):
        client = await container.get_order_client()._get_client()

        await container.close()

        assert client.is_closed


def test_process_wide_container():
    first = get_container()
    assert get_container() is first

    reset_container()
    assert get_container() is not first
