"""
Integration Tests for the HTTP API

The full application is built with `create_app`; only the two upstream
services are replaced, by httpx.MockTransport handlers.
"""

import copy
import json

import httpx
import pytest
from fastapi.testclient import TestClient

from printflow.api.dependencies import get_app_container
from printflow.clients import OrderApiClient, PricingApiClient
from printflow.config.settings import Settings, get_settings
from printflow.core.app_factory import create_app
from printflow.core.container import DependencyContainer

API = "/api/v1"


class FakeOrderBackend:
    """In-memory order backend speaking the dashboard API."""

    def __init__(self, orders: dict[int, dict]):
        self.orders = orders
        self.status_updates: list[tuple[int, str]] = []
        self.reject_updates = False
        self.down = False

    def __call__(self, request: httpx.Request) -> httpx.Response:
        if self.down:
            raise httpx.ConnectError("connection refused", request=request)

        parts = request.url.path.strip("/").split("/")
        if parts == ["api", "orders"]:
            rows = list(self.orders.values())
            return httpx.Response(200, json={"total": len(rows), "page": 1, "limit": 50, "orders": rows})

        order_id = int(parts[2])
        if order_id not in self.orders:
            return httpx.Response(404, json={"error": "Order not found"})

        if request.method == "POST":
            if self.reject_updates:
                return httpx.Response(500, json={"error": "database unavailable"})
            status = json.loads(request.content)["status"]
            self.status_updates.append((order_id, status))
            self.orders[order_id]["printavoStatusName"] = status
            return httpx.Response(200, json={"success": True})

        return httpx.Response(200, json=self.orders[order_id])


class FakePricingService:
    """Pricing service that can be switched off."""

    def __init__(self):
        self.down = False

    def __call__(self, request: httpx.Request) -> httpx.Response:
        if self.down:
            raise httpx.ConnectError("connection refused", request=request)
        if request.url.path == "/health":
            return httpx.Response(200, json={"status": "ok"})
        payload = json.loads(request.content)
        subtotal = 10 * payload["quantity"]
        return httpx.Response(
            200,
            json={
                "subtotal": subtotal,
                "total_price": subtotal * 1.5,
                "margin_pct": 50,
                "breakdown": {"base_cost": subtotal, "margin_amount": subtotal * 0.5},
                "line_items": [{"description": payload["service"], "qty": payload["quantity"], "total": subtotal}],
                "rules_applied": ["flat-rate"],
                "calculation_time_ms": 2,
            },
        )


@pytest.fixture
def order_backend(backend_order_detail, backend_order_row):
    return FakeOrderBackend({1042: copy.deepcopy(backend_order_detail), 2001: copy.deepcopy(backend_order_row)})


@pytest.fixture
def pricing_service():
    return FakePricingService()


@pytest.fixture
def settings():
    return Settings(ENVIRONMENT="test", PRICING_DEBOUNCE_MS=0)


@pytest.fixture
def container(settings, order_backend, pricing_service):
    container = DependencyContainer(settings)
    container._order_client = OrderApiClient(
        base_url="http://orders.test", transport=httpx.MockTransport(order_backend)
    )
    container._pricing_client = PricingApiClient(
        base_url="http://pricing.test", transport=httpx.MockTransport(pricing_service)
    )
    return container


@pytest.fixture
def app(settings, container):
    application = create_app(settings)
    application.dependency_overrides[get_app_container] = lambda: container
    application.dependency_overrides[get_settings] = lambda: settings
    return application


@pytest.fixture
def client(app):
    return TestClient(app)


class TestHealth:
    """Liveness"""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "ok"
        assert response.json()["environment"] == "test"


class TestPricingRoutes:
    """/pricing"""

    def test_methods_and_locations(self, client):
        methods = client.get(f"{API}/pricing/methods").json()
        locations = client.get(f"{API}/pricing/locations").json()

        assert methods[0] == {"value": "screen-printing", "label": "Screen Printing"}
        assert [location["value"] for location in locations][:2] == ["front-center", "front-left-chest"]

    def test_remote_quote(self, client):
        response = client.post(
            f"{API}/pricing/quote",
            json={"method": "dtg", "quantity": 20, "locations": ["front-center", "back-center"]},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["source"] == "remote"
        assert body["total_price"] == 300.0
        assert body["unit_price"] == 15.0
        assert body["rules_applied"] == ["flat-rate"]

    def test_fallback_quote_when_service_down(self, client, pricing_service):
        pricing_service.down = True

        response = client.post(
            f"{API}/pricing/quote",
            json={"method": "screen-printing", "quantity": 100, "colors": 2},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["source"] == "fallback"
        assert body["subtotal"] == 1100.0
        assert body["total_price"] == 1485.0
        assert body["unit_price"] == 14.85

    def test_zero_quantity_is_null(self, client):
        response = client.post(f"{API}/pricing/quote", json={"method": "dtg", "quantity": 0})

        assert response.status_code == 200
        assert response.json() is None

    def test_invalid_body(self, client):
        response = client.post(f"{API}/pricing/quote", json={"method": "dtg", "quantity": 5, "colors": 0})

        assert response.status_code == 422
        assert response.json()["code"] == "VALIDATION_ERROR"

    def test_health(self, client, pricing_service):
        assert client.get(f"{API}/pricing/health").json() == {"healthy": True, "using_fallback": False}

        pricing_service.down = True
        assert client.get(f"{API}/pricing/health").json() == {"healthy": False, "using_fallback": True}


class TestOrderRoutes:
    """/orders"""

    def test_workflow_catalog(self, client):
        phases = client.get(f"{API}/orders/workflow").json()

        assert [phase["phase"] for phase in phases] == [
            "Quotes",
            "Art & Design",
            "Screen Print",
            "Embroidery",
            "DTG",
            "Fulfillment",
            "Completion",
        ]
        assert phases[2]["statuses"][2] == "SP - In Production"
        assert phases[4]["label"] == "DTG / Direct to Garment"
        assert phases[0]["color"] == "yellow"

    def test_get_order(self, client):
        response = client.get(f"{API}/orders/1042")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "ART - In Progress"
        assert body["amount_paid"] == 1000.0
        assert body["customer"]["name"] == "Riverside Youth League"
        assert [change["to"] for change in body["status_history"]] == ["QUOTE - Approved", "ART - In Progress"]

    def test_unknown_order_is_404(self, client):
        response = client.get(f"{API}/orders/9")

        assert response.status_code == 404
        assert response.json()["code"] == "ENTITY_NOT_FOUND"

    def test_backend_down_is_503(self, client, order_backend):
        order_backend.down = True

        response = client.get(f"{API}/orders/1042")

        assert response.status_code == 503
        assert response.json()["code"] == "INTEGRATION_ERROR"

    def test_list_orders(self, client):
        body = client.get(f"{API}/orders", params={"page": 1}).json()

        assert body["total"] == 2
        assert {order["customer_name"] for order in body["orders"]} == {"Riverside Youth League", "Harbor Cafe"}

    def test_change_status(self, client, order_backend):
        response = client.post(
            f"{API}/orders/1042/status",
            json={"status": "SP - In Production"},
            headers={"X-Actor-Id": "u1"},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "SP - In Production"
        assert body["phase"] == "Screen Print"
        last = body["status_history"][-1]
        assert last["from"] == "ART - In Progress"
        assert last["to"] == "SP - In Production"
        assert last["changed_by"] == "u1"
        assert order_backend.status_updates == [(1042, "SP - In Production")]

    def test_change_status_requires_actor(self, client, order_backend):
        response = client.post(f"{API}/orders/1042/status", json={"status": "SP - In Production"})

        assert response.status_code == 401
        assert order_backend.status_updates == []

    def test_auth_bypass_uses_owner(self, app, order_backend):
        bypass = Settings(ENVIRONMENT="test", AUTH_BYPASS_ENABLED=True, DEV_OWNER_ID="owner-1")
        app.dependency_overrides[get_settings] = lambda: bypass

        response = TestClient(app).post(f"{API}/orders/1042/status", json={"status": "QUOTE"})

        assert response.status_code == 200
        assert response.json()["status_history"][-1]["changed_by"] == "owner-1"

    def test_unknown_status_is_422(self, client, order_backend):
        response = client.post(
            f"{API}/orders/1042/status",
            json={"status": "On Hold"},
            headers={"X-Actor-Id": "u1"},
        )

        assert response.status_code == 422
        assert response.json()["code"] == "UNKNOWN_STATUS"
        assert order_backend.status_updates == []

    def test_rejected_write_is_502(self, client, order_backend):
        order_backend.reject_updates = True

        response = client.post(
            f"{API}/orders/1042/status",
            json={"status": "SP - In Production"},
            headers={"X-Actor-Id": "u1"},
        )

        assert response.status_code == 502
        body = response.json()
        assert body["code"] == "PERSISTENCE_ERROR"
        assert body["details"]["retryable"] is True
        assert order_backend.orders[1042]["printavoStatusName"] == "ART - In Progress"
