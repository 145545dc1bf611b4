"""End-to-end tests through the assembled application."""

import pytest
from fastapi.testclient import TestClient
from shared.config import get_settings

ADMIN_TOKEN = "s3cret-admin"


@pytest.fixture()
def client(monkeypatch):
    monkeypatch.setattr(get_settings(), "admin_token", ADMIN_TOKEN)

    from app import app

    with TestClient(app) as client:
        yield client


@pytest.fixture()
def admin_headers():
    return {"X-Admin-Token": ADMIN_TOKEN}


class TestHealth:
    def test_health(self, client):
        assert client.get("/health").json() == {"status": "ok", "env": "test"}


class TestDashboard:
    def test_empty_dashboard(self, client):
        data = client.get("/dashboard").json()
        assert data["total_products"] == 0
        assert data["total_categories"] == 0
        assert data["low_stock_count"] == 0
        assert data["recent_orders"] == []

    def test_dashboard_after_an_order(self, client, admin_headers):
        category_id = client.post("/categories", json={"name": "Electronics"}, headers=admin_headers).json()["id"]
        product = client.post(
            "/products",
            json={
                "name": "Laptop",
                "price": "10.00",
                "quantity_in_stock": 10,
                "low_stock_threshold": 5,
                "category_id": category_id,
            },
            headers=admin_headers,
        ).json()
        client.post(
            "/orders",
            json={
                "guest_name": "Ada",
                "guest_email": "ada@example.com",
                "items": [{"product_id": product["id"], "quantity": 6}],
            },
            headers={"Accept": "application/json"},
        )

        data = client.get("/dashboard").json()

        assert data["total_products"] == 1
        assert data["total_categories"] == 1
        assert data["low_stock_count"] == 1
        assert data["low_stock_products"][0]["quantity_in_stock"] == 4
        assert data["recent_orders"][0]["total_amount"] == "60.00"
        assert data["recent_orders"][0]["item_count"] == 6

    def test_recent_orders_do_not_expose_guest_email(self, client, admin_headers):
        category_id = client.post("/categories", json={"name": "Books"}, headers=admin_headers).json()["id"]
        product = client.post(
            "/products",
            json={"name": "Novel", "price": "5.00", "quantity_in_stock": 3, "category_id": category_id},
            headers=admin_headers,
        ).json()
        client.post(
            "/orders",
            json={
                "guest_name": "Ada",
                "guest_email": "ada@example.com",
                "items": [{"product_id": product["id"], "quantity": 1}],
            },
            headers={"Accept": "application/json"},
        )

        recent = client.get("/dashboard").json()["recent_orders"]

        assert recent[0]["guest_name"] == "Ada"
        assert "guest_email" not in recent[0]


class TestUnhandledErrors:
    def test_unexpected_failure_returns_generic_500(self, client, monkeypatch):
        import reporting.api.routes

        def explode():
            raise RuntimeError("database exploded at /var/lib/secret")

        monkeypatch.setattr(reporting.api.routes, "build_overview", explode)

        response = client.get("/dashboard")

        assert response.status_code == 500
        data = response.json()
        assert data["success"] is False
        assert "exploded" not in data["message"]
