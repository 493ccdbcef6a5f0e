"""
API Tests
=========
Tests for the token checkout REST API endpoints.
"""

from decimal import Decimal

from fastapi.testclient import TestClient


class TestHealthEndpoints:
    """Tests for health check endpoints."""

    def test_health_check(self, client: TestClient):
        """Test liveness probe."""
        response = client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ok"
        assert "version" in data


class TestPackageEndpoints:
    """Tests for token package endpoints."""

    def test_list_packages(self, client: TestClient):
        """Test packages are returned in catalog order."""
        response = client.get("/tokens/packages")
        assert response.status_code == 200
        packages = response.json()["packages"]

        assert [p["ui_id"] for p in packages] == ["starter", "momentum", "elite"]
        assert [p["tokens"] for p in packages] == [10000, 20000, 30000]

    def test_get_package(self, client: TestClient):
        response = client.get("/tokens/packages/momentum")
        assert response.status_code == 200
        data = response.json()

        assert data["api_id"] == "POPULAR"
        assert data["title"] == "Momentum Pack"
        assert data["tokens"] == 20000
        assert data["highlight"] is True

    def test_get_unknown_package(self, client: TestClient):
        response = client.get("/tokens/packages/platinum")
        assert response.status_code == 404

    def test_get_package_by_billing_id(self, client: TestClient):
        response = client.get("/tokens/packages/billing/PRO")
        assert response.status_code == 200
        assert response.json()["ui_id"] == "elite"

    def test_enterprise_package_not_found(self, client: TestClient):
        """Test enterprise is never served from the catalog."""
        response = client.get("/tokens/packages/billing/ENTERPRISE")
        assert response.status_code == 404
        assert "ENTERPRISE" in response.json()["detail"]


class TestRateEndpoints:
    """Tests for rate and quick amount endpoints."""

    def test_get_rates(self, client: TestClient):
        response = client.get("/tokens/rates")
        assert response.status_code == 200
        rates = {r["currency"]: r for r in response.json()["rates"]}

        assert set(rates) == {"EUR", "GBP", "USD"}
        assert Decimal(str(rates["EUR"]["tokens_per_unit"])) == Decimal("100.00")
        assert Decimal(str(rates["GBP"]["tokens_per_unit"])) == Decimal("114.94")
        assert Decimal(str(rates["USD"]["tokens_per_unit"])) == Decimal("74.07")
        assert rates["GBP"]["label"] == "100 tokens = £0.87"

    def test_get_quick_amounts(self, client: TestClient):
        response = client.get("/tokens/quick-amounts")
        assert response.status_code == 200

        assert response.json()["amounts"] == {
            "EUR": [50, 100, 200],
            "GBP": [45, 90, 180],
            "USD": [70, 140, 280],
        }

    def test_get_quick_amounts_for_currency(self, client: TestClient):
        response = client.get("/tokens/quick-amounts", params={"currency": "USD"})
        assert response.status_code == 200
        assert response.json()["amounts"] == {"USD": [70, 140, 280]}

    def test_get_quick_amounts_invalid_currency(self, client: TestClient):
        response = client.get("/tokens/quick-amounts", params={"currency": "CHF"})
        assert response.status_code == 422


class TestQuoteEndpoint:
    """Tests for custom amount quotes."""

    def test_quote_rounded_amount(self, client: TestClient):
        response = client.post("/tokens/quote", json={"amount": 1, "currency": "GBP"})
        assert response.status_code == 200
        data = response.json()

        assert data["currency"] == "GBP"
        assert data["tokens"] == 110
        assert data["rounded"] is True
        assert Decimal(str(data["exact_tokens"])) == Decimal("114.94")

    def test_quote_exact_amount(self, client: TestClient):
        response = client.post("/tokens/quote", json={"amount": "50.00", "currency": "EUR"})
        assert response.status_code == 200
        data = response.json()

        assert data["tokens"] == 5000
        assert data["rounded"] is False

    def test_quote_zero_amount(self, client: TestClient):
        response = client.post("/tokens/quote", json={"amount": 0, "currency": "USD"})
        assert response.status_code == 200
        data = response.json()

        assert data["tokens"] == 0
        assert data["rounded"] is False

    def test_quote_negative_amount(self, client: TestClient):
        response = client.post("/tokens/quote", json={"amount": -5, "currency": "EUR"})
        assert response.status_code == 422

    def test_quote_amount_above_maximum(self, client: TestClient):
        response = client.post("/tokens/quote", json={"amount": 10001, "currency": "EUR"})
        assert response.status_code == 422

    def test_quote_invalid_currency(self, client: TestClient):
        response = client.post("/tokens/quote", json={"amount": 10, "currency": "CHF"})
        assert response.status_code == 422

    def test_quote_missing_fields(self, client: TestClient):
        response = client.post("/tokens/quote", json={"amount": 10})
        assert response.status_code == 422
