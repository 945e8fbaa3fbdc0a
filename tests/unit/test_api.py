"""
Unit tests for API endpoints.
"""

import pytest
from fastapi.testclient import TestClient

from product_ids.api import app

NIKE_URL = "https://www.nike.com/t/air-max-270-mens-shoe/ABC123-DEF"


class TestAPIEndpoints:
    """Test API endpoints."""

    @pytest.fixture(autouse=True)
    def setup(self):
        """Setup test client; the context manager runs the app lifespan."""
        with TestClient(app) as client:
            self.client = client
            yield

    def test_root_endpoint(self):
        """Test health check endpoint."""
        response = self.client.get("/")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ok"

    def test_get_product_ids(self):
        """Test single URL extraction."""
        response = self.client.get("/v1/product-ids", params={"url": NIKE_URL})
        assert response.status_code == 200

        data = response.json()
        assert data["url"] == NIKE_URL
        assert data["domain"] == "nike.com"
        assert data["href"] == "https://nike.com/t/air-max-270-mens-shoe/ABC123-DEF"
        assert len(data["key"]) == 16
        assert data["product_ids"] == ["abc123-def"]
        assert data["count"] == 1

    def test_get_product_ids_with_store_id(self):
        """Test the store_id parameter overrides domain rules."""
        response = self.client.get(
            "/v1/product-ids", params={"url": NIKE_URL, "store_id": "5246"}
        )
        assert response.status_code == 200
        assert response.json()["product_ids"] == []

    def test_get_product_ids_invalid_url(self):
        """Test unparseable URLs return 400."""
        response = self.client.get("/v1/product-ids", params={"url": "javascript:alert(1)"})
        assert response.status_code == 400

    def test_get_product_ids_missing_url(self):
        """Test the url parameter is required."""
        response = self.client.get("/v1/product-ids")
        assert response.status_code == 422

    def test_batch_analysis(self):
        """Test batch analysis reports each URL."""
        response = self.client.post(
            "/v1/url-analysis/batch",
            json={
                "urls": [
                    {"url": NIKE_URL},
                    {"url": "https://www.target.com/p/lamp/-/A-54191097", "store_id": 5246},
                    {"url": "javascript:alert(1)"},
                ]
            },
        )
        assert response.status_code == 200

        data = response.json()
        assert data["total"] == 3
        assert data["successful"] == 2
        assert data["failed"] == 1

        nike, target, invalid = data["results"]
        assert nike["success"] is True
        assert nike["product_ids"] == ["abc123-def"]
        assert target["product_ids"] == ["54191097"]
        assert invalid["success"] is False
        assert invalid["error"] == "InvalidUrlError"
        assert invalid["product_ids"] == []

    def test_batch_limits(self):
        """Test batches must hold between 1 and 100 URLs."""
        response = self.client.post("/v1/url-analysis/batch", json={"urls": []})
        assert response.status_code == 422

        urls = [{"url": f"https://example.com/p/{i}"} for i in range(101)]
        response = self.client.post("/v1/url-analysis/batch", json={"urls": urls})
        assert response.status_code == 422

    def test_batch_at_limit(self):
        """Test a batch of exactly 100 URLs is accepted."""
        urls = [{"url": f"https://example.com/item?sku=SKU{i:04d}"} for i in range(100)]
        response = self.client.post("/v1/url-analysis/batch", json={"urls": urls})
        assert response.status_code == 200

        data = response.json()
        assert data["successful"] == 100
        assert data["results"][7]["product_ids"] == ["sku0007"]
