"""Unit tests for health check endpoints."""

from __future__ import annotations

from unittest.mock import AsyncMock, patch

import pytest
from fastapi.testclient import TestClient

from recipebox.core.config import Settings
from recipebox.factory import create_app


pytestmark = pytest.mark.unit


@pytest.fixture
def client(test_settings: Settings) -> TestClient:
    # No context manager: lifespan (database, session provider) is not run
    return TestClient(create_app(test_settings))


class TestHealthEndpoint:
    """Tests for /health."""

    def test_healthy(self, client: TestClient, test_settings: Settings) -> None:
        """Should report healthy with version and environment."""
        response = client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["version"] == test_settings.app.version
        assert body["environment"] == "test"
        assert "timestamp" in body

    def test_no_security_cache_headers(self, client: TestClient) -> None:
        """Should not mark non-API responses as no-store."""
        response = client.get("/health")

        assert response.headers["X-Content-Type-Options"] == "nosniff"
        assert "Cache-Control" not in response.headers


class TestReadinessEndpoint:
    """Tests for /ready."""

    def test_ready(self, client: TestClient) -> None:
        """Should be ready when every dependency is healthy."""
        with patch(
            "recipebox.api.endpoints.health.check_database_health",
            new=AsyncMock(return_value={"database": "healthy"}),
        ):
            response = client.get("/ready")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "ready"
        assert body["dependencies"] == {"database": "healthy"}

    def test_degraded(self, client: TestClient) -> None:
        """Should report degraded when the database is down."""
        with patch(
            "recipebox.api.endpoints.health.check_database_health",
            new=AsyncMock(return_value={"database": "unhealthy"}),
        ):
            response = client.get("/ready")

        assert response.status_code == 200
        assert response.json()["status"] == "degraded"
