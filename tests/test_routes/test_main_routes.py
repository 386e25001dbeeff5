"""
Smoke tests for the main blueprint and application-wide handlers.

These verify that the application starts up correctly, the health
check responds, and errors outside the equipment routes still come
back as JSON.
"""

import pytest
from sqlalchemy import text

from app import create_app
from app.blueprints.main import routes


class TestHealthCheck:
    """Tests for the health check endpoint."""

    def test_health_check_returns_200(self, client):
        """The health check should report a reachable store."""
        response = client.get("/health")
        assert response.status_code == 200
        assert response.get_json() == {"status": "healthy", "database": "connected"}

    def test_store_failure_returns_503_without_details(self, client, monkeypatch):
        """A failing store query is reported without leaking the error text."""
        monkeypatch.setattr(
            routes, "text", lambda _sql: text("SELECT * FROM missing_health_table")
        )

        response = client.get("/health")
        assert response.status_code == 503
        assert response.get_json() == {"status": "unhealthy", "database": "unavailable"}


class TestErrorHandlers:
    """Unknown routes and methods should return JSON error bodies."""

    def test_unknown_route_returns_json_404(self, client):
        response = client.get("/api/nothing-here")
        assert response.status_code == 404
        assert response.get_json() == {"message": "Resource not found."}

    def test_unsupported_method_returns_json_405(self, client):
        response = client.patch("/api/equipment", json={})
        assert response.status_code == 405
        assert response.get_json() == {"message": "Method not allowed."}


class TestCors:
    """The API accepts cross-origin requests from the client."""

    def test_api_allows_any_origin_by_default(self, client):
        response = client.get(
            "/api/equipment", headers={"Origin": "http://localhost:3000"}
        )
        assert response.headers["Access-Control-Allow-Origin"] == "*"

    def test_preflight_allows_json_posts(self, client):
        response = client.options(
            "/api/equipment",
            headers={
                "Origin": "http://localhost:3000",
                "Access-Control-Request-Method": "POST",
                "Access-Control-Request-Headers": "Content-Type",
            },
        )
        assert response.status_code == 200
        assert "POST" in response.headers["Access-Control-Allow-Methods"]


class TestAppFactory:
    """Tests for config selection in ``create_app``."""

    def test_unknown_config_name_raises(self):
        with pytest.raises(ValueError, match="Unknown config"):
            create_app("staging")

    def test_testing_config_is_applied(self, app):
        assert app.config["TESTING"] is True
        assert app.config["SQLALCHEMY_DATABASE_URI"] == "sqlite://"
