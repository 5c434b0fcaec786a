"""Tests for the /api/health endpoint."""

from fastapi.testclient import TestClient

from app.config import Credentials, get_credentials
from app.main import app


def test_health_endpoint(client: TestClient) -> None:
    """Test that health endpoint returns the fixed body."""
    response = client.get("/api/health")

    assert response.status_code == 200
    assert response.json() == {"status": "OK", "message": "Server is running"}


def test_health_without_credentials() -> None:
    """Test health does not depend on configuration."""
    app.dependency_overrides[get_credentials] = lambda: Credentials()
    try:
        response = TestClient(app).get("/api/health")
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 200
    assert response.json()["status"] == "OK"


def test_health_allows_any_origin(client: TestClient) -> None:
    """Test CORS headers are sent for arbitrary origins."""
    response = client.get("/api/health", headers={"Origin": "https://example.org"})

    assert response.headers["access-control-allow-origin"] == "*"
