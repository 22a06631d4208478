"""Tests for CORS helpers and request logging middleware."""

import pytest
from api.middleware import get_allowed_origins, get_cors_headers
from fastapi.testclient import TestClient


@pytest.mark.unit
def test_allowed_origins_in_development() -> None:
    """Test the UI URL is allowed under both schemes plus local dev servers."""
    origins = get_allowed_origins("http://ui.example.com/", "development")

    assert origins[:2] == ["http://ui.example.com", "https://ui.example.com"]
    assert "http://localhost:5173" in origins
    assert len(origins) == len(set(origins))


@pytest.mark.unit
def test_allowed_origins_in_production() -> None:
    """Test production only allows the configured UI."""
    assert get_allowed_origins("https://ui.example.com", "production") == [
        "https://ui.example.com",
        "http://ui.example.com",
    ]


@pytest.mark.unit
def test_cors_headers_for_unknown_origin() -> None:
    """Test no CORS headers are produced for origins that are not allowed."""
    assert get_cors_headers("https://evil.example.com", "https://ui.example.com", "production") == {}
    assert get_cors_headers(None) == {}


@pytest.mark.unit
def test_cors_headers_expose_api_headers() -> None:
    """Test allowed origins can read Location and X-Pagination."""
    headers = get_cors_headers("http://localhost:5173")

    assert headers["Access-Control-Allow-Origin"] == "http://localhost:5173"
    assert "X-Pagination" in headers["Access-Control-Expose-Headers"]
    assert "Location" in headers["Access-Control-Expose-Headers"]


@pytest.mark.unit
def test_request_id_is_echoed(client: TestClient) -> None:
    """Test a caller-supplied request id comes back on the response."""
    response = client.get("/api/health", headers={"X-Request-ID": "abc123"})

    assert response.headers["X-Request-ID"] == "abc123"


@pytest.mark.unit
def test_request_id_is_generated(client: TestClient) -> None:
    """Test every response carries a request id."""
    response = client.get("/api/users")

    assert response.headers["X-Request-ID"]
