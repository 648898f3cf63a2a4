"""Tests for health check endpoint."""


def test_health_check(client):
    """Test that health check returns status and database info."""
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["database"] == "connected"
    assert isinstance(data["cjk_segmentation"], bool)
    assert data["tokenizer_version"] == "1.0.0"
    assert "version" in data


def test_root_endpoint(client):
    """Test that root endpoint returns service info."""
    response = client.get("/")
    assert response.status_code == 200
    data = response.json()
    assert data["service"] == "Speedread API"
    assert "version" in data


def test_cors_preflight_allows_dev_origin(client):
    """The Vite dev server origin may call the API."""
    response = client.options(
        "/api/health",
        headers={
            "Origin": "http://localhost:5173",
            "Access-Control-Request-Method": "GET",
        },
    )
    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "http://localhost:5173"
