"""
Health endpoint tests.
"""


def test_health_endpoint(client):
    """Test that the /health endpoint returns 200 OK."""
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert "data" in data
    assert data["data"]["status"] == "healthy"
    assert "timestamp" in data["data"]
    assert "version" in data["data"]
    assert data["data"]["service"] == "HealthScript"


def test_health_live_endpoint(client):
    response = client.get("/health/live")
    assert response.status_code == 200
    assert response.json()["data"] == {"alive": True}


def test_health_ready_endpoint(client):
    """Readiness answers 200 even when MongoDB is unreachable."""
    response = client.get("/health/ready")
    assert response.status_code == 200
    data = response.json()["data"]
    assert "database" in data["checks"]
    assert data["ready"] is (data["checks"]["database"] == "ok")


def test_root_endpoint(client):
    """Test that the root endpoint returns API information."""
    response = client.get("/")
    assert response.status_code == 200
    data = response.json()
    assert data["service"] == "HealthScript"
    assert "version" in data
    assert data["status"] == "running"


def test_request_id_and_timing_headers(client):
    response = client.get("/health/live", headers={"X-Request-ID": "req-123"})
    assert response.headers["X-Request-ID"] == "req-123"
    assert "X-Process-Time" in response.headers
    assert response.json()["request_id"] == "req-123"


def test_protected_endpoint_requires_token(client):
    response = client.get("/patients/20240123456789")
    assert response.status_code == 401
    body = response.json()
    assert body["success"] is False
    assert body["error"] == "UNAUTHORIZED"
    assert response.headers["WWW-Authenticate"] == "Bearer"


def test_malformed_token_rejected(client):
    response = client.get(
        "/patients/20240123456789", headers={"Authorization": "Bearer not-a-jwt"}
    )
    assert response.status_code == 401
