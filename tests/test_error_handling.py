"""
Tests for the shared error body, request logging headers and health check.
"""

from test_fixtures import client


def test_health_check():
    r = client.get("/health-check")

    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "ok"
    assert body["service"] == "Cookbook"


def test_request_id_header():
    r = client.get("/health-check")

    assert r.headers["X-Request-ID"]
    assert float(r.headers["X-Process-Time"]) >= 0


def test_unknown_route_uses_error_body():
    r = client.get("/api/nothing-here")

    assert r.status_code == 404
    body = r.json()
    assert body["success"] is False
    assert body["error"]["code"] == "HTTP_404"
    assert "timestamp" in body


def test_validation_error_body(stores):
    r = client.post("/api/recipe", json={})

    assert r.status_code == 422
    body = r.json()
    assert body["success"] is False
    assert body["error"]["code"] == "VALIDATION_ERROR"
    assert body["error"]["message"] == "Request validation failed"
    assert isinstance(body["error"]["details"], list)
