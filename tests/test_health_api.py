"""Tests for the liveness probe, CORS policy and envelope on framework errors."""
from __future__ import annotations

from fastapi.testclient import TestClient

from app.config import Settings
from app.main import create_app


def test_health_check(test_client: TestClient):
    response = test_client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "message": "Workout Builder API is running"}


def test_cors_preflight_allows_frontend_origin(test_client: TestClient):
    response = test_client.options(
        "/api/v1/workouts",
        headers={
            "Origin": "http://localhost:5173",
            "Access-Control-Request-Method": "PUT",
            "Access-Control-Request-Headers": "Content-Type",
        },
    )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "http://localhost:5173"
    assert "PUT" in response.headers["access-control-allow-methods"]


def test_cors_rejects_unknown_origin(test_client: TestClient):
    response = test_client.options(
        "/api/v1/workouts",
        headers={
            "Origin": "http://evil.example",
            "Access-Control-Request-Method": "GET",
        },
    )

    assert response.status_code == 400
    assert "access-control-allow-origin" not in response.headers


def test_unknown_route_uses_envelope(test_client: TestClient):
    response = test_client.get("/api/v1/nothing-here")

    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "Not Found"}


def test_unsupported_method_uses_envelope(test_client: TestClient):
    response = test_client.patch("/api/v1/workouts/1", json={})

    assert response.status_code == 405
    assert response.json()["success"] is False


def test_health_reports_name_of_the_app_it_serves():
    client = TestClient(create_app(Settings(app_name="Gym Tracker")))

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["message"] == "Gym Tracker is running"
