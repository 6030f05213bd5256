"""Integration tests for progress record API endpoints."""
from __future__ import annotations

import asyncio

import httpx
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient


def _record(user_id: str = "1", workout_id: str = "2", **overrides) -> dict:
    body = {
        "userId": user_id,
        "workoutId": workout_id,
        "date": "2024-02-01",
        "duration": 45,
        "completed": False,
    }
    body.update(overrides)
    return body


def test_list_progress_for_seeded_user(test_client: TestClient):
    response = test_client.get("/api/v1/progress/user/1")

    assert response.status_code == 200
    payload = response.json()
    assert payload["success"] is True
    assert payload["data"] == [
        {
            "id": "1",
            "userId": "1",
            "workoutId": "1",
            "date": "2024-01-15",
            "duration": 30,
            "completed": True,
        }
    ]


def test_list_progress_for_unknown_user_is_empty(test_client: TestClient):
    response = test_client.get("/api/v1/progress/user/nobody")

    assert response.status_code == 200
    assert response.json() == {"success": True, "data": []}


def test_list_progress_by_user_matches_full_list_subset(test_client: TestClient):
    test_client.post("/api/v1/progress", json=_record(user_id="2"))
    test_client.post("/api/v1/progress", json=_record(user_id="1", date="2024-02-02"))
    test_client.post("/api/v1/progress", json=_record(user_id="2", date="2024-02-03"))

    everything = test_client.get("/api/v1/progress").json()["data"]
    for user_id in ("1", "2"):
        subset = test_client.get(f"/api/v1/progress/user/{user_id}").json()["data"]
        assert subset == [r for r in everything if r["userId"] == user_id]


def test_create_progress_with_dangling_references(test_client: TestClient):
    response = test_client.post("/api/v1/progress", json=_record(user_id="404", workout_id="999"))

    assert response.status_code == 201
    created = response.json()["data"]
    assert created["id"] != "1"
    assert created["userId"] == "404"
    assert created["workoutId"] == "999"
    assert created["completed"] is False


def test_create_progress_with_wrong_type(test_client: TestClient):
    response = test_client.post("/api/v1/progress", json=_record(completed={"yes": True}))

    assert response.status_code == 400
    assert response.json() == {"success": False, "message": "Invalid request body"}


def test_get_progress_record(test_client: TestClient):
    response = test_client.get("/api/v1/progress/1")

    assert response.status_code == 200
    assert response.json()["data"]["workoutId"] == "1"

    missing = test_client.get("/api/v1/progress/2")
    assert missing.status_code == 404
    assert missing.json() == {"success": False, "message": "Progress not found"}


def test_update_progress(test_client: TestClient):
    response = test_client.put("/api/v1/progress/1", json=_record(completed=True, duration=50))

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["id"] == "1"
    assert data["workoutId"] == "2"
    assert data["duration"] == 50
    assert test_client.get("/api/v1/progress/1").json()["data"] == data


def test_update_nonexistent_progress(test_client: TestClient):
    response = test_client.put("/api/v1/progress/999", json=_record())

    assert response.status_code == 404
    assert response.json()["message"] == "Progress not found"


def test_delete_progress(test_client: TestClient):
    response = test_client.delete("/api/v1/progress/1")

    assert response.status_code == 200
    assert response.json()["message"] == "Progress deleted successfully"
    assert test_client.get("/api/v1/progress").json()["data"] == []
    assert test_client.delete("/api/v1/progress/1").status_code == 404


@pytest.mark.asyncio
async def test_concurrent_creates_over_http_get_unique_ids(app: FastAPI):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
        responses = await asyncio.gather(
            *(client.post("/api/v1/progress", json=_record(date=f"2024-03-{i:02d}")) for i in range(1, 29))
        )

    assert all(r.status_code == 201 for r in responses)
    ids = [r.json()["data"]["id"] for r in responses]
    assert len(set(ids)) == len(ids)
    assert "1" not in ids


def test_create_progress_rejects_string_duration(test_client: TestClient):
    response = test_client.post("/api/v1/progress", json=_record(duration="30"))

    assert response.status_code == 400
    assert response.json() == {"success": False, "message": "Invalid request body"}


def test_create_progress_rejects_string_completed(test_client: TestClient):
    response = test_client.post("/api/v1/progress", json=_record(completed="yes"))

    assert response.status_code == 400
    assert len(test_client.get("/api/v1/progress").json()["data"]) == 1


def test_update_progress_rejects_wrong_types_without_mutation(test_client: TestClient):
    before = test_client.get("/api/v1/progress/1").json()

    response = test_client.put("/api/v1/progress/1", json=_record(duration="30", completed="yes"))

    assert response.status_code == 400
    assert test_client.get("/api/v1/progress/1").json() == before
