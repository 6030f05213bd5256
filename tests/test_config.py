"""Unit tests for environment-driven settings."""
from __future__ import annotations

import pytest
from fastapi.testclient import TestClient
from pydantic import ValidationError

from app.config import Settings
from app.main import create_app


def test_defaults_need_no_environment():
    settings = Settings()

    assert settings.app_port == 8080
    assert settings.seed_sample_data is True
    assert "http://localhost:5173" in settings.cors_origins
    assert settings.cors_headers == ["Origin", "Content-Type", "Accept", "Authorization"]


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("APP_PORT", "9000")
    monkeypatch.setenv("CORS_ORIGINS", '["http://localhost:4000"]')

    settings = Settings()

    assert settings.log_level == "DEBUG"
    assert settings.app_port == 9000
    assert settings.cors_origins == ["http://localhost:4000"]


def test_invalid_log_level_rejected():
    with pytest.raises(ValidationError):
        Settings(log_level="chatty")


def test_seeding_can_be_disabled():
    client = TestClient(create_app(Settings(seed_sample_data=False)))

    assert client.get("/api/v1/users").json() == {"success": True, "data": []}
    assert client.get("/api/v1/workouts/1").status_code == 404
