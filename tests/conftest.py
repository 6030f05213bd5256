"""Pytest configuration for global fixtures and logging setup."""
from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.config import Settings
from app.logging_config import configure_logging

TEST_SETTINGS = Settings()

configure_logging(TEST_SETTINGS)

from app.main import create_app


@pytest.fixture()
def app() -> FastAPI:
    """Application with freshly seeded stores, isolated per test."""

    return create_app(TEST_SETTINGS)


@pytest.fixture()
def test_client(app: FastAPI) -> TestClient:
    """Provide a FastAPI test client over the seeded app."""

    return TestClient(app)


@pytest.fixture()
def empty_client() -> TestClient:
    """Provide a test client whose stores start empty."""

    return TestClient(create_app(Settings(seed_sample_data=False)))
