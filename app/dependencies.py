"""FastAPI dependencies resolving the settings and stores owned by the running app."""
from __future__ import annotations

from fastapi import Request

from app.config import Settings
from app.models.schemas import UserProfile, WorkoutPlan
from app.services.resource_store import ProgressStore, ResourceStore
from app.services.store_registry import StoreRegistry


def get_app_settings(request: Request) -> Settings:
    """Settings the running app was built with, not the cached environment ones."""
    return request.app.state.settings


def get_stores(request: Request) -> StoreRegistry:
    return request.app.state.stores


def get_workout_store(request: Request) -> ResourceStore[WorkoutPlan]:
    return get_stores(request).workouts


def get_user_store(request: Request) -> ResourceStore[UserProfile]:
    return get_stores(request).users


def get_progress_store(request: Request) -> ProgressStore:
    return get_stores(request).progress
