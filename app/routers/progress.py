"""API endpoints for workout completion records."""
from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends

from app.dependencies import get_progress_store
from app.models.schemas import ApiResponse, ProgressRecord
from app.services.resource_store import ProgressStore


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/progress", tags=["progress"])

Progress = Annotated[ProgressStore, Depends(get_progress_store)]


@router.get("", response_model=ApiResponse[list[ProgressRecord]], response_model_exclude_none=True)
async def list_progress(store: Progress):
    """List every progress record."""
    return ApiResponse(success=True, data=store.list_all())


# Registered before "/{progress_id}" so "user" is never read as a record id.
@router.get(
    "/user/{user_id}",
    response_model=ApiResponse[list[ProgressRecord]],
    response_model_exclude_none=True,
)
async def list_progress_for_user(user_id: str, store: Progress):
    """
    List the progress records of one user.

    Args:
        user_id: User profile ID; it does not have to exist

    Returns:
        ApiResponse: Envelope with the matching records, empty when none match
    """
    records = store.list_by_user_id(user_id)
    logger.info("Retrieved progress for user: user_id=%s, records=%d", user_id, len(records))
    return ApiResponse(success=True, data=records)


@router.get("/{progress_id}", response_model=ApiResponse[ProgressRecord], response_model_exclude_none=True)
async def get_progress(progress_id: str, store: Progress):
    return ApiResponse(success=True, data=store.get(progress_id))


@router.post(
    "",
    response_model=ApiResponse[ProgressRecord],
    response_model_exclude_none=True,
    status_code=201,
)
async def create_progress(record: ProgressRecord, store: Progress):
    """
    Record a workout completion.

    ``userId`` and ``workoutId`` are stored as given; they are not checked
    against existing users or workouts.
    """
    created = store.create(record)
    logger.info(
        "Created progress: id=%s, user_id=%s, workout_id=%s",
        created.id,
        created.user_id,
        created.workout_id,
    )
    return ApiResponse(success=True, data=created)


@router.put("/{progress_id}", response_model=ApiResponse[ProgressRecord], response_model_exclude_none=True)
async def update_progress(progress_id: str, record: ProgressRecord, store: Progress):
    """Replace a progress record (full replace, not a partial update)."""
    updated = store.update(progress_id, record)
    logger.info("Updated progress: id=%s", progress_id)
    return ApiResponse(success=True, data=updated)


@router.delete("/{progress_id}", response_model=ApiResponse, response_model_exclude_none=True)
async def delete_progress(progress_id: str, store: Progress):
    """Delete a progress record."""
    store.delete(progress_id)
    logger.info("Deleted progress: id=%s", progress_id)
    return ApiResponse(success=True, message="Progress deleted successfully")
