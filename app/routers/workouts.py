"""API endpoints for workout plan management."""
from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends

from app.dependencies import get_workout_store
from app.models.schemas import ApiResponse, WorkoutPlan
from app.services.resource_store import ResourceStore


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/workouts", tags=["workouts"])

WorkoutStore = Annotated[ResourceStore[WorkoutPlan], Depends(get_workout_store)]


@router.get("", response_model=ApiResponse[list[WorkoutPlan]], response_model_exclude_none=True)
async def list_workouts(store: WorkoutStore):
    """List all workout plans in creation order."""
    return ApiResponse(success=True, data=store.list_all())


@router.get("/{workout_id}", response_model=ApiResponse[WorkoutPlan], response_model_exclude_none=True)
async def get_workout(workout_id: str, store: WorkoutStore):
    """
    Get a single workout plan.

    Args:
        workout_id: Workout plan ID

    Returns:
        ApiResponse: Envelope with the workout, or 404 if it does not exist
    """
    return ApiResponse(success=True, data=store.get(workout_id))


@router.post(
    "",
    response_model=ApiResponse[WorkoutPlan],
    response_model_exclude_none=True,
    status_code=201,
)
async def create_workout(workout: WorkoutPlan, store: WorkoutStore):
    """
    Create a workout plan.

    Any ``id`` in the body is ignored; the server assigns one.
    """
    created = store.create(workout)
    logger.info("Created workout: id=%s, name=%s", created.id, created.name)
    return ApiResponse(success=True, data=created)


@router.put("/{workout_id}", response_model=ApiResponse[WorkoutPlan], response_model_exclude_none=True)
async def update_workout(workout_id: str, workout: WorkoutPlan, store: WorkoutStore):
    """
    Replace a workout plan.

    This is a full replace: send every field, omitted ones are reset to
    their empty defaults.
    """
    updated = store.update(workout_id, workout)
    logger.info("Updated workout: id=%s", workout_id)
    return ApiResponse(success=True, data=updated)


@router.delete("/{workout_id}", response_model=ApiResponse, response_model_exclude_none=True)
async def delete_workout(workout_id: str, store: WorkoutStore):
    """Delete a workout plan."""
    store.delete(workout_id)
    logger.info("Deleted workout: id=%s", workout_id)
    return ApiResponse(success=True, message="Workout deleted successfully")
