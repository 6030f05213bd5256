"""Pydantic models describing API payloads."""
from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


T = TypeVar("T")


class ResourceModel(BaseModel):
    """Base schema for stored entities.

    Decoding is structural only: every field has an empty default, JSON
    types must match exactly (no coercion), and unknown keys are ignored.
    ``id`` is always assigned by the store, whatever the client sends.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore", strict=True)

    id: str = ""


class WorkoutPlan(ResourceModel):
    """Schema for a workout plan."""

    name: str = ""
    description: str = ""
    difficulty: str = ""  # beginner, intermediate, advanced
    exercises: list[str] = Field(default_factory=list)
    duration_minutes: int = Field(
        default=0,
        alias="duration",
        validation_alias=AliasChoices("duration", "durationMinutes"),
    )


class UserProfile(ResourceModel):
    """Schema for a user profile."""

    username: str = ""
    email: str = ""
    level: str = ""  # beginner, intermediate, advanced


class ProgressRecord(ResourceModel):
    """Schema for a workout completion record.

    ``user_id`` and ``workout_id`` are soft references: they are stored as
    given and never checked against the user or workout stores.
    """

    user_id: str = Field(default="", alias="userId", validation_alias=AliasChoices("userId", "user_id"))
    workout_id: str = Field(
        default="",
        alias="workoutId",
        validation_alias=AliasChoices("workoutId", "workout_id"),
    )
    date: str = ""  # ISO calendar date, e.g. 2024-01-15
    duration_minutes: int = Field(
        default=0,
        alias="duration",
        validation_alias=AliasChoices("duration", "durationMinutes"),
    )
    completed: bool = False


class ApiResponse(BaseModel, Generic[T]):
    """Uniform response envelope returned by every resource endpoint."""

    success: bool
    data: T | None = None
    message: str | None = None
