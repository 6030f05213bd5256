"""Sample entities loaded at startup so the API is not empty on first run."""
from typing import List

from app.models.schemas import ProgressRecord, UserProfile, WorkoutPlan


SAMPLE_WORKOUTS: List[WorkoutPlan] = [
    WorkoutPlan(
        name="Beginner Full Body",
        description="A complete full-body workout for beginners",
        difficulty="beginner",
        exercises=["Push-ups", "Squats", "Planks", "Lunges"],
        duration_minutes=30,
    ),
    WorkoutPlan(
        name="Intermediate Strength",
        description="Strength-focused workout for intermediate users",
        difficulty="intermediate",
        exercises=["Deadlifts", "Bench Press", "Pull-ups", "Overhead Press"],
        duration_minutes=45,
    ),
    WorkoutPlan(
        name="Advanced HIIT",
        description="High-intensity interval training for advanced users",
        difficulty="advanced",
        exercises=["Burpees", "Mountain Climbers", "Jump Squats", "Push-up Burpees"],
        duration_minutes=60,
    ),
]

SAMPLE_USERS: List[UserProfile] = [
    UserProfile(username="john_doe", email="john@example.com", level="intermediate"),
]

# Ids resolve against the seeded collections above: user "1" completed workout "1".
SAMPLE_PROGRESS: List[ProgressRecord] = [
    ProgressRecord(user_id="1", workout_id="1", date="2024-01-15", duration_minutes=30, completed=True),
]
