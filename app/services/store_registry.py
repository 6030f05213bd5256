"""Process-wide set of resource stores backing the API."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field

from app.models.sample_data import SAMPLE_PROGRESS, SAMPLE_USERS, SAMPLE_WORKOUTS
from app.models.schemas import UserProfile, WorkoutPlan
from app.services.resource_store import ProgressStore, ResourceStore


logger = logging.getLogger(__name__)


@dataclass
class StoreRegistry:
    """The three independent stores; each one locks on its own."""

    workouts: ResourceStore[WorkoutPlan] = field(default_factory=lambda: ResourceStore("Workout"))
    users: ResourceStore[UserProfile] = field(default_factory=lambda: ResourceStore("User"))
    progress: ProgressStore = field(default_factory=ProgressStore)

    def load_sample_data(self) -> None:
        """Create the sample entities through the normal create path."""
        for workout in SAMPLE_WORKOUTS:
            self.workouts.create(workout)
        for user in SAMPLE_USERS:
            self.users.create(user)
        for record in SAMPLE_PROGRESS:
            self.progress.create(record)
        logger.info(
            "Loaded sample data: workouts=%d, users=%d, progress=%d",
            len(self.workouts),
            len(self.users),
            len(self.progress),
        )


def build_store_registry(seed: bool = True) -> StoreRegistry:
    """Return a fresh registry, optionally populated with the sample data."""

    registry = StoreRegistry()
    if seed:
        registry.load_sample_data()
    return registry
