"""Generic in-memory storage shared by workouts, users and progress records."""
from __future__ import annotations

import logging
import threading
from typing import Generic, TypeVar

from app.errors import ResourceNotFoundError
from app.models.schemas import ProgressRecord, ResourceModel
from app.services.id_generator import SequentialIdGenerator


logger = logging.getLogger(__name__)

T = TypeVar("T", bound=ResourceModel)


class ResourceStore(Generic[T]):
    """
    Ordered, thread-safe collection of entities keyed by a store-assigned id.

    Every operation, reads included, holds the store lock, so writers never
    interleave with each other or with a listing. Entities are copied on the
    way in and on the way out; callers never see the stored objects.

    Args:
        kind: Human readable entity name used in error messages ("Workout").
        id_generator: Source of new ids, defaults to a per-store counter.
    """

    def __init__(self, kind: str, id_generator: SequentialIdGenerator | None = None) -> None:
        self.kind = kind
        self._ids = id_generator or SequentialIdGenerator()
        # dicts keep insertion order; reassigning an existing key keeps its slot.
        self._items: dict[str, T] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def list_all(self) -> list[T]:
        """Return every entry in insertion order."""
        with self._lock:
            return [item.model_copy(deep=True) for item in self._items.values()]

    def get(self, resource_id: str) -> T:
        """
        Look up one entry.

        Raises:
            ResourceNotFoundError: if no entry has ``resource_id``.
        """
        with self._lock:
            item = self._items.get(resource_id)
            if item is None:
                raise ResourceNotFoundError(self.kind, resource_id)
            return item.model_copy(deep=True)

    def create(self, entity: T) -> T:
        """Store ``entity`` under a fresh id, ignoring any id it already has."""
        with self._lock:
            resource_id = self._ids.next_id()
            stored = entity.model_copy(update={"id": resource_id}, deep=True)
            self._items[resource_id] = stored
            logger.debug("Created %s id=%s (total=%d)", self.kind, resource_id, len(self._items))
            return stored.model_copy(deep=True)

    def update(self, resource_id: str, replacement: T) -> T:
        """
        Replace the whole entry stored under ``resource_id``.

        This is a full replace, not a merge: fields missing from
        ``replacement`` are not carried over from the old entry.

        Raises:
            ResourceNotFoundError: if no entry has ``resource_id``; nothing changes.
        """
        with self._lock:
            if resource_id not in self._items:
                raise ResourceNotFoundError(self.kind, resource_id)
            stored = replacement.model_copy(update={"id": resource_id}, deep=True)
            self._items[resource_id] = stored
            logger.debug("Replaced %s id=%s", self.kind, resource_id)
            return stored.model_copy(deep=True)

    def delete(self, resource_id: str) -> None:
        """
        Remove an entry, keeping the relative order of the rest.

        Raises:
            ResourceNotFoundError: if no entry has ``resource_id``.
        """
        with self._lock:
            if self._items.pop(resource_id, None) is None:
                raise ResourceNotFoundError(self.kind, resource_id)
            logger.debug("Deleted %s id=%s (total=%d)", self.kind, resource_id, len(self._items))


class ProgressStore(ResourceStore[ProgressRecord]):
    """Progress record store with the per-user listing query."""

    def __init__(self, id_generator: SequentialIdGenerator | None = None) -> None:
        super().__init__("Progress", id_generator)

    def list_by_user_id(self, user_id: str) -> list[ProgressRecord]:
        """Return the records owned by ``user_id`` in insertion order (possibly none)."""
        with self._lock:
            return [
                record.model_copy(deep=True)
                for record in self._items.values()
                if record.user_id == user_id
            ]
