"""Identifier generation for the in-memory resource stores."""
from __future__ import annotations

import itertools
import threading


class SequentialIdGenerator:
    """Hand out ``"1"``, ``"2"``, ... for one collection.

    Values come from a counter that only moves forward, so an id is never
    issued twice even after entries are deleted from the collection.
    """

    def __init__(self, start: int = 1) -> None:
        self._counter = itertools.count(start)
        self._lock = threading.Lock()

    def next_id(self) -> str:
        with self._lock:
            return str(next(self._counter))
