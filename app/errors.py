"""Error types raised by the resource stores and controllers.

Every error carries the HTTP status it maps to and renders the same
``{"success": false, "message": ...}`` envelope the controllers use for
successful responses, so the exception handlers stay trivial.
"""
from __future__ import annotations

from typing import Any


class WorkoutApiError(Exception):
    """Base class for errors surfaced to API clients."""

    http_status: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_response(self) -> dict[str, Any]:
        return {"success": False, "message": self.message}


class ResourceNotFoundError(WorkoutApiError):
    """Raised when an id is absent from the targeted store."""

    http_status = 404

    def __init__(self, kind: str, resource_id: str) -> None:
        super().__init__(f"{kind} not found")
        self.kind = kind
        self.resource_id = resource_id


class InvalidRequestBodyError(WorkoutApiError):
    """Raised when a request payload fails structural decoding."""

    http_status = 400

    def __init__(self, message: str = "Invalid request body") -> None:
        super().__init__(message)
