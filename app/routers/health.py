"""Router exposing the liveness probe."""
from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends

from app.config import Settings
from app.dependencies import get_app_settings


router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check(settings: Annotated[Settings, Depends(get_app_settings)]) -> dict[str, str]:
    """Simple health probe for liveness checks."""
    return {"status": "ok", "message": f"{settings.app_name} is running"}
