"""API endpoints for user profiles."""
from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends

from app.dependencies import get_user_store
from app.models.schemas import ApiResponse, UserProfile
from app.services.resource_store import ResourceStore


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/users", tags=["users"])

UserStore = Annotated[ResourceStore[UserProfile], Depends(get_user_store)]


@router.get("", response_model=ApiResponse[list[UserProfile]], response_model_exclude_none=True)
async def list_users(store: UserStore):
    """List all user profiles."""
    return ApiResponse(success=True, data=store.list_all())


@router.get("/{user_id}", response_model=ApiResponse[UserProfile], response_model_exclude_none=True)
async def get_user(user_id: str, store: UserStore):
    return ApiResponse(success=True, data=store.get(user_id))


@router.post(
    "",
    response_model=ApiResponse[UserProfile],
    response_model_exclude_none=True,
    status_code=201,
)
async def create_user(user: UserProfile, store: UserStore):
    """Register a user profile; the server assigns the id."""
    created = store.create(user)
    logger.info("Created user: id=%s, username=%s", created.id, created.username)
    return ApiResponse(success=True, data=created)


@router.put("/{user_id}", response_model=ApiResponse[UserProfile], response_model_exclude_none=True)
async def update_user(user_id: str, user: UserProfile, store: UserStore):
    """Replace a user profile (full replace, not a partial update)."""
    updated = store.update(user_id, user)
    logger.info("Updated user: id=%s", user_id)
    return ApiResponse(success=True, data=updated)


@router.delete("/{user_id}", response_model=ApiResponse, response_model_exclude_none=True)
async def delete_user(user_id: str, store: UserStore):
    """
    Delete a user profile.

    Progress records pointing at the user are left untouched.
    """
    store.delete(user_id)
    logger.info("Deleted user: id=%s", user_id)
    return ApiResponse(success=True, message="User deleted successfully")
