"""
Freaky Fit API - User Routes.

Endpoints for the caller's own profile.
"""

from fastapi import APIRouter, Depends

from app.crud import UserRepository
from app.dependencies import get_current_user, get_user_repository
from app.models.mongodb import UserDocument
from app.schemas.user import UserPublic, ProfileUpdate


router = APIRouter()


@router.get("/profile")
async def get_profile(user: UserDocument = Depends(get_current_user)) -> dict:
    """
    Get current user's profile.

    Returns:
        dict: Public user record (no credentials).
    """
    return UserPublic.from_user(user).to_json()


@router.patch("/profile")
async def update_profile(
    payload: ProfileUpdate,
    user: UserDocument = Depends(get_current_user),
    users: UserRepository = Depends(get_user_repository),
) -> dict:
    """
    Update current user's profile.

    Only provided fields are updated (partial update).
    """
    changes = payload.model_dump(exclude_none=True)
    if changes:
        user = await users.update_fields(user, **changes)
    return UserPublic.from_user(user).to_json()
