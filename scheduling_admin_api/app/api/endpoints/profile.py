"""
Profile endpoints.

The caller reads and saves their own business profile.  There is no
way to address another identity's profile: the owner is always the
``sub`` of the bearer token.
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, status

from scheduling_admin_api.app.core.security import get_current_user
from scheduling_admin_api.app.core.validation import validate_profile
from scheduling_admin_api.app.schemas.profile import ProfileResponse
from scheduling_admin_api.app.services.profile_service import ProfileService

router = APIRouter()


@router.get("", response_model=ProfileResponse)
async def get_profile(current_user: dict = Depends(get_current_user)) -> ProfileResponse:
    """Return the caller's profile, or 404 if it has not been saved yet."""
    profile = await ProfileService.get_profile(current_user["user_id"])
    if profile is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Profile not found")
    return ProfileResponse(profile=profile)


@router.put("", response_model=ProfileResponse)
async def save_profile(
    body: Any = Body(...),
    current_user: dict = Depends(get_current_user),
) -> ProfileResponse:
    """Create the caller's profile on first save, update it afterwards.

    The body is ``{"business_name": "..."}``; the name is trimmed and
    must be 2–100 characters long.
    """
    data = validate_profile(body)
    profile = await ProfileService.save_profile(current_user["user_id"], data)
    return ProfileResponse(profile=profile)
