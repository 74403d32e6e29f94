"""
Availability endpoints.

The weekly schedule is read and written as a whole.  ``PUT`` replaces
every window of the caller's profile with the submitted list; there is
no endpoint for patching a single window.
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, status

from scheduling_admin_api.app.core.security import get_current_user
from scheduling_admin_api.app.core.validation import validate_availability_body
from scheduling_admin_api.app.schemas.availability import AvailabilityListResponse
from scheduling_admin_api.app.services.availability_service import AvailabilityService
from scheduling_admin_api.app.services.profile_service import ProfileService

router = APIRouter()


def _profile_not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Profile not found")


@router.get("", response_model=AvailabilityListResponse)
async def list_availability(current_user: dict = Depends(get_current_user)) -> AvailabilityListResponse:
    """Return the caller's windows ordered by ``day_of_week``."""
    owner_id = current_user["user_id"]
    if not await ProfileService.profile_exists(owner_id):
        raise _profile_not_found()
    items = await AvailabilityService.list_availabilities(owner_id)
    return AvailabilityListResponse(availabilities=items)


@router.put("", response_model=AvailabilityListResponse)
async def replace_availability(
    body: Any = Body(...),
    current_user: dict = Depends(get_current_user),
) -> AvailabilityListResponse:
    """Replace the caller's weekly schedule.

    The body is ``{"availabilities": [{"day_of_week", "start_time",
    "end_time"}, ...]}``.  Issues are reported per entry, e.g.
    ``availabilities.1.end_time``.
    """
    items = validate_availability_body(body)
    owner_id = current_user["user_id"]
    if not await ProfileService.profile_exists(owner_id):
        raise _profile_not_found()
    stored = await AvailabilityService.replace_availabilities(owner_id, items)
    return AvailabilityListResponse(availabilities=stored)
