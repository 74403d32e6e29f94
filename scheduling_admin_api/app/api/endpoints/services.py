"""
Service endpoints.

CRUD over the appointment types offered by the caller's business.
A service owned by someone else is reported as not found, the same as
a service that does not exist.
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, status

from scheduling_admin_api.app.core.security import get_current_user
from scheduling_admin_api.app.core.validation import validate_service
from scheduling_admin_api.app.schemas.service import (
    MessageResponse,
    ServiceListResponse,
    ServiceResponse,
)
from scheduling_admin_api.app.services.catalog_service import CatalogService
from scheduling_admin_api.app.services.profile_service import ProfileService

router = APIRouter()


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Service not found")


@router.get("", response_model=ServiceListResponse)
async def list_services(current_user: dict = Depends(get_current_user)) -> ServiceListResponse:
    """List the caller's services, newest first (empty list if none)."""
    services = await CatalogService.list_services(current_user["user_id"])
    return ServiceListResponse(services=services)


@router.post("", response_model=ServiceResponse, status_code=status.HTTP_201_CREATED)
async def create_service(
    body: Any = Body(...),
    current_user: dict = Depends(get_current_user),
) -> ServiceResponse:
    """Create a service.  The caller must have saved a profile first."""
    data = validate_service(body)
    owner_id = current_user["user_id"]
    if not await ProfileService.profile_exists(owner_id):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Set up your profile before adding services",
        )
    service = await CatalogService.create_service(owner_id, data)
    return ServiceResponse(service=service)


@router.get("/{service_id}", response_model=ServiceResponse)
async def get_service(service_id: int, current_user: dict = Depends(get_current_user)) -> ServiceResponse:
    service = await CatalogService.get_service(current_user["user_id"], service_id)
    if service is None:
        raise _not_found()
    return ServiceResponse(service=service)


@router.put("/{service_id}", response_model=ServiceResponse)
async def update_service(
    service_id: int,
    body: Any = Body(...),
    current_user: dict = Depends(get_current_user),
) -> ServiceResponse:
    """Replace name and duration of one of the caller's services."""
    data = validate_service(body)
    service = await CatalogService.update_service(current_user["user_id"], service_id, data)
    if service is None:
        raise _not_found()
    return ServiceResponse(service=service)


@router.delete("/{service_id}", response_model=MessageResponse)
async def delete_service(service_id: int, current_user: dict = Depends(get_current_user)) -> MessageResponse:
    deleted = await CatalogService.delete_service(current_user["user_id"], service_id)
    if not deleted:
        raise _not_found()
    return MessageResponse(message="Service deleted")
