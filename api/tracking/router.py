"""
Tracking API endpoints.

- `public_router`: unauthenticated lookup by tracking number
- `admin_router`: CRUD + search, every route behind a bearer token
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request, status

from auth import dependencies as auth_dependencies
from core import body, errors

from . import schemas, service

public_router = APIRouter()

admin_router = APIRouter(
    prefix="/admin/tracking",
    dependencies=[Depends(auth_dependencies.get_current_admin)],
)


@public_router.get("/{tracking_number}", response_model=schemas.TrackingResponse)
async def public_lookup(tracking_number: str) -> dict:
    with errors.internal_on_failure("Server error", "public_lookup_error"):
        return await service.get_tracking(
            tracking_number,
            not_found_message=service.PUBLIC_NOT_FOUND,
        )


@admin_router.post(
    "",
    response_model=schemas.TrackingResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_tracking(request: Request) -> dict:
    with errors.internal_on_failure("Server error creating tracking", "create_tracking_error"):
        payload = await body.parse_body(request, schemas.TrackingCreateRequest)
        return await service.create_tracking(payload)


@admin_router.get("", response_model=list[schemas.TrackingResponse])
async def list_trackings() -> list[dict]:
    with errors.internal_on_failure("Server error retrieving trackings", "list_trackings_error"):
        return await service.list_trackings()


@admin_router.get("/search/{query}", response_model=list[schemas.TrackingResponse])
async def search_trackings(query: str) -> list[dict]:
    with errors.internal_on_failure("Server error searching trackings", "search_trackings_error"):
        return await service.search_trackings(query)


@admin_router.get("/{tracking_number}", response_model=schemas.TrackingResponse)
async def get_tracking(tracking_number: str) -> dict:
    with errors.internal_on_failure("Server error retrieving tracking", "get_tracking_error"):
        return await service.get_tracking(tracking_number)


@admin_router.put("/{tracking_number}", response_model=schemas.TrackingResponse)
async def update_tracking(tracking_number: str, request: Request) -> dict:
    with errors.internal_on_failure("Server error updating tracking", "update_tracking_error"):
        payload = await body.parse_body(request, schemas.TrackingUpdateRequest)
        return await service.update_tracking(tracking_number, payload)


@admin_router.delete("/{tracking_number}")
async def delete_tracking(tracking_number: str) -> dict:
    with errors.internal_on_failure("Server error deleting tracking", "delete_tracking_error"):
        return await service.delete_tracking(tracking_number)
