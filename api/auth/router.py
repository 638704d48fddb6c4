"""
Admin login endpoint.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request

from core import body, errors
from core.config import Settings

from . import dependencies, schemas, service

router = APIRouter(prefix="/admin")


@router.post("/login", response_model=schemas.TokenResponse)
async def login(
    request: Request,
    settings: Settings = Depends(dependencies.get_settings),
) -> schemas.TokenResponse:
    with errors.internal_on_failure("Server error during login", "login_error"):
        payload = await body.parse_body(request, schemas.LoginRequest)
        return await service.login(payload, settings)
