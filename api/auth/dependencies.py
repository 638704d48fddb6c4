"""
Auth dependencies for protected FastAPI routes.
"""

from __future__ import annotations

from fastapi import Depends, Header, Request

from core import errors
from core.config import Settings

from . import schemas, service

MISSING_TOKEN = "Unauthorized: Missing Bearer token"


def _extract_bearer_token(authorization: str | None) -> str:
    raw = (authorization or "").strip()
    parts = raw.split(" ", 1)
    if len(parts) != 2:
        raise errors.AuthenticationError(MISSING_TOKEN)

    scheme, token = parts[0].strip().lower(), parts[1].strip()
    if scheme != "bearer" or not token:
        raise errors.AuthenticationError(MISSING_TOKEN)
    return token


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


async def get_bearer_token(authorization: str | None = Header(default=None)) -> str:
    return _extract_bearer_token(authorization)


async def get_current_admin(
    request: Request,
    access_token: str = Depends(get_bearer_token),
    settings: Settings = Depends(get_settings),
) -> schemas.AdminClaims:
    claims = service.get_admin_from_access_token(access_token, settings)
    request.state.admin = claims
    return claims
