"""
Auth business logic.
"""

from __future__ import annotations

import asyncio
import logging

from core import errors
from core.config import Settings

from . import repository, schemas, security

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid username or password"


async def login(payload: schemas.LoginRequest, settings: Settings) -> schemas.TokenResponse:
    admin_row = await repository.get_admin_by_username(payload.username)

    # Same error (and same bcrypt cost) whether the username or the password
    # is wrong.
    password_hash = (
        str(admin_row.get("password") or "")
        if admin_row is not None
        else security.dummy_password_hash()
    )
    is_valid = await asyncio.to_thread(security.verify_password, payload.password, password_hash)
    if admin_row is None or not is_valid:
        logger.info("login_failed username=%s", payload.username)
        raise errors.AuthenticationError(INVALID_CREDENTIALS)

    admin_id = admin_row.get("id")
    if not isinstance(admin_id, int):
        logger.error("login_admin_id_missing username=%s", payload.username)
        raise errors.InternalError("Server configuration error: User ID missing.")

    token = security.build_access_token(
        settings,
        admin_id=admin_id,
        username=str(admin_row["username"]),
    )
    logger.info("login_ok admin_id=%s", admin_id)
    return schemas.TokenResponse(token=token)


def get_admin_from_access_token(access_token: str, settings: Settings) -> schemas.AdminClaims:
    """
    Verify a bearer token and return its claims.

    Verification is stateless: signature and expiry only, no DB lookup.
    """
    try:
        payload = security.decode_access_token(settings, access_token)
    except security.AuthSecurityError as exc:
        logger.info("token_rejected reason=%s", exc)
        raise errors.AuthenticationError("Unauthorized: Invalid token") from exc

    subject = str(payload.get("sub") or "").strip()
    if not subject.isdigit():
        raise errors.AuthenticationError("Unauthorized: Invalid token")

    return schemas.AdminClaims(id=int(subject), username=str(payload.get("username") or ""))
