"""
API error taxonomy.

Store and auth code raise these; the app renders them as
`{"message": ...}` with the matching status code (see `main.py`).
Messages are safe to show to clients. Internal detail goes to the log only.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from fastapi import status

logger = logging.getLogger(__name__)


class ApiError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request body"


class AuthenticationError(ApiError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Unauthorized"


class NotFoundError(ApiError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class ConflictError(ApiError):
    status_code = status.HTTP_409_CONFLICT
    default_message = "Unique field violation"


class InternalError(ApiError):
    pass


@contextmanager
def internal_on_failure(message: str, event: str) -> Iterator[None]:
    """
    Turn any non-API exception raised in the block into InternalError(message).

    The original exception is logged under `event` and chained, never shown.
    """
    try:
        yield
    except ApiError:
        raise
    except Exception as exc:
        logger.exception(event)
        raise InternalError(message) from exc


# Pydantic error types that mean "field absent or empty".
_MISSING_TYPES = {"missing", "string_too_short"}


def _field_name(loc: tuple) -> str:
    parts = [str(part) for part in loc if part != "body"]
    return ".".join(parts) or "body"


def describe_validation_errors(problems: list[dict]) -> str:
    missing = [_field_name(tuple(p.get("loc", ()))) for p in problems if p.get("type") in _MISSING_TYPES]
    if missing and len(missing) == len(problems):
        return "Missing required fields: " + ", ".join(missing)

    details = [f"{_field_name(tuple(p.get('loc', ())))}: {p.get('msg', 'invalid')}" for p in problems]
    return "Invalid request body: " + "; ".join(details)
