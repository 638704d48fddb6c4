"""
Tracking business logic.

Scope:
- create records with a server-generated tracking number
- lookup / list / substring search
- partial updates that never touch `id` or `trackingNumber`
- delete
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from core import errors

from . import numbers, repository, schemas

logger = logging.getLogger(__name__)

NOT_FOUND = "Tracking not found"
PUBLIC_NOT_FOUND = "Tracking information not found"


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


async def create_tracking(payload: schemas.TrackingCreateRequest) -> dict:
    tracking_number = numbers.generate_tracking_number()
    try:
        row = await repository.create_tracking(
            tracking_number=tracking_number,
            ship_date=payload.ship_date or _utc_now(),
            delivery_date=payload.delivery_date,
            estimated_delivery_date=payload.estimated_delivery_date,
            recipient_name=payload.recipient_name,
            recipient_phone=payload.recipient_phone,
            destination=payload.destination,
            origin=payload.origin,
            status=payload.status,
            service=payload.service,
        )
    except errors.ConflictError:
        # Not retried: the client may simply POST again.
        logger.warning("tracking_number_conflict tracking_number=%s", tracking_number)
        raise

    logger.info("tracking_created tracking_number=%s id=%s", row["tracking_number"], row["id"])
    return row


async def get_tracking(tracking_number: str, *, not_found_message: str = NOT_FOUND) -> dict:
    row = await repository.get_tracking(tracking_number)
    if row is None:
        raise errors.NotFoundError(not_found_message)
    return row


async def list_trackings() -> list[dict]:
    return await repository.list_trackings()


async def search_trackings(query: str) -> list[dict]:
    return await repository.search_trackings(query)


async def update_tracking(tracking_number: str, payload: schemas.TrackingUpdateRequest) -> dict:
    changes = payload.changes()
    row = await repository.update_tracking(tracking_number, changes)
    if row is None:
        raise errors.NotFoundError(NOT_FOUND)

    logger.info(
        "tracking_updated tracking_number=%s fields=%s",
        tracking_number,
        ",".join(sorted(changes)) or "-",
    )
    return row


async def delete_tracking(tracking_number: str) -> dict[str, str]:
    deleted = await repository.delete_tracking(tracking_number)
    if not deleted:
        raise errors.NotFoundError(NOT_FOUND)

    logger.info("tracking_deleted tracking_number=%s", tracking_number)
    return {"message": "Tracking deleted successfully"}
