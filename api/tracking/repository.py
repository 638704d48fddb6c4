"""
Tracking record persistence (raw SQL).
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from core import db, errors

TRACKING_COLUMNS = """
    id, tracking_number, ship_date, delivery_date, estimated_delivery_date,
    recipient_name, recipient_phone, destination, origin, status, service
"""

TRACKING_CONFLICT = "Tracking number conflict or other unique field violation."

# `id` and `tracking_number` are immutable.
UPDATABLE_COLUMNS = frozenset(
    {
        "ship_date",
        "delivery_date",
        "estimated_delivery_date",
        "recipient_name",
        "recipient_phone",
        "destination",
        "origin",
        "status",
        "service",
    }
)


async def create_tracking(
    *,
    tracking_number: str,
    ship_date: datetime,
    delivery_date: datetime | None,
    estimated_delivery_date: datetime | None,
    recipient_name: str,
    recipient_phone: str,
    destination: str,
    origin: str,
    status: str,
    service: str,
) -> dict:
    """
    Insert a record. Raises ConflictError if the tracking number is taken.
    """
    try:
        row = await db.fetch_one(
            f"""
            INSERT INTO trackings (
                tracking_number, ship_date, delivery_date, estimated_delivery_date,
                recipient_name, recipient_phone, destination, origin, status, service
            )
            VALUES ($1, $2, $3, $4, $5, $6, $7, $8, $9, $10)
            RETURNING {TRACKING_COLUMNS}
            """,
            tracking_number,
            ship_date,
            delivery_date,
            estimated_delivery_date,
            recipient_name,
            recipient_phone,
            destination,
            origin,
            status,
            service,
        )
    except errors.ConflictError as exc:
        raise errors.ConflictError(TRACKING_CONFLICT) from exc
    if row is None:
        raise RuntimeError("Failed to create tracking.")
    return row


async def get_tracking(tracking_number: str) -> dict | None:
    return await db.fetch_one(
        f"""
        SELECT {TRACKING_COLUMNS}
        FROM trackings
        WHERE tracking_number = $1
        """,
        tracking_number,
    )


async def list_trackings() -> list[dict]:
    return await db.fetch_all(
        f"""
        SELECT {TRACKING_COLUMNS}
        FROM trackings
        ORDER BY id ASC
        """
    )


async def search_trackings(fragment: str) -> list[dict]:
    """
    Case-sensitive substring match on tracking number.

    strpos() treats `%` and `_` literally, unlike LIKE.
    """
    return await db.fetch_all(
        f"""
        SELECT {TRACKING_COLUMNS}
        FROM trackings
        WHERE strpos(tracking_number, $1) > 0
        ORDER BY id ASC
        """,
        fragment,
    )


async def update_tracking(tracking_number: str, changes: dict[str, Any]) -> dict | None:
    columns = [name for name in changes if name in UPDATABLE_COLUMNS]
    if not columns:
        return await get_tracking(tracking_number)

    # Column names come from the whitelist above, values are bound params.
    assignments = ", ".join(f"{name} = ${index}" for index, name in enumerate(columns, start=2))
    return await db.fetch_one(
        f"""
        UPDATE trackings
        SET {assignments}
        WHERE tracking_number = $1
        RETURNING {TRACKING_COLUMNS}
        """,
        tracking_number,
        *(changes[name] for name in columns),
    )


async def delete_tracking(tracking_number: str) -> bool:
    row = await db.fetch_one(
        """
        DELETE FROM trackings
        WHERE tracking_number = $1
        RETURNING id
        """,
        tracking_number,
    )
    return row is not None
