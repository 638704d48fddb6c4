"""
Admin credential persistence helpers.

Admins are provisioned out of band (see `seed.py`); the HTTP surface only
reads them.
"""

from __future__ import annotations

from core import db


def normalize_username(username: str) -> str:
    return (username or "").strip()


async def get_admin_by_username(username: str) -> dict | None:
    return await db.fetch_one(
        """
        SELECT id, username, password
        FROM admins
        WHERE username = $1
        """,
        normalize_username(username),
    )


async def create_admin(*, username: str, password_hash: str) -> dict:
    row = await db.fetch_one(
        """
        INSERT INTO admins (username, password)
        VALUES ($1, $2)
        RETURNING id, username
        """,
        normalize_username(username),
        password_hash,
    )
    if row is None:
        raise RuntimeError("Failed to create admin.")
    return row
