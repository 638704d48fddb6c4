"""
Health report for `GET /health`.
"""

from __future__ import annotations

import os
import time
from typing import Any

import psutil

from . import db
from .config import Settings

_STARTED_AT = time.monotonic()


def uptime_s() -> float:
    return round(time.monotonic() - _STARTED_AT, 3)


def memory_usage() -> dict[str, int]:
    info = psutil.Process(os.getpid()).memory_info()
    return {"rss_bytes": int(info.rss), "vms_bytes": int(info.vms)}


async def report(settings: Settings) -> tuple[bool, dict[str, Any]]:
    """
    Return (healthy, body). Healthy means the database answered `SELECT 1`.
    """
    database_ok = await db.ping()
    body = {
        "status": "ok" if database_ok else "degraded",
        "env": {
            "JWT_SECRET": bool(settings.jwt_secret),
            "DATABASE_URL": bool(settings.database_url),
        },
        "database": {"ok": database_ok},
        "uptime_s": uptime_s(),
        "memory": memory_usage(),
    }
    return database_ok, body
