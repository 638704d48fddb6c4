"""
Out-of-band admin provisioning.

    DATABASE_URL=... python seed.py --username admin --password '...'
    DATABASE_URL=... ADMIN_PASSWORD=... python seed.py --username admin --apply-schema

There is no HTTP route for creating admins; this is the only way in.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import os
from pathlib import Path

from auth import repository, security
from core import db, errors
from core.log import configure_logging

SCHEMA_PATH = Path(__file__).resolve().parents[1] / "db" / "schema.sql"

logger = logging.getLogger("seed")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Create an admin account.")
    parser.add_argument("--username", required=True)
    parser.add_argument(
        "--password",
        default=os.environ.get("ADMIN_PASSWORD", ""),
        help="defaults to $ADMIN_PASSWORD",
    )
    parser.add_argument(
        "--apply-schema",
        action="store_true",
        help=f"run {SCHEMA_PATH.name} before inserting",
    )
    return parser.parse_args(argv)


async def create_admin(username: str, password: str, *, apply_schema: bool = False) -> dict:
    # Hash first: a rejected password never opens a connection.
    password_hash = security.hash_password(password)
    await db.init_pool(os.environ.get("DATABASE_URL", ""))
    try:
        if apply_schema:
            await db.execute(SCHEMA_PATH.read_text(encoding="utf-8"))
        return await repository.create_admin(username=username, password_hash=password_hash)
    finally:
        await db.close_pool()


def main(argv: list[str] | None = None) -> int:
    configure_logging(os.environ.get("LOG_LEVEL", "INFO"))
    args = parse_args(argv)
    if not args.password:
        logger.error("admin_seed_failed reason=password_missing")
        return 2

    try:
        row = asyncio.run(create_admin(args.username, args.password, apply_schema=args.apply_schema))
    except errors.ConflictError:
        logger.error("admin_seed_failed reason=username_taken username=%s", args.username)
        return 1
    except (security.AuthSecurityError, ValueError) as exc:
        logger.error("admin_seed_failed reason=password_invalid detail=%s", exc)
        return 2

    logger.info("admin_created id=%s username=%s", row["id"], row["username"])
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
