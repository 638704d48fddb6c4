"""
Process configuration.

Settings are read from the environment once, at startup, and then passed
around explicitly (`app.state.settings`).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field


class ConfigError(RuntimeError):
    pass


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_list(name: str, default: list[str]) -> list[str]:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    return [item.strip() for item in raw.split(",") if item.strip()]


@dataclass(frozen=True)
class Settings:
    jwt_secret: str
    jwt_algorithm: str = "HS256"
    access_token_expire_minutes: int = 60
    database_url: str = ""
    port: int = 3000
    cors_origins: list[str] = field(default_factory=lambda: ["*"])
    cors_origin_regex: str | None = None
    log_level: str = "INFO"


def load_settings() -> Settings:
    """
    Build settings from the process environment.

    Raises ConfigError when JWT_SECRET is missing so a misconfigured process
    dies on boot instead of on the first login.
    """
    secret = os.environ.get("JWT_SECRET", "").strip()
    if not secret:
        raise ConfigError("JWT_SECRET is not set.")

    return Settings(
        jwt_secret=secret,
        jwt_algorithm=os.environ.get("JWT_ALG", "HS256").strip() or "HS256",
        access_token_expire_minutes=_env_int("ACCESS_TOKEN_EXPIRE_MIN", 60),
        database_url=os.environ.get("DATABASE_URL", "").strip(),
        port=_env_int("PORT", 3000),
        cors_origins=_env_list("CORS_ORIGINS", ["*"]),
        cors_origin_regex=os.environ.get("CORS_ORIGIN_REGEX", "").strip() or None,
        log_level=os.environ.get("LOG_LEVEL", "INFO").strip().upper() or "INFO",
    )
