"""Tests for the admin provisioning command."""

from unittest.mock import AsyncMock

import seed
from core import errors


def test_password_defaults_to_env(monkeypatch):
    monkeypatch.setenv("ADMIN_PASSWORD", "from-env")

    args = seed.parse_args(["--username", "ops"])

    assert args.username == "ops"
    assert args.password == "from-env"
    assert args.apply_schema is False


def test_missing_password_exits_2(monkeypatch):
    monkeypatch.delenv("ADMIN_PASSWORD", raising=False)
    create = AsyncMock()
    monkeypatch.setattr(seed, "create_admin", create)

    assert seed.main(["--username", "ops"]) == 2
    create.assert_not_called()


def test_creates_admin(monkeypatch):
    create = AsyncMock(return_value={"id": 5, "username": "ops"})
    monkeypatch.setattr(seed, "create_admin", create)

    assert seed.main(["--username", "ops", "--password", "pw", "--apply-schema"]) == 0
    create.assert_awaited_once_with("ops", "pw", apply_schema=True)


def test_taken_username_exits_1(monkeypatch):
    monkeypatch.setattr(seed, "create_admin", AsyncMock(side_effect=errors.ConflictError()))

    assert seed.main(["--username", "ops", "--password", "pw"]) == 1


def test_schema_file_ships_both_tables():
    sql = seed.SCHEMA_PATH.read_text(encoding="utf-8")

    assert "CREATE TABLE IF NOT EXISTS admins" in sql
    assert "CREATE TABLE IF NOT EXISTS trackings" in sql


def test_overlong_password_exits_2_without_connecting(monkeypatch):
    init_pool = AsyncMock()
    monkeypatch.setattr(seed.db, "init_pool", init_pool)

    assert seed.main(["--username", "ops", "--password", "x" * 73]) == 2
    init_pool.assert_not_called()


def test_hashing_value_error_exits_2(monkeypatch):
    monkeypatch.setattr(seed, "create_admin", AsyncMock(side_effect=ValueError("password too long")))

    assert seed.main(["--username", "ops", "--password", "pw"]) == 2
