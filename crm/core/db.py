"""
Async database access helpers (raw SQL) using asyncpg.

`Database` owns one connection pool. `main.py` creates it during the app
lifespan and stores it on `app.state.db`; request handlers receive it through
the `get_database` dependency instead of reaching for a module global.

SQL parameter style:
- asyncpg uses positional placeholders: $1, $2, $3, ...
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any

import asyncpg
from fastapi import Request

DEFAULT_PORT = 5432
DEFAULT_POOL_MIN_SIZE = 1
DEFAULT_POOL_MAX_SIZE = 10
DEFAULT_COMMAND_TIMEOUT = 30.0


def _required_env(name: str) -> str:
    value = os.environ.get(name, "").strip()
    if not value:
        raise RuntimeError(f"{name} is not set.")
    return value


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


@dataclass(frozen=True)
class DatabaseSettings:
    host: str
    user: str
    password: str
    database: str
    port: int = DEFAULT_PORT
    min_size: int = DEFAULT_POOL_MIN_SIZE
    max_size: int = DEFAULT_POOL_MAX_SIZE
    command_timeout: float = DEFAULT_COMMAND_TIMEOUT


def database_settings() -> DatabaseSettings:
    """
    Read connection settings from the environment.

    DB_HOST, DB_USER, DB_PASSWORD and DB_NAME have no defaults.
    """
    min_size = max(_env_int("DB_POOL_MIN_SIZE", DEFAULT_POOL_MIN_SIZE), 1)
    max_size = max(_env_int("DB_POOL_MAX_SIZE", DEFAULT_POOL_MAX_SIZE), 1)
    return DatabaseSettings(
        host=_required_env("DB_HOST"),
        user=_required_env("DB_USER"),
        password=_required_env("DB_PASSWORD"),
        database=_required_env("DB_NAME"),
        port=_env_int("DB_PORT", DEFAULT_PORT),
        min_size=min(min_size, max_size),
        max_size=max_size,
        command_timeout=_env_float("DB_COMMAND_TIMEOUT", DEFAULT_COMMAND_TIMEOUT),
    )


def _record_to_dict(record: asyncpg.Record) -> dict[str, Any]:
    return dict(record)


class Database:
    """
    Thin wrapper over an asyncpg pool.

    Every call borrows one connection for a single statement and hands it
    back right after; there are no multi-statement transactions here.
    """

    def __init__(self, pool: asyncpg.Pool) -> None:
        self._pool = pool

    @classmethod
    async def connect(cls, settings: DatabaseSettings) -> "Database":
        # Bad credentials or an unreachable host must fail here rather than on
        # the first request, whatever min_size the pool was given.
        pool = await asyncpg.create_pool(
            host=settings.host,
            port=settings.port,
            user=settings.user,
            password=settings.password,
            database=settings.database,
            min_size=settings.min_size,
            max_size=settings.max_size,
            command_timeout=settings.command_timeout,
        )
        try:
            await pool.fetchval("SELECT 1")
        except BaseException:
            await pool.close()
            raise
        return cls(pool)

    async def close(self) -> None:
        await self._pool.close()

    async def fetch_one(self, sql: str, *args: Any) -> dict[str, Any] | None:
        """
        Run a query and return a single row as a dict (or None).
        """
        row = await self._pool.fetchrow(sql, *args)
        return _record_to_dict(row) if row is not None else None

    async def fetch_all(self, sql: str, *args: Any) -> list[dict[str, Any]]:
        """
        Run a query and return all rows as a list of dicts.
        """
        rows = await self._pool.fetch(sql, *args)
        return [_record_to_dict(r) for r in rows]

    async def execute(self, sql: str, *args: Any) -> str:
        """
        Run a statement (INSERT/UPDATE/DELETE/DDL) and return its status tag.
        """
        return await self._pool.execute(sql, *args)


def get_database(request: Request) -> Database:
    database = getattr(request.app.state, "db", None)
    if database is None:
        raise RuntimeError("Database is not initialized. It is created on app startup.")
    return database
