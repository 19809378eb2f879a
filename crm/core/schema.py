"""
Schema bootstrap.

Normally the tables are created out-of-band. Setting DB_INIT_SCHEMA=1 makes
the app apply this DDL on startup; every statement is idempotent.
"""

from __future__ import annotations

import logging
import os

from .db import Database

logger = logging.getLogger(__name__)

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS clients (
    client_id   SERIAL PRIMARY KEY,
    name        TEXT NOT NULL,
    email       TEXT UNIQUE,
    phone       TEXT,
    created_at  TIMESTAMPTZ NOT NULL DEFAULT now()
);

CREATE INDEX IF NOT EXISTS clients_created_at_idx
    ON clients (created_at DESC);

CREATE TABLE IF NOT EXISTS contacts (
    contact_id  SERIAL PRIMARY KEY,
    client_id   INTEGER NOT NULL REFERENCES clients (client_id) ON DELETE CASCADE,
    name        TEXT NOT NULL,
    position    TEXT,
    email       TEXT,
    phone       TEXT
);
"""

_TRUTHY = {"1", "true", "yes", "on"}


def schema_bootstrap_enabled() -> bool:
    return os.environ.get("DB_INIT_SCHEMA", "").strip().lower() in _TRUTHY


async def ensure_schema(database: Database) -> None:
    # No bind parameters, so asyncpg sends this through the simple query
    # protocol and several statements can go in one call.
    await database.execute(SCHEMA_SQL)
    logger.info("schema_ready tables=clients,contacts")
