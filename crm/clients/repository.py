"""
Client persistence.
This module is where client-related SQL lives.
"""

from __future__ import annotations

from typing import Any

from fastapi import Depends

from crm.core import db


class ClientRepository:
    def __init__(self, database: db.Database) -> None:
        self._db = database

    async def list_clients(self) -> list[dict[str, Any]]:
        """
        All clients, newest first.
        """
        return await self._db.fetch_all(
            """
            SELECT client_id, name, email, phone, created_at
            FROM clients
            ORDER BY created_at DESC, client_id DESC
            """
        )

    async def create_client(
        self,
        *,
        name: str | None,
        email: str | None = None,
        phone: str | None = None,
    ) -> int:
        """
        Insert one client and return the generated client_id.
        """
        row = await self._db.fetch_one(
            """
            INSERT INTO clients (name, email, phone)
            VALUES ($1, $2, $3)
            RETURNING client_id
            """,
            name,
            email,
            phone,
        )
        if row is None:
            raise RuntimeError("Failed to create client.")
        return int(row["client_id"])


def get_client_repository(database: db.Database = Depends(db.get_database)) -> ClientRepository:
    return ClientRepository(database)
