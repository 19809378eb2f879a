"""
Pydantic schemas for client endpoints.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class ClientCreate(BaseModel):
    # Unknown keys are dropped; NOT NULL on `name` is left to the database.
    model_config = ConfigDict(extra="ignore")

    name: str | None = None
    email: str | None = None
    phone: str | None = None


class ClientResponse(BaseModel):
    client_id: int
    name: str
    email: str | None = None
    phone: str | None = None
    created_at: datetime


class ClientCreated(BaseModel):
    message: str
    id: int
