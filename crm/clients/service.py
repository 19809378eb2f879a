"""
Client business logic.

Database errors never reach the response body. They are logged here with the
original exception and turned into an HTTPException carrying a fixed message.

CLIENT_ERROR_MODE controls how much the status code tells the caller:
- generic (default): every failure is a 500
- strict: duplicate email -> 409, missing name -> 400, anything else -> 500
"""

from __future__ import annotations

import logging
import os

import asyncpg
from fastapi import HTTPException, status

from crm.core.errors import ERROR_MESSAGE

from . import schemas
from .repository import ClientRepository

CREATED_MESSAGE = "Cliente creado"
DUPLICATE_EMAIL_MESSAGE = "El email ya está registrado"
MISSING_NAME_MESSAGE = "El nombre es obligatorio"

ERROR_MODE_GENERIC = "generic"
ERROR_MODE_STRICT = "strict"

logger = logging.getLogger(__name__)


def error_mode() -> str:
    mode = os.environ.get("CLIENT_ERROR_MODE", ERROR_MODE_GENERIC).strip().lower()
    if mode not in (ERROR_MODE_GENERIC, ERROR_MODE_STRICT):
        return ERROR_MODE_GENERIC
    return mode


def _internal_error() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=ERROR_MESSAGE,
    )


def _create_error(exc: Exception) -> HTTPException:
    if error_mode() == ERROR_MODE_STRICT:
        if isinstance(exc, asyncpg.UniqueViolationError):
            return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=DUPLICATE_EMAIL_MESSAGE)
        if isinstance(exc, asyncpg.NotNullViolationError):
            return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=MISSING_NAME_MESSAGE)
    return _internal_error()


def _to_client_response(row: dict) -> schemas.ClientResponse:
    return schemas.ClientResponse(
        client_id=int(row["client_id"]),
        name=row["name"],
        email=row.get("email"),
        phone=row.get("phone"),
        created_at=row["created_at"],
    )


async def list_clients(repo: ClientRepository) -> list[schemas.ClientResponse]:
    try:
        rows = await repo.list_clients()
    except Exception as exc:
        logger.exception("list_clients_failed")
        raise _internal_error() from exc
    return [_to_client_response(row) for row in rows]


async def create_client(
    repo: ClientRepository,
    payload: schemas.ClientCreate,
) -> schemas.ClientCreated:
    try:
        client_id = await repo.create_client(
            name=payload.name,
            email=payload.email,
            phone=payload.phone,
        )
    except Exception as exc:
        logger.exception("create_client_failed")
        raise _create_error(exc) from exc

    logger.info("client_created client_id=%s", client_id)
    return schemas.ClientCreated(message=CREATED_MESSAGE, id=client_id)
