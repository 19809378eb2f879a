"""
Client API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from . import schemas, service
from .repository import ClientRepository, get_client_repository

router = APIRouter(prefix="/clients")


@router.get("", response_model=list[schemas.ClientResponse])
async def list_clients(
    repo: ClientRepository = Depends(get_client_repository),
) -> list[schemas.ClientResponse]:
    """
    All clients ordered by creation time, newest first.
    """
    return await service.list_clients(repo)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=schemas.ClientCreated)
async def create_client(
    payload: schemas.ClientCreate,
    repo: ClientRepository = Depends(get_client_repository),
) -> schemas.ClientCreated:
    return await service.create_client(repo, payload)
