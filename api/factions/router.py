"""
Faction API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status

from core.dependencies import EntityId
from core.entities import Faction
from core.errors import NotFoundError

from . import schemas
from .dependencies import get_faction_service
from .service import FactionService

router = APIRouter()


@router.get("/factions")
async def list_factions(
    service: FactionService = Depends(get_faction_service),
) -> list[Faction]:
    """
    All factions, each with its characters.
    """
    return await service.get_all()


@router.get("/factions/{faction_id}")
async def get_faction(
    faction_id: EntityId,
    service: FactionService = Depends(get_faction_service),
) -> Faction:
    faction = await service.get_by_id(faction_id)
    if faction is None:
        raise NotFoundError("Faction", faction_id)
    return faction


@router.post("/factions", status_code=status.HTTP_201_CREATED)
async def create_faction(
    request: schemas.FactionCreate,
    service: FactionService = Depends(get_faction_service),
) -> Faction:
    return await service.create(request)


@router.put("/factions/{faction_id}")
async def update_faction(
    faction_id: EntityId,
    request: schemas.FactionUpdate,
    service: FactionService = Depends(get_faction_service),
) -> Faction:
    return await service.update(faction_id, request)


@router.delete(
    "/factions/{faction_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def delete_faction(
    faction_id: EntityId,
    service: FactionService = Depends(get_faction_service),
) -> Response:
    await service.delete(faction_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
