"""
Race API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status

from core.dependencies import EntityId
from core.entities import Race
from core.errors import NotFoundError

from . import schemas
from .dependencies import get_race_service
from .service import RaceService

router = APIRouter()


@router.get("/races")
async def list_races(
    service: RaceService = Depends(get_race_service),
) -> list[Race]:
    """
    All races with their factions and each faction's characters.
    """
    return await service.get_all()


@router.get("/races/{race_id}")
async def get_race(
    race_id: EntityId,
    service: RaceService = Depends(get_race_service),
) -> Race:
    race = await service.get_by_id(race_id)
    if race is None:
        raise NotFoundError("Race", race_id)
    return race


@router.post("/races", status_code=status.HTTP_201_CREATED)
async def create_race(
    request: schemas.RaceCreate,
    service: RaceService = Depends(get_race_service),
) -> Race:
    return await service.create(request)


@router.put("/races/{race_id}")
async def update_race(
    race_id: EntityId,
    request: schemas.RaceUpdate,
    service: RaceService = Depends(get_race_service),
) -> Race:
    # Any "id" in the body is ignored; the path decides which row changes.
    return await service.update(race_id, request)


@router.delete(
    "/races/{race_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def delete_race(
    race_id: EntityId,
    service: RaceService = Depends(get_race_service),
) -> Response:
    await service.delete(race_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
