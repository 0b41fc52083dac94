"""
Character API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status

from core.dependencies import EntityId
from core.entities import Character
from core.errors import NotFoundError

from . import schemas
from .dependencies import get_character_service
from .service import CharacterService

router = APIRouter()


@router.get("/characters")
async def list_characters(
    service: CharacterService = Depends(get_character_service),
) -> list[Character]:
    return await service.get_all()


@router.get("/characters/{character_id}")
async def get_character(
    character_id: EntityId,
    service: CharacterService = Depends(get_character_service),
) -> Character:
    character = await service.get_by_id(character_id)
    if character is None:
        raise NotFoundError("Character", character_id)
    return character


@router.post("/characters", status_code=status.HTTP_201_CREATED)
async def create_character(
    request: schemas.CharacterCreate,
    service: CharacterService = Depends(get_character_service),
) -> Character:
    return await service.create(request)


@router.put("/characters/{character_id}")
async def update_character(
    character_id: EntityId,
    request: schemas.CharacterUpdate,
    service: CharacterService = Depends(get_character_service),
) -> Character:
    return await service.update(character_id, request)


@router.delete(
    "/characters/{character_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def delete_character(
    character_id: EntityId,
    service: CharacterService = Depends(get_character_service),
) -> Response:
    await service.delete(character_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
