"""
Character business logic.
"""

from __future__ import annotations

import logging

from core.entities import Character
from core.validation import require_non_empty

from . import schemas
from .repository import CharacterRepository

logger = logging.getLogger(__name__)


class CharacterService:
    def __init__(self, repository: CharacterRepository) -> None:
        self._repository = repository

    async def get_all(self) -> list[Character]:
        return await self._repository.get_all()

    async def get_by_id(self, character_id: int) -> Character | None:
        return await self._repository.get_by_id(character_id)

    async def create(self, payload: schemas.CharacterCreate) -> Character:
        # Faction existence is left to the faction_id foreign key.
        require_non_empty(payload.name, "name")
        character = await self._repository.create(payload)
        logger.info("character_created character_id=%s faction_id=%s", character.id, character.faction_id)
        return character

    async def update(self, character_id: int, payload: schemas.CharacterUpdate) -> Character:
        changes = payload.model_dump(exclude_unset=True)
        if "name" in changes:
            require_non_empty(changes["name"], "name")
        if "faction_id" in changes:
            require_non_empty(changes["faction_id"], "faction_id")

        character = await self._repository.update(character_id, changes)
        logger.info("character_updated character_id=%s fields=%s", character_id, ",".join(sorted(changes)))
        return character

    async def delete(self, character_id: int) -> None:
        await self._repository.delete(character_id)
        logger.info("character_deleted character_id=%s", character_id)
