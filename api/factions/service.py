"""
Faction business logic.
"""

from __future__ import annotations

import logging

from core.entities import Faction
from core.validation import require_non_empty

from . import schemas
from .repository import FactionRepository

logger = logging.getLogger(__name__)


class FactionService:
    def __init__(self, repository: FactionRepository) -> None:
        self._repository = repository

    async def get_all(self) -> list[Faction]:
        return await self._repository.get_all()

    async def get_by_id(self, faction_id: int) -> Faction | None:
        return await self._repository.get_by_id(faction_id)

    async def create(self, payload: schemas.FactionCreate) -> Faction:
        require_non_empty(payload.name, "name")
        if payload.race_id == 0:
            payload = payload.model_copy(update={"race_id": None})
        faction = await self._repository.create(payload)
        logger.info("faction_created faction_id=%s race_id=%s", faction.id, faction.race_id)
        return faction

    async def update(self, faction_id: int, payload: schemas.FactionUpdate) -> Faction:
        changes = payload.model_dump(exclude_unset=True)
        if "name" in changes:
            require_non_empty(changes["name"], "name")
        # race_id 0 means "no race", same as null.
        if changes.get("race_id") == 0:
            changes["race_id"] = None

        faction = await self._repository.update(faction_id, changes)
        logger.info("faction_updated faction_id=%s fields=%s", faction_id, ",".join(sorted(changes)))
        return faction

    async def delete(self, faction_id: int) -> None:
        await self._repository.delete(faction_id)
        logger.info("faction_deleted faction_id=%s", faction_id)
