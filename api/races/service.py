"""
Race business logic.

Validation is limited to required fields; uniqueness of `name` is enforced by
the database and surfaces as a constraint violation.
"""

from __future__ import annotations

import logging

from core.entities import Race
from core.validation import require_non_empty

from . import schemas
from .repository import RaceRepository

logger = logging.getLogger(__name__)


class RaceService:
    def __init__(self, repository: RaceRepository) -> None:
        self._repository = repository

    async def get_all(self) -> list[Race]:
        return await self._repository.get_all()

    async def get_by_id(self, race_id: int) -> Race | None:
        return await self._repository.get_by_id(race_id)

    async def create(self, payload: schemas.RaceCreate) -> Race:
        require_non_empty(payload.name, "name")
        race = await self._repository.create(payload)
        logger.info("race_created race_id=%s", race.id)
        return race

    async def update(self, race_id: int, payload: schemas.RaceUpdate) -> Race:
        changes = payload.model_dump(exclude_unset=True)
        if "name" in changes:
            require_non_empty(changes["name"], "name")

        race = await self._repository.update(race_id, changes)
        logger.info("race_updated race_id=%s fields=%s", race_id, ",".join(sorted(changes)))
        return race

    async def delete(self, race_id: int) -> None:
        await self._repository.delete(race_id)
        logger.info("race_deleted race_id=%s", race_id)
