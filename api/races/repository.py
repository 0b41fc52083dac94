"""
Race persistence (raw SQL).

Reads return the full subtree: race -> factions -> characters. Each level is
one query regardless of how many rows the level above returned.
"""

from __future__ import annotations

from typing import Any, Protocol

from core.db import Database, assignment_clause
from core.entities import Race
from core.errors import NotFoundError
from factions.repository import fetch_factions_by_race

from .schemas import RaceCreate

RACE_COLUMNS = "id, name, description"
UPDATABLE_COLUMNS = ("name", "description")


class RaceRepository(Protocol):
    async def get_all(self) -> list[Race]: ...
    async def get_by_id(self, race_id: int) -> Race | None: ...
    async def create(self, data: RaceCreate) -> Race: ...
    async def update(self, race_id: int, changes: dict[str, Any]) -> Race: ...
    async def delete(self, race_id: int) -> None: ...


class PostgresRaceRepository:
    def __init__(self, database: Database) -> None:
        self._db = database

    async def _with_factions(self, rows: list[dict[str, Any]]) -> list[Race]:
        factions = await fetch_factions_by_race(self._db, [int(row["id"]) for row in rows])
        return [Race(**row, factions=factions.get(int(row["id"]), [])) for row in rows]

    async def get_all(self) -> list[Race]:
        rows = await self._db.fetch_all(
            f"""
            SELECT {RACE_COLUMNS}
            FROM races
            ORDER BY id
            """
        )
        return await self._with_factions(rows)

    async def get_by_id(self, race_id: int) -> Race | None:
        row = await self._db.fetch_one(
            f"""
            SELECT {RACE_COLUMNS}
            FROM races
            WHERE id = $1
            """,
            race_id,
        )
        if row is None:
            return None
        races = await self._with_factions([row])
        return races[0]

    async def create(self, data: RaceCreate) -> Race:
        row = await self._db.fetch_one(
            f"""
            INSERT INTO races (name, description)
            VALUES ($1, $2)
            RETURNING {RACE_COLUMNS}
            """,
            data.name,
            data.description,
        )
        if row is None:
            raise RuntimeError("Failed to insert race.")
        return Race(**row)

    async def update(self, race_id: int, changes: dict[str, Any]) -> Race:
        fields = {k: v for k, v in changes.items() if k in UPDATABLE_COLUMNS}
        if fields:
            clause, args = assignment_clause(fields)
            row = await self._db.fetch_one(
                f"""
                UPDATE races
                SET {clause}
                WHERE id = $1
                RETURNING id
                """,
                race_id,
                *args,
            )
            if row is None:
                raise NotFoundError("Race", race_id)

        race = await self.get_by_id(race_id)
        if race is None:
            raise NotFoundError("Race", race_id)
        return race

    async def delete(self, race_id: int) -> None:
        # factions.race_id is ON DELETE SET NULL, so owned factions are detached.
        await self._db.execute("DELETE FROM races WHERE id = $1", race_id)
