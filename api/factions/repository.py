"""
Faction persistence (raw SQL).

Reads preload each faction's characters with one extra query per call.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol

from characters.repository import fetch_characters_by_faction
from core.db import Database, assignment_clause
from core.entities import Faction
from core.errors import NotFoundError

from .schemas import FactionCreate

FACTION_COLUMNS = "id, name, description, race_id"
UPDATABLE_COLUMNS = ("name", "description", "race_id")


class FactionRepository(Protocol):
    async def get_all(self) -> list[Faction]: ...
    async def get_by_id(self, faction_id: int) -> Faction | None: ...
    async def create(self, data: FactionCreate) -> Faction: ...
    async def update(self, faction_id: int, changes: dict[str, Any]) -> Faction: ...
    async def delete(self, faction_id: int) -> None: ...


async def _with_characters(database: Database, rows: list[dict[str, Any]]) -> list[Faction]:
    characters = await fetch_characters_by_faction(database, [int(row["id"]) for row in rows])
    return [Faction(**row, characters=characters.get(int(row["id"]), [])) for row in rows]


async def fetch_factions_by_race(
    database: Database,
    race_ids: Sequence[int],
) -> dict[int, list[Faction]]:
    """
    Load factions (with characters) for many races, grouped by race id.
    """
    if not race_ids:
        return {}

    rows = await database.fetch_all(
        f"""
        SELECT {FACTION_COLUMNS}
        FROM factions
        WHERE race_id = ANY($1::bigint[])
        ORDER BY id
        """,
        list(race_ids),
    )
    grouped: dict[int, list[Faction]] = {}
    for faction in await _with_characters(database, rows):
        if faction.race_id is not None:
            grouped.setdefault(faction.race_id, []).append(faction)
    return grouped


class PostgresFactionRepository:
    def __init__(self, database: Database) -> None:
        self._db = database

    async def get_all(self) -> list[Faction]:
        rows = await self._db.fetch_all(
            f"""
            SELECT {FACTION_COLUMNS}
            FROM factions
            ORDER BY id
            """
        )
        return await _with_characters(self._db, rows)

    async def get_by_id(self, faction_id: int) -> Faction | None:
        row = await self._db.fetch_one(
            f"""
            SELECT {FACTION_COLUMNS}
            FROM factions
            WHERE id = $1
            """,
            faction_id,
        )
        if row is None:
            return None
        factions = await _with_characters(self._db, [row])
        return factions[0]

    async def create(self, data: FactionCreate) -> Faction:
        row = await self._db.fetch_one(
            f"""
            INSERT INTO factions (name, description, race_id)
            VALUES ($1, $2, $3)
            RETURNING {FACTION_COLUMNS}
            """,
            data.name,
            data.description,
            data.race_id,
        )
        if row is None:
            raise RuntimeError("Failed to insert faction.")
        return Faction(**row)

    async def update(self, faction_id: int, changes: dict[str, Any]) -> Faction:
        fields = {k: v for k, v in changes.items() if k in UPDATABLE_COLUMNS}
        if fields:
            clause, args = assignment_clause(fields)
            row = await self._db.fetch_one(
                f"""
                UPDATE factions
                SET {clause}
                WHERE id = $1
                RETURNING id
                """,
                faction_id,
                *args,
            )
            if row is None:
                raise NotFoundError("Faction", faction_id)

        faction = await self.get_by_id(faction_id)
        if faction is None:
            raise NotFoundError("Faction", faction_id)
        return faction

    async def delete(self, faction_id: int) -> None:
        # Fails with a constraint violation while characters still reference it.
        await self._db.execute("DELETE FROM factions WHERE id = $1", faction_id)
