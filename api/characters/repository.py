"""
Character persistence (raw SQL).
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol

from core.db import Database, assignment_clause
from core.entities import Character
from core.errors import NotFoundError

from .schemas import CharacterCreate

CHARACTER_COLUMNS = "id, name, description, rank, faction_id"
UPDATABLE_COLUMNS = ("name", "description", "rank", "faction_id")


class CharacterRepository(Protocol):
    async def get_all(self) -> list[Character]: ...
    async def get_by_id(self, character_id: int) -> Character | None: ...
    async def create(self, data: CharacterCreate) -> Character: ...
    async def update(self, character_id: int, changes: dict[str, Any]) -> Character: ...
    async def delete(self, character_id: int) -> None: ...


async def fetch_characters_by_faction(
    database: Database,
    faction_ids: Sequence[int],
) -> dict[int, list[Character]]:
    """
    Load characters for many factions in one query, grouped by faction id.
    """
    if not faction_ids:
        return {}

    rows = await database.fetch_all(
        f"""
        SELECT {CHARACTER_COLUMNS}
        FROM characters
        WHERE faction_id = ANY($1::bigint[])
        ORDER BY id
        """,
        list(faction_ids),
    )
    grouped: dict[int, list[Character]] = {}
    for row in rows:
        grouped.setdefault(int(row["faction_id"]), []).append(Character(**row))
    return grouped


class PostgresCharacterRepository:
    def __init__(self, database: Database) -> None:
        self._db = database

    async def get_all(self) -> list[Character]:
        rows = await self._db.fetch_all(
            f"""
            SELECT {CHARACTER_COLUMNS}
            FROM characters
            ORDER BY id
            """
        )
        return [Character(**row) for row in rows]

    async def get_by_id(self, character_id: int) -> Character | None:
        row = await self._db.fetch_one(
            f"""
            SELECT {CHARACTER_COLUMNS}
            FROM characters
            WHERE id = $1
            """,
            character_id,
        )
        return Character(**row) if row is not None else None

    async def create(self, data: CharacterCreate) -> Character:
        row = await self._db.fetch_one(
            f"""
            INSERT INTO characters (name, description, rank, faction_id)
            VALUES ($1, $2, $3, $4)
            RETURNING {CHARACTER_COLUMNS}
            """,
            data.name,
            data.description,
            data.rank,
            data.faction_id,
        )
        if row is None:
            raise RuntimeError("Failed to insert character.")
        return Character(**row)

    async def update(self, character_id: int, changes: dict[str, Any]) -> Character:
        fields = {k: v for k, v in changes.items() if k in UPDATABLE_COLUMNS}
        if not fields:
            current = await self.get_by_id(character_id)
            if current is None:
                raise NotFoundError("Character", character_id)
            return current

        clause, args = assignment_clause(fields)
        row = await self._db.fetch_one(
            f"""
            UPDATE characters
            SET {clause}
            WHERE id = $1
            RETURNING {CHARACTER_COLUMNS}
            """,
            character_id,
            *args,
        )
        if row is None:
            raise NotFoundError("Character", character_id)
        return Character(**row)

    async def delete(self, character_id: int) -> None:
        await self._db.execute("DELETE FROM characters WHERE id = $1", character_id)
