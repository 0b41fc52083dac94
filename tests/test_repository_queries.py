"""
Postgres repositories against a scripted Database: checks eager loading is
batched per level and that updates only write supplied columns.
"""

import pytest

from characters.repository import PostgresCharacterRepository
from core.errors import NotFoundError
from factions.repository import PostgresFactionRepository
from races.repository import PostgresRaceRepository


class ScriptedDatabase:
    """
    Returns canned results in call order and records every statement.
    """

    def __init__(self, *results):
        self.results = list(results)
        self.calls = []

    def _next(self, sql, args):
        self.calls.append((" ".join(sql.split()), args))
        return self.results.pop(0)

    async def fetch_one(self, sql, *args):
        return self._next(sql, args)

    async def fetch_all(self, sql, *args):
        return self._next(sql, args)

    async def execute(self, sql, *args):
        self.calls.append((" ".join(sql.split()), args))


async def test_race_get_all_loads_each_level_once():
    database = ScriptedDatabase(
        [{"id": 1, "name": "Orks", "description": None}, {"id": 2, "name": "Eldar", "description": None}],
        [
            {"id": 10, "name": "Goffs", "description": None, "race_id": 1},
            {"id": 11, "name": "Ulthwe", "description": None, "race_id": 2},
        ],
        [{"id": 100, "name": "Ghazghkull", "description": None, "rank": "Warboss", "faction_id": 10}],
    )

    races = await PostgresRaceRepository(database).get_all()

    assert len(database.calls) == 3
    assert database.calls[1][1] == ([1, 2],)
    assert database.calls[2][1] == ([10, 11],)
    assert [f.name for f in races[0].factions] == ["Goffs"]
    assert races[0].factions[0].characters[0].name == "Ghazghkull"
    assert races[1].factions[0].characters == []


async def test_race_get_by_id_missing_skips_child_queries():
    database = ScriptedDatabase(None)

    assert await PostgresRaceRepository(database).get_by_id(5) is None
    assert len(database.calls) == 1


async def test_race_without_factions_does_not_query_characters():
    database = ScriptedDatabase({"id": 1, "name": "Orks", "description": None}, [])

    race = await PostgresRaceRepository(database).get_by_id(1)

    assert race.factions == []
    assert len(database.calls) == 2


async def test_faction_update_writes_only_supplied_columns_then_rereads():
    database = ScriptedDatabase(
        {"id": 3},
        {"id": 3, "name": "B", "description": "d", "race_id": None},
        [],
    )

    faction = await PostgresFactionRepository(database).update(3, {"name": "B", "ignored": 1})

    sql, args = database.calls[0]
    assert "SET name = $2 WHERE id = $1" in sql
    assert args == (3, "B")
    assert faction.name == "B"
    assert faction.description == "d"


async def test_faction_update_missing_row_raises_not_found():
    database = ScriptedDatabase(None)

    with pytest.raises(NotFoundError):
        await PostgresFactionRepository(database).update(8, {"description": "x"})


async def test_character_update_with_no_changes_returns_current_row():
    row = {"id": 4, "name": "Snikrot", "description": None, "rank": None, "faction_id": 1}
    database = ScriptedDatabase(row)

    character = await PostgresCharacterRepository(database).update(4, {})

    assert character.name == "Snikrot"
    assert database.calls[0][0].startswith("SELECT")


async def test_delete_issues_single_statement():
    database = ScriptedDatabase()

    await PostgresCharacterRepository(database).delete(7)

    assert database.calls == [("DELETE FROM characters WHERE id = $1", (7,))]
