"""
Database client: error translation and SQL helpers, against a stub pool.
"""

import asyncpg
import pytest

from core.db import Database, assignment_clause
from core.errors import ConstraintViolationError, StoreError


class StubPool:
    def __init__(self, *, rows=None, error=None):
        self.rows = rows or []
        self.error = error
        self.calls = []

    async def fetchrow(self, sql, *args):
        self.calls.append((sql, args))
        if self.error is not None:
            raise self.error
        return self.rows[0] if self.rows else None

    async def fetch(self, sql, *args):
        self.calls.append((sql, args))
        if self.error is not None:
            raise self.error
        return self.rows

    async def execute(self, sql, *args):
        self.calls.append((sql, args))
        if self.error is not None:
            raise self.error
        return "OK"


def _database(pool) -> Database:
    database = Database("postgresql://unused")
    database._pool = pool
    return database


def test_assignment_clause_numbers_params_after_id():
    clause, args = assignment_clause({"name": "B", "description": None})

    assert clause == "name = $2, description = $3"
    assert args == ["B", None]


def test_pool_access_before_connect_fails():
    with pytest.raises(RuntimeError):
        Database("postgresql://unused").pool


async def test_fetch_one_returns_dict_or_none():
    database = _database(StubPool(rows=[{"id": 1, "name": "Orks"}]))
    assert await database.fetch_one("SELECT 1") == {"id": 1, "name": "Orks"}

    empty = _database(StubPool())
    assert await empty.fetch_one("SELECT 1") is None


async def test_unique_violation_becomes_constraint_violation():
    database = _database(StubPool(error=asyncpg.UniqueViolationError("duplicate key value")))

    with pytest.raises(ConstraintViolationError) as excinfo:
        await database.fetch_one("INSERT INTO races (name) VALUES ($1)", "Orks")

    assert isinstance(excinfo.value, StoreError)
    assert excinfo.value.http_status == 409
    assert isinstance(excinfo.value.__cause__, asyncpg.UniqueViolationError)


async def test_foreign_key_violation_becomes_constraint_violation():
    database = _database(StubPool(error=asyncpg.ForeignKeyViolationError("fk")))

    with pytest.raises(ConstraintViolationError):
        await database.execute("DELETE FROM factions WHERE id = $1", 1)


async def test_connection_loss_becomes_store_error():
    database = _database(StubPool(error=ConnectionResetError("gone")))

    with pytest.raises(StoreError) as excinfo:
        await database.fetch_all("SELECT 1")

    assert not isinstance(excinfo.value, ConstraintViolationError)
    assert excinfo.value.to_response()["error"]["message"] == "Database operation failed."
