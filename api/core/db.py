"""
Async database access helpers (raw SQL) using asyncpg.

`Database` owns the connection pool. The app builds one instance in its
lifespan (see `api/main.py`) and hands it to repositories; tests build their
own.

SQL parameter style:
- asyncpg uses positional placeholders: $1, $2, $3, ...
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from typing import Any

import asyncpg

from core.errors import ConstraintViolationError, StoreError

logger = logging.getLogger(__name__)


@contextmanager
def _translate_errors() -> Iterator[None]:
    try:
        yield
    except asyncpg.IntegrityConstraintViolationError as exc:
        constraint = getattr(exc, "constraint_name", None)
        logger.warning("constraint_violation constraint=%s sqlstate=%s", constraint, exc.sqlstate)
        raise ConstraintViolationError(constraint) from exc
    except (asyncpg.PostgresError, asyncpg.InterfaceError, OSError, asyncio.TimeoutError) as exc:
        logger.error("store_error type=%s error=%s", type(exc).__name__, exc)
        raise StoreError() from exc


def _record_to_dict(record: Mapping[str, Any]) -> dict[str, Any]:
    return dict(record)


def assignment_clause(changes: Mapping[str, Any], *, first_param: int = 2) -> tuple[str, list[Any]]:
    """
    Build `col = $n, ...` for an UPDATE plus the matching argument list.

    Column names must already be whitelisted by the caller.
    """
    parts: list[str] = []
    args: list[Any] = []
    for offset, (column, value) in enumerate(changes.items()):
        parts.append(f"{column} = ${first_param + offset}")
        args.append(value)
    return ", ".join(parts), args


class Database:
    def __init__(
        self,
        dsn: str,
        *,
        min_size: int = 1,
        max_size: int = 5,
        command_timeout: float = 30,
    ) -> None:
        self.dsn = dsn
        self.min_size = min_size
        self.max_size = max_size
        self.command_timeout = command_timeout
        self._pool: asyncpg.Pool | None = None

    async def connect(self) -> None:
        if self._pool is not None:
            return None
        with _translate_errors():
            self._pool = await asyncpg.create_pool(
                dsn=self.dsn,
                min_size=self.min_size,
                max_size=self.max_size,
                command_timeout=self.command_timeout,
            )
        logger.info("db_pool_opened min_size=%s max_size=%s", self.min_size, self.max_size)

    async def close(self) -> None:
        if self._pool is None:
            return None
        await self._pool.close()
        self._pool = None
        logger.info("db_pool_closed")

    @property
    def pool(self) -> asyncpg.Pool:
        if self._pool is None:
            raise RuntimeError("DB pool is not initialized. Call connect() on startup.")
        return self._pool

    async def fetch_one(self, sql: str, *args: Any) -> dict[str, Any] | None:
        """
        Run a query and return a single row as a dict (or None).
        """
        with _translate_errors():
            row = await self.pool.fetchrow(sql, *args)
        return _record_to_dict(row) if row is not None else None

    async def fetch_all(self, sql: str, *args: Any) -> list[dict[str, Any]]:
        """
        Run a query and return all rows as a list of dicts.
        """
        with _translate_errors():
            rows = await self.pool.fetch(sql, *args)
        return [_record_to_dict(r) for r in rows]

    async def execute(self, sql: str, *args: Any) -> None:
        """
        Run a statement (INSERT/UPDATE/DELETE/DDL). No result returned.
        """
        with _translate_errors():
            await self.pool.execute(sql, *args)
