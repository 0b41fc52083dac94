"""
Shared FastAPI dependencies.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Path, Request

from core.db import Database

# Ids are Postgres bigserial; larger values can never match a row.
BIGINT_MAX = 2**63 - 1

EntityId = Annotated[int, Path(le=BIGINT_MAX)]


def get_database(request: Request) -> Database:
    database = getattr(request.app.state, "database", None)
    if database is None:
        raise RuntimeError("Database is not configured on app.state.")
    return database
