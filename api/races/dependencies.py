from __future__ import annotations

from fastapi import Depends

from core.db import Database
from core.dependencies import get_database

from .repository import PostgresRaceRepository
from .service import RaceService


def get_race_service(database: Database = Depends(get_database)) -> RaceService:
    return RaceService(PostgresRaceRepository(database))
