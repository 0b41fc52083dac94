from __future__ import annotations

from fastapi import Depends

from core.db import Database
from core.dependencies import get_database

from .repository import PostgresFactionRepository
from .service import FactionService


def get_faction_service(database: Database = Depends(get_database)) -> FactionService:
    return FactionService(PostgresFactionRepository(database))
