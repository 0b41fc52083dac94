from __future__ import annotations

from fastapi import Depends

from core.db import Database
from core.dependencies import get_database

from .repository import PostgresCharacterRepository
from .service import CharacterService


def get_character_service(database: Database = Depends(get_database)) -> CharacterService:
    return CharacterService(PostgresCharacterRepository(database))
