"""
Shared fixtures: in-memory repositories, services over them, and an HTTP
client whose service dependencies are overridden to use those services.

The app lifespan (pool + schema) never runs here; ASGITransport does not send
lifespan events.
"""

from __future__ import annotations

import pytest
from httpx import ASGITransport, AsyncClient

from characters.dependencies import get_character_service
from characters.service import CharacterService
from factions.dependencies import get_faction_service
from factions.service import FactionService
from fakes import (
    InMemoryCharacterRepository,
    InMemoryFactionRepository,
    InMemoryRaceRepository,
    InMemoryStore,
)
from main import app
from races.dependencies import get_race_service
from races.service import RaceService


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def race_service(store) -> RaceService:
    return RaceService(InMemoryRaceRepository(store))


@pytest.fixture
def faction_service(store) -> FactionService:
    return FactionService(InMemoryFactionRepository(store))


@pytest.fixture
def character_service(store) -> CharacterService:
    return CharacterService(InMemoryCharacterRepository(store))


@pytest.fixture
async def client(race_service, faction_service, character_service):
    app.dependency_overrides[get_race_service] = lambda: race_service
    app.dependency_overrides[get_faction_service] = lambda: faction_service
    app.dependency_overrides[get_character_service] = lambda: character_service

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c

    app.dependency_overrides.clear()
