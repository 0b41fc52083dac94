"""
Domain records returned by repositories and serialized by routers.

Nesting mirrors the ownership chain Race -> Faction -> Character. Child lists
are empty unless the repository eagerly loaded them.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class Character(BaseModel):
    id: int
    name: str
    description: str | None = None
    rank: str | None = None
    faction_id: int


class Faction(BaseModel):
    id: int
    name: str
    description: str | None = None
    race_id: int | None = None
    characters: list[Character] = Field(default_factory=list)


class Race(BaseModel):
    id: int
    name: str
    description: str | None = None
    factions: list[Faction] = Field(default_factory=list)
