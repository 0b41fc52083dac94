"""
Pydantic schemas for character endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel


class CharacterCreate(BaseModel):
    # Emptiness is checked by the service so the error shape matches updates.
    name: str = ""
    description: str | None = None
    rank: str | None = None
    faction_id: int


class CharacterUpdate(BaseModel):
    """
    Partial update. Only fields present in the request body are written;
    `null` clears an optional field.
    """

    name: str | None = None
    description: str | None = None
    rank: str | None = None
    faction_id: int | None = None
