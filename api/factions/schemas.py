"""
Pydantic schemas for faction endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel


class FactionCreate(BaseModel):
    name: str = ""
    description: str | None = None
    race_id: int | None = None


class FactionUpdate(BaseModel):
    """
    Partial update; omitted fields are left untouched, `null` clears
    description. `race_id` of `null` or 0 detaches the faction from its race.
    """

    name: str | None = None
    description: str | None = None
    race_id: int | None = None
