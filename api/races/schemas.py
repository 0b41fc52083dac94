"""
Pydantic schemas for race endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel


class RaceCreate(BaseModel):
    name: str = ""
    description: str | None = None


class RaceUpdate(BaseModel):
    name: str | None = None
    description: str | None = None
