"""
Schema bootstrap.

Runs once at startup. Statements are idempotent so restarts against an
existing database only add what is missing.
"""

from __future__ import annotations

import logging

from core.db import Database

logger = logging.getLogger(__name__)

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS races (
    id bigserial PRIMARY KEY,
    name text NOT NULL,
    CONSTRAINT races_name_key UNIQUE (name)
);

CREATE TABLE IF NOT EXISTS factions (
    id bigserial PRIMARY KEY,
    name text NOT NULL,
    CONSTRAINT factions_name_key UNIQUE (name)
);

CREATE TABLE IF NOT EXISTS characters (
    id bigserial PRIMARY KEY,
    name text NOT NULL,
    faction_id bigint NOT NULL
        CONSTRAINT characters_faction_id_fkey REFERENCES factions (id)
);

ALTER TABLE races ADD COLUMN IF NOT EXISTS description text;

ALTER TABLE factions ADD COLUMN IF NOT EXISTS description text;
ALTER TABLE factions ADD COLUMN IF NOT EXISTS race_id bigint
    CONSTRAINT factions_race_id_fkey REFERENCES races (id) ON DELETE SET NULL;

ALTER TABLE characters ADD COLUMN IF NOT EXISTS description text;
ALTER TABLE characters ADD COLUMN IF NOT EXISTS rank text;

CREATE INDEX IF NOT EXISTS factions_race_id_idx ON factions (race_id);
CREATE INDEX IF NOT EXISTS characters_faction_id_idx ON characters (faction_id);
"""


async def ensure_schema(database: Database) -> None:
    await database.execute(SCHEMA_SQL)
    logger.info("schema_ready tables=races,factions,characters")
