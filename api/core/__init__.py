"""
Shared, cross-cutting code for the API.

`core/` holds the small building blocks every entity feature uses (DB client,
entity records, errors, settings, logging). Entity-specific SQL and business
rules live in the feature packages (`races/`, `factions/`, `characters/`).
"""
