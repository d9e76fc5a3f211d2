"""ABOUTME: Ingestion module for fetching Pokemon data from PokeAPI.
ABOUTME: Handles payload parsing, single-record refreshes, and full database seeding."""

from pokelearn.ingestion.pokeapi import (
    PokeApiError,
    fetch_pokemon,
    parse_pokemon_payload,
)
from pokelearn.ingestion.seed import (
    SeedSummary,
    seed_database,
    update_single_pokemon,
)

__all__ = [
    "PokeApiError",
    "SeedSummary",
    "fetch_pokemon",
    "parse_pokemon_payload",
    "seed_database",
    "update_single_pokemon",
]
