# ABOUTME: Storage package for persisted Pokemon records.
# ABOUTME: Re-exports the SQLite query and upsert functions.

from pokelearn.storage.database import (
    clear_pokemon,
    count_pokemon,
    get_connection,
    get_pokemon_by_name,
    get_pokemon_by_number,
    get_random_pokemon,
    list_pokemon,
    list_pokemon_by_type,
    search_pokemon,
    upsert_pokemon,
)

__all__ = [
    "clear_pokemon",
    "count_pokemon",
    "get_connection",
    "get_pokemon_by_name",
    "get_pokemon_by_number",
    "get_random_pokemon",
    "list_pokemon",
    "list_pokemon_by_type",
    "search_pokemon",
    "upsert_pokemon",
]
