# ABOUTME: SQLite storage for Pokemon records fetched from PokeAPI.
# ABOUTME: Provides upsert, lookup, search, and listing functions keyed by Pokedex number.

import json
import logging
import sqlite3
from pathlib import Path
from typing import Any

from pokelearn.models import Pokemon
from pokelearn.settings import settings
from pokelearn.utils.type_chart import normalize_type

logger = logging.getLogger(__name__)

_POKEMON_SCHEMA = """
CREATE TABLE IF NOT EXISTS pokemon (
    pokedex_number INTEGER PRIMARY KEY,
    name VARCHAR NOT NULL UNIQUE,
    types TEXT NOT NULL,
    sprite VARCHAR,
    sprite_shiny VARCHAR,
    height INTEGER,
    weight INTEGER,
    stats TEXT,
    strong_against TEXT NOT NULL,
    weak_against TEXT NOT NULL,
    resistant_to TEXT NOT NULL,
    immune_to TEXT NOT NULL
)
"""

_COLUMNS = (
    "pokedex_number",
    "name",
    "types",
    "sprite",
    "sprite_shiny",
    "height",
    "weight",
    "stats",
    "strong_against",
    "weak_against",
    "resistant_to",
    "immune_to",
)

# Columns holding JSON encoded lists or objects
_JSON_COLUMNS = frozenset({"types", "stats", "strong_against", "weak_against", "resistant_to", "immune_to"})

_SELECT = f"SELECT {', '.join(_COLUMNS)} FROM pokemon"  # noqa: S608


def _get_db_path() -> Path:
    """Get path to the Pokemon database, allows tests to override via settings."""
    return settings.db_path


def get_connection(db_path: Path | None = None, create: bool = True) -> sqlite3.Connection:
    """Get a connection to the Pokemon database.

    Args:
        db_path: Optional path to database. Defaults to settings.db_path.
        create: If True, create the database file and schema when missing.

    Returns:
        SQLite connection.

    Raises:
        FileNotFoundError: If create is False and the database doesn't exist.
    """
    if db_path is None:
        db_path = _get_db_path()

    if not create and not db_path.exists():
        raise FileNotFoundError(f"Database not found: {db_path}")

    db_path.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(str(db_path))
    ensure_schema(conn)
    return conn


def ensure_schema(conn: sqlite3.Connection) -> None:
    """Create the pokemon table if it doesn't exist.

    Args:
        conn: Active SQLite connection.
    """
    conn.execute(_POKEMON_SCHEMA)
    conn.commit()


def _pokemon_to_row(pokemon: Pokemon) -> list[Any]:
    data = pokemon.model_dump()
    return [json.dumps(data[col]) if col in _JSON_COLUMNS else data[col] for col in _COLUMNS]


def _row_to_pokemon(row: tuple[Any, ...]) -> Pokemon:
    data: dict[str, Any] = {}
    for col, value in zip(_COLUMNS, row, strict=True):
        data[col] = json.loads(value) if col in _JSON_COLUMNS and value is not None else value
    return Pokemon.model_validate(data)


def upsert_pokemon(pokemon: Pokemon, db_path: Path | None = None) -> Pokemon:
    """Insert a Pokemon record, or update the existing record with the same Pokedex number.

    Args:
        pokemon: Record to store.
        db_path: Optional path to database.

    Returns:
        The stored record.

    Raises:
        sqlite3.IntegrityError: If a different Pokedex number already uses the same name.
    """
    placeholders = ", ".join("?" for _ in _COLUMNS)
    updates = ", ".join(f"{col} = excluded.{col}" for col in _COLUMNS if col != "pokedex_number")

    conn = get_connection(db_path)
    try:
        conn.execute(
            f"INSERT INTO pokemon ({', '.join(_COLUMNS)}) VALUES ({placeholders}) "  # noqa: S608
            f"ON CONFLICT(pokedex_number) DO UPDATE SET {updates}",
            _pokemon_to_row(pokemon),
        )
        conn.commit()
    finally:
        conn.close()

    logger.info("Saved #%d %s", pokemon.pokedex_number, pokemon.display_name)
    return pokemon


def clear_pokemon(db_path: Path | None = None) -> int:
    """Delete all Pokemon records.

    Args:
        db_path: Optional path to database.

    Returns:
        Number of deleted records.
    """
    conn = get_connection(db_path)
    try:
        cursor = conn.execute("DELETE FROM pokemon")
        conn.commit()
        deleted = cursor.rowcount
    finally:
        conn.close()

    logger.info("Cleared %d Pokemon records", deleted)
    return deleted


def count_pokemon(db_path: Path | None = None) -> int:
    """Return the number of stored Pokemon records.

    Raises:
        FileNotFoundError: If the database doesn't exist.
    """
    conn = get_connection(db_path, create=False)
    try:
        return conn.execute("SELECT COUNT(*) FROM pokemon").fetchone()[0]
    finally:
        conn.close()


def _fetch_one(query: str, params: list[Any], db_path: Path | None) -> Pokemon | None:
    conn = get_connection(db_path, create=False)
    try:
        row = conn.execute(query, params).fetchone()
    finally:
        conn.close()
    return _row_to_pokemon(row) if row is not None else None


def _fetch_all(query: str, params: list[Any], db_path: Path | None) -> list[Pokemon]:
    conn = get_connection(db_path, create=False)
    try:
        rows = conn.execute(query, params).fetchall()
    finally:
        conn.close()
    return [_row_to_pokemon(row) for row in rows]


def get_pokemon_by_number(pokedex_number: int, db_path: Path | None = None) -> Pokemon | None:
    """Get a Pokemon by its Pokedex number.

    Args:
        pokedex_number: National Pokedex number.
        db_path: Optional path to database.

    Returns:
        The record, or None if not found.
    """
    return _fetch_one(f"{_SELECT} WHERE pokedex_number = ?", [pokedex_number], db_path)


def get_pokemon_by_name(name: str, db_path: Path | None = None) -> Pokemon | None:
    """Get a Pokemon by name, ignoring letter case.

    Args:
        name: Pokemon name (e.g., "Charizard").
        db_path: Optional path to database.

    Returns:
        The record, or None if not found.
    """
    return _fetch_one(f"{_SELECT} WHERE name = ?", [name.strip().lower()], db_path)


def search_pokemon(query: str, limit: int = 10, db_path: Path | None = None) -> list[Pokemon]:
    """Find Pokemon whose name starts with the query, for autocompletion.

    Args:
        query: Name prefix, case insensitive.
        limit: Maximum number of results.
        db_path: Optional path to database.

    Returns:
        Matching records ordered by Pokedex number. Empty if the query is blank.
    """
    prefix = query.strip().lower()
    if not prefix:
        return []

    # Escape LIKE wildcards so they match literally
    escaped = prefix.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return _fetch_all(
        f"{_SELECT} WHERE name LIKE ? ESCAPE '\\' ORDER BY pokedex_number LIMIT ?",
        [f"{escaped}%", limit],
        db_path,
    )


def list_pokemon(limit: int | None = None, offset: int = 0, db_path: Path | None = None) -> list[Pokemon]:
    """List stored Pokemon ordered by Pokedex number.

    Args:
        limit: Maximum number of results, or None for all.
        offset: Number of records to skip.
        db_path: Optional path to database.

    Returns:
        List of records.
    """
    # SQLite treats a negative LIMIT as no limit
    return _fetch_all(
        f"{_SELECT} ORDER BY pokedex_number LIMIT ? OFFSET ?",
        [-1 if limit is None else limit, offset],
        db_path,
    )


def list_pokemon_by_type(type_name: str, db_path: Path | None = None) -> list[Pokemon]:
    """List Pokemon that have the given type as primary or secondary type.

    Args:
        type_name: Type identifier (e.g., "fire").
        db_path: Optional path to database.

    Returns:
        Matching records ordered by Pokedex number.

    Raises:
        UnknownTypeError: If the type is not one of the 18 known types.
    """
    normalized = normalize_type(type_name)
    return _fetch_all(
        f"{_SELECT} WHERE EXISTS (SELECT 1 FROM json_each(pokemon.types) WHERE json_each.value = ?) "
        "ORDER BY pokedex_number",
        [normalized],
        db_path,
    )


def get_random_pokemon(db_path: Path | None = None) -> Pokemon | None:
    """Return a random stored Pokemon, or None if the database is empty."""
    return _fetch_one(f"{_SELECT} ORDER BY RANDOM() LIMIT 1", [], db_path)
