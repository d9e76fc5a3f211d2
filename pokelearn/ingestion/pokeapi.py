"""ABOUTME: Fetches Pokemon data from PokeAPI and converts it into Pokemon records.
ABOUTME: Extracts types, stats, and sprites and computes type relations for each record."""

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from pokelearn.models import Pokemon, PokemonStats
from pokelearn.settings import settings

logger = logging.getLogger(__name__)

# PokeAPI stat names that differ from the record field names
_STAT_NAME_MAP = {
    "special-attack": "special_attack",
    "special-defense": "special_defense",
}


class PokeApiError(Exception):
    """Raised when a PokeAPI payload is missing data needed to build a record."""


def _extract_types(data: dict[str, Any]) -> list[str]:
    """Return type names ordered by slot (primary type first)."""
    entries = data.get("types") or []
    if not entries:
        raise PokeApiError(f"Pokemon {data.get('name')!r} has no types")
    return [entry["type"]["name"] for entry in sorted(entries, key=lambda entry: entry["slot"])]


def _extract_stats(data: dict[str, Any]) -> PokemonStats:
    """Flatten the PokeAPI stats list into a PokemonStats model."""
    stats: dict[str, int] = {}
    for entry in data.get("stats") or []:
        stat_name = entry["stat"]["name"]
        stats[_STAT_NAME_MAP.get(stat_name, stat_name)] = entry["base_stat"]
    return PokemonStats.model_validate(stats)


def parse_pokemon_payload(data: dict[str, Any]) -> Pokemon:
    """Convert a PokeAPI ``/pokemon/{id}`` response body into a Pokemon record.

    Args:
        data: Decoded JSON body from PokeAPI.

    Returns:
        Pokemon record with type relations computed.

    Raises:
        PokeApiError: If required fields are missing or malformed.
        TypeChartError: If the typing is not valid for the type chart.
    """
    if not isinstance(data, dict):
        raise PokeApiError(f"Malformed PokeAPI payload: expected an object, got {type(data).__name__}")

    try:
        types = _extract_types(data)
        sprites = data.get("sprites") or {}
        return Pokemon.from_types(
            types,
            pokedex_number=data["id"],
            name=data["name"],
            sprite=sprites.get("front_default"),
            sprite_shiny=sprites.get("front_shiny"),
            height=data.get("height"),
            weight=data.get("weight"),
            stats=_extract_stats(data),
        )
    except (AttributeError, KeyError, TypeError) as e:
        raise PokeApiError(f"Malformed PokeAPI payload: missing or invalid {e}") from e
    except ValidationError as e:
        raise PokeApiError(f"Invalid PokeAPI payload for {data.get('name')!r}: {e}") from e


async def fetch_pokemon(
    pokedex_number: int,
    client: httpx.AsyncClient | None = None,
    base_url: str | None = None,
) -> Pokemon:
    """Fetch a single Pokemon from PokeAPI.

    Args:
        pokedex_number: National Pokedex number to fetch.
        client: Optional httpx client for connection reuse.
        base_url: API base URL. Uses settings default if not provided.

    Returns:
        Parsed Pokemon record.

    Raises:
        httpx.HTTPStatusError: If the request fails.
        PokeApiError: If the body is not JSON or cannot be parsed.
    """
    if base_url is None:
        base_url = settings.POKEAPI_BASE_URL

    url = f"{base_url.rstrip('/')}/pokemon/{pokedex_number}"

    should_close_client = client is None
    if client is None:
        client = httpx.AsyncClient(follow_redirects=True, timeout=settings.REQUEST_TIMEOUT_SECONDS)

    try:
        logger.debug("Fetching %s", url)
        response = await client.get(url)
        response.raise_for_status()
        try:
            data = response.json()
        except ValueError as e:
            raise PokeApiError(f"PokeAPI returned a non-JSON body for {url}") from e
        pokemon = parse_pokemon_payload(data)
        logger.info("Fetched #%d %s", pokemon.pokedex_number, pokemon.display_name)
        return pokemon
    finally:
        if should_close_client:
            await client.aclose()
