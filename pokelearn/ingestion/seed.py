"""ABOUTME: Populates the Pokemon database from PokeAPI.
ABOUTME: Fetches records sequentially with a delay and skips entries that fail."""

import asyncio
import logging
import sqlite3
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

import httpx

from pokelearn.ingestion.pokeapi import PokeApiError, fetch_pokemon
from pokelearn.models import Pokemon
from pokelearn.settings import settings
from pokelearn.storage.database import clear_pokemon, upsert_pokemon
from pokelearn.utils.type_chart import TypeChartError

logger = logging.getLogger(__name__)


@dataclass
class SeedSummary:
    """Outcome of a seeding run.

    Attributes:
        success_count: Number of records fetched and saved.
        error_count: Number of records skipped because of an error.
        failed_numbers: Pokedex numbers that were skipped.
    """

    success_count: int = 0
    error_count: int = 0
    failed_numbers: list[int] = field(default_factory=list)

    @property
    def total(self) -> int:
        """Total number of processed Pokedex numbers."""
        return self.success_count + self.error_count


async def seed_database(
    pokedex_numbers: Iterable[int] | None = None,
    clear: bool = False,
    db_path: Path | None = None,
    client: httpx.AsyncClient | None = None,
    delay: float | None = None,
) -> SeedSummary:
    """Fetch Pokemon from PokeAPI and store them, skipping records that fail.

    Requests are made one at a time with a pause in between to respect the
    API's rate limits.

    Args:
        pokedex_numbers: Numbers to fetch. Defaults to 1..settings.TOTAL_POKEMON.
        clear: If True, delete all stored records first.
        db_path: Optional path to database.
        client: Optional httpx client for connection reuse.
        delay: Seconds to wait between requests. Uses settings default if not provided.

    Returns:
        SeedSummary with success and error counts.
    """
    if pokedex_numbers is None:
        pokedex_numbers = range(1, settings.TOTAL_POKEMON + 1)

    if delay is None:
        delay = settings.REQUEST_DELAY_SECONDS

    if clear:
        await asyncio.to_thread(clear_pokemon, db_path)

    summary = SeedSummary()

    should_close_client = client is None
    if client is None:
        client = httpx.AsyncClient(follow_redirects=True, timeout=settings.REQUEST_TIMEOUT_SECONDS)

    try:
        for number in pokedex_numbers:
            try:
                pokemon = await fetch_pokemon(number, client=client)
                await asyncio.to_thread(upsert_pokemon, pokemon, db_path)
            except (httpx.HTTPError, PokeApiError, TypeChartError, sqlite3.Error) as e:
                summary.error_count += 1
                summary.failed_numbers.append(number)
                logger.warning("Skipping Pokemon #%d: %s", number, e)
                continue

            summary.success_count += 1
            if delay > 0:
                await asyncio.sleep(delay)
    finally:
        if should_close_client:
            await client.aclose()

    logger.info(
        "Seeding finished: %d saved, %d skipped, %d processed",
        summary.success_count,
        summary.error_count,
        summary.total,
    )
    return summary


async def update_single_pokemon(
    pokedex_number: int,
    db_path: Path | None = None,
    client: httpx.AsyncClient | None = None,
) -> Pokemon:
    """Fetch one Pokemon from PokeAPI and insert or update its stored record.

    Args:
        pokedex_number: National Pokedex number to refresh.
        db_path: Optional path to database.
        client: Optional httpx client for connection reuse.

    Returns:
        The stored record.

    Raises:
        httpx.HTTPError: If the request fails.
        PokeApiError: If the payload cannot be parsed.
        sqlite3.IntegrityError: If another Pokedex number already uses the same name.
    """
    pokemon = await fetch_pokemon(pokedex_number, client=client)
    return await asyncio.to_thread(upsert_pokemon, pokemon, db_path)
