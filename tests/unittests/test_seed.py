"""ABOUTME: Tests for seeding the database from PokeAPI.
ABOUTME: Verifies skip-and-continue behavior, clearing, and single record updates."""

import asyncio
from pathlib import Path
from typing import Any

import httpx
import pytest

from pokelearn.ingestion.seed import SeedSummary, seed_database, update_single_pokemon
from pokelearn.models import Pokemon
from pokelearn.storage.database import count_pokemon, get_pokemon_by_number, upsert_pokemon


def _mock_client(payload_factory: Any, missing: set[int] | None = None) -> httpx.AsyncClient:
    """Client answering /pokemon/{id} with generated payloads, 404 for missing numbers."""
    missing = missing or set()

    def handler(request: httpx.Request) -> httpx.Response:
        number = int(request.url.path.rstrip("/").split("/")[-1])
        if number in missing:
            return httpx.Response(404, text="Not Found")
        if number == 3:
            payload = payload_factory(pokedex_number=3, name="venusaur", types=("grass", "poison"))
        else:
            payload = payload_factory(pokedex_number=number, name=f"pokemon-{number}", types=("water",))
        return httpx.Response(200, json=payload)

    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


class TestSeedSummary:
    """Tests for SeedSummary."""

    def test_total(self) -> None:
        """Total adds successes and errors."""
        assert SeedSummary(success_count=3, error_count=2).total == 5


class TestSeedDatabase:
    """Tests for seed_database function."""

    def test_seeds_all_numbers(self, temp_db: Path, payload_factory: Any) -> None:
        """Every fetched Pokemon is stored."""

        async def run() -> SeedSummary:
            async with _mock_client(payload_factory) as client:
                return await seed_database(range(1, 4), db_path=temp_db, client=client, delay=0)

        summary = asyncio.run(run())

        assert summary.success_count == 3
        assert summary.error_count == 0
        assert count_pokemon(temp_db) == 3

        venusaur = get_pokemon_by_number(3, temp_db)
        assert venusaur is not None
        assert venusaur.types == ["grass", "poison"]
        assert "psychic" in venusaur.weak_against

    def test_skips_failures(self, temp_db: Path, payload_factory: Any) -> None:
        """Failed requests are counted and the batch continues."""

        async def run() -> SeedSummary:
            async with _mock_client(payload_factory, missing={2}) as client:
                return await seed_database([1, 2, 3], db_path=temp_db, client=client, delay=0)

        summary = asyncio.run(run())

        assert summary.success_count == 2
        assert summary.error_count == 1
        assert summary.failed_numbers == [2]
        assert get_pokemon_by_number(2, temp_db) is None
        assert get_pokemon_by_number(3, temp_db) is not None

    def test_skips_invalid_types(self, temp_db: Path, payload_factory: Any) -> None:
        """Records with unknown types are skipped, not stored with neutral relations."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json=payload_factory(pokedex_number=1, name="oddity", types=("shadow",)))

        async def run() -> SeedSummary:
            async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
                return await seed_database([1], db_path=temp_db, client=client, delay=0)

        summary = asyncio.run(run())

        assert summary.error_count == 1
        assert not temp_db.exists()

    def test_skips_malformed_bodies(self, temp_db: Path, payload_factory: Any) -> None:
        """An HTML error page or a JSON array is skipped and the batch continues."""

        def handler(request: httpx.Request) -> httpx.Response:
            number = int(request.url.path.rstrip("/").split("/")[-1])
            if number == 2:
                return httpx.Response(200, text="<html>rate limited</html>")
            if number == 3:
                return httpx.Response(200, json=[])
            return httpx.Response(200, json=payload_factory(pokedex_number=number, name=f"pokemon-{number}"))

        async def run() -> SeedSummary:
            async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
                return await seed_database([1, 2, 3, 4], db_path=temp_db, client=client, delay=0)

        summary = asyncio.run(run())

        assert summary.success_count == 2
        assert summary.failed_numbers == [2, 3]
        assert get_pokemon_by_number(1, temp_db) is not None
        assert get_pokemon_by_number(4, temp_db) is not None

    def test_skips_duplicate_name(self, temp_db: Path, payload_factory: Any) -> None:
        """A record whose name is already stored under another number is skipped."""
        upsert_pokemon(Pokemon.from_types(["water"], pokedex_number=7, name="pokemon-1"), temp_db)

        async def run() -> SeedSummary:
            async with _mock_client(payload_factory) as client:
                return await seed_database([1, 2], db_path=temp_db, client=client, delay=0)

        summary = asyncio.run(run())

        assert summary.success_count == 1
        assert summary.failed_numbers == [1]
        assert get_pokemon_by_number(1, temp_db) is None
        assert count_pokemon(temp_db) == 2

    def test_clear_removes_existing(self, temp_db: Path, payload_factory: Any) -> None:
        """Clearing deletes records that are not fetched again."""
        upsert_pokemon(Pokemon.from_types(["dragon"], pokedex_number=149, name="dragonite"), temp_db)

        async def run() -> SeedSummary:
            async with _mock_client(payload_factory) as client:
                return await seed_database([1], clear=True, db_path=temp_db, client=client, delay=0)

        asyncio.run(run())

        assert get_pokemon_by_number(149, temp_db) is None
        assert count_pokemon(temp_db) == 1

    def test_without_clear_keeps_existing(self, temp_db: Path, payload_factory: Any) -> None:
        """Without clearing, existing records stay."""
        upsert_pokemon(Pokemon.from_types(["dragon"], pokedex_number=149, name="dragonite"), temp_db)

        async def run() -> SeedSummary:
            async with _mock_client(payload_factory) as client:
                return await seed_database([1], db_path=temp_db, client=client, delay=0)

        asyncio.run(run())

        assert count_pokemon(temp_db) == 2


class TestUpdateSinglePokemon:
    """Tests for update_single_pokemon function."""

    def test_updates_record(self, temp_db: Path, payload_factory: Any) -> None:
        """The fetched record replaces the stored one."""
        upsert_pokemon(Pokemon.from_types(["normal"], pokedex_number=3, name="venusaur"), temp_db)

        async def run() -> Pokemon:
            async with _mock_client(payload_factory) as client:
                return await update_single_pokemon(3, db_path=temp_db, client=client)

        pokemon = asyncio.run(run())
        stored = get_pokemon_by_number(3, temp_db)

        assert pokemon.types == ["grass", "poison"]
        assert stored is not None
        assert stored.types == ["grass", "poison"]

    def test_error_propagates(self, temp_db: Path, payload_factory: Any) -> None:
        """Unlike seeding, a single update reports failures."""

        async def run() -> Pokemon:
            async with _mock_client(payload_factory, missing={3}) as client:
                return await update_single_pokemon(3, db_path=temp_db, client=client)

        with pytest.raises(httpx.HTTPStatusError):
            asyncio.run(run())
