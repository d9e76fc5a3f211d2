"""Contains configurations for the test run."""

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

PayloadFactory = Callable[..., dict[str, Any]]


def _make_payload(
    pokedex_number: int = 6,
    name: str = "charizard",
    types: tuple[str, ...] = ("fire", "flying"),
) -> dict[str, Any]:
    """Build a minimal PokeAPI /pokemon response body."""
    type_entries = [{"slot": slot, "type": {"name": t, "url": ""}} for slot, t in enumerate(types, start=1)]
    stat_values = {
        "hp": 78,
        "attack": 84,
        "defense": 78,
        "special-attack": 109,
        "special-defense": 85,
        "speed": 100,
    }
    return {
        "id": pokedex_number,
        "name": name,
        "height": 17,
        "weight": 905,
        # Listed in reverse so parsing has to sort by slot
        "types": list(reversed(type_entries)),
        "stats": [{"base_stat": value, "stat": {"name": stat}} for stat, value in stat_values.items()],
        "sprites": {
            "front_default": f"https://sprites.example/{pokedex_number}.png",
            "front_shiny": f"https://sprites.example/shiny/{pokedex_number}.png",
        },
    }


@pytest.fixture
def payload_factory() -> PayloadFactory:
    """Factory for PokeAPI payloads with custom number, name, and types."""
    return _make_payload


@pytest.fixture
def charizard_payload() -> dict[str, Any]:
    """PokeAPI payload for Charizard (fire/flying)."""
    return _make_payload()


@pytest.fixture
def temp_db(tmp_path: Path) -> Path:
    """Create a temporary database path."""
    return tmp_path / "db" / "test_pokemon.sqlite"
