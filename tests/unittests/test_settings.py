"""ABOUTME: Tests for the settings and logging modules.
ABOUTME: Verifies environment overrides, derived paths, and YAML logging setup."""

import logging
from pathlib import Path

import pytest

from pokelearn.logs import init_logging
from pokelearn.settings import Settings, settings


class TestSettings:
    """Tests for Settings class."""

    def test_defaults(self) -> None:
        """Defaults point at PokeAPI and the full Pokedex."""
        assert settings.POKEAPI_BASE_URL == "https://pokeapi.co/api/v2"
        assert settings.TOTAL_POKEMON == 1025

    def test_derived_paths(self, tmp_path: Path) -> None:
        """Data and config paths hang off the project root."""
        custom = Settings(PROJECT_ROOT=tmp_path)

        assert custom.db_path == tmp_path / "data" / "db" / "pokemon.sqlite"
        assert custom.logging_config_path == tmp_path / "configs" / "logging.yml"

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """POKELEARN_ environment variables override defaults."""
        monkeypatch.setenv("POKELEARN_TOTAL_POKEMON", "151")
        monkeypatch.setenv("POKELEARN_REQUEST_DELAY_SECONDS", "0.5")

        custom = Settings()

        assert custom.TOTAL_POKEMON == 151
        assert custom.REQUEST_DELAY_SECONDS == 0.5

    def test_shipped_logging_config_exists(self) -> None:
        """The repository ships a logging configuration."""
        assert settings.logging_config_path.exists()


class TestInitLogging:
    """Tests for init_logging function."""

    def test_applies_config(self, tmp_path: Path) -> None:
        """The YAML config is applied and returned."""
        config_path = tmp_path / "logging.yml"
        config_path.write_text("""
version: 1
disable_existing_loggers: false
loggers:
  pokelearn.test_logging:
    level: DEBUG
""")

        config = init_logging(config_path)

        assert config["version"] == 1
        assert logging.getLogger("pokelearn.test_logging").level == logging.DEBUG

    def test_missing_file(self, tmp_path: Path) -> None:
        """Missing config raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            init_logging(tmp_path / "nonexistent.yml")
