"""ABOUTME: Configuration logic and path settings for the project.
ABOUTME: Provides the PokeAPI source, seeding limits, and database and config paths."""

from pathlib import Path

from pydantic import computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict

from pokelearn import __version__


def _get_project_root() -> Path:
    """Find project root by looking for pyproject.toml."""
    current = Path(__file__).resolve().parent
    while current != current.parent:
        if (current / "pyproject.toml").exists():
            return current
        current = current.parent
    return Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """Contains settings for this project.

    Every field can be overridden with a ``POKELEARN_`` prefixed environment variable.
    """

    model_config = SettingsConfigDict(env_prefix="POKELEARN_")

    VERSION: str = __version__
    """Project version."""

    PROJECT_ROOT: Path = _get_project_root()
    """Root directory of the project."""

    POKEAPI_BASE_URL: str = "https://pokeapi.co/api/v2"
    """Base URL of the public Pokemon data API."""

    TOTAL_POKEMON: int = 1025
    """Number of Pokedex entries fetched by a full seed."""

    REQUEST_DELAY_SECONDS: float = 0.1
    """Pause between consecutive PokeAPI requests while seeding."""

    REQUEST_TIMEOUT_SECONDS: float = 30.0
    """Timeout for a single PokeAPI request."""

    @computed_field  # type: ignore[prop-decorator]
    @property
    def data_dir(self) -> Path:
        """Base data directory."""
        return self.PROJECT_ROOT / "data"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def db_path(self) -> Path:
        """Path to the SQLite database holding Pokemon records."""
        return self.data_dir / "db" / "pokemon.sqlite"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def configs_dir(self) -> Path:
        """Directory containing configuration files."""
        return self.PROJECT_ROOT / "configs"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def logging_config_path(self) -> Path:
        """Path to the logging.yml configuration file."""
        return self.configs_dir / "logging.yml"


settings = Settings()
