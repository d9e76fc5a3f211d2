"""ABOUTME: Pydantic models for stored Pokemon records.
ABOUTME: Serializes to camelCase API bodies and computes type relations on construction."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator
from pydantic.alias_generators import to_camel

from pokelearn.utils.type_chart import compute_effectiveness, normalize_type_profile


class _CamelModel(BaseModel):
    """Base model accepting snake_case or camelCase input and dumping camelCase by alias."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PokemonStats(_CamelModel):
    """Base stats of a Pokemon."""

    hp: int = Field(ge=0)
    attack: int = Field(ge=0)
    defense: int = Field(ge=0)
    special_attack: int = Field(ge=0)
    special_defense: int = Field(ge=0)
    speed: int = Field(ge=0)


class Pokemon(_CamelModel):
    """A single Pokemon record as stored in the database and returned by the API.

    The four relation lists are derived from ``types`` by the type chart engine;
    use ``Pokemon.from_types`` to build a record with them filled in.
    """

    pokedex_number: int = Field(ge=1)
    name: str = Field(min_length=1)
    types: list[str]
    sprite: str | None = None
    sprite_shiny: str | None = None
    height: int | None = Field(default=None, ge=0)
    weight: int | None = Field(default=None, ge=0)
    stats: PokemonStats | None = None
    strong_against: list[str] = Field(default_factory=list)
    weak_against: list[str] = Field(default_factory=list)
    resistant_to: list[str] = Field(default_factory=list)
    immune_to: list[str] = Field(default_factory=list)

    @field_validator("name")
    @classmethod
    def _lowercase_name(cls, value: str) -> str:
        return value.strip().lower()

    @field_validator("types")
    @classmethod
    def _validate_types(cls, value: list[str]) -> list[str]:
        # TypeChartError subclasses ValueError, so pydantic reports it as a validation error
        return list(normalize_type_profile(value))

    @computed_field  # type: ignore[prop-decorator]
    @property
    def display_name(self) -> str:
        """Human readable name (e.g., "mr-mime" -> "Mr-Mime")."""
        return "-".join(part.capitalize() for part in self.name.split("-"))

    @classmethod
    def from_types(cls, types: list[str], **fields: Any) -> "Pokemon":
        """Build a record whose type relations are computed from its types.

        Args:
            types: The Pokemon's one or two types, primary type first.
            **fields: Remaining record fields (pokedex_number, name, stats, ...).

        Returns:
            Validated Pokemon record.

        Raises:
            InvalidTypeProfileError: If the typing is empty, too long, or repeats a type.
            UnknownTypeError: If a type is not one of the 18 known types.
        """
        relations = compute_effectiveness(types)
        return cls(
            types=list(types),
            strong_against=list(relations.strong_against),
            weak_against=list(relations.weak_against),
            resistant_to=list(relations.resistant_to),
            immune_to=list(relations.immune_to),
            **fields,
        )

    def to_api_dict(self) -> dict[str, Any]:
        """Return the record serialized with camelCase keys."""
        return self.model_dump(by_alias=True)
