# ABOUTME: Pokemon type effectiveness chart for Gen 6+ (18 types including Fairy).
# ABOUTME: Computes strong/weak/resistant/immune type relations for a Pokemon's typing.

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

# Effectiveness values
SUPER_EFFECTIVE = 2.0
NOT_VERY_EFFECTIVE = 0.5
NEUTRAL_VALUE = 1.0
IMMUNITY_VALUE = 0.0

MAX_PROFILE_LENGTH = 2

TYPES: tuple[str, ...] = (
    "normal",
    "fire",
    "water",
    "electric",
    "grass",
    "ice",
    "fighting",
    "poison",
    "ground",
    "flying",
    "psychic",
    "bug",
    "rock",
    "ghost",
    "dragon",
    "dark",
    "steel",
    "fairy",
)

_TYPE_INDEX: Mapping[str, int] = MappingProxyType({type_name: index for index, type_name in enumerate(TYPES)})

# Non-neutral matchups per attacking type; every pair not listed is 1x.
_MATCHUPS: dict[str, dict[float, tuple[str, ...]]] = {
    "normal": {
        NOT_VERY_EFFECTIVE: ("rock", "steel"),
        IMMUNITY_VALUE: ("ghost",),
    },
    "fire": {
        SUPER_EFFECTIVE: ("grass", "ice", "bug", "steel"),
        NOT_VERY_EFFECTIVE: ("fire", "water", "rock", "dragon"),
    },
    "water": {
        SUPER_EFFECTIVE: ("fire", "ground", "rock"),
        NOT_VERY_EFFECTIVE: ("water", "grass", "dragon"),
    },
    "electric": {
        SUPER_EFFECTIVE: ("water", "flying"),
        NOT_VERY_EFFECTIVE: ("electric", "grass", "dragon"),
        IMMUNITY_VALUE: ("ground",),
    },
    "grass": {
        SUPER_EFFECTIVE: ("water", "ground", "rock"),
        NOT_VERY_EFFECTIVE: ("fire", "grass", "poison", "flying", "bug", "dragon", "steel"),
    },
    "ice": {
        SUPER_EFFECTIVE: ("grass", "ground", "flying", "dragon"),
        NOT_VERY_EFFECTIVE: ("fire", "water", "ice", "steel"),
    },
    "fighting": {
        SUPER_EFFECTIVE: ("normal", "ice", "rock", "dark", "steel"),
        NOT_VERY_EFFECTIVE: ("poison", "flying", "psychic", "bug", "fairy"),
        IMMUNITY_VALUE: ("ghost",),
    },
    "poison": {
        SUPER_EFFECTIVE: ("grass", "fairy"),
        NOT_VERY_EFFECTIVE: ("poison", "ground", "rock", "ghost"),
        IMMUNITY_VALUE: ("steel",),
    },
    "ground": {
        SUPER_EFFECTIVE: ("fire", "electric", "poison", "rock", "steel"),
        NOT_VERY_EFFECTIVE: ("grass", "bug"),
        IMMUNITY_VALUE: ("flying",),
    },
    "flying": {
        SUPER_EFFECTIVE: ("grass", "fighting", "bug"),
        NOT_VERY_EFFECTIVE: ("electric", "rock", "steel"),
    },
    "psychic": {
        SUPER_EFFECTIVE: ("fighting", "poison"),
        NOT_VERY_EFFECTIVE: ("psychic", "steel"),
        IMMUNITY_VALUE: ("dark",),
    },
    "bug": {
        SUPER_EFFECTIVE: ("grass", "psychic", "dark"),
        NOT_VERY_EFFECTIVE: ("fire", "fighting", "poison", "flying", "ghost", "steel", "fairy"),
    },
    "rock": {
        SUPER_EFFECTIVE: ("fire", "ice", "flying", "bug"),
        NOT_VERY_EFFECTIVE: ("fighting", "ground", "steel"),
    },
    "ghost": {
        SUPER_EFFECTIVE: ("psychic", "ghost"),
        NOT_VERY_EFFECTIVE: ("dark",),
        IMMUNITY_VALUE: ("normal",),
    },
    "dragon": {
        SUPER_EFFECTIVE: ("dragon",),
        NOT_VERY_EFFECTIVE: ("steel",),
        IMMUNITY_VALUE: ("fairy",),
    },
    "dark": {
        SUPER_EFFECTIVE: ("psychic", "ghost"),
        NOT_VERY_EFFECTIVE: ("fighting", "dark", "fairy"),
    },
    "steel": {
        SUPER_EFFECTIVE: ("ice", "rock", "fairy"),
        NOT_VERY_EFFECTIVE: ("fire", "water", "electric", "steel"),
    },
    "fairy": {
        SUPER_EFFECTIVE: ("fighting", "dragon", "dark"),
        NOT_VERY_EFFECTIVE: ("fire", "poison", "steel"),
    },
}


def _build_effectiveness_chart() -> Mapping[str, Mapping[str, float]]:
    """Expand the sparse matchup listing into a read-only 18x18 chart."""
    chart: dict[str, Mapping[str, float]] = {}
    for atk_type in TYPES:
        row = dict.fromkeys(TYPES, NEUTRAL_VALUE)
        for multiplier, def_types in _MATCHUPS[atk_type].items():
            for def_type in def_types:
                row[def_type] = multiplier
        chart[atk_type] = MappingProxyType(row)
    return MappingProxyType(chart)


# 18x18 effectiveness matrix: EFFECTIVENESS[attacking_type][defending_type]
EFFECTIVENESS: Mapping[str, Mapping[str, float]] = _build_effectiveness_chart()


class TypeChartError(ValueError):
    """Base class for invalid input to the type matchup functions."""


class InvalidTypeProfileError(TypeChartError):
    """Raised when a typing has no types, more than two, or a repeated type."""


class UnknownTypeError(TypeChartError):
    """Raised when a type identifier is not one of the 18 known types."""

    def __init__(self, type_name: str) -> None:
        super().__init__(f"Unknown type: {type_name!r}")
        self.type_name = type_name


@dataclass(frozen=True)
class TypeRelations:
    """Categorized type matchups for a single Pokemon typing.

    Attributes:
        strong_against: Types this Pokemon's attacks hit super effectively.
        weak_against: Types whose attacks hit this Pokemon super effectively.
        resistant_to: Types whose attacks deal reduced (non-zero) damage.
        immune_to: Types whose attacks deal no damage.
    """

    strong_against: tuple[str, ...] = ()
    weak_against: tuple[str, ...] = ()
    resistant_to: tuple[str, ...] = ()
    immune_to: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, list[str]]:
        """Return the relations keyed the way API responses name them."""
        return {
            "strongAgainst": list(self.strong_against),
            "weakAgainst": list(self.weak_against),
            "resistantTo": list(self.resistant_to),
            "immuneTo": list(self.immune_to),
        }


def normalize_type(type_name: str) -> str:
    """Normalize a single type identifier and check it is known.

    Args:
        type_name: Type identifier in any letter case (e.g., "Fire").

    Returns:
        The lowercase type identifier.

    Raises:
        UnknownTypeError: If the type is not one of the 18 known types.
    """
    if not isinstance(type_name, str):
        raise UnknownTypeError(str(type_name))

    normalized = type_name.strip().lower()
    if normalized not in _TYPE_INDEX:
        raise UnknownTypeError(type_name)
    return normalized


def normalize_type_profile(types: Iterable[str]) -> tuple[str, ...]:
    """Validate a Pokemon typing and return it normalized.

    Args:
        types: One or two type identifiers, primary type first.

    Returns:
        Tuple of lowercase type identifiers in the given order.

    Raises:
        InvalidTypeProfileError: If there are 0 or more than 2 types, or a type repeats.
        UnknownTypeError: If any type is not one of the 18 known types.
    """
    if isinstance(types, str):
        raise InvalidTypeProfileError("Type profile must be a sequence of types, not a single string")

    raw_types = list(types)
    if not 1 <= len(raw_types) <= MAX_PROFILE_LENGTH:
        raise InvalidTypeProfileError(f"Type profile must contain 1 or 2 types, got {len(raw_types)}")

    profile = tuple(normalize_type(type_name) for type_name in raw_types)
    if len(set(profile)) != len(profile):
        raise InvalidTypeProfileError(f"Type profile contains a repeated type: {list(profile)}")

    return profile


def get_effectiveness(atk_type: str, def_types: Iterable[str]) -> float:
    """Calculate the multiplier of an attacking type against a defending typing.

    Args:
        atk_type: The attacking type (e.g., "rock").
        def_types: The defender's one or two types.

    Returns:
        Effectiveness multiplier: 0, 0.25, 0.5, 1, 2, or 4.
    """
    row = EFFECTIVENESS[normalize_type(atk_type)]
    multiplier = NEUTRAL_VALUE
    for def_type in normalize_type_profile(def_types):
        multiplier *= row[def_type]
    return multiplier


def get_defensive_multipliers(types: Iterable[str]) -> dict[str, float]:
    """Return the combined multiplier every attacking type has against this typing.

    Multipliers of both types are multiplied together, so a 0x on either type
    makes the combined value 0 and two 2x weaknesses stack to 4x.

    Args:
        types: The defender's one or two types.

    Returns:
        Dict mapping each attacking type to its combined multiplier, in canonical order.
    """
    profile = normalize_type_profile(types)
    multipliers: dict[str, float] = {}
    for atk_type in TYPES:
        multiplier = NEUTRAL_VALUE
        for def_type in profile:
            multiplier *= EFFECTIVENESS[atk_type][def_type]
        multipliers[atk_type] = multiplier
    return multipliers


def get_offensive_multipliers(types: Iterable[str]) -> dict[str, float]:
    """Return the best multiplier this typing's attacks reach against every type.

    A move has a single type, so each of the Pokemon's types attacks on its own
    and the higher multiplier is kept.

    Args:
        types: The attacker's one or two types.

    Returns:
        Dict mapping each defending type to the best multiplier, in canonical order.
    """
    profile = normalize_type_profile(types)
    return {def_type: max(EFFECTIVENESS[atk_type][def_type] for atk_type in profile) for def_type in TYPES}


def compute_effectiveness(types: Iterable[str]) -> TypeRelations:
    """Categorize the type matchups of a Pokemon with the given typing.

    Args:
        types: The Pokemon's one or two types, primary type first.

    Returns:
        TypeRelations with each tuple in canonical type order.

    Raises:
        InvalidTypeProfileError: If there are 0 or more than 2 types, or a type repeats.
        UnknownTypeError: If any type is not one of the 18 known types.
    """
    profile = normalize_type_profile(types)

    immune_to: list[str] = []
    resistant_to: list[str] = []
    weak_against: list[str] = []

    for atk_type, multiplier in get_defensive_multipliers(profile).items():
        if multiplier == IMMUNITY_VALUE:
            immune_to.append(atk_type)
        elif multiplier < NEUTRAL_VALUE:
            resistant_to.append(atk_type)
        elif multiplier > NEUTRAL_VALUE:
            weak_against.append(atk_type)
        # 1x is neutral and not listed

    strong_against = [
        def_type for def_type, multiplier in get_offensive_multipliers(profile).items() if multiplier > NEUTRAL_VALUE
    ]

    return TypeRelations(
        strong_against=tuple(strong_against),
        weak_against=tuple(weak_against),
        resistant_to=tuple(resistant_to),
        immune_to=tuple(immune_to),
    )


def generate_all_type_combinations() -> list[tuple[str, ...]]:
    """Generate all 171 valid type profiles.

    Returns:
        List of 171 tuples:
        - 18 monotypes as (type,)
        - 153 dual types as (type1, type2), in canonical type order
    """
    monotypes: list[tuple[str, ...]] = [(t,) for t in TYPES]
    dual_types: list[tuple[str, ...]] = [
        (type1, type2) for i, type1 in enumerate(TYPES) for type2 in TYPES[i + 1 :]
    ]
    return monotypes + dual_types
