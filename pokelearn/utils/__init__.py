# ABOUTME: Utils package for pokelearn utility functions.
# ABOUTME: Contains the type chart and the type matchup engine.

from pokelearn.utils.type_chart import (
    EFFECTIVENESS,
    TYPES,
    InvalidTypeProfileError,
    TypeChartError,
    TypeRelations,
    UnknownTypeError,
    compute_effectiveness,
    generate_all_type_combinations,
    get_defensive_multipliers,
    get_effectiveness,
    get_offensive_multipliers,
    normalize_type,
    normalize_type_profile,
)

__all__ = [
    "EFFECTIVENESS",
    "TYPES",
    "InvalidTypeProfileError",
    "TypeChartError",
    "TypeRelations",
    "UnknownTypeError",
    "compute_effectiveness",
    "generate_all_type_combinations",
    "get_defensive_multipliers",
    "get_effectiveness",
    "get_offensive_multipliers",
    "normalize_type",
    "normalize_type_profile",
]
