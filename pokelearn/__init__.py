"""ABOUTME: pokelearn package for Pokemon type matchups backed by PokeAPI data.
ABOUTME: Exposes the package version."""

__version__ = "1.0.0"
