"""ABOUTME: CLI entry point for pokelearn commands.
ABOUTME: Provides seed, matchup, show, and search commands via Typer."""

import asyncio
from collections.abc import Sequence

import typer
from rich.console import Console
from rich.table import Table

from pokelearn.ingestion import seed_database, update_single_pokemon
from pokelearn.logs import init_logging
from pokelearn.models import Pokemon
from pokelearn.settings import settings
from pokelearn.storage import count_pokemon, get_pokemon_by_name, list_pokemon, search_pokemon
from pokelearn.utils.type_chart import TypeChartError, compute_effectiveness

app = typer.Typer(
    name="pokelearn",
    help="Pokemon type matchups backed by PokeAPI data.",
    no_args_is_help=True,
)

console = Console()

_RELATION_LABELS = {
    "strong_against": "Strong against",
    "weak_against": "Weak against",
    "resistant_to": "Resistant to",
    "immune_to": "Immune to",
}


def _format_types(types: Sequence[str]) -> str:
    return ", ".join(types) if types else "-"


def _relations_table(title: str, relations: dict[str, Sequence[str]]) -> Table:
    """Build a two-column table of relation labels and type lists."""
    table = Table(title=title)
    table.add_column("Relation", style="bold")
    table.add_column("Types")
    for key, label in _RELATION_LABELS.items():
        table.add_row(label, _format_types(relations[key]))
    return table


def _print_pokemon(pokemon: Pokemon) -> None:
    """Print a stored Pokemon record."""
    console.print(f"[bold]#{pokemon.pokedex_number} {pokemon.display_name}[/] ({'/'.join(pokemon.types)})")
    if pokemon.stats is not None:
        stats = pokemon.stats
        console.print(
            f"  HP {stats.hp} | Atk {stats.attack} | Def {stats.defense} | "
            f"SpA {stats.special_attack} | SpD {stats.special_defense} | Spe {stats.speed}"
        )
    relations = {key: getattr(pokemon, key) for key in _RELATION_LABELS}
    console.print(_relations_table(pokemon.display_name, relations))


@app.callback()
def main(
    log_config: bool = typer.Option(True, "--log-config/--no-log-config", help="Apply configs/logging.yml"),
) -> None:
    """Configure logging before running a command."""
    if log_config and settings.logging_config_path.exists():
        init_logging(settings.logging_config_path)


@app.command()
def seed(
    clear: bool = typer.Option(False, "--clear", "-c", help="Delete stored Pokemon before seeding"),
    limit: int | None = typer.Option(None, "--limit", "-n", min=1, help="Only fetch the first N Pokemon"),
    update: int | None = typer.Option(None, "--update", "-u", min=1, help="Refresh a single Pokemon by number"),
) -> None:
    """Fetch Pokemon from PokeAPI and store them with their type relations."""
    if update is not None:
        try:
            pokemon = asyncio.run(update_single_pokemon(update))
        except Exception as e:
            console.print(f"[red]Error updating Pokemon #{update}:[/] {e}")
            raise typer.Exit(1) from None
        console.print(f"[green]Updated #{pokemon.pokedex_number} {pokemon.display_name}[/]")
        return

    total = limit if limit is not None else settings.TOTAL_POKEMON
    console.print(f"[blue]Seeding {total} Pokemon into {settings.db_path}[/]")
    summary = asyncio.run(seed_database(range(1, total + 1), clear=clear))

    table = Table(title="Seeding summary")
    table.add_column("Saved", style="green")
    table.add_column("Skipped", style="red")
    table.add_column("Processed")
    table.add_row(str(summary.success_count), str(summary.error_count), str(summary.total))
    console.print(table)

    if summary.failed_numbers:
        console.print(f"[yellow]Skipped numbers:[/] {', '.join(map(str, summary.failed_numbers))}")

    if summary.error_count and not summary.success_count:
        raise typer.Exit(1)

    console.print(f"[blue]{count_pokemon()} Pokemon stored. First entries:[/]")
    for pokemon in list_pokemon(limit=5):
        console.print(
            f"  #{pokemon.pokedex_number} {pokemon.display_name} ({'/'.join(pokemon.types)})"
            f" strong against: {_format_types(pokemon.strong_against)};"
            f" weak against: {_format_types(pokemon.weak_against)}"
        )


@app.command()
def matchup(
    types: list[str] = typer.Argument(..., help="One or two types, e.g. 'ground flying'"),
) -> None:
    """Show the type relations of a typing."""
    try:
        relations = compute_effectiveness(types)
    except TypeChartError as e:
        console.print(f"[red]Error:[/] {e}")
        raise typer.Exit(1) from None

    title = "/".join(t.lower() for t in types)
    console.print(
        _relations_table(
            title,
            {
                "strong_against": relations.strong_against,
                "weak_against": relations.weak_against,
                "resistant_to": relations.resistant_to,
                "immune_to": relations.immune_to,
            },
        )
    )


@app.command()
def show(name: str = typer.Argument(..., help="Pokemon name, e.g. 'charizard'")) -> None:
    """Show a stored Pokemon."""
    try:
        pokemon = get_pokemon_by_name(name)
    except FileNotFoundError as e:
        console.print(f"[red]Error:[/] {e}. Run 'pokelearn seed' first.")
        raise typer.Exit(1) from None
    if pokemon is None:
        console.print(f"[red]Error:[/] Pokemon '{name}' not found. Run 'pokelearn seed' first.")
        raise typer.Exit(1)
    _print_pokemon(pokemon)


@app.command()
def search(
    query: str = typer.Argument(..., help="Start of a Pokemon name"),
    limit: int = typer.Option(10, "--limit", "-n", min=1, help="Maximum number of results"),
) -> None:
    """Autocomplete stored Pokemon names."""
    try:
        results = search_pokemon(query, limit=limit)
    except FileNotFoundError as e:
        console.print(f"[red]Error:[/] {e}. Run 'pokelearn seed' first.")
        raise typer.Exit(1) from None
    if not results:
        console.print(f"[yellow]No Pokemon found for '{query}'[/]")
        return
    for pokemon in results:
        console.print(f"#{pokemon.pokedex_number} {pokemon.display_name} ({'/'.join(pokemon.types)})")


if __name__ == "__main__":
    app()
