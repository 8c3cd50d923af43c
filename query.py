#!/usr/bin/env python3
"""Ad hoc query runner for Recipe Finder.

Run one ingredient search from the terminal without starting the UI.
Useful for checking the API key and endpoint configuration.

Usage:
    python query.py "chicken, rice"
    python query.py --debug "chicken, rice"  # Show full JSON of every recipe
"""

import asyncio
import sys

from rich.console import Console
from rich.table import Table

from src.controllers.search import SearchController
from src.models.models import SearchOutcome
from src.utils.config import config
from src.utils.logger import logger

console = Console()


def build_results_table(controller: SearchController) -> Table:
    """Tabulate the controller's current recipes in result order."""
    table = Table(title="Suggested Recipes")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Title", style="bold")
    table.add_column("Image")

    for position, recipe in enumerate(controller.recipes, start=1):
        table.add_row(str(position), recipe.title or "", recipe.image or "")
    return table


def run_query(ingredients: str, debug: bool = False) -> SearchOutcome:
    """Execute a single search and print the resulting state.

    Args:
        ingredients: Comma-separated ingredient text, sent as typed.
        debug: If True, print each recipe record as JSON.

    Returns:
        Outcome of the search cycle.
    """
    controller = SearchController(config)
    controller.set_query(ingredients)

    outcome = asyncio.run(controller.submit())
    console.print()

    if controller.error:
        console.print(f"[red]✗ {controller.error}[/red]")
        return outcome

    if not controller.recipes:
        console.print("[yellow]No recipes found for these ingredients[/yellow]")
        return outcome

    console.print(build_results_table(controller))

    if debug:
        console.print("[bold cyan]Debug Mode: Full Records[/bold cyan]")
        for recipe in controller.recipes:
            console.print_json(data=recipe.model_dump())

    return outcome


if __name__ == "__main__":
    args = sys.argv[1:]
    debug_mode = False
    if args and args[0] == "--debug":
        debug_mode = True
        args = args[1:]

    if not args or args[0].startswith("--"):
        print("Usage: python query.py [--debug] \"<ingredients>\"")
        print("")
        print("Examples:")
        print("  python query.py \"chicken, rice\"")
        print("  python query.py --debug \"tomato, basil, mozzarella\"")
        sys.exit(1)

    try:
        result = run_query(" ".join(args), debug=debug_mode)
    except KeyboardInterrupt:
        logger.info("Query interrupted by user.")
        sys.exit(0)

    sys.exit(0 if result == SearchOutcome.POPULATED else 1)
