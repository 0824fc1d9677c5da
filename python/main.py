#!/usr/bin/env python3
"""Water Sort Puzzle solver.

Usage::

    python main.py solve "red,blue,red|blue,red,blue||"   # fastest solution
    python main.py hint "red,blue,red|blue,red,blue||"    # first move only
    python main.py generate --vials 7 --seed 42           # random board key

Keys list each vial's colors bottom to top, separated by ``,``, with
vials separated by ``|``.  Vial numbers printed for humans are 1-based.
"""

import logging
import random
import sys
from pathlib import Path
from typing import Optional

import rich.box
import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.engine.gamegenerator import GameGenerator  # noqa: E402
from backend.engine.gamegenerator.generator import MAX_VIALS, MIN_VIALS  # noqa: E402
from backend.engine.gamesolver import SolveResult, Solver, SolverConfig  # noqa: E402
from backend.models import Puzzle, PuzzleError  # noqa: E402

console = Console()

EXIT_UNSOLVED = 1
EXIT_BAD_INPUT = 2


# -- helpers ------------------------------------------------------------------


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _load(
    key: str,
    config_path: Optional[Path],
    max_depth: Optional[int],
    node_budget: Optional[int],
) -> tuple[Puzzle, SolverConfig]:
    try:
        puzzle = Puzzle.from_key(key)
        config = SolverConfig.load(config_path).override(max_depth, node_budget)
    except (PuzzleError, ValueError, OSError) as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(EXIT_BAD_INPUT) from exc
    return puzzle, config


def _render_path(result: SolveResult) -> Table:
    table = Table(box=rich.box.ROUNDED, border_style="bright_blue")
    table.add_column("#", justify="right", style="dim")
    table.add_column("From", justify="right", style="bold cyan")
    table.add_column("To", justify="right", style="bold cyan")
    for i, move in enumerate(result.path, 1):
        table.add_row(str(i), str(move.source + 1), str(move.dest + 1))
    return table


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False, help="Water Sort Puzzle solver.")

_KEY = typer.Argument(..., help="Puzzle key, e.g. 'red,blue|blue,red||'.")
_MAX_DEPTH = typer.Option(None, "--max-depth", min=0, help="Deepest level searched.")
_NODE_BUDGET = typer.Option(
    None, "--node-budget", min=1, help="Maximum number of states expanded."
)
_CONFIG = typer.Option(
    None, "-c", "--config", help="TOML file with a [solver] table."
)
_VERBOSE = typer.Option(False, "-v", "--verbose", help="Log search progress.")


@app.command()
def solve(
    key: str = _KEY,
    max_depth: Optional[int] = _MAX_DEPTH,
    node_budget: Optional[int] = _NODE_BUDGET,
    config: Optional[Path] = _CONFIG,
    verbose: bool = _VERBOSE,
) -> None:
    """Find a fastest pour sequence."""
    _setup_logging(verbose)
    puzzle, solver_config = _load(key, config, max_depth, node_budget)
    result = Solver.solve_with(puzzle, solver_config)

    if not result.solved:
        console.print(f"[yellow]{result.reason}[/yellow] ({result.nodes_expanded} states)")
        raise typer.Exit(EXIT_UNSOLVED)

    n = result.min_moves
    console.print(
        f"[bold green]{result.reason}:[/bold green] "
        f"{n} move{'' if n == 1 else 's'} ({result.nodes_expanded} states)"
    )
    if result.path:
        console.print(_render_path(result))


@app.command()
def hint(
    key: str = _KEY,
    max_depth: Optional[int] = _MAX_DEPTH,
    node_budget: Optional[int] = _NODE_BUDGET,
    config: Optional[Path] = _CONFIG,
    verbose: bool = _VERBOSE,
) -> None:
    """Show the first move of a fastest solution."""
    _setup_logging(verbose)
    puzzle, solver_config = _load(key, config, max_depth, node_budget)
    result = Solver.solve_with(puzzle, solver_config)

    move = result.first_move
    if move is None:
        style = "green" if result.solved else "yellow"
        console.print(f"[{style}]{result.reason}[/{style}]")
        if not result.solved:
            raise typer.Exit(EXIT_UNSOLVED)
        return
    console.print(
        f"[cyan]Hint:[/cyan] pour vial [bold]{move.source + 1}[/bold] "
        f"into vial [bold]{move.dest + 1}[/bold]"
    )


@app.command()
def generate(
    vials: int = typer.Option(
        7, "-n", "--vials", min=MIN_VIALS, max=MAX_VIALS, help="Number of vials."
    ),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed."),
) -> None:
    """Print the key of a random board."""
    puzzle = GameGenerator.generate(vials, random.Random(seed))
    print(puzzle.key())


if __name__ == "__main__":
    app()
