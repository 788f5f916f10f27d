#!/usr/bin/env python3
"""Sliding-Tile Solver.

Usage::

    python main.py solve "1 2 3|4 _ 6|7 5 8"          # A* with Manhattan distance
    python main.py solve "..." -a bfs                 # breadth-first search
    python main.py solve "..." --max-expansions 5000  # bounded search
    python main.py scramble -r 3 -c 4 --seed 7        # print a random board
"""

import logging
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from tilepuzzle.engine.puzzlegenerator import PuzzleGenerator  # noqa: E402
from tilepuzzle.engine.puzzlesolver import (  # noqa: E402
    SearchBudget,
    SearchEngine,
    breadth_first_search,
    get_heuristic,
)
from tilepuzzle.errors import Cancelled, MalformedLayoutError, NoSolutionError  # noqa: E402
from tilepuzzle.models.notation import format_board, parse_state  # noqa: E402


# -- option enums -------------------------------------------------------------


class Algorithm(StrEnum):
    astar = "astar"
    bfs = "bfs"


class HeuristicName(StrEnum):
    manhattan = "manhattan"
    zero = "zero"


# Exit codes per outcome.
EXIT_NO_SOLUTION = 1
EXIT_MALFORMED = 2
EXIT_CANCELLED = 3


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(show_path=False)],
        force=True,
    )


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False, help="Sliding-Tile Solver.")


@app.command()
def solve(
    board: str = typer.Argument(
        ...,
        help='Board text, rows split by "|", cells by spaces, blank as "_".',
    ),
    algorithm: Algorithm = typer.Option(
        Algorithm.astar, "-a", "--algorithm",
        help="Search algorithm.",
    ),
    heuristic: HeuristicName = typer.Option(
        HeuristicName.manhattan, "-H", "--heuristic",
        help="Heuristic for A*.",
    ),
    max_expansions: Optional[int] = typer.Option(
        None, "--max-expansions",
        min=0,
        help="Give up after expanding this many states.",
    ),
    timeout: Optional[float] = typer.Option(
        None, "--timeout",
        min=0.0,
        help="Give up after this many seconds.",
    ),
    animate: bool = typer.Option(
        False, "--animate",
        help="Play the solution back move by move.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log search progress.",
    ),
) -> None:
    """Solve BOARD and print the moves."""
    from frontend.cli.rich import app as ui

    _configure_logging(verbose)

    try:
        initial = parse_state(board)
    except MalformedLayoutError as exc:
        ui.show_error(str(exc))
        raise typer.Exit(EXIT_MALFORMED) from None

    budget = SearchBudget(max_expansions=max_expansions, timeout=timeout)
    try:
        if algorithm is Algorithm.bfs:
            solution = breadth_first_search(initial, budget)
        else:
            engine = SearchEngine(get_heuristic(heuristic.value))
            solution = engine.solve(initial, budget=budget)
    except NoSolutionError as exc:
        ui.show_board(initial.board, "Unsolvable")
        ui.show_error(str(exc))
        raise typer.Exit(EXIT_NO_SOLUTION) from None
    except Cancelled as exc:
        ui.show_error(f"{exc} Retry with a larger budget.")
        raise typer.Exit(EXIT_CANCELLED) from None

    if animate:
        ui.animate(initial, solution)
    ui.show_solution(initial, solution)
    typer.echo(" ".join(d.value for d in solution.directions))


@app.command()
def scramble(
    rows: int = typer.Option(3, "-r", "--rows", min=1, help="Board rows."),
    cols: int = typer.Option(3, "-c", "--cols", min=1, help="Board columns."),
    moves: Optional[int] = typer.Option(
        None, "-m", "--moves",
        min=1,
        help="Random slides away from the goal (default rows*cols*10).",
    ),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed."),
) -> None:
    """Print a random solvable board in solver notation."""
    if rows * cols < 2:
        typer.echo("A board needs at least two cells.", err=True)
        raise typer.Exit(EXIT_MALFORMED)
    board = PuzzleGenerator.generate(rows, cols, moves=moves, seed=seed)
    typer.echo(format_board(board))


if __name__ == "__main__":
    app()
