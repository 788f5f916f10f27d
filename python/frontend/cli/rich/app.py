"""Rich terminal renderer: boards, solution tables and step-by-step playback.

Uses the ``rich`` library for styled output.  Everything here only reads
``tilepuzzle`` objects; solving happens in ``main.py``.
"""

from __future__ import annotations

import sys
import time

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from tilepuzzle.engine.puzzlesolver import Solution
from tilepuzzle.engine.puzzlestate import State
from tilepuzzle.engine.replay import Replay
from tilepuzzle.models.board import Board

console = Console()


# -- board rendering ----------------------------------------------------------


def render_board(board: Board, highlight: tuple[int, int] | None = None) -> Table:
    """Return a Rich Table of the grid.

    Tiles on their goal cell are green, the rest white.  The cell at
    *highlight* (usually the tile that just slid) is drawn reversed.
    """
    width = len(str(board.size - 1))
    table = Table(
        show_header=False,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.cols):
        table.add_column(width=width + 1, justify="center")

    for r in range(board.rows):
        table.add_row(*(_cell(board, r, c, width, (r, c) == highlight) for c in range(board.cols)))
    return table


def _cell(board: Board, r: int, c: int, width: int, highlighted: bool) -> Text:
    tile = board.get_tile(r, c)
    if tile.is_blank:
        return Text("·", style="dim")
    style = "bold green" if board.is_tile_correct(r, c) else "bold white"
    if highlighted:
        style += " reverse"
    return Text(f"{int(tile):>{width}}", style=style)


def _board_panel(
    board: Board, title: str, style: str, highlight: tuple[int, int] | None = None
) -> Panel:
    return Panel(
        Align.center(render_board(board, highlight)),
        title=f"[bold {style}]{title}  {board.rows}×{board.cols}[/bold {style}]",
        border_style=style,
        padding=(1, 2),
    )


# -- solution rendering -------------------------------------------------------


def render_moves(solution: Solution) -> Table:
    """Return a table listing every move of *solution*."""
    table = Table(
        title=f"{solution.cost} moves",
        title_style="bold cyan",
        box=rich.box.ROUNDED,
        border_style="dim",
    )
    table.add_column("#", justify="right", style="dim", width=4)
    table.add_column("Blank", style="cyan")
    table.add_column("Tile", justify="right", style="yellow")
    table.add_column("To", justify="center", style="dim")

    for i, action in enumerate(solution.actions, 1):
        table.add_row(
            str(i),
            action.direction.value,
            str(int(action.tile)),
            f"{action.target[0]},{action.target[1]}",
        )
    return table


def render_stats(solution: Solution) -> Text:
    stats = solution.stats
    text = Text()
    text.append("  Expanded: ", style="dim")
    text.append(str(stats.expanded), style="bold yellow")
    text.append("    Generated: ", style="dim")
    text.append(str(stats.generated), style="bold yellow")
    text.append("    Peak frontier: ", style="dim")
    text.append(str(stats.peak_frontier), style="bold yellow")
    text.append("    Time: ", style="dim")
    text.append(f"{stats.elapsed:.3f}s", style="bold yellow")
    return text


def show_solution(initial: State, solution: Solution) -> None:
    """Print the start board, the move list, search stats and the goal."""
    parts = [Align.center(_board_panel(initial.board, "Start", "bright_blue"))]
    if solution.actions:
        parts.append(Align.center(render_moves(solution)))
    else:
        parts.append(Align.center(Text("Already solved!", style="green")))
    parts.append(Align.center(_board_panel(solution.final_state.board, "Goal", "green")))
    parts.append(Align.center(render_stats(solution)))

    console.print()
    console.print(Group(*parts))


def animate(initial: State, solution: Solution, delay: float = 0.2) -> None:
    """Replay *solution* on screen one move at a time."""
    replay = Replay(initial)
    total = solution.cost
    for i, direction in enumerate(solution.directions):
        slid_to = replay.state.blank
        replay.move(direction)
        console.clear()

        progress = Text()
        progress.append(f"  Solving… move {i + 1}/{total} ", style="bold cyan")
        progress.append(f"({direction.value})", style="dim")

        console.print()
        console.print(Align.center(_board_panel(replay.state.board, "Auto-Solve", "cyan", slid_to)))
        console.print(Align.center(progress))
        sys.stdout.flush()
        time.sleep(delay)

    done = f"[bold green]Solved in {replay.moves} moves![/bold green]"
    console.print(Align.center(Text.from_markup(done)))


def show_board(board: Board, title: str = "Board") -> None:
    console.print(Align.center(_board_panel(board, title, "bright_blue")))


def show_error(message: str) -> None:
    console.print(f"[bold red]Error:[/bold red] {escape(message)}")
