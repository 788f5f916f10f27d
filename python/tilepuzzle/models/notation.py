"""One-line text notation for boards.

Rows are separated by ``|``, cells by spaces, and the blank is ``_``::

    1 2 3|4 _ 6|7 5 8
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tilepuzzle.errors import MalformedLayoutError
from tilepuzzle.models.board import Board

if TYPE_CHECKING:
    from tilepuzzle.engine.puzzlestate import State

ROW_SEPARATOR = "|"
CELL_SEPARATOR = " "
BLANK_SYMBOL = "_"


def parse_board(
    text: str,
    row_sep: str = ROW_SEPARATOR,
    cell_sep: str = CELL_SEPARATOR,
    blank: str = BLANK_SYMBOL,
) -> Board:
    """Parse *text* into a ``Board``; dimensions are taken from the text.

    Repeated cell separators are collapsed, so ``"1  2"`` is two cells.
    Both *blank* and ``0`` denote the blank.
    """
    text = text.strip()
    if not text:
        raise MalformedLayoutError("Board text is empty.")

    grid: list[list[int]] = []
    for r, raw_row in enumerate(text.split(row_sep)):
        cells = [c.strip() for c in raw_row.split(cell_sep) if c.strip()]
        if not cells:
            raise MalformedLayoutError(f"Row {r} is empty in {text!r}.")
        row: list[int] = []
        for cell in cells:
            if cell == blank:
                row.append(0)
                continue
            try:
                row.append(int(cell))
            except ValueError:
                raise MalformedLayoutError(
                    f"Cell {cell!r} in row {r} is neither a number nor {blank!r}."
                ) from None
        grid.append(row)

    cols = len(grid[0])
    if any(len(row) != cols for row in grid):
        raise MalformedLayoutError(
            f"Rows have different lengths: {[len(row) for row in grid]}."
        )
    return Board.make(len(grid), cols, grid)


def format_board(
    board: Board,
    row_sep: str = ROW_SEPARATOR,
    cell_sep: str = CELL_SEPARATOR,
    blank: str = BLANK_SYMBOL,
) -> str:
    return row_sep.join(
        cell_sep.join(blank if v == 0 else str(v) for v in row)
        for row in board.tiles
    )


def parse_state(text: str, **kwargs: str) -> State:
    """Parse *text* straight into a search ``State``."""
    from tilepuzzle.engine.puzzlestate import State

    return State.from_board(parse_board(text, **kwargs))
