"""Board model for the sliding-tile puzzle."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import StrEnum
from functools import lru_cache

from tilepuzzle.errors import MalformedLayoutError


class Tile(int):
    """A single cell value. ``0`` is the blank."""

    __slots__ = ()

    @property
    def is_blank(self) -> bool:
        return self == 0

    def __repr__(self) -> str:
        return f"Tile({int(self)})"


BLANK = Tile(0)


class Direction(StrEnum):
    """Where the *blank* moves, relative to its current cell.

    Members are declared in expansion order; iteration order is relied on
    for deterministic search.
    """

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def delta(self) -> tuple[int, int]:
        return _DELTAS[self]

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]


_DELTAS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}

_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

Grid = tuple[tuple[Tile, ...], ...]


@dataclass(frozen=True)
class Board:
    """An immutable ``rows`` x ``cols`` grid of tiles.

    The grid always holds every value in ``0..rows*cols-1`` exactly once.
    Two boards are equal when their grids are equal cell by cell.
    """

    rows: int
    cols: int
    tiles: Grid

    def __post_init__(self) -> None:
        object.__setattr__(self, "tiles", _validate(self.rows, self.cols, self.tiles))

    # -- construction helpers -------------------------------------------------

    @classmethod
    def make(cls, rows: int, cols: int, grid: Sequence[Sequence[int]]) -> Board:
        """Create a board from a nested row-major grid.

        Example::

            Board.make(3, 3, [[1, 2, 3], [4, 5, 6], [7, 0, 8]])
        """
        return cls(rows=rows, cols=cols, tiles=grid)  # type: ignore[arg-type]

    @classmethod
    def from_flat(cls, rows: int, cols: int, flat: Sequence[int]) -> Board:
        """Create a board from a flat row-major tile list."""
        if not _positive(rows) or not _positive(cols):
            raise MalformedLayoutError(
                f"Dimensions must be positive integers, got {rows!r}x{cols!r}."
            )
        if len(flat) != rows * cols:
            raise MalformedLayoutError(
                f"Expected {rows * cols} tiles for a {rows}×{cols} board, "
                f"got {len(flat)}."
            )
        return cls.make(rows, cols, [flat[r * cols : (r + 1) * cols] for r in range(rows)])

    @classmethod
    def _trusted(cls, rows: int, cols: int, tiles: Grid) -> Board:
        # Skips validation; only for grids derived from a valid board.
        obj = object.__new__(cls)
        object.__setattr__(obj, "rows", rows)
        object.__setattr__(obj, "cols", cols)
        object.__setattr__(obj, "tiles", tiles)
        return obj

    # -- queries --------------------------------------------------------------

    @property
    def size(self) -> int:
        return self.rows * self.cols

    def get_tile(self, row: int, col: int) -> Tile:
        return self.tiles[row][col]

    def find(self, value: int) -> tuple[int, int]:
        """Return the ``(row, col)`` holding *value*."""
        for r, row in enumerate(self.tiles):
            for c, v in enumerate(row):
                if v == value:
                    return r, c
        raise ValueError(f"Tile {value} is not on the board.")

    def flat(self) -> tuple[Tile, ...]:
        return tuple(v for row in self.tiles for v in row)

    def goal_position(self, value: int) -> tuple[int, int]:
        """Where *value* sits on the goal board of these dimensions."""
        if value == 0:
            return self.rows - 1, self.cols - 1
        return divmod(value - 1, self.cols)

    def is_solved(self) -> bool:
        return self == goal_board(self.rows, self.cols)

    def is_tile_correct(self, row: int, col: int) -> bool:
        """Check if a specific tile is in its goal position."""
        return self.goal_position(self.tiles[row][col]) == (row, col)

    # -- derived boards -------------------------------------------------------

    def swap(self, a: tuple[int, int], b: tuple[int, int]) -> Board:
        """Return a new board with cells *a* and *b* exchanged."""
        (ar, ac), (br, bc) = a, b
        rows = [list(row) for row in self.tiles]
        rows[ar][ac], rows[br][bc] = rows[br][bc], rows[ar][ac]
        return Board._trusted(self.rows, self.cols, tuple(tuple(row) for row in rows))

    def copy(self) -> Board:
        return Board._trusted(
            self.rows,
            self.cols,
            tuple(tuple(Tile(int(v)) for v in row) for row in self.tiles),
        )

    def __str__(self) -> str:
        width = len(str(self.size - 1))
        return "\n".join(
            " ".join("_".rjust(width) if v == 0 else str(v).rjust(width) for v in row)
            for row in self.tiles
        )


@lru_cache(maxsize=None)
def goal_board(rows: int, cols: int) -> Board:
    """Return the solved board: ``1..rows*cols-1`` row-major, blank last."""
    if not _positive(rows) or not _positive(cols):
        raise MalformedLayoutError(
            f"Dimensions must be positive integers, got {rows!r}x{cols!r}."
        )
    n = rows * cols
    flat = list(range(1, n)) + [0]
    return Board.from_flat(rows, cols, flat)


# -- validation ---------------------------------------------------------------


def _positive(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def _as_tile(value: object) -> Tile:
    if isinstance(value, bool) or not isinstance(value, int):
        raise MalformedLayoutError(f"Tile values must be integers, got {value!r}.")
    return value if isinstance(value, Tile) else Tile(value)


def _validate(rows: int, cols: int, tiles: Iterable[Sequence[int]]) -> Grid:
    """Check dimensions and the permutation invariant; return the tuple grid."""
    if not _positive(rows) or not _positive(cols):
        raise MalformedLayoutError(
            f"Dimensions must be positive integers, got {rows!r}x{cols!r}."
        )
    try:
        grid = tuple(tuple(_as_tile(v) for v in row) for row in tiles)
    except TypeError as exc:
        raise MalformedLayoutError(f"Grid is not a sequence of rows: {exc}") from exc
    if len(grid) != rows or any(len(row) != cols for row in grid):
        shape = [len(row) for row in grid]
        raise MalformedLayoutError(
            f"Grid shape {shape} does not match a {rows}×{cols} board."
        )
    values = sorted(v for row in grid for v in row)
    if values != list(range(rows * cols)):
        raise MalformedLayoutError(
            f"Tiles must be a permutation of 0..{rows * cols - 1}, got {values}."
        )
    return grid
