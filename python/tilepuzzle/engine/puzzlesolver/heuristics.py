"""Heuristic estimates of the remaining distance to the goal."""

from __future__ import annotations

from typing import Protocol

from tilepuzzle.engine.puzzlestate import State


class Heuristic(Protocol):
    """Any callable mapping a ``State`` to a non-negative cost estimate.

    The search engine only ever calls it; A* returns shortest paths as long as
    the estimate never exceeds the true remaining number of moves.
    """

    def __call__(self, state: State) -> float: ...


def manhattan_distance(state: State) -> int:
    """Sum of grid distances of every non-blank tile from its goal cell."""
    board = state.board
    cols = board.cols
    dist = 0
    for r, row in enumerate(board.tiles):
        for c, tile in enumerate(row):
            if tile == 0:
                continue
            gr, gc = divmod(tile - 1, cols)
            dist += abs(r - gr) + abs(c - gc)
    return dist


def zero_heuristic(state: State) -> int:
    return 0


HEURISTICS: dict[str, Heuristic] = {
    "manhattan": manhattan_distance,
    "zero": zero_heuristic,
}


def get_heuristic(name: str) -> Heuristic:
    try:
        return HEURISTICS[name]
    except KeyError:
        raise KeyError(
            f"Unknown heuristic {name!r}; choose from {', '.join(sorted(HEURISTICS))}."
        ) from None
