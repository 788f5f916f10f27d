"""Sliding-tile puzzle model and A* solver."""

from tilepuzzle.engine.puzzlesolver import SearchBudget, Solution, solve
from tilepuzzle.engine.puzzlestate import State
from tilepuzzle.errors import (
    Cancelled,
    IllegalMoveError,
    MalformedLayoutError,
    NoSolutionError,
    PuzzleError,
    SearchError,
)
from tilepuzzle.models import Action, Board, Direction, Tile, goal_board

__version__ = "0.1.0"

__all__ = [
    "Action",
    "Board",
    "Cancelled",
    "Direction",
    "IllegalMoveError",
    "MalformedLayoutError",
    "NoSolutionError",
    "PuzzleError",
    "SearchBudget",
    "SearchError",
    "Solution",
    "State",
    "Tile",
    "goal_board",
    "solve",
]
