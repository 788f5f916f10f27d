"""Exceptions raised by the puzzle model and the search engines."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tilepuzzle.engine.puzzlesolver.solver import SearchStats


class PuzzleError(Exception):
    """Base class for every error raised by ``tilepuzzle``."""


class MalformedLayoutError(PuzzleError, ValueError):
    """The grid is not a permutation of ``0..rows*cols-1`` for its dimensions."""


class IllegalMoveError(PuzzleError, ValueError):
    """The blank cannot move in the requested direction."""


class SearchError(PuzzleError):
    """A search ended without a solution.

    ``stats`` holds the counters gathered up to that point.
    """

    def __init__(self, message: str, stats: SearchStats | None = None) -> None:
        super().__init__(message)
        self.stats = stats


class NoSolutionError(SearchError):
    """The frontier emptied before a goal state was reached."""


class Cancelled(SearchError):
    """The search budget ran out before the search finished."""
