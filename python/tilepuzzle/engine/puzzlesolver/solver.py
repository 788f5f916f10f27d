"""Informed best-first (A*) search over puzzle states."""

from __future__ import annotations

import heapq
import itertools
import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import StrEnum
from time import perf_counter
from typing import NoReturn

from tilepuzzle.engine.puzzlesolver.heuristics import Heuristic, manhattan_distance
from tilepuzzle.engine.puzzlesolver.node import Node
from tilepuzzle.engine.puzzlestate import State
from tilepuzzle.errors import Cancelled, NoSolutionError, SearchError
from tilepuzzle.models.action import Action
from tilepuzzle.models.board import Direction

logger = logging.getLogger(__name__)


class SearchStatus(StrEnum):
    READY = "ready"
    SEARCHING = "searching"
    SOLVED = "solved"
    EXHAUSTED = "exhausted"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class SearchBudget:
    """Search limits; ``None`` means unlimited.

    ``timeout`` and ``should_stop`` are polled once per loop iteration.
    ``max_expansions`` is checked only when a node is about to be expanded,
    so a goal reached within the limit is still returned.
    """

    max_expansions: int | None = None
    timeout: float | None = None
    should_stop: Callable[[], bool] | None = None

    def interrupted(self, elapsed: float) -> str | None:
        """Return why the search must stop now, or ``None`` to carry on."""
        if self.timeout is not None and elapsed > self.timeout:
            return f"timeout of {self.timeout:g}s reached"
        if self.should_stop is not None and self.should_stop():
            return "stopped by caller"
        return None

    def exhausted(self, expanded: int) -> str | None:
        """Return a reason if *expanded* nodes leave no room for another."""
        if self.max_expansions is not None and expanded >= self.max_expansions:
            return f"expansion limit of {self.max_expansions} reached"
        return None

    def exceeded(self, expanded: int, elapsed: float) -> str | None:
        return self.exhausted(expanded) or self.interrupted(elapsed)


@dataclass
class SearchStats:
    expanded: int = 0
    generated: int = 0
    peak_frontier: int = 0
    explored: int = 0
    elapsed: float = 0.0


@dataclass(frozen=True)
class Solution:
    """A goal path: the actions from the initial state, in order."""

    actions: tuple[Action, ...]
    final_state: State
    stats: SearchStats = field(default_factory=SearchStats, compare=False)

    @property
    def cost(self) -> int:
        return len(self.actions)

    @property
    def directions(self) -> list[Direction]:
        return [a.direction for a in self.actions]

    def replay(self, initial: State) -> State:
        """Apply every action to *initial* and return the resulting state."""
        state = initial
        for action in self.actions:
            state = state.apply(action.direction)
        return state


class SearchEngine:
    """A* driver: ``READY -> SEARCHING -> SOLVED | EXHAUSTED | CANCELLED``.

    The frontier is a binary heap keyed by ``cost + heuristic`` with an
    insertion counter as tie-breaker, so equal keys pop first-in first-out
    and repeated runs return the same path.
    """

    def __init__(self, heuristic: Heuristic = manhattan_distance) -> None:
        self.heuristic = heuristic
        self.status = SearchStatus.READY
        self.stats = SearchStats()

    def solve(
        self,
        initial: State,
        heuristic: Heuristic | None = None,
        budget: SearchBudget | None = None,
    ) -> Solution:
        """Search from *initial* to the goal of the same dimensions.

        Raises ``NoSolutionError`` when the reachable space holds no goal and
        ``Cancelled`` when *budget* runs out first.  Any other exception, for
        instance from a faulty heuristic or stop predicate, propagates after
        the engine is put back to ``READY``.
        """
        h = self.heuristic if heuristic is None else heuristic
        budget = budget or SearchBudget()
        self.status = SearchStatus.SEARCHING
        self.stats = SearchStats()
        logger.debug(
            "A* start: %dx%d board, heuristic=%s",
            initial.rows, initial.cols, getattr(h, "__name__", type(h).__name__),
        )
        try:
            return self._search(initial, h, budget)
        except SearchError:
            raise
        except BaseException:
            self.status = SearchStatus.READY
            raise

    def _search(self, initial: State, h: Heuristic, budget: SearchBudget) -> Solution:
        stats = self.stats
        t0 = perf_counter()
        counter = itertools.count()
        root = Node.root(initial, h)
        frontier: list[tuple[float, int, Node]] = [(root.f, next(counter), root)]
        explored: set[State] = set()

        while frontier:
            stats.elapsed = perf_counter() - t0
            reason = budget.interrupted(stats.elapsed)
            if reason is not None:
                self._cancel(reason, explored)

            stats.peak_frontier = max(stats.peak_frontier, len(frontier))
            _, _, node = heapq.heappop(frontier)

            if node.state.is_goal():
                return self._finish(node, explored, t0)
            if node.state in explored:
                continue

            reason = budget.exhausted(stats.expanded)
            if reason is not None:
                self._cancel(reason, explored)

            explored.add(node.state)
            stats.expanded += 1
            for child in node.expand():
                stats.generated += 1
                if child.state not in explored:
                    heapq.heappush(frontier, (child.f, next(counter), child))

        stats.elapsed = perf_counter() - t0
        stats.explored = len(explored)
        self.status = SearchStatus.EXHAUSTED
        self._log_outcome()
        raise NoSolutionError(
            f"No solution: explored {len(explored)} states without reaching the goal.",
            stats,
        )

    def hint(self, initial: State, budget: SearchBudget | None = None) -> Direction | None:
        """Return the first move of a shortest solution, ``None`` if solved."""
        if initial.is_goal():
            return None
        solution = self.solve(initial, budget=budget)
        return solution.directions[0]

    # -- helpers --------------------------------------------------------------

    def _finish(self, node: Node, explored: set[State], t0: float) -> Solution:
        self.stats.elapsed = perf_counter() - t0
        self.stats.explored = len(explored)
        self.status = SearchStatus.SOLVED
        self._log_outcome(node.cost)
        return Solution(actions=node.reconstruct_path(), final_state=node.state, stats=self.stats)

    def _cancel(self, reason: str, explored: set[State]) -> NoReturn:
        self.stats.explored = len(explored)
        self.status = SearchStatus.CANCELLED
        self._log_outcome()
        raise Cancelled(f"Search cancelled: {reason}.", self.stats)

    def _log_outcome(self, cost: int | None = None) -> None:
        logger.info(
            "A* %s: cost=%s expanded=%d generated=%d peak_frontier=%d (%.3fs)",
            self.status.value,
            "-" if cost is None else cost,
            self.stats.expanded,
            self.stats.generated,
            self.stats.peak_frontier,
            self.stats.elapsed,
        )


class Solver:
    """Stateless facade over ``SearchEngine``; all methods are static."""

    @staticmethod
    def solve(
        initial: State,
        heuristic: Heuristic = manhattan_distance,
        budget: SearchBudget | None = None,
    ) -> Solution:
        return SearchEngine(heuristic).solve(initial, budget=budget)

    @staticmethod
    def hint(
        initial: State,
        heuristic: Heuristic = manhattan_distance,
        budget: SearchBudget | None = None,
    ) -> Direction | None:
        """Return the single best next move, or ``None`` if already solved."""
        return SearchEngine(heuristic).hint(initial, budget=budget)


def solve(
    initial: State,
    heuristic: Heuristic = manhattan_distance,
    budget: SearchBudget | None = None,
) -> Solution:
    """Entry point: shortest move sequence from *initial* to the goal."""
    return Solver.solve(initial, heuristic, budget)
