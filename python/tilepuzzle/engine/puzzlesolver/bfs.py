"""Uninformed breadth-first search, the shortest-path reference for A*."""

from __future__ import annotations

import logging
from collections import deque
from time import perf_counter

from tilepuzzle.engine.puzzlesolver.node import Node
from tilepuzzle.engine.puzzlesolver.solver import SearchBudget, SearchStats, Solution
from tilepuzzle.engine.puzzlestate import State
from tilepuzzle.errors import Cancelled, NoSolutionError

logger = logging.getLogger(__name__)


def breadth_first_search(initial: State, budget: SearchBudget | None = None) -> Solution:
    """Expand states level by level until the goal is popped.

    States are marked seen when generated, so each one enters the queue once.
    """
    budget = budget or SearchBudget()
    stats = SearchStats()
    t0 = perf_counter()
    queue: deque[Node] = deque([Node.root(initial)])
    seen: set[State] = {initial}

    while queue:
        stats.elapsed = perf_counter() - t0
        _check(budget.interrupted(stats.elapsed), stats, seen)

        stats.peak_frontier = max(stats.peak_frontier, len(queue))
        node = queue.popleft()
        if node.state.is_goal():
            stats.explored = len(seen)
            logger.info(
                "BFS solved: cost=%d expanded=%d generated=%d (%.3fs)",
                node.cost, stats.expanded, stats.generated, stats.elapsed,
            )
            return Solution(actions=node.reconstruct_path(), final_state=node.state, stats=stats)

        _check(budget.exhausted(stats.expanded), stats, seen)
        stats.expanded += 1
        for child in node.expand():
            stats.generated += 1
            if child.state in seen:
                continue
            seen.add(child.state)
            queue.append(child)

    stats.elapsed = perf_counter() - t0
    stats.explored = len(seen)
    logger.info("BFS exhausted: %d states reachable, none is the goal", len(seen))
    raise NoSolutionError(
        f"No solution: explored {len(seen)} states without reaching the goal.",
        stats,
    )


def _check(reason: str | None, stats: SearchStats, seen: set[State]) -> None:
    if reason is None:
        return
    stats.explored = len(seen)
    logger.info("BFS cancelled after %d expansions", stats.expanded)
    raise Cancelled(f"Search cancelled: {reason}.", stats)
