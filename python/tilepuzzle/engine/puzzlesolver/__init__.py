from tilepuzzle.engine.puzzlesolver.bfs import breadth_first_search
from tilepuzzle.engine.puzzlesolver.heuristics import (
    Heuristic,
    get_heuristic,
    manhattan_distance,
    zero_heuristic,
)
from tilepuzzle.engine.puzzlesolver.node import Node
from tilepuzzle.engine.puzzlesolver.solver import (
    SearchBudget,
    SearchEngine,
    SearchStats,
    SearchStatus,
    Solution,
    Solver,
    solve,
)

__all__ = [
    "Heuristic",
    "Node",
    "SearchBudget",
    "SearchEngine",
    "SearchStats",
    "SearchStatus",
    "Solution",
    "Solver",
    "breadth_first_search",
    "get_heuristic",
    "manhattan_distance",
    "solve",
    "zero_heuristic",
]
