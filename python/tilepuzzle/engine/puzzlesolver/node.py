"""Search-tree nodes."""

from __future__ import annotations

from dataclasses import dataclass, field

from tilepuzzle.engine.puzzlesolver.heuristics import Heuristic, zero_heuristic
from tilepuzzle.engine.puzzlestate import State
from tilepuzzle.models.action import Action


@dataclass(eq=False, slots=True)
class Node:
    """One node of the search tree.

    Children hold a reference to their parent and never the other way round,
    so the tree cannot form cycles and branches that drop out of the frontier
    are garbage-collected.
    """

    state: State
    parent: Node | None = None
    action: Action | None = None
    cost: int = 0
    heuristic_fn: Heuristic = field(default=zero_heuristic, repr=False)
    _h: float | None = field(default=None, init=False, repr=False)

    @classmethod
    def root(cls, state: State, heuristic_fn: Heuristic = zero_heuristic) -> Node:
        return cls(state=state, heuristic_fn=heuristic_fn)

    @property
    def depth(self) -> int:
        return self.cost

    def heuristic(self) -> float:
        """Estimated remaining cost, computed on first use."""
        if self._h is None:
            h = self.heuristic_fn(self.state)
            if h < 0:
                raise ValueError(f"Heuristic returned a negative estimate ({h}).")
            self._h = h
        return self._h

    @property
    def f(self) -> float:
        return self.cost + self.heuristic()

    def expand(self) -> list[Node]:
        """One child per legal move, in Up, Down, Left, Right order."""
        return [
            Node(
                state=child,
                parent=self,
                action=action,
                cost=self.cost + 1,
                heuristic_fn=self.heuristic_fn,
            )
            for action, child in self.state.successors()
        ]

    def reconstruct_path(self) -> tuple[Action, ...]:
        """Actions leading from the root to this node."""
        actions: list[Action] = []
        node: Node | None = self
        while node is not None and node.action is not None:
            actions.append(node.action)
            node = node.parent
        actions.reverse()
        return tuple(actions)
