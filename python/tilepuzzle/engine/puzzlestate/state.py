"""Search state: a board plus the cached position of its blank."""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import cached_property

from tilepuzzle.errors import IllegalMoveError
from tilepuzzle.models.action import Action
from tilepuzzle.models.board import Board, Direction, goal_board


@dataclass(frozen=True)
class State:
    """An immutable puzzle configuration.

    ``blank`` is derived from ``board`` and is excluded from equality and
    hashing. Every transition returns a new ``State``; nothing here is ever
    mutated after construction.
    """

    board: Board
    blank: tuple[int, int] = field(compare=False)

    def __post_init__(self) -> None:
        r, c = self.blank
        if not (0 <= r < self.board.rows and 0 <= c < self.board.cols):
            raise ValueError(f"Blank position {self.blank} is off the board.")
        if self.board.tiles[r][c] != 0:
            raise ValueError(f"Blank position {self.blank} does not hold the blank.")

    @classmethod
    def from_board(cls, board: Board) -> State:
        return cls(board=board, blank=board.find(0))

    # -- queries --------------------------------------------------------------

    @property
    def rows(self) -> int:
        return self.board.rows

    @property
    def cols(self) -> int:
        return self.board.cols

    def is_goal(self) -> bool:
        return self.board == goal_board(self.rows, self.cols)

    @cached_property
    def _moves(self) -> tuple[Direction, ...]:
        r, c = self.blank
        moves: list[Direction] = []
        if r > 0:
            moves.append(Direction.UP)
        if r < self.rows - 1:
            moves.append(Direction.DOWN)
        if c > 0:
            moves.append(Direction.LEFT)
        if c < self.cols - 1:
            moves.append(Direction.RIGHT)
        return tuple(moves)

    def legal_moves(self) -> tuple[Direction, ...]:
        """Directions the blank can move in, in Up, Down, Left, Right order."""
        return self._moves

    # -- transitions ----------------------------------------------------------

    def action_for(self, direction: Direction) -> Action:
        """Describe moving the blank one cell in *direction*."""
        br, bc = self.blank
        dr, dc = direction.delta
        tr, tc = br + dr, bc + dc
        if not (0 <= tr < self.rows and 0 <= tc < self.cols):
            raise IllegalMoveError(
                f"Blank at {self.blank} cannot move {direction.value} "
                f"on a {self.rows}×{self.cols} board."
            )
        return Action(direction=direction, target=(tr, tc), tile=self.board.tiles[tr][tc])

    def result(self, action: Action) -> State:
        """Return the state reached by *action*; ``self`` is left untouched."""
        return State(board=self.board.swap(self.blank, action.target), blank=action.target)

    def apply(self, direction: Direction) -> State:
        return self.result(self.action_for(direction))

    def successors(self) -> list[tuple[Action, State]]:
        out: list[tuple[Action, State]] = []
        for direction in self.legal_moves():
            action = self.action_for(direction)
            out.append((action, self.result(action)))
        return out

    def __str__(self) -> str:
        return str(self.board)
