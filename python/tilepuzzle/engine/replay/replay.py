"""Replays move sequences against a puzzle state."""

from __future__ import annotations

from collections.abc import Iterable

from tilepuzzle.engine.puzzlestate import State
from tilepuzzle.errors import IllegalMoveError
from tilepuzzle.models.action import Action
from tilepuzzle.models.board import Board, Direction


class Replay:
    """Steps a state forward one blank slide at a time and records the moves."""

    def __init__(self, state: State) -> None:
        self.initial = state
        self.state = state
        self.history: list[Action] = []

    @classmethod
    def from_board(cls, board: Board) -> Replay:
        return cls(State.from_board(board))

    # -- movement (direction = where the *blank* moves) -----------------------

    def move(self, direction: Direction) -> bool:
        """Slide the blank in *direction*.

        Returns False, leaving the state unchanged, if the blank would leave
        the board.
        """
        if direction not in self.state.legal_moves():
            return False
        action = self.state.action_for(direction)
        self.state = self.state.result(action)
        self.history.append(action)
        return True

    def play(self, directions: Iterable[Direction]) -> int:
        """Apply every direction in order; stop at the first illegal one."""
        played = 0
        for i, direction in enumerate(directions):
            if not self.move(direction):
                raise IllegalMoveError(
                    f"Move {i} ({direction.value}) is illegal with the blank at "
                    f"{self.state.blank}."
                )
            played += 1
        return played

    def reset(self) -> None:
        self.state = self.initial
        self.history.clear()

    # -- queries --------------------------------------------------------------

    @property
    def moves(self) -> int:
        return len(self.history)

    @property
    def is_won(self) -> bool:
        return self.state.is_goal()
