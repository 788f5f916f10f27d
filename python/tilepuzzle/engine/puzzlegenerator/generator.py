"""Generates solvable boards by random walks from the goal."""

from __future__ import annotations

import random

from tilepuzzle.engine.puzzlestate import State
from tilepuzzle.models.board import Board, goal_board


class PuzzleGenerator:
    """Creates solvable puzzles by sliding the blank away from the solved state."""

    @staticmethod
    def solved(rows: int, cols: int) -> Board:
        """Return the goal-state board (all tiles in order, blank bottom-right)."""
        return goal_board(rows, cols)

    @staticmethod
    def scramble(board: Board, moves: int, rng: random.Random | None = None) -> Board:
        """Return *board* after *moves* random blank slides.

        The walk never undoes the previous slide unless it has no other
        choice, so short walks still wander away from the start.
        """
        rng = rng or random.Random()
        state = State.from_board(board)
        prev_blank: tuple[int, int] | None = None

        for _ in range(moves):
            successors = state.successors()
            if len(successors) > 1:
                successors = [(a, s) for a, s in successors if a.target != prev_blank]
            _, nxt = rng.choice(successors)
            prev_blank = state.blank
            state = nxt
        return state.board

    @staticmethod
    def generate(
        rows: int,
        cols: int,
        moves: int | None = None,
        seed: int | None = None,
    ) -> Board:
        """Return a random *solvable*, not already solved, board."""
        if rows * cols < 2:
            raise ValueError(f"A {rows}×{cols} board has only one configuration.")
        rng = random.Random(seed)
        walk = moves if moves is not None else rows * cols * 10
        solved = PuzzleGenerator.solved(rows, cols)
        while True:
            board = PuzzleGenerator.scramble(solved, walk, rng)
            if not board.is_solved():
                return board
            # An odd-length walk always leaves the blank on another cell.
            walk += 1
