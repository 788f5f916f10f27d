"""State transitions: legal moves, move application and goal test."""

from __future__ import annotations

import pytest

from tilepuzzle.engine.puzzlestate import State
from tilepuzzle.errors import IllegalMoveError
from tilepuzzle.models.board import Board, Direction, goal_board
from tilepuzzle.models.notation import parse_state

D = Direction


# -- helpers ------------------------------------------------------------------


def _state_with_blank_at(rows: int, cols: int, pos: tuple[int, int]) -> State:
    """Goal board with the blank swapped into *pos*."""
    board = goal_board(rows, cols).swap((rows - 1, cols - 1), pos)
    return State.from_board(board)


_ALL_3x3 = [(r, c) for r in range(3) for c in range(3)]


# -- construction -------------------------------------------------------------


def test_from_board_finds_blank() -> None:
    state = parse_state("1 2 3|4 _ 6|7 5 8")

    assert state.blank == (1, 1)


def test_wrong_blank_position_is_rejected() -> None:
    board = goal_board(2, 2)
    with pytest.raises(ValueError):
        State(board=board, blank=(0, 0))
    with pytest.raises(ValueError):
        State(board=board, blank=(2, 2))


def test_equality_ignores_blank_cache_and_uses_board() -> None:
    a = parse_state("1 2|3 _")
    b = State.from_board(Board.make(2, 2, [[1, 2], [3, 0]]))

    assert a == b
    assert hash(a) == hash(b)
    assert a != parse_state("1 2|_ 3")


# -- goal test ----------------------------------------------------------------


@pytest.mark.parametrize(("rows", "cols"), [(1, 2), (2, 2), (3, 3), (2, 5), (4, 4)])
def test_goal_board_state_is_goal(rows: int, cols: int) -> None:
    assert State.from_board(goal_board(rows, cols)).is_goal()


def test_non_goal_state() -> None:
    assert not parse_state("1 2 3|4 _ 6|7 5 8").is_goal()


# -- legal moves --------------------------------------------------------------


@pytest.mark.parametrize(
    ("pos", "expected"),
    [
        ((0, 0), (D.DOWN, D.RIGHT)),
        ((0, 2), (D.DOWN, D.LEFT)),
        ((2, 0), (D.UP, D.RIGHT)),
        ((2, 2), (D.UP, D.LEFT)),
        ((0, 1), (D.DOWN, D.LEFT, D.RIGHT)),
        ((1, 0), (D.UP, D.DOWN, D.RIGHT)),
        ((1, 2), (D.UP, D.DOWN, D.LEFT)),
        ((2, 1), (D.UP, D.LEFT, D.RIGHT)),
        ((1, 1), (D.UP, D.DOWN, D.LEFT, D.RIGHT)),
    ],
)
def test_legal_moves_3x3(pos: tuple[int, int], expected: tuple[Direction, ...]) -> None:
    assert _state_with_blank_at(3, 3, pos).legal_moves() == expected


@pytest.mark.parametrize(("rows", "cols"), [(2, 2), (3, 3), (3, 5), (4, 4)])
def test_legal_move_counts_by_position(rows: int, cols: int) -> None:
    for r in range(rows):
        for c in range(cols):
            on_row_edge = r in (0, rows - 1)
            on_col_edge = c in (0, cols - 1)
            expected = 4 - on_row_edge - on_col_edge
            state = _state_with_blank_at(rows, cols, (r, c))
            assert len(state.legal_moves()) == expected, (r, c)


def test_legal_moves_on_a_strip() -> None:
    assert parse_state("1 _ 2").legal_moves() == (D.LEFT, D.RIGHT)
    assert parse_state("_ 1 2").legal_moves() == (D.RIGHT,)


# -- apply --------------------------------------------------------------------


@pytest.mark.parametrize("pos", _ALL_3x3)
def test_apply_moves_blank_one_cell_and_keeps_tiles(pos: tuple[int, int]) -> None:
    state = _state_with_blank_at(3, 3, pos)
    for direction in state.legal_moves():
        nxt = state.apply(direction)
        dr, dc = direction.delta

        assert nxt.blank == (pos[0] + dr, pos[1] + dc)
        assert nxt.board.find(0) == nxt.blank
        assert sorted(nxt.board.flat()) == sorted(state.board.flat())
        assert nxt.board.get_tile(*pos) == state.board.get_tile(*nxt.blank)


@pytest.mark.parametrize("pos", _ALL_3x3)
def test_apply_does_not_mutate_receiver(pos: tuple[int, int]) -> None:
    state = _state_with_blank_at(3, 3, pos)
    before = state.board.copy()
    blank_before = state.blank

    for direction in state.legal_moves():
        state.apply(direction)

    assert state.board == before
    assert state.blank == blank_before


def test_apply_illegal_direction_raises() -> None:
    state = _state_with_blank_at(3, 3, (0, 0))
    with pytest.raises(IllegalMoveError):
        state.apply(D.UP)
    with pytest.raises(IllegalMoveError):
        state.apply(D.LEFT)


def test_action_for_describes_the_move() -> None:
    state = parse_state("1 2 3|4 _ 6|7 5 8")
    action = state.action_for(D.DOWN)

    assert action.direction is D.DOWN
    assert action.target == (2, 1)
    assert action.tile == 5


def test_successors_follow_direction_order() -> None:
    state = parse_state("1 2 3|4 _ 6|7 5 8")
    successors = state.successors()

    assert [a.direction for a, _ in successors] == [D.UP, D.DOWN, D.LEFT, D.RIGHT]
    assert [a.tile for a, _ in successors] == [2, 5, 4, 6]
    for action, child in successors:
        assert child == state.apply(action.direction)


def test_apply_then_opposite_returns_to_start() -> None:
    state = parse_state("1 2 3|4 _ 6|7 5 8")
    for direction in state.legal_moves():
        assert state.apply(direction).apply(direction.opposite) == state
