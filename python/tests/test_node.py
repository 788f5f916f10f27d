"""Search-tree nodes and the heuristics they evaluate."""

from __future__ import annotations

import pytest

from tilepuzzle.engine.puzzlesolver.heuristics import (
    get_heuristic,
    manhattan_distance,
    zero_heuristic,
)
from tilepuzzle.engine.puzzlesolver.node import Node
from tilepuzzle.engine.puzzlestate import State
from tilepuzzle.models.board import Direction, goal_board
from tilepuzzle.models.notation import parse_state

START = "1 2 3|4 _ 6|7 5 8"


# -- expansion ----------------------------------------------------------------


def test_root_node() -> None:
    root = Node.root(parse_state(START))

    assert root.parent is None
    assert root.action is None
    assert root.cost == 0
    assert root.depth == 0
    assert root.reconstruct_path() == ()


def test_expand_creates_one_child_per_legal_move() -> None:
    root = Node.root(parse_state(START), manhattan_distance)
    children = root.expand()

    assert [c.action.direction for c in children] == list(Direction)
    for child in children:
        assert child.parent is root
        assert child.cost == 1
        assert child.heuristic_fn is manhattan_distance
        assert child.state == root.state.apply(child.action.direction)


def test_expand_from_corner() -> None:
    root = Node.root(State.from_board(goal_board(3, 3)))

    assert [c.action.direction for c in root.expand()] == [Direction.UP, Direction.LEFT]


def test_reconstruct_path_walks_back_to_root() -> None:
    root = Node.root(parse_state(START))
    down = next(c for c in root.expand() if c.action.direction is Direction.DOWN)
    right = next(c for c in down.expand() if c.action.direction is Direction.RIGHT)

    path = right.reconstruct_path()

    assert [a.direction for a in path] == [Direction.DOWN, Direction.RIGHT]
    assert [a.tile for a in path] == [5, 8]
    assert right.cost == 2
    assert right.state.is_goal()


# -- heuristic ----------------------------------------------------------------


def test_heuristic_is_computed_once() -> None:
    calls: list[State] = []

    def counting(state: State) -> int:
        calls.append(state)
        return 3

    node = Node.root(parse_state(START), counting)
    assert calls == []

    assert node.heuristic() == 3
    assert node.heuristic() == 3
    assert node.f == 3
    assert len(calls) == 1


def test_negative_heuristic_is_rejected() -> None:
    node = Node.root(parse_state(START), lambda state: -1)
    with pytest.raises(ValueError):
        node.heuristic()


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("1 2 3|4 5 6|7 8 _", 0),
        ("1 2 3|4 _ 6|7 5 8", 2),
        ("1 2 3|4 5 6|7 _ 8", 1),
        ("8 1 3|4 _ 2|7 6 5", 10),
        ("1 2 3 4|5 6 7 _", 0),
        ("_ 1 2 3|5 6 7 4", 4),
    ],
)
def test_manhattan_distance(text: str, expected: int) -> None:
    assert manhattan_distance(parse_state(text)) == expected


def test_zero_heuristic() -> None:
    assert zero_heuristic(parse_state(START)) == 0


def test_get_heuristic() -> None:
    assert get_heuristic("manhattan") is manhattan_distance
    assert get_heuristic("zero") is zero_heuristic
    with pytest.raises(KeyError, match="manhattan"):
        get_heuristic("misplaced")
