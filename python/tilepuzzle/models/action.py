"""A single legal move of the blank."""

from __future__ import annotations

from dataclasses import dataclass

from tilepuzzle.models.board import Direction, Tile


@dataclass(frozen=True)
class Action:
    """The blank moves in ``direction`` into ``target``, displacing ``tile``.

    After the move ``tile`` sits in the cell the blank just left.
    """

    direction: Direction
    target: tuple[int, int]
    tile: Tile

    def __str__(self) -> str:
        return f"{self.direction.value} (tile {int(self.tile)})"
