from tilepuzzle.models.action import Action
from tilepuzzle.models.board import BLANK, Board, Direction, Tile, goal_board
from tilepuzzle.models.notation import format_board, parse_board

__all__ = [
    "Action",
    "BLANK",
    "Board",
    "Direction",
    "Tile",
    "format_board",
    "goal_board",
    "parse_board",
]
