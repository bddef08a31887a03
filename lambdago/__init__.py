"""
lambdago - Go game record toolkit

Board model with capture engine, SGF replay, score-mean analysis of
Lizzie/KataGo records, Elo ratings and charts.
"""

__version__ = "2020.8.26"

from .board import (
    Board,
    Color,
    Point,
    create_board,
    render,
    BoardError,
    InvalidDimensionError,
    OutOfBoundsError,
    InvalidGroupQueryError,
    IllegalMoveError,
    OccupiedPointError,
    SuicideMoveError,
)
from .groups import Group, group_and_liberties
from .engine import Move, apply_move, put_stone, play_moves

__all__ = [
    "Board",
    "Color",
    "Point",
    "create_board",
    "render",
    "BoardError",
    "InvalidDimensionError",
    "OutOfBoundsError",
    "InvalidGroupQueryError",
    "IllegalMoveError",
    "OccupiedPointError",
    "SuicideMoveError",
    "Group",
    "group_and_liberties",
    "Move",
    "apply_move",
    "put_stone",
    "play_moves",
]
