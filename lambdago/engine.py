"""
Move engine: stone placement, capture and suicide detection.

Every function here is pure. A move either produces a new Board or raises
an IllegalMoveError; the input board is never changed. No ko or repetition
rule is enforced, callers wanting one must compare successive boards.
"""

import logging
from typing import Iterable, List, NamedTuple, Optional

from .board import (
    Board, Color, IllegalMoveError, OccupiedPointError, Point, SuicideMoveError,
)
from .groups import Group, find_group

logger = logging.getLogger(__name__)


class Move(NamedTuple):
    """A stone of color placed at point; point None is a pass."""
    color: Color
    point: Optional[Point]

    @property
    def is_pass(self) -> bool:
        return self.point is None

    def __str__(self) -> str:
        if self.point is None:
            return f"{self.color.value} PASS"
        return f"{self.color.value} ({self.point.x},{self.point.y})"


class MoveResult(NamedTuple):
    """Board after a legal move together with the groups it captured."""
    board: Board
    captured: List[Group]

    @property
    def capture_count(self) -> int:
        return sum(len(g) for g in self.captured)


def captured_groups(board: Board, point: Point, color: Color) -> List[Group]:
    """
    Enemy groups adjacent to point that have no liberties on board.

    board must already hold the stone of color at point. Groups touching
    point more than once are reported once.
    """
    enemy = color.opponent
    groups: List[Group] = []
    for neighbor in board.neighbors(point):
        if board.get(neighbor) is not enemy:
            continue
        if any(neighbor in g for g in groups):
            continue
        group = find_group(board, neighbor)
        if group.is_captured:
            groups.append(group)
    return groups


def resolve_move(board: Board, point: Point, color: Color) -> MoveResult:
    """
    Apply a move and report what it captured.

    Captures of all adjacent enemy groups are resolved before the suicide
    check, so a move that gains its only liberty by capturing is legal.

    Args:
        board: Board before the move
        point: Target point
        color: Color of the placed stone

    Returns:
        MoveResult with the new board and captured groups

    Raises:
        OutOfBoundsError: If point is outside the board
        OccupiedPointError: If point already holds a stone
        SuicideMoveError: If the placed stone's group ends without liberties
    """
    if board.get(point) is not None:
        raise OccupiedPointError(f"Point {tuple(point)} is already occupied")

    placed = board.with_stone(point, color)
    captured = captured_groups(placed, point, color)
    after = placed.with_empties(p for g in captured for p in g.stones)

    if find_group(after, point).is_captured:
        raise SuicideMoveError(
            f"{color.name.title()} at {tuple(point)} would have no liberties"
        )

    return MoveResult(board=after, captured=captured)


def apply_move(board: Board, point: Point, color: Color) -> Board:
    """
    Apply a move, returning the resulting board.

    See resolve_move for the rules and the errors raised.
    """
    return resolve_move(board, point, color).board


def put_stone(board: Board, point: Point, color: Color) -> Board:
    """
    Lenient form of apply_move.

    An illegal move is logged and dropped: the input board is returned
    unchanged. Out-of-bounds points still raise.
    """
    try:
        return apply_move(board, point, color)
    except IllegalMoveError as e:
        logger.info(f"Dropped move {Move(color, point)}: {e}")
        return board


def play_moves(board: Board, moves: Iterable[Move]) -> Board:
    """
    Fold put_stone over a move sequence, skipping passes.

    Args:
        board: Starting board
        moves: Moves in play order

    Returns:
        Board after the last move
    """
    for move in moves:
        if move.is_pass:
            continue
        board = put_stone(board, move.point, move.color)
    return board
