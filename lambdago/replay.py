"""
Replay of parsed game records through the move engine.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from .board import Board, Color, IllegalMoveError, create_board
from .engine import Move, resolve_move
from .sgf import GameRecord

logger = logging.getLogger(__name__)


@dataclass
class ReplayResult:
    """
    Outcome of replaying a record.

    Attributes:
        initial: Board after setup stones, before the first move
        boards: Board after each move (passes and skipped moves included)
        skipped: (move number, move, error) for every rejected move
        captures: Stones captured by each color
    """
    initial: Board
    boards: List[Board] = field(default_factory=list)
    skipped: List[Tuple[int, Move, IllegalMoveError]] = field(default_factory=list)
    captures: Dict[Color, int] = field(
        default_factory=lambda: {Color.BLACK: 0, Color.WHITE: 0}
    )

    @property
    def final(self) -> Board:
        return self.boards[-1] if self.boards else self.initial


def setup_board(record: GameRecord) -> Board:
    """Empty board of the record's size with its setup stones placed."""
    board = create_board(record.board_size)
    for color, point in record.setup_stones:
        board = board.with_stone(point, color)
    return board


def replay(record: GameRecord, board: Optional[Board] = None) -> ReplayResult:
    """
    Replay every move of a record.

    Illegal moves are logged and skipped; the board stays as it was. Each
    move depends on the previous board, so a single record is always
    replayed sequentially.

    Args:
        record: Parsed game record
        board: Starting board (default: setup_board(record))

    Returns:
        ReplayResult
    """
    if board is None:
        board = setup_board(record)
    result = ReplayResult(initial=board)

    for number, move in enumerate(record.moves, start=1):
        if not move.is_pass:
            try:
                outcome = resolve_move(board, move.point, move.color)
            except IllegalMoveError as e:
                logger.warning(f"Skipping illegal move {number} ({move}): {e}")
                result.skipped.append((number, move, e))
            else:
                board = outcome.board
                result.captures[move.color] += outcome.capture_count
        result.boards.append(board)

    logger.debug(
        f"Replayed {len(record.moves)} moves, skipped {len(result.skipped)}"
    )
    return result
