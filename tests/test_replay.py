"""
Unit tests for replay.py module.

Tests:
- Board sequence produced by a record
- Illegal moves are logged and skipped
- Setup stones and capture counts
- End-to-end replay of an SGF record
"""

import logging

import pytest
import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from lambdago.board import Color, Point, SuicideMoveError, create_board
from lambdago.engine import Move
from lambdago.replay import replay, setup_board
from lambdago.sgf import GameRecord, parse_sgf

B = Color.BLACK
W = Color.WHITE


@pytest.fixture
def record():
    """3x3 game with a capture, a suicide attempt and a pass."""
    return GameRecord(
        board_size=3,
        moves=[
            Move(B, Point(2, 1)),
            Move(W, Point(1, 1)),
            Move(B, Point(1, 2)),  # captures (1,1)
            Move(W, Point(1, 1)),  # suicide
            Move(W, None),
            Move(B, Point(3, 3)),
        ],
    )


def sgf_coord(point):
    return chr(ord("a") + point.x - 1) + chr(ord("a") + point.y - 1)


class TestReplay:
    """Tests for replay function."""

    def test_board_per_move(self, record):
        result = replay(record)

        assert len(result.boards) == len(record.moves)
        assert result.initial == create_board(3, 3)
        assert result.boards[0].render() == ".X.\n...\n...\n"
        assert result.final.render() == ".X.\nX..\n..X\n"

    def test_illegal_move_skipped(self, record):
        result = replay(record)

        assert len(result.skipped) == 1
        number, move, error = result.skipped[0]
        assert number == 4
        assert move == Move(W, Point(1, 1))
        assert isinstance(error, SuicideMoveError)
        assert result.boards[3] == result.boards[2]

    def test_pass_keeps_board(self, record):
        result = replay(record)
        assert result.boards[4] == result.boards[3]

    def test_captures_counted(self, record):
        result = replay(record)
        assert result.captures == {B: 1, W: 0}

    def test_illegal_move_logged(self, record, caplog):
        with caplog.at_level(logging.WARNING, logger="lambdago.replay"):
            replay(record)
        assert "Skipping illegal move 4" in caplog.text

    def test_empty_record(self):
        result = replay(GameRecord(board_size=5))
        assert result.boards == []
        assert result.final == create_board(5, 5)

    def test_custom_start_board(self):
        start = create_board(3, 3).with_stone(Point(2, 2), W)
        result = replay(GameRecord(board_size=3, moves=[Move(B, Point(1, 1))]), board=start)
        assert result.final.render() == "X..\n.O.\n...\n"


class TestSetupBoard:
    """Tests for setup stones."""

    def test_setup_stones_placed(self):
        record = GameRecord(
            board_size=3,
            setup_stones=[(B, Point(1, 1)), (W, Point(3, 3))],
        )
        assert setup_board(record).render() == "X..\n...\n..O\n"

    def test_moves_start_from_setup(self):
        record = GameRecord(
            board_size=3,
            setup_stones=[(B, Point(2, 1)), (B, Point(1, 2))],
            moves=[Move(W, Point(1, 1))],
        )
        result = replay(record)
        assert result.skipped[0][0] == 1
        assert result.final.render() == ".X.\nX..\n...\n"


class TestReplaySgf:
    """End-to-end replay of parsed SGF."""

    def test_5x5_record(self):
        points = [
            (B, (3, 4)), (W, (3, 3)), (B, (4, 3)), (W, (4, 4)), (B, (4, 5)),
            (W, (2, 4)), (B, (5, 4)), (W, (3, 2)), (B, (2, 5)), (W, (1, 4)),
            (B, (4, 2)),
        ]
        nodes = "".join(f";{c.value}[{sgf_coord(Point(*p))}]" for c, p in points)
        record = parse_sgf(f"(;GM[1]FF[4]SZ[5]{nodes})")

        result = replay(record)

        assert result.skipped == []
        assert result.captures == {B: 1, W: 0}
        assert result.boards[6].get(Point(4, 4)) is None
        assert result.final.render() == ".....\n..OX.\n..OX.\nOOX.X\n.X.X.\n"
