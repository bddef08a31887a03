"""
Unit tests for cli.py module.
"""

import json

import matplotlib

import pytest
import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from lambdago.cli import main, parse_args

GAME_5X5 = (
    "(;GM[1]FF[4]SZ[5]PB[A]PW[B]RE[B+R]"
    ";B[cd];W[cc];B[dc];W[dd];B[de];W[bd];B[ed];W[cb];B[be];W[ad];B[db])"
)


@pytest.fixture
def config_path(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("logging:\n  level: WARNING\n", encoding="utf-8")
    return str(path)


@pytest.fixture
def sgf_path(tmp_path):
    path = tmp_path / "game.sgf"
    path.write_text(GAME_5X5, encoding="utf-8")
    return str(path)


class TestParseArgs:
    """Tests for argument parsing."""

    def test_board(self):
        parsed = parse_args(["board", "game.sgf", "--every"])
        assert parsed.command == "board"
        assert parsed.sgf == "game.sgf"
        assert parsed.every

    def test_command_required(self):
        with pytest.raises(SystemExit):
            parse_args([])


class TestBoardCommand:
    """Tests for the board command."""

    def test_final_board(self, config_path, sgf_path, capsys):
        assert main(["--config", config_path, "board", sgf_path]) == 0
        assert capsys.readouterr().out == ".....\n..OX.\n..OX.\nOOX.X\n.X.X.\n"

    def test_every_board(self, config_path, sgf_path, capsys):
        assert main(["--config", config_path, "board", sgf_path, "--every"]) == 0
        out = capsys.readouterr().out
        assert out.count("Move ") == 11
        assert "Move 1: B (3,4)" in out

    def test_missing_file(self, config_path, tmp_path, capsys):
        assert main(["--config", config_path, "board", str(tmp_path / "nope.sgf")]) == 1
        assert "Error" in capsys.readouterr().err

    def test_malformed_sgf(self, config_path, tmp_path, capsys):
        path = tmp_path / "bad.sgf"
        path.write_text("not sgf", encoding="utf-8")
        assert main(["--config", config_path, "board", str(path)]) == 1


class TestReportCommand:
    """Tests for the report command."""

    def test_json_report(self, config_path, sgf_path, capsys):
        assert main(["--config", config_path, "report", sgf_path]) == 0
        report = json.loads(capsys.readouterr().out)
        assert report["title"] == "B: A W: B R: B+R"
        assert len(report["charts"]) == 12

    def test_png(self, config_path, sgf_path, tmp_path, capsys):
        png = tmp_path / "effects.png"
        assert main(["--config", config_path, "report", sgf_path, "--png", str(png)]) == 0
        assert png.exists()
        assert matplotlib.get_backend().lower() == "agg"


class TestEloCommand:
    """Tests for the elo command."""

    def test_ratings(self, config_path, tmp_path, capsys):
        games = tmp_path / "games.yaml"
        games.write_text(
            "players: {A: 1200, B: 1200}\n"
            "games:\n"
            "  - {b: A, w: B, r: b+12.5}\n",
            encoding="utf-8",
        )
        assert main(["--config", config_path, "elo", str(games)]) == 0
        assert capsys.readouterr().out == "A: 1216\nB: 1184\n"

    def test_game_not_a_mapping(self, config_path, tmp_path, capsys):
        games = tmp_path / "games.yaml"
        games.write_text("games:\n  - [A, B, B+1]\n", encoding="utf-8")
        assert main(["--config", config_path, "elo", str(games)]) == 1
        assert "mapping" in capsys.readouterr().err

    def test_non_numeric_rating(self, config_path, tmp_path, capsys):
        games = tmp_path / "games.yaml"
        games.write_text(
            "players: {A: high}\n"
            "games:\n"
            "  - {b: A, w: B, r: B+1}\n",
            encoding="utf-8",
        )
        assert main(["--config", config_path, "elo", str(games)]) == 1
        assert "must be a number" in capsys.readouterr().err

    def test_games_not_a_list(self, config_path, tmp_path, capsys):
        games = tmp_path / "games.yaml"
        games.write_text("games: {b: A, w: B, r: B+1}\n", encoding="utf-8")
        assert main(["--config", config_path, "elo", str(games)]) == 1

    def test_bad_config(self, tmp_path, capsys):
        assert main(["--config", str(tmp_path / "missing.yaml"), "elo", "games.yaml"]) == 1
