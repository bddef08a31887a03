"""
Command-line interface for lambdago.

Usage:
    # Final position of a game record
    python -m lambdago.cli board game.sgf

    # Every position, one after the other
    python -m lambdago.cli board game.sgf --every

    # Score-mean report of a Lizzie-analysed game (JSON on stdout)
    python -m lambdago.cli report game.sgf --png effects.png

    # Ratings after a series of games
    python -m lambdago.cli elo games.yaml
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

import matplotlib
import yaml

from .config import AppConfig, load_config
from .elo import process_games
from .replay import replay
from .report import save_effects_chart, sgf_report
from .sgf import load_sgf_file
from . import lizzie

logger = logging.getLogger(__name__)


def parse_args(args: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="lambdago",
        description="Go game record tools: replay, score-mean reports, Elo ratings",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s board game.sgf
  %(prog)s report game.sgf --png effects.png
  %(prog)s elo games.yaml

games.yaml holds optional 'players' ratings and a list of 'games':
  players: {A: 1200, B: 1200}
  games:
    - {b: A, w: B, r: B+12.5}
        """
    )

    parser.add_argument(
        "--config", "-c",
        type=str,
        help="Path to config.yaml (default: search current directory and project root)"
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Debug logging"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    board_parser = subparsers.add_parser("board", help="Replay a game record and print the board")
    board_parser.add_argument("sgf", help="SGF file")
    board_parser.add_argument(
        "--every",
        action="store_true",
        help="Print the board after every move"
    )

    report_parser = subparsers.add_parser("report", help="Score-mean report as Vega-Lite JSON")
    report_parser.add_argument("sgf", help="SGF file with LZ analysis")
    report_parser.add_argument("--png", type=str, help="Also save an effects chart image")

    elo_parser = subparsers.add_parser("elo", help="Ratings after a series of games")
    elo_parser.add_argument("games", help="YAML file with players and games")

    return parser.parse_args(args)


def run_board(parsed: argparse.Namespace, config: AppConfig) -> int:
    record = load_sgf_file(parsed.sgf)
    result = replay(record)

    if parsed.every:
        for number, (move, board) in enumerate(zip(record.moves, result.boards), start=1):
            print(f"Move {number}: {move}")
            print(board.render())
    else:
        print(result.final.render(), end="")

    if result.skipped:
        print(f"Skipped {len(result.skipped)} illegal move(s)", file=sys.stderr)
    return 0


def run_report(parsed: argparse.Namespace, config: AppConfig) -> int:
    record = load_sgf_file(parsed.sgf)
    report = sgf_report(record, width_per_move=config.report.width_per_move)
    print(json.dumps(report, indent=2))

    if parsed.png:
        save_effects_chart(lizzie.effects(lizzie.raw_data(record)), parsed.png)
    return 0


def run_elo(parsed: argparse.Namespace, config: AppConfig) -> int:
    with open(parsed.games, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Expected a mapping with 'games' in {parsed.games}")
    games = data.get("games") or []
    if not isinstance(games, list):
        raise ValueError(f"'games' must be a list in {parsed.games}")

    ratings = process_games(
        data.get("players") or {},
        games,
        k=config.elo.k_factor,
        initial_rating=config.elo.initial_rating,
    )
    for name, rating in sorted(ratings.items(), key=lambda kv: -kv[1]):
        print(f"{name}: {rating:g}")
    return 0


COMMANDS = {
    "board": run_board,
    "report": run_report,
    "elo": run_elo,
}


def main(args: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parsed = parse_args(args)

    try:
        config = load_config(parsed.config)
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"Config error: {e}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=logging.DEBUG if parsed.verbose else config.logging.level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )

    # Charts are only ever written to files
    matplotlib.use("Agg")

    try:
        return COMMANDS[parsed.command](parsed, config)
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except (ValueError, yaml.YAMLError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main())
