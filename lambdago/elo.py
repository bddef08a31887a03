"""
Elo rating calculation for series of games.
"""

import logging
import math
from typing import Dict, Iterable, Mapping

logger = logging.getLogger(__name__)

K_FACTOR = 32
INITIAL_RATING = 1200


def q_value(rating: float) -> float:
    return 10 ** (rating / 400)


def expected_score(rating_a: float, rating_b: float) -> float:
    """Expected score of player A against player B."""
    qa = q_value(rating_a)
    qb = q_value(rating_b)
    return qa / (qa + qb)


def rating_adjustment(score: float, expected: float, k: float = K_FACTOR) -> int:
    """
    Points gained (or lost, if negative) for an actual score against the
    expected score. Rounded half up.
    """
    return math.floor(k * (score - expected) + 0.5)


def new_rating(rating_a: float, rating_b: float, result: float, k: float = K_FACTOR) -> float:
    """Rating of player A after a game with result (1 win, 0 loss) against B."""
    return rating_a + rating_adjustment(result, expected_score(rating_a, rating_b), k)


def black_won(result: str) -> bool:
    """Whether an SGF style result ('B+12.5', 'W+R') is a Black win."""
    return result[:1].upper() == "B"


def _rating(name, value) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ValueError(f"Rating of {name} must be a number, got {value!r}")


def process_games(
    players: Mapping[str, float],
    games: Iterable[Mapping[str, str]],
    k: float = K_FACTOR,
    initial_rating: float = INITIAL_RATING,
) -> Dict[str, float]:
    """
    Apply a series of games to the ratings.

    Args:
        players: Current ratings by player name
        games: Games as {"b": black name, "w": white name, "r": result}
        k: K-factor
        initial_rating: Rating of players not in players

    Returns:
        New ratings by player name (players is not modified)

    Raises:
        ValueError: If a game is not a mapping with b, w and r entries, or
            a rating is not a number
    """
    if not isinstance(players, Mapping):
        raise ValueError(f"Players must map names to ratings, got {players!r}")
    ratings = {name: _rating(name, r) for name, r in players.items()}
    initial_rating = _rating("initial rating", initial_rating)
    for game in games:
        if not isinstance(game, Mapping):
            raise ValueError(f"Game must be a mapping with b, w and r, got {game!r}")
        try:
            black, white, result = game["b"], game["w"], str(game["r"])
        except KeyError as e:
            raise ValueError(f"Game {game!r} is missing {e}")

        rb = ratings.setdefault(black, initial_rating)
        rw = ratings.setdefault(white, initial_rating)
        score = 1.0 if black_won(result) else 0.0
        delta = rating_adjustment(score, expected_score(rb, rw), k)
        logger.debug(f"{black} vs {white} ({result}): {delta:+d}")

        ratings[black] = rb + delta
        ratings[white] = rw - delta
    return ratings
