"""
Functions for working with the output of Lizzie after doing KataGo analysis.

Design decisions:
- Internally all score values are from Black's perspective: positive means
  a Black win, negative a White win.
- The move counter tells how many moves were made; the color tells whose
  turn it is.

Rows are plain dicts so they can be fed to chart specifications directly.
A raw data row has the keys move, color, mean, meanmean, medianmean, means.
"""

from typing import Any, Dict, Iterable, List, Sequence

from .board import Color
from .sgf import GameRecord
from .stats import mean, median

Row = Dict[str, Any]

SCORE_MEAN_TAG = "scoreMean"


def extract_from_lz(text: str, tag: str) -> List[str]:
    """
    Values following every occurrence of tag in a Lizzie LZ string.

    If the tag has more values (like pv), only the first is taken.
    """
    tokens = text.split()
    return [value for key, value in zip(tokens, tokens[1:]) if key == tag]


def raw_data(record: GameRecord) -> List[Row]:
    """
    Score means and the color to move after every analysed move.

    Move nodes without an LZ property, or without score means in it, are
    left out; move numbers still count them.
    """
    rows = []
    for number, (move, lz) in enumerate(zip(record.moves, record.analysis), start=1):
        if not lz:
            continue
        means = [float(v) for v in extract_from_lz(lz, SCORE_MEAN_TAG)]
        if not means:
            continue
        # LZ scores are for the side to move; flip them after Black's moves
        if move.color is Color.BLACK:
            means = [-m for m in means]
        rows.append({
            "move": number,
            "color": move.color.opponent.value,
            "mean": means[0],
            "meanmean": mean(means),
            "medianmean": median(means),
            "means": means,
        })
    return rows


def unroll_scoremeans(rows: Iterable[Row]) -> List[Row]:
    """
    All score means from raw data, one row per variation, from the
    perspective of the player to move.
    """
    return [
        {
            "color": d["color"],
            "move": d["move"],
            "mean": m if d["color"] == "B" else -m,
        }
        for d in rows
        for m in d["means"]
    ]


def effects(rows: Sequence[Row]) -> List[Row]:
    """The score mean differences caused by the moves."""
    result = []
    for before, after in zip(rows, rows[1:]):
        diff = after["mean"] - before["mean"]
        result.append({
            "color": before["color"],
            "effect": diff if before["color"] == "B" else -diff,
            "move": after["move"],
        })
    return result


def choices(rows: Sequence[Row]) -> List[Row]:
    """
    Score of the chosen move against the engine's top choice, the average
    and the median of all considered variations.
    """
    result = []
    for before, after in zip(rows, rows[1:]):
        sign = 1 if before["color"] == "B" else -1
        result.append({
            "color": before["color"],
            "choice": sign * after["mean"],
            "move": before["move"],
            "average": sign * before["meanmean"],
            "median": sign * before["medianmean"],
            "AI": sign * before["mean"],
        })
    return result


def deviations(effs: Sequence[Row]) -> List[Row]:
    """Effects with their distance from the mean effect."""
    if not effs:
        return []
    avg = mean([e["effect"] for e in effs])
    return [dict(e, deviation=e["effect"] - avg) for e in effs]


def data_transform(
    rows: Iterable[Row],
    fixed_keys: Sequence[str],
    var_keys: Sequence[str],
    key: str,
) -> List[Row]:
    """
    Prepares rows for plotting in the same diagram.

    Fixed keys are copied, then each variable key becomes a separate row
    with its name under 'name' and its value under key.
    """
    result = []
    for row in rows:
        fixed = {k: row[k] for k in fixed_keys}
        for k in var_keys:
            result.append(dict(fixed, name=k, **{key: row[k]}))
    return result
