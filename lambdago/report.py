"""
Game reports: Vega-Lite chart specifications and chart images built from
the score-mean analysis of a game record.
"""

import logging
from itertools import accumulate
from typing import Any, Dict, List, Sequence

import matplotlib.pyplot as plt

from . import lizzie
from .sgf import GameRecord

logger = logging.getLogger(__name__)

Spec = Dict[str, Any]

COLOR_FIELD = {"field": "color", "type": "nominal"}


# ============================================================================
# Vega-Lite specifications
# ============================================================================

def effects_chart(effs: Sequence[dict], width: int, title: str) -> Spec:
    """Bar per move effect with a rule at the mean effect."""
    return {
        "data": {"values": list(effs)},
        "layer": [
            {
                "encoding": {
                    "x": {"field": "move", "type": "ordinal"},
                    "y": {"field": "effect", "type": "quantitative"},
                    "color": COLOR_FIELD,
                },
                "mark": "bar",
                "width": width,
                "title": title,
            },
            {
                "encoding": {
                    "y": {"field": "effect", "type": "quantitative", "aggregate": "mean"},
                    "color": COLOR_FIELD,
                },
                "mark": "rule",
            },
        ],
    }


def deviations_chart(devs: Sequence[dict], width: int, title: str) -> Spec:
    return {
        "data": {"values": list(devs)},
        "vconcat": [
            {
                "encoding": {
                    "x": {"field": "move", "type": "ordinal"},
                    "y": {"field": "deviation", "type": "quantitative"},
                },
                "mark": "bar",
                "width": width,
                "title": title,
            }
        ],
    }


def normalized_effects_chart(effs: Sequence[dict], width: int, title: str) -> Spec:
    """Cumulative sum of effects divided by the number of own moves made."""
    sums = accumulate(e["effect"] for e in effs)
    normalized = [dict(e, cumsum=s / (e["move"] / 2)) for e, s in zip(effs, sums)]
    return {
        "data": {"values": normalized},
        "encoding": {
            "x": {"field": "move", "type": "quantitative"},
            "y": {"field": "cumsum", "type": "quantitative"},
            "color": COLOR_FIELD,
        },
        "mark": "bar",
        "width": width,
        "title": title,
    }


def effects_summary_chart(effs: Sequence[dict]) -> Spec:
    return {
        "data": {"values": list(effs)},
        "title": "Summary of effects",
        "encoding": {
            "x": {"field": "color", "type": "nominal"},
            "y": {"field": "effect", "type": "quantitative"},
        },
        "mark": {"type": "boxplot", "extent": "min-max"},
    }


def all_scoremeans_chart(means: Sequence[dict], width: int, title: str) -> Spec:
    return {
        "data": {"values": list(means)},
        "width": width,
        "title": title,
        "encoding": {
            "x": {"field": "move", "type": "ordinal"},
            "y": {"field": "mean", "type": "quantitative"},
        },
        "mark": {"type": "boxplot", "extent": "min-max", "size": 5},
    }


def choices_chart(choices: Sequence[dict], width: int, title: str) -> Spec:
    return {
        "data": {"values": list(choices)},
        "encoding": {
            "x": {"field": "move", "type": "ordinal"},
            "y": {"field": "scoreMean", "type": "quantitative"},
            "color": {"field": "name", "type": "nominal"},
        },
        "mark": {"type": "line", "size": 1},
        "width": width,
        "title": title,
    }


# ============================================================================
# Reports
# ============================================================================

def _of(color: str, rows: Sequence[dict]) -> List[dict]:
    return [r for r in rows if r["color"] == color]


def sgf_report(record: GameRecord, width_per_move: float = 5.4) -> Dict[str, Any]:
    """
    Build the full chart report of an analysed game.

    Args:
        record: Game record whose move nodes carry LZ analysis
        width_per_move: Chart width in pixels per move

    Returns:
        Dict with 'title', 'note' and 'charts' (Vega-Lite specifications)
    """
    raw = lizzie.raw_data(record)
    if not raw:
        logger.warning("Record has no LZ score means, report will be empty")

    all_means = lizzie.unroll_scoremeans(raw)
    effs = lizzie.effects(raw)
    devs = lizzie.deviations(effs)
    choices = lizzie.data_transform(
        lizzie.choices(raw), ["color", "move"],
        ["choice", "median", "AI", "average"], "scoreMean",
    )
    width = int(width_per_move * len(effs))

    charts = [
        choices_chart(_of("B", choices), width, "Black's scoremean values"),
        choices_chart(_of("W", choices), width, "White's scoremean values"),
        all_scoremeans_chart(_of("B", all_means), width,
                             "Black's all scoreMeans for variations"),
        all_scoremeans_chart(_of("W", all_means), width,
                             "White's all scoreMeans for variations"),
        effects_chart(effs, width, "Effects of moves"),
        effects_chart(_of("W", effs), width, "Effects of White's moves"),
        effects_chart(_of("B", effs), width, "Effects of Black's moves"),
        deviations_chart(_of("W", devs), width,
                         "Deviations (distances from the mean) of White's moves"),
        deviations_chart(_of("B", devs), width, "Deviations of Black's moves"),
        normalized_effects_chart(
            _of("W", effs), width,
            "White's Cumulative sum of effects normalized by number of moves made"),
        normalized_effects_chart(
            _of("B", effs), width,
            "Black's Cumulative sum of effects normalized by number of moves made"),
        effects_summary_chart(effs),
    ]

    return {
        "title": f"B: {record.black_player} W: {record.white_player} R: {record.result}",
        "note": "Move numbers for score means indicate how many moves made before.",
        "charts": charts,
    }


def save_effects_chart(effs: Sequence[dict], path: str, title: str = "Effects of moves") -> None:
    """
    Save a bar chart of move effects as an image.

    Args:
        effs: Rows from lizzie.effects
        path: Output file; the format follows the extension
        title: Chart title
    """
    fig, ax = plt.subplots(figsize=(max(6.0, 0.08 * len(effs)), 4))
    try:
        for color, bar_color in (("B", "black"), ("W", "lightgray")):
            rows = _of(color, effs)
            ax.bar(
                [r["move"] for r in rows],
                [r["effect"] for r in rows],
                color=bar_color,
                edgecolor="black",
                label="Black" if color == "B" else "White",
            )
        ax.axhline(0, color="gray", linewidth=0.5)
        ax.set_xlabel("Move")
        ax.set_ylabel("Score mean effect")
        ax.set_title(title)
        ax.legend()
        fig.savefig(path)
    finally:
        plt.close(fig)
    logger.info(f"Saved effects chart to {path}")
