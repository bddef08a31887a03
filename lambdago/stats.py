"""
Statistical functions used by the score-mean analysis.
"""

from typing import List, Sequence

import numpy as np


def _as_array(nums: Sequence[float]) -> np.ndarray:
    values = np.asarray(list(nums), dtype=float)
    if values.size == 0:
        raise ValueError("Expected at least one value")
    return values


def mean(nums: Sequence[float]) -> float:
    """Calculating the average."""
    return float(np.mean(_as_array(nums)))


def median(nums: Sequence[float]) -> float:
    """Median; the mean of the two middle values for even counts."""
    return float(np.median(_as_array(nums)))


def cmas(nums: Sequence[float]) -> List[float]:
    """
    Cumulative moving averages.

    The n-th value is the mean of the first n numbers.
    """
    values = _as_array(nums)
    return (np.cumsum(values) / np.arange(1, values.size + 1)).tolist()


def normalize(nums: Sequence[float]) -> List[float]:
    """Scale values so that they sum to 1."""
    values = _as_array(nums)
    total = values.sum()
    if total == 0:
        raise ValueError("Cannot normalize values summing to zero")
    return (values / total).tolist()


def kl_divergence(p: Sequence[float], q: Sequence[float]) -> float:
    """
    The Kullback-Leibler divergence of probability distributions P and Q.

    The information gain when using Q instead of P. Terms with p = 0
    contribute nothing.
    """
    pv = _as_array(p)
    qv = _as_array(q)
    if pv.shape != qv.shape:
        raise ValueError(f"Distributions differ in length: {pv.size} vs {qv.size}")
    mask = pv > 0
    return float(np.sum(pv[mask] * np.log(pv[mask] / qv[mask])))
