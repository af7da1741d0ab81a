"""
correlation.py

Selection of the "strong" feature pairs that drive the correlation
adjustment step of synthesis.
"""

from __future__ import annotations

from typing import List, NamedTuple

from genesynth.errors import InvalidInputError
from genesynth.synth.stats import CorrelationMatrix


class StrongPair(NamedTuple):
    feature_a: str
    feature_b: str
    correlation: float


def select_strong_pairs(
    matrix: CorrelationMatrix,
    threshold: float = 0.5,
    cap: int = 10,
    order: str = "matrix",
) -> List[StrongPair]:
    """
    Return at most ``cap`` pairs with |r| > ``threshold``.

    Each unordered pair appears once, as (a, b) with a < b. With
    ``order="matrix"`` pairs are taken in matrix iteration order: outer
    feature in column order, then inner feature in column order. With
    ``order="strength"`` they are ranked by descending |r| first; ties keep
    matrix order.
    """
    if cap < 0:
        raise InvalidInputError(f"cap must be >= 0, got {cap}")
    if order not in ("matrix", "strength"):
        raise InvalidInputError(f"unknown pair order: {order!r}")

    pairs: List[StrongPair] = []
    for a, row in matrix.items():
        for b, r in row.items():
            if a < b and abs(r) > threshold:
                pairs.append(StrongPair(a, b, r))

    if order == "strength":
        pairs.sort(key=lambda p: abs(p.correlation), reverse=True)
    return pairs[:cap]
