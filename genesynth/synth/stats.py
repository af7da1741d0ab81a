"""
stats.py

Per-feature descriptive statistics and the pairwise Pearson correlation
matrix of a gene-expression table.

Every feature column (all columns except the label) is summarised over its
finite numeric values only; a non-numeric or missing cell is dropped from
that feature's series, not from the whole row.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Tuple

import numpy as np
import pandas as pd

from genesynth.errors import InvalidInputError
from genesynth.utils.logging import get_logger

log = get_logger(__name__)

TARGET_COL = "Target"

CorrelationMatrix = Dict[str, Dict[str, float]]


@dataclass(frozen=True)
class FeatureStats:
    count: int
    mean: float
    std: float
    min: float
    max: float
    median: float
    q1: float
    q3: float

    def as_dict(self) -> Dict[str, float]:
        return {
            "mean": self.mean,
            "std": self.std,
            "min": self.min,
            "max": self.max,
            "median": self.median,
            "q1": self.q1,
            "q3": self.q3,
        }


# ----------------------------
# Helpers
# ----------------------------
def feature_columns(df: pd.DataFrame, target_col: str = TARGET_COL) -> List[str]:
    return [str(c) for c in df.columns if str(c) != target_col]


def numeric_values(series: pd.Series) -> np.ndarray:
    """Finite numeric values of a column, in row order."""
    x = pd.to_numeric(series, errors="coerce").to_numpy(dtype=np.float64)
    return x[np.isfinite(x)]


def describe(values: np.ndarray) -> FeatureStats:
    n = int(values.size)
    # A constant column is exactly degenerate; np.std can leave float residue on it
    flat = n <= 1 or np.min(values) == np.max(values)
    std = 0.0 if flat else float(np.std(values, ddof=1))
    q1, median, q3 = np.quantile(values, [0.25, 0.5, 0.75])
    return FeatureStats(
        count=n,
        mean=float(np.mean(values)),
        std=std,
        min=float(np.min(values)),
        max=float(np.max(values)),
        median=float(median),
        q1=float(q1),
        q3=float(q3),
    )


def _block_correlations(block: np.ndarray) -> np.ndarray:
    """Pearson sum formula over every column pair of an (n, k) block."""
    n = block.shape[0]
    sums = block.sum(axis=0)
    gram = block.T @ block
    sq = np.diag(gram).copy()
    spread = n * sq - sums * sums  # n*Sxx - Sx^2, per column
    # Constant columns have exactly zero spread, whatever the float residue
    spread = np.where(block.max(axis=0) == block.min(axis=0), 0.0, spread)

    num = n * gram - np.outer(sums, sums)
    den_sq = np.outer(spread, spread)
    with np.errstate(invalid="ignore", divide="ignore"):
        r = np.where(den_sq > 0, num / np.sqrt(np.where(den_sq > 0, den_sq, 1.0)), 0.0)
    # Self-pairs use the exact spread so a varying column correlates to 1.0
    np.fill_diagonal(r, np.where(spread > 0, 1.0, 0.0))
    r = np.clip(r, -1.0, 1.0)
    # Mirror the upper triangle so r[a, b] == r[b, a] bit for bit
    upper = np.triu(r)
    return upper + np.triu(r, k=1).T


# ----------------------------
# Public API
# ----------------------------
def correlation_matrix(series: Dict[str, np.ndarray]) -> CorrelationMatrix:
    """
    Pairwise Pearson coefficients over independently filtered series.

    A pair is populated only when both filtered series have the same
    length n > 1; every other pair is left absent. Features sharing a
    length are computed together as one block.
    """
    names = list(series)
    matrix: CorrelationMatrix = {name: {} for name in names}

    groups: Dict[int, List[str]] = {}
    for name in names:
        groups.setdefault(int(series[name].size), []).append(name)

    coeffs: Dict[Tuple[str, str], float] = {}
    for n, members in groups.items():
        if n <= 1:
            continue
        block = np.column_stack([series[m] for m in members])
        r = _block_correlations(block)
        for i, a in enumerate(members):
            for j, b in enumerate(members):
                coeffs[(a, b)] = float(r[i, j])

    # Inner mappings follow column order
    for a in names:
        row = matrix[a]
        for b in names:
            key = (a, b)
            if key in coeffs:
                row[b] = coeffs[key]
    return matrix


def compute_statistics(
    df: pd.DataFrame,
    target_col: str = TARGET_COL,
) -> Tuple[Dict[str, FeatureStats], CorrelationMatrix]:
    """
    Summarise every feature of ``df`` and correlate every feature pair.

    Returns
    -------
    (stats, matrix)
        stats  : feature -> FeatureStats, in column order
        matrix : feature -> {feature -> Pearson r}
    """
    if df is None or not isinstance(df, pd.DataFrame):
        raise InvalidInputError("dataset must be a pandas DataFrame")
    if df.empty:
        raise InvalidInputError("dataset is empty")

    cols = feature_columns(df, target_col)
    if not cols:
        raise InvalidInputError("dataset has no feature columns")

    series: Dict[str, np.ndarray] = {}
    stats: Dict[str, FeatureStats] = {}
    for c in cols:
        values = numeric_values(df[c])
        if values.size == 0:
            raise InvalidInputError(f"feature {c!r} has no numeric values")
        series[c] = values
        stats[c] = describe(values)

    matrix = correlation_matrix(series)

    n_pairs = sum(len(v) for v in matrix.values())
    degenerate = sum(1 for s in stats.values() if s.std == 0)
    log.info(f"Computed statistics for {len(stats)} features; {n_pairs} correlation entries")
    if degenerate:
        log.debug(f"{degenerate} features have zero variance")
    return stats, matrix
