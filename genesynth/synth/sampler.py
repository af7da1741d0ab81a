"""
sampler.py

Synthetic sample generation for a small, high-dimensional labelled table.

Per synthetic row:
- a class label is drawn from the empirical prior by inverse-CDF sampling
- every feature gets a base value, either an observed value plus Gaussian
  noise or a draw from Normal(mean, std), rounded to an integer inside the
  observed range
- each strong pair (a, b) nudges b toward the value implied by a and their
  correlation

Rows are independent of each other, so generation runs in chunks; a caller
can stop it between chunks. Nothing is returned unless every chunk finishes.
"""

from __future__ import annotations

from typing import Callable, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

import numpy as np
import pandas as pd

from genesynth.errors import GenerationCancelled, InvalidInputError, UnassignedLabelError
from genesynth.synth.correlation import StrongPair
from genesynth.synth.random_source import RandomSource, as_random_source
from genesynth.synth.stats import TARGET_COL, FeatureStats, feature_columns, numeric_values
from genesynth.utils.logging import get_logger

log = get_logger(__name__)

# Upper bound on cells (rows x features) held per chunk
CELL_BUDGET = 2_000_000

Prior = List[Tuple[int, float]]


# -----------------------------------------------------------------------------
# Validation
# -----------------------------------------------------------------------------
def dataset_from_records(
    records: Sequence[Mapping[str, object]],
    target_col: str = TARGET_COL,
) -> pd.DataFrame:
    """Build a dataset from row mappings that all share one key set."""
    if not records:
        raise InvalidInputError("dataset is empty")
    keys = set(records[0])
    for i, rec in enumerate(records[1:], start=1):
        if set(rec) != keys:
            diff = sorted(keys.symmetric_difference(rec))
            raise InvalidInputError(f"row {i} has a different feature set (mismatched keys: {diff})")
    if target_col not in keys:
        raise InvalidInputError(f"rows have no {target_col!r} field")
    return pd.DataFrame.from_records(list(records), columns=list(records[0]))


def _labels(df: pd.DataFrame, target_col: str) -> np.ndarray:
    if target_col not in df.columns:
        raise InvalidInputError(f"dataset has no {target_col!r} column")
    y = pd.to_numeric(df[target_col], errors="coerce").to_numpy(dtype=np.float64)
    if not np.all(np.isfinite(y)):
        bad = int((~np.isfinite(y)).sum())
        raise InvalidInputError(f"{bad} rows have a missing or non-numeric {target_col!r}")
    if not np.all(y == np.round(y)):
        raise InvalidInputError(f"{target_col!r} must hold integer class labels")
    return y.astype(np.int64)


# -----------------------------------------------------------------------------
# Label draw
# -----------------------------------------------------------------------------
def class_prior(df: pd.DataFrame, target_col: str = TARGET_COL) -> Prior:
    """Empirical (label, probability) pairs in ascending label order."""
    if df.empty:
        raise InvalidInputError("dataset is empty")
    y = _labels(df, target_col)
    labels, counts = np.unique(y, return_counts=True)
    return [(int(lab), float(c) / len(y)) for lab, c in zip(labels, counts)]


def draw_labels(prior: Prior, u: np.ndarray, strict: bool = False) -> np.ndarray:
    """
    Inverse-CDF label draw: the first label whose cumulative probability
    is >= u. A draw past the last cumulative value (floating error) falls
    back to the last label, or raises UnassignedLabelError when ``strict``.
    """
    labels = np.array([lab for lab, _ in prior], dtype=np.int64)
    cum = np.cumsum([p for _, p in prior])
    idx = np.searchsorted(cum, u, side="left")
    unassigned = idx >= len(labels)
    if unassigned.any():
        n = int(unassigned.sum())
        if strict:
            raise UnassignedLabelError(
                f"{n} label draws exceeded the cumulative prior ({cum[-1]!r})"
            )
        log.warning(f"{n} label draws fell past the prior; using last label {labels[-1]}")
        idx = np.where(unassigned, len(labels) - 1, idx)
    return labels[idx]


# -----------------------------------------------------------------------------
# Feature values
# -----------------------------------------------------------------------------
def _round_half_up(x: np.ndarray) -> np.ndarray:
    return np.floor(x + 0.5)


class _FeatureTable:
    """Column-aligned arrays of the statistics used during generation."""

    def __init__(self, df: pd.DataFrame, features: List[str], stats: Mapping[str, FeatureStats]):
        missing = [f for f in features if f not in stats]
        if missing:
            raise InvalidInputError(
                f"statistics are missing {len(missing)} dataset features (e.g. {missing[0]!r}); recompute them"
            )
        self.features = features
        self.index = {f: i for i, f in enumerate(features)}
        self.mean = np.array([stats[f].mean for f in features], dtype=np.float64)
        std = np.array([stats[f].std for f in features], dtype=np.float64)
        self.std = np.where(np.isfinite(std), std, 0.0)
        self.lo = np.array([stats[f].min for f in features], dtype=np.float64)
        self.hi = np.array([stats[f].max for f in features], dtype=np.float64)
        # Integer bounds inside [min, max]; a range holding no integer collapses to its rounded midpoint
        ilo, ihi = np.ceil(self.lo), np.floor(self.hi)
        no_int = ilo > ihi
        mid = _round_half_up((self.lo + self.hi) / 2.0)
        self.ilo = np.where(no_int, mid, ilo)
        self.ihi = np.where(no_int, mid, ihi)

        # Observed values per feature, NaN-padded into one (max_n, F) pool
        observed = [numeric_values(df[f]) for f in features]
        self.counts = np.array([v.size for v in observed], dtype=np.int64)
        if np.any(self.counts == 0):
            empty = features[int(np.argmin(self.counts))]
            raise InvalidInputError(f"feature {empty!r} has no numeric values")
        self.pool = np.full((int(self.counts.max()), len(features)), np.nan)
        for j, v in enumerate(observed):
            self.pool[: v.size, j] = v

    def base_values(
        self,
        rs: RandomSource,
        m: int,
        sample_fraction: float,
        noise_scale: float,
    ) -> np.ndarray:
        F = len(self.features)
        from_observed = rs.uniform((m, F)) < sample_fraction

        pos = np.floor(rs.uniform((m, F)) * self.counts).astype(np.int64)
        pos = np.minimum(pos, self.counts - 1)
        observed = self.pool[pos, np.arange(F)]
        noise = rs.standard_normal((m, F)) * (noise_scale * self.std)

        parametric = self.mean + self.std * rs.standard_normal((m, F))

        # Parametric draws are clamped to the observed range before rounding
        parametric = _round_half_up(np.clip(parametric, self.lo, self.hi))
        raw = np.where(from_observed, _round_half_up(observed + noise), parametric)
        return np.clip(raw, self.ilo, self.ihi)

    def adjust(self, values: np.ndarray, pairs: Iterable[StrongPair], blend_scale: float) -> None:
        """Nudge each pair's second feature toward its correlation-implied value, in place."""
        for a, b, r in pairs:
            ia, ib = self.index[a], self.index[b]
            if self.std[ia] > 0:
                z = (values[:, ia] - self.mean[ia]) / self.std[ia]
            else:
                z = np.zeros(values.shape[0])
            expected = self.mean[ib] + r * z * self.std[ib]
            blend = abs(r) * blend_scale
            nudged = _round_half_up(values[:, ib] * (1.0 - blend) + expected * blend)
            values[:, ib] = np.clip(nudged, self.ilo[ib], self.ihi[ib])


# -----------------------------------------------------------------------------
# Public API
# -----------------------------------------------------------------------------
def generate_samples(
    df: pd.DataFrame,
    stats: Mapping[str, FeatureStats],
    pairs: Sequence[StrongPair],
    count: int,
    random_state: Union[None, int, RandomSource] = None,
    *,
    target_col: str = TARGET_COL,
    sample_fraction: float = 0.3,
    noise_scale: float = 0.2,
    blend_scale: float = 0.7,
    strict_labels: bool = False,
    chunk_size: int = 5000,
    should_cancel: Optional[Callable[[], bool]] = None,
) -> pd.DataFrame:
    """
    Generate ``count`` synthetic rows shaped like ``df``.

    Parameters
    ----------
    df : pd.DataFrame
        Original dataset; never modified.
    stats : mapping
        FeatureStats per feature, as returned by ``compute_statistics(df)``.
    pairs : sequence of StrongPair
        Adjusted in list order; a feature appearing in several pairs keeps
        the last adjustment.
    count : int
        Number of rows to produce (> 0).
    random_state : int, RandomSource or None
        Seed or random source for every draw.
    should_cancel : callable, optional
        Polled before each chunk; returning True raises GenerationCancelled.

    Returns
    -------
    pd.DataFrame
        ``count`` rows with the columns of ``df`` in the same order.
    """
    if df is None or not isinstance(df, pd.DataFrame) or df.empty:
        raise InvalidInputError("original dataset is empty")
    if isinstance(count, bool) or int(count) != count or count <= 0:
        raise InvalidInputError(f"count must be a positive integer, got {count!r}")
    if chunk_size <= 0:
        raise InvalidInputError(f"chunk_size must be > 0, got {chunk_size}")
    count = int(count)

    features = feature_columns(df, target_col)
    prior = class_prior(df, target_col)
    table = _FeatureTable(df, features, stats)
    for p in pairs:
        if p.feature_a not in table.index or p.feature_b not in table.index:
            raise InvalidInputError(f"strong pair {p.feature_a!r}/{p.feature_b!r} is not in the dataset")

    rs = as_random_source(random_state)
    rows_per_chunk = max(1, min(chunk_size, CELL_BUDGET // max(1, len(features))))

    log.info(
        f"Generating {count} samples: {len(features)} features, "
        f"{len(prior)} classes, {len(pairs)} strong pairs"
    )

    label_parts: List[np.ndarray] = []
    value_parts: List[np.ndarray] = []
    done = 0
    while done < count:
        if should_cancel is not None and should_cancel():
            raise GenerationCancelled(f"generation cancelled after {done} of {count} samples")
        m = min(rows_per_chunk, count - done)
        label_parts.append(draw_labels(prior, rs.uniform(m), strict=strict_labels))
        values = table.base_values(rs, m, sample_fraction, noise_scale)
        table.adjust(values, pairs, blend_scale)
        value_parts.append(values)
        done += m
        log.debug(f"chunk done: {done}/{count}")

    values = np.vstack(value_parts).astype(np.int64)

    data: Dict[str, np.ndarray] = {f: values[:, j] for j, f in enumerate(features)}
    data[target_col] = np.concatenate(label_parts)
    return pd.DataFrame(data, columns=[str(c) for c in df.columns])
