"""
duplicates.py

Exact whole-row duplicate audit over the combined original + synthetic
table. Duplicates are counted, never removed.
"""

from __future__ import annotations

import math
from typing import Any, Hashable, Iterable, Mapping, Tuple, Union

import numpy as np
import pandas as pd

Rows = Union[pd.DataFrame, Iterable[Mapping[str, Any]]]


def _scalar(v: Any) -> Hashable:
    if isinstance(v, np.generic):
        v = v.item()
    if v is None or (isinstance(v, float) and math.isnan(v)):
        return None
    return v


def canonical_row(row: Mapping[str, Any]) -> Tuple[Tuple[str, Hashable], ...]:
    """Field order independent key: (field, value) items sorted by field name."""
    return tuple(sorted((str(k), _scalar(v)) for k, v in row.items()))


def _iter_rows(rows: Rows) -> Iterable[Mapping[str, Any]]:
    if isinstance(rows, pd.DataFrame):
        return rows.to_dict(orient="records")
    return rows


def audit_duplicates(rows: Rows) -> int:
    """Count rows identical to an earlier row, field by field."""
    seen = set()
    duplicates = 0
    for row in _iter_rows(rows):
        key = canonical_row(row)
        if key in seen:
            duplicates += 1
        else:
            seen.add(key)
    return duplicates


def combine(original: pd.DataFrame, synthetic: pd.DataFrame) -> pd.DataFrame:
    """Original rows followed by synthetic rows, in the original's column order."""
    synthetic = synthetic.reindex(columns=original.columns)
    return pd.concat([original, synthetic], ignore_index=True)
