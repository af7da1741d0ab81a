"""
sizing.py

Rough guidance on how many synthetic rows to generate for model training,
given the shape of the original table.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

import pandas as pd

# (low, high) sample counts per model family
SIZE_BANDS: Dict[str, Tuple[int, int]] = {
    "Simple ML models": (1_000, 5_000),
    "Complex models (RF, SVM)": (5_000, 10_000),
    "Deep learning": (10_000, 50_000),
    "Genomics/High-dim data": (10_000, 100_000),
}

RECOMMENDED_HIGH_DIM = (10_000, 20_000)


@dataclass(frozen=True)
class SizeRecommendation:
    n_samples: int
    n_features: int
    n_classes: int
    high_dimensional: bool
    recommended_min: int
    recommended_max: int

    def message(self) -> str:
        if self.high_dimensional:
            return (
                f"With {self.n_samples} original samples and {self.n_features} features, "
                "you have a high-dimensional, low-sample scenario. Generate at least "
                f"{self.recommended_min:,} samples for reliable model performance. Consider "
                "dimensionality reduction (PCA, feature selection) if computational resources are limited."
            )
        return (
            f"{self.n_samples} original samples across {self.n_features} features; "
            f"{self.recommended_min:,}-{self.recommended_max:,} synthetic samples are usually enough."
        )


def recommend_size(df: pd.DataFrame, target_col: str = "Target") -> SizeRecommendation:
    n_features = sum(1 for c in df.columns if c != target_col)
    n_classes = int(df[target_col].nunique()) if target_col in df.columns else 0
    high_dim = n_features > len(df)
    lo, hi = RECOMMENDED_HIGH_DIM if high_dim else SIZE_BANDS["Complex models (RF, SVM)"]
    return SizeRecommendation(
        n_samples=len(df),
        n_features=n_features,
        n_classes=n_classes,
        high_dimensional=high_dim,
        recommended_min=lo,
        recommended_max=hi,
    )
