"""
pipeline.py

Runs the generator stages in order and returns every intermediate
result to the caller:

    dataset -> statistics + correlation matrix -> strong pairs
            -> synthetic rows -> duplicate audit

Each call produces a fresh ExpansionResult; nothing is cached between
calls.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Union

import pandas as pd

from genesynth.config import SynthConfig
from genesynth.synth.correlation import StrongPair, select_strong_pairs
from genesynth.synth.duplicates import audit_duplicates, combine
from genesynth.synth.random_source import RandomSource
from genesynth.synth.sampler import generate_samples
from genesynth.synth.stats import CorrelationMatrix, FeatureStats, compute_statistics
from genesynth.utils.logging import get_logger

log = get_logger(__name__)


@dataclass(frozen=True)
class ExpansionResult:
    original: pd.DataFrame
    stats: Dict[str, FeatureStats]
    matrix: CorrelationMatrix
    pairs: List[StrongPair]
    synthetic: pd.DataFrame
    duplicates: int

    @property
    def combined(self) -> pd.DataFrame:
        return combine(self.original, self.synthetic)


def expand_dataset(
    df: pd.DataFrame,
    cfg: Optional[SynthConfig] = None,
    random_state: Union[None, int, RandomSource] = None,
    should_cancel: Optional[Callable[[], bool]] = None,
) -> ExpansionResult:
    """
    Synthesize ``cfg.n_samples`` rows from ``df``.

    ``random_state`` overrides ``cfg.seed`` when given.
    """
    cfg = (cfg or SynthConfig()).validate()

    stats, matrix = compute_statistics(df, target_col=cfg.target_col)
    pairs = select_strong_pairs(
        matrix,
        threshold=cfg.corr_threshold,
        cap=cfg.max_pairs,
        order=cfg.pair_order,
    )
    log.info(f"Selected {len(pairs)} strong pairs (|r| > {cfg.corr_threshold}, order={cfg.pair_order})")

    synthetic = generate_samples(
        df,
        stats,
        pairs,
        cfg.n_samples,
        random_state if random_state is not None else cfg.seed,
        target_col=cfg.target_col,
        sample_fraction=cfg.sample_fraction,
        noise_scale=cfg.noise_scale,
        blend_scale=cfg.blend_scale,
        strict_labels=cfg.strict_labels,
        chunk_size=cfg.chunk_size,
        should_cancel=should_cancel,
    )

    duplicates = audit_duplicates(combine(df, synthetic))
    log.info(f"Generated {len(synthetic)} samples; {duplicates} duplicates in combined table")

    return ExpansionResult(
        original=df,
        stats=stats,
        matrix=matrix,
        pairs=pairs,
        synthetic=synthetic,
        duplicates=duplicates,
    )
