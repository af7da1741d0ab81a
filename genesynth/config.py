from __future__ import annotations
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional
import yaml

from .errors import InvalidInputError

PAIR_ORDERS = ("matrix", "strength")

@dataclass(frozen=True)
class SynthConfig:
    n_samples: int = 1000
    seed: Optional[int] = 42
    target_col: str = "Target"
    sample_fraction: float = 0.3   # share of values drawn from observed rows
    noise_scale: float = 0.2       # noise sd as a multiple of the feature sd
    blend_scale: float = 0.7       # blend = |r| * blend_scale
    corr_threshold: float = 0.5
    max_pairs: int = 10
    pair_order: str = "matrix"     # "matrix" | "strength"
    strict_labels: bool = False    # raise instead of falling back to the last label
    chunk_size: int = 5000

    def validate(self) -> "SynthConfig":
        if int(self.n_samples) != self.n_samples or self.n_samples <= 0:
            raise InvalidInputError(f"n_samples must be a positive integer, got {self.n_samples!r}")
        if not 0.0 <= self.sample_fraction <= 1.0:
            raise InvalidInputError(f"sample_fraction must be in [0, 1], got {self.sample_fraction}")
        if self.noise_scale < 0 or self.blend_scale < 0:
            raise InvalidInputError("noise_scale and blend_scale must be >= 0")
        if self.max_pairs < 0:
            raise InvalidInputError(f"max_pairs must be >= 0, got {self.max_pairs}")
        if self.pair_order not in PAIR_ORDERS:
            raise InvalidInputError(f"pair_order must be one of {PAIR_ORDERS}, got {self.pair_order!r}")
        if self.chunk_size <= 0:
            raise InvalidInputError(f"chunk_size must be > 0, got {self.chunk_size}")
        return self

    def with_overrides(self, **overrides: Any) -> "SynthConfig":
        """Return a copy with every non-None override applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


def load_config(path: Optional[Path]) -> SynthConfig:
    if not path:
        return SynthConfig()
    with Path(path).open("r") as f:
        raw: Dict[str, Any] = yaml.safe_load(f) or {}
    section = raw.get("synth", raw) or {}
    known = {f.name for f in fields(SynthConfig)}
    unknown = sorted(set(section) - known)
    if unknown:
        raise InvalidInputError(f"Unknown config keys in {path}: {unknown}")
    return SynthConfig(**section).validate()
