"""
random_source.py

Seedable random source used by the sample synthesizer.

Uniform draws come from a numpy Generator; normal draws are produced from
pairs of uniforms with the Box-Muller transform. Anything implementing
``uniform`` and ``standard_normal`` with the same signatures can be passed
to ``generate_samples`` instead (e.g. a scripted source in tests).
"""

from __future__ import annotations

from typing import Optional, Protocol, Tuple, Union

import numpy as np

Shape = Union[int, Tuple[int, ...]]


class RandomSource(Protocol):
    def uniform(self, size: Shape) -> np.ndarray: ...

    def standard_normal(self, size: Shape) -> np.ndarray: ...


class BoxMullerSource:
    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rng = np.random.default_rng(seed)

    def uniform(self, size: Shape) -> np.ndarray:
        """Draws in [0, 1)."""
        return self._rng.random(size)

    def standard_normal(self, size: Shape) -> np.ndarray:
        # 1 - U maps [0, 1) onto (0, 1], keeping log() finite
        u = 1.0 - self._rng.random(size)
        v = 1.0 - self._rng.random(size)
        return np.sqrt(-2.0 * np.log(u)) * np.cos(2.0 * np.pi * v)


def as_random_source(seed_or_source: Union[None, int, RandomSource]) -> RandomSource:
    if seed_or_source is None or isinstance(seed_or_source, (int, np.integer)):
        return BoxMullerSource(None if seed_or_source is None else int(seed_or_source))
    return seed_or_source
