"""
errors.py

Exception types raised by the genesynth core.

All failures are synchronous and raised before any partial output is
returned to the caller.
"""


class GenesynthError(Exception):
    """Base class for all genesynth errors."""


class InvalidInputError(GenesynthError, ValueError):
    """Empty dataset, non-positive sample count, or inconsistent rows."""


class UnassignedLabelError(GenesynthError, RuntimeError):
    """A label draw fell past the cumulative class prior."""


class GenerationCancelled(GenesynthError):
    """Synthesis was stopped by the caller between chunks."""
