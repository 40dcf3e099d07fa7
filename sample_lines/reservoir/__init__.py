"""Line samplers."""

from __future__ import annotations

from sample_lines.config import FixedCount, Rate, SamplingMode
from sample_lines.random_source import RandomSource
from sample_lines.reservoir.algorithm_r import FixedCountSampler
from sample_lines.reservoir.base import LineSampler
from sample_lines.reservoir.bernoulli import RateSampler


def build_sampler(
    mode: SamplingMode, rng: RandomSource, preserve_order: bool = False
) -> LineSampler:
    """Return the sampler implementing *mode*."""
    if isinstance(mode, FixedCount):
        return FixedCountSampler(mode.count, rng, preserve_order=preserve_order)
    if isinstance(mode, Rate):
        return RateSampler(mode.probability, rng)
    raise ValueError(f"Unknown sampling mode: {mode!r}")


__all__ = [
    "LineSampler",
    "FixedCountSampler",
    "RateSampler",
    "build_sampler",
]
