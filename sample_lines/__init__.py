"""sample_lines — single-pass random line sampling.

Public API
----------
The entire usable surface is importable directly from ``sample_lines``::

    from sample_lines import SamplerConfig, FixedCount, Rate, sample_lines
    from sample_lines import SamplingRun, SampleResult
    from sample_lines.reservoir import FixedCountSampler, RateSampler
    from sample_lines.random_source import NumpyRandomSource
"""

from __future__ import annotations

__version__ = "0.1.0"

# Configuration
from sample_lines.config import FixedCount, Rate, SamplerConfig, SamplingMode

# Header passthrough
from sample_lines.headers import split_headers

# Run driver — class and functional APIs
from sample_lines.pipeline import SampleResult, SamplingRun, sample_lines

# Random sources
from sample_lines.random_source import NumpyRandomSource, RandomSource

# Samplers
from sample_lines.reservoir import FixedCountSampler, LineSampler, RateSampler, build_sampler

__all__ = [
    # Configuration
    "SamplerConfig",
    "FixedCount",
    "Rate",
    "SamplingMode",
    # Run driver
    "SamplingRun",
    "SampleResult",
    "sample_lines",
    # Building blocks
    "split_headers",
    "RandomSource",
    "NumpyRandomSource",
    "LineSampler",
    "FixedCountSampler",
    "RateSampler",
    "build_sampler",
    "__version__",
]
