"""Random sources used by the line samplers."""

from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np


class RandomSource(ABC):
    """Uniform random draws needed by the samplers."""

    @abstractmethod
    def next_uniform_in_range(self, upper: int) -> int:
        """Return an integer drawn uniformly from ``[0, upper)``."""

    @abstractmethod
    def next_uniform_float(self) -> float:
        """Return a float drawn uniformly from ``[0.0, 1.0)``."""


class NumpyRandomSource(RandomSource):
    """Random source backed by a NumPy ``Generator`` (PCG64)."""

    def __init__(self, seed: int | None = None) -> None:
        """Initialize the random source.

        Args:
            seed: Random seed for reproducibility. ``None`` seeds from OS entropy.
        """
        self.seed = seed
        self._rng = np.random.default_rng(seed)

    def next_uniform_in_range(self, upper: int) -> int:
        if upper <= 0:
            raise ValueError("upper must be positive")
        return int(self._rng.integers(0, upper))

    def next_uniform_float(self) -> float:
        return float(self._rng.random())
