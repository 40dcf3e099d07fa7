"""Probability-rate (Bernoulli) line sampler."""

from __future__ import annotations

from sample_lines.random_source import RandomSource
from sample_lines.reservoir.base import LineSampler


class RateSampler(LineSampler):
    """Keep each line independently with fixed probability.

    Selected lines stay in input order. The selection size is unbounded and
    averages ``probability * total``.
    """

    def __init__(self, probability: float, rng: RandomSource) -> None:
        """Initialize the sampler.

        Args:
            probability: Inclusion probability in ``[0, 1]``.
            rng: Source of uniform draws.
        """
        if not 0.0 <= probability <= 1.0:
            raise ValueError("probability must be within [0, 1]")
        super().__init__(rng)
        self.probability = probability
        self._selected: list[str] = []

    def add(self, line: str) -> None:
        self.n_seen += 1
        if self._rng.next_uniform_float() < self.probability:
            self._selected.append(line)

    def selection(self) -> list[str]:
        return list(self._selected)

    def __len__(self) -> int:
        return len(self._selected)
