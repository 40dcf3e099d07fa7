"""Fixed-count reservoir sampler (Algorithm R)."""

from __future__ import annotations

from sample_lines.random_source import RandomSource
from sample_lines.reservoir.base import LineSampler


class FixedCountSampler(LineSampler):
    """Keep a uniform random sample of ``count`` lines from a stream.

    The first ``count`` lines fill the reservoir. The i-th line after that
    (1-indexed over all lines seen) draws ``j`` uniformly from ``[0, i)`` and
    replaces slot ``j`` when ``j < count``. Every line ends up selected with
    probability ``count / total``.

    Selections come back in reservoir slot order unless ``preserve_order`` is
    set, in which case the arrival index of each slot is tracked and the
    selection is sorted back into input order.
    """

    def __init__(self, count: int, rng: RandomSource, preserve_order: bool = False) -> None:
        """Initialize the sampler.

        Args:
            count: Reservoir capacity (non-negative).
            rng: Source of uniform draws.
            preserve_order: Return the selection in input order.
        """
        if count < 0:
            raise ValueError("count must be non-negative")
        super().__init__(rng)
        self.count = count
        self.preserve_order = preserve_order
        self._reservoir: list[str] = []
        self._positions: list[int] = []

    def add(self, line: str) -> None:
        position = self.n_seen
        self.n_seen += 1
        if self.count == 0:
            return
        if len(self._reservoir) < self.count:
            self._reservoir.append(line)
            if self.preserve_order:
                self._positions.append(position)
            return
        slot = self._rng.next_uniform_in_range(self.n_seen)
        if slot < self.count:
            self._reservoir[slot] = line
            if self.preserve_order:
                self._positions[slot] = position

    def selection(self) -> list[str]:
        if not self.preserve_order:
            return list(self._reservoir)
        order = sorted(range(len(self._reservoir)), key=self._positions.__getitem__)
        return [self._reservoir[i] for i in order]

    def __len__(self) -> int:
        return len(self._reservoir)
