"""Streaming line sampler interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable

from sample_lines.random_source import RandomSource


class LineSampler(ABC):
    """Base interface for single-pass line sampling strategies.

    Subclasses decide per line whether it is kept; the base class only counts
    lines and owns the random source.
    """

    def __init__(self, rng: RandomSource) -> None:
        self._rng = rng
        self.n_seen = 0

    @abstractmethod
    def add(self, line: str) -> None:
        """Offer the next line of the stream to the sampler."""

    @abstractmethod
    def selection(self) -> list[str]:
        """Return the lines currently selected."""

    def extend(self, lines: Iterable[str]) -> None:
        """Offer every line of *lines* in order."""
        for line in lines:
            self.add(line)
