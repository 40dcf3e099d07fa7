"""Sampling run driver — SamplingRun class plus sample_lines functional API.

:class:`SamplingRun` owns one sampler and its random source for a single pass.
Feed it lines with :meth:`SamplingRun.feed`, or hand it a whole stream with
:meth:`SamplingRun.run`; either way :meth:`SamplingRun.result` returns the
headers and the selection once input is exhausted.

``sample_lines(...)`` is a thin wrapper for the common one-shot case.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from sample_lines.config import SamplerConfig
from sample_lines.headers import split_headers
from sample_lines.random_source import NumpyRandomSource, RandomSource
from sample_lines.reservoir import LineSampler, build_sampler

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Result dataclass
# ---------------------------------------------------------------------------


@dataclass
class SampleResult:
    """Outcome of one sampling pass.

    Attributes:
        headers: Preserved leading lines, in input order.
        selected: Sampled lines. Fixed-count selections are in reservoir slot
            order unless order preservation was requested.
        n_seen: Number of non-header lines processed.
    """

    headers: list[str] = field(default_factory=list)
    selected: list[str] = field(default_factory=list)
    n_seen: int = 0

    @property
    def output(self) -> list[str]:
        """Headers followed by the selection, as they are written out."""
        return self.headers + self.selected


# ---------------------------------------------------------------------------
# SamplingRun
# ---------------------------------------------------------------------------


class SamplingRun:
    """A single streaming pass over a line source.

    The first ``config.header_count`` lines fed are held as headers; every
    later line goes to the sampler.

    Attributes:
        config: Sampling configuration.
        sampler: Strategy chosen from ``config.mode``.
        headers: Header lines captured so far.
    """

    def __init__(self, config: SamplerConfig, rng: RandomSource | None = None) -> None:
        self.config = config
        if rng is None:
            rng = NumpyRandomSource(config.seed)
        self.sampler: LineSampler = build_sampler(
            config.mode, rng, preserve_order=config.preserve_order
        )
        self.headers: list[str] = []
        logger.debug(
            "Sampling run: mode=%s headers=%d seeded=%s preserve_order=%s",
            config.mode,
            config.header_count,
            config.seed is not None,
            config.preserve_order,
        )

    # ------------------------------------------------------------------
    # Core API
    # ------------------------------------------------------------------

    def feed(self, line: str) -> None:
        """Process the next line of the stream."""
        if len(self.headers) < self.config.header_count:
            self.headers.append(line)
        else:
            self.sampler.add(line)

    def run(self, lines: Iterable[str]) -> SampleResult:
        """Consume *lines* to exhaustion and return the result."""
        headers, rest = split_headers(lines, self.config.header_count - len(self.headers))
        self.headers.extend(headers)
        self.sampler.extend(rest)
        return self.result()

    def result(self) -> SampleResult:
        """Return headers and the current selection."""
        selected = self.sampler.selection()
        logger.info(
            "Selected %d of %d lines (%d header lines preserved)",
            len(selected),
            self.sampler.n_seen,
            len(self.headers),
        )
        return SampleResult(
            headers=list(self.headers),
            selected=selected,
            n_seen=self.sampler.n_seen,
        )

    # ------------------------------------------------------------------
    # Convenience properties
    # ------------------------------------------------------------------

    @property
    def n_seen(self) -> int:
        """Number of non-header lines processed so far."""
        return self.sampler.n_seen


# ---------------------------------------------------------------------------
# Functional API
# ---------------------------------------------------------------------------


def sample_lines(
    lines: Iterable[str],
    config: SamplerConfig,
    rng: RandomSource | None = None,
) -> SampleResult:
    """Sample *lines* in one pass.

    Args:
        lines: Line stream without trailing newlines. Exceptions raised while
            iterating it propagate unchanged.
        config: Sampling configuration.
        rng: Optional random source. Defaults to a NumPy generator seeded from
            ``config.seed``.

    Returns:
        A :class:`SampleResult`.
    """
    return SamplingRun(config, rng=rng).run(lines)
