"""Sampler configuration objects.

The sampling mode is a tagged variant: a :class:`SamplerConfig` holds exactly
one of :class:`FixedCount` or :class:`Rate`. Both are frozen and validate
their parameters on construction, so a config that exists is a config that
can run.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


def _require_non_negative_int(name: str, value: object) -> None:
    """Raise ``ValueError`` unless *value* is an ``int`` >= 0 (bools rejected)."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


@dataclass(frozen=True)
class FixedCount:
    """Select exactly ``count`` lines (or every line, if fewer arrive).

    Attributes:
        count: Reservoir capacity. ``0`` is valid and selects nothing.
    """

    count: int

    def __post_init__(self) -> None:
        _require_non_negative_int("count", self.count)


@dataclass(frozen=True)
class Rate:
    """Select each line independently with probability ``probability``.

    Attributes:
        probability: Inclusion probability in ``[0.0, 1.0]``.
    """

    probability: float

    def __post_init__(self) -> None:
        if isinstance(self.probability, bool) or not isinstance(self.probability, (int, float)):
            raise ValueError(f"probability must be a number, got {self.probability!r}")
        # NaN fails both comparisons
        if not 0.0 <= self.probability <= 1.0:
            raise ValueError(f"probability must be within [0, 1], got {self.probability}")


SamplingMode = Union[FixedCount, Rate]


@dataclass(frozen=True)
class SamplerConfig:
    """Configuration for one sampling pass.

    Attributes:
        mode: Either :class:`FixedCount` or :class:`Rate`.
        seed: Optional non-negative seed. ``None`` draws from OS entropy.
        header_count: Number of leading lines passed through unsampled.
        preserve_order: Return a fixed-count selection in input order instead
            of reservoir slot order. Rate selections are always in input order.
    """

    mode: SamplingMode
    seed: int | None = None
    header_count: int = 0
    preserve_order: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.mode, (FixedCount, Rate)):
            raise ValueError(f"mode must be FixedCount or Rate, got {self.mode!r}")
        if self.seed is not None:
            _require_non_negative_int("seed", self.seed)
        _require_non_negative_int("header_count", self.header_count)

    @property
    def mode_name(self) -> str:
        """Short label for the sampling mode (``count`` or ``rate``)."""
        return "count" if isinstance(self.mode, FixedCount) else "rate"
