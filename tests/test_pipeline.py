"""Tests for SamplingRun and the sample_lines functional API."""

from __future__ import annotations

import numpy as np
import pytest

from sample_lines import FixedCount, Rate, SampleResult, SamplerConfig, SamplingRun, sample_lines


def _lines(n: int) -> list[str]:
    return [str(i) for i in range(1, n + 1)]


def test_ten_lines_count_three_seed_42_is_stable() -> None:
    """Seeded fixed-count runs pick the same three lines in the same order."""
    cfg = SamplerConfig(mode=FixedCount(count=3), seed=42)
    first = sample_lines(_lines(10), cfg)
    second = sample_lines(iter(_lines(10)), cfg)
    assert first.selected == second.selected
    assert len(first.selected) == 3
    assert len(set(first.selected)) == 3
    assert set(first.selected) <= set(_lines(10))
    assert first.n_seen == 10


def test_ten_lines_count_three_seed_42_matches_pcg64_draws() -> None:
    """Seed 42 selects the lines implied by PCG64 integer draws over [0, i)."""
    rng = np.random.default_rng(42)
    expected = ["1", "2", "3"]
    for i in range(4, 11):
        slot = int(rng.integers(0, i))
        if slot < 3:
            expected[slot] = str(i)

    result = sample_lines(_lines(10), SamplerConfig(mode=FixedCount(count=3), seed=42))
    assert result.selected == expected


def test_short_input_returns_all_lines() -> None:
    """Five lines with count 10 come back whole and unpadded."""
    result = sample_lines(_lines(5), SamplerConfig(mode=FixedCount(count=10), seed=1))
    assert sorted(result.selected, key=int) == _lines(5)
    assert result.headers == []


def test_rate_zero_and_one() -> None:
    """Rate 0 selects nothing and rate 1 selects all 100 lines."""
    lines = _lines(100)
    assert sample_lines(lines, SamplerConfig(mode=Rate(probability=0.0))).selected == []
    assert sample_lines(lines, SamplerConfig(mode=Rate(probability=1.0))).selected == lines


def test_empty_input_any_count() -> None:
    """Empty input gives an empty selection for any count."""
    for count in (0, 1, 50):
        result = sample_lines([], SamplerConfig(mode=FixedCount(count=count), seed=3))
        assert result.selected == []
        assert result.n_seen == 0


def test_headers_excluded_from_sampling() -> None:
    """Header lines lead the output and are never drawn into the sample."""
    lines = _lines(20)
    for seed in range(50):
        cfg = SamplerConfig(mode=FixedCount(count=5), seed=seed, header_count=2)
        result = sample_lines(lines, cfg)
        assert result.headers == ["1", "2"]
        assert result.output[:2] == ["1", "2"]
        assert len(result.selected) == 5
        assert set(result.selected) <= set(lines[2:])
        assert result.n_seen == 18


def test_headers_with_rate_mode_everything_selected() -> None:
    """Headers lead the output in rate mode too."""
    cfg = SamplerConfig(mode=Rate(probability=1.0), header_count=2)
    result = sample_lines(_lines(20), cfg)
    assert result.output == _lines(20)
    assert result.selected == _lines(20)[2:]


def test_input_shorter_than_headers() -> None:
    """Input shorter than the header count is all headers."""
    cfg = SamplerConfig(mode=FixedCount(count=5), header_count=3)
    result = sample_lines(["h1", "h2"], cfg)
    assert result.headers == ["h1", "h2"]
    assert result.selected == []
    assert result.n_seen == 0


def test_feed_matches_run() -> None:
    """Feeding lines one at a time gives the same result as a pulled run."""
    cfg = SamplerConfig(mode=FixedCount(count=4), seed=7, header_count=1)
    pushed = SamplingRun(cfg)
    for line in _lines(30):
        pushed.feed(line)
    assert pushed.n_seen == 29
    assert pushed.result() == SamplingRun(cfg).run(_lines(30))


def test_run_after_partial_feed_respects_remaining_headers() -> None:
    """A pulled run continues header capture started by feed."""
    cfg = SamplerConfig(mode=Rate(probability=1.0), header_count=3)
    run = SamplingRun(cfg)
    run.feed("h1")
    result = run.run(["h2", "h3", "a", "b"])
    assert result.headers == ["h1", "h2", "h3"]
    assert result.selected == ["a", "b"]


def test_preserve_order_outputs_input_order() -> None:
    """Order preservation sorts the same selection into input order."""
    cfg = SamplerConfig(mode=FixedCount(count=6), seed=11, preserve_order=True)
    result = sample_lines(_lines(200), cfg)
    assert [int(x) for x in result.selected] == sorted(int(x) for x in result.selected)
    unordered = sample_lines(_lines(200), SamplerConfig(mode=FixedCount(count=6), seed=11))
    assert sorted(unordered.selected) == sorted(result.selected)


def test_upstream_errors_propagate() -> None:
    """Errors raised by the line source abort the run unchanged."""
    def failing():
        yield "a"
        yield "b"
        raise OSError("disk went away")

    with pytest.raises(OSError, match="disk went away"):
        sample_lines(failing(), SamplerConfig(mode=FixedCount(count=1), seed=0))


def test_sample_result_output_concatenates() -> None:
    """Output is the headers followed by the selection."""
    result = SampleResult(headers=["h"], selected=["x", "y"], n_seen=5)
    assert result.output == ["h", "x", "y"]
