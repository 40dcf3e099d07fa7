"""Header passthrough for line streams."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from itertools import islice


def split_headers(lines: Iterable[str], count: int) -> tuple[list[str], Iterator[str]]:
    """Split the first *count* lines off a stream.

    Only the header lines are consumed; the remainder is returned as a lazy
    iterator positioned right after them. A stream shorter than *count*
    yields every line as a header and an exhausted remainder.

    Args:
        lines: Line stream.
        count: Number of header lines to take.

    Returns:
        ``(headers, rest)``.

    Raises:
        ValueError: If *count* is negative.

    Examples:
        >>> headers, rest = split_headers(["h", "a", "b"], 1)
        >>> headers, list(rest)
        (['h'], ['a', 'b'])
    """
    if count < 0:
        raise ValueError(f"header count must be non-negative, got {count}")
    stream = iter(lines)
    headers = list(islice(stream, count))
    return headers, stream
