"""Binomial coefficients C(i, j) for orders up to 50."""

from __future__ import annotations

MAX_ORDER = 50
"""The largest order ``i`` for which coefficients are available."""


def _pascal_rows(n: int) -> tuple[tuple[float, ...], ...]:
    rows: list[tuple[float, ...]] = [(1.0,)]
    for _ in range(n):
        previous = rows[-1]
        inner = (a + b for a, b in zip(previous, previous[1:]))
        rows.append((1.0, *inner, 1.0))
    return tuple(rows)


_ROWS = _pascal_rows(MAX_ORDER)


def binomial_coefficient(i: int, j: int) -> float:
    """Return C(i, j) as a float, for 0 <= j <= i <= 50.

    Raises ValueError when the order exceeds 50, when j > i, or when either
    index is negative.
    """
    if i < 0 or j < 0:
        raise ValueError(f"binomial coefficient indices must be non-negative, got C({i}, {j})")
    if i > MAX_ORDER:
        raise ValueError(
            f"violation of maximum order {MAX_ORDER} for binomial coefficient retrieval: i={i}"
        )
    if j > i:
        raise ValueError(f"violation of j <= i condition for binomial coefficient C({i}, {j})")
    return _ROWS[i][j]