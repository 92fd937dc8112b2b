"""Taylor series of scalar or vector functions along a direction."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

import numpy as np

from taylorad.derivative import Along, At, derivatives_of
from taylorad.traits import is_vector


def _term(d: Any) -> Any:
    if is_vector(d):
        return np.array(d, dtype=float)
    return float(d)


def _copy(d: Any) -> Any:
    return d.copy() if isinstance(d, np.ndarray) else d


class TaylorSeries:
    """A truncated Taylor series built from directional derivatives of orders 0 to N."""

    __slots__ = ("_derivatives",)

    def __init__(self, derivatives: Iterable[Any]) -> None:
        terms = [_term(d) for d in derivatives]
        if not terms:
            raise ValueError("a Taylor series needs at least the zeroth derivative")
        self._derivatives = terms

    def __call__(self, t: float) -> Any:
        """Evaluate the series at step ``t`` along the direction."""
        terms = iter(self._derivatives)
        result = _copy(next(terms))
        factor = t
        for i, d in enumerate(terms, start=1):
            result = result + factor * d
            factor = factor * t / (i + 1)
        return result

    def derivatives(self) -> list[Any]:
        """Return the directional derivatives of this series."""
        return [_copy(d) for d in self._derivatives]


def taylorseries(f: Callable[..., Any], along: Along, at: At) -> TaylorSeries:
    """Return the Taylor series of ``f`` along a direction at the given arguments."""
    if not isinstance(along, Along):
        raise TypeError(f"taylorseries() expects an along(...) list, got {type(along).__name__}")
    return TaylorSeries(derivatives_of(f, along, at))