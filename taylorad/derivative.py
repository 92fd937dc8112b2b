"""Seeding autodiff numbers, evaluating functions and extracting their derivatives.

Derivatives are requested with three keywords: ``wrt(...)`` names the
variables to differentiate with respect to, ``at(...)`` holds the arguments
passed to the function, and ``along(...)`` gives a direction for directional
derivatives. The variables are autodiff numbers (see :mod:`taylorad.real` and
:mod:`taylorad.dual`) and are seeded in place before the function runs and
unseeded afterwards.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import numpy as np

from taylorad.real import Real
from taylorad.traits import is_vector
from taylorad.traits import order as _order


@dataclass(frozen=True)
class Wrt:
    """The variables with respect to which derivatives are computed."""

    args: tuple[Any, ...]


@dataclass(frozen=True)
class At:
    """The arguments at which a function is evaluated."""

    args: tuple[Any, ...]


@dataclass(frozen=True)
class Along:
    """The direction, one entry per argument, of a directional derivative."""

    args: tuple[Any, ...]


def wrt(*args: Any) -> Wrt:
    """Return the list of variables with respect to which derivatives are taken."""
    return Wrt(args)


def at(*args: Any) -> At:
    """Return the list of arguments at which derivatives are evaluated."""
    return At(args)


def along(*args: Any) -> Along:
    """Return the direction along which derivatives are evaluated."""
    return Along(args)


def _require_number(x: Any, role: str) -> Any:
    if is_vector(x) or _order(x) == 0:
        raise TypeError(f"{role} must be an autodiff number, got {type(x).__name__}")
    return x


def seed(wrt: Wrt, value: Any = 1.0) -> None:
    """Seed each variable in ``wrt`` using its position as the derivative order.

    ``seed(wrt(x, y, z))`` seeds the first-order part of x, the second-order
    part of y and the third-order part of z. When the numbers have a higher
    order than there are variables, the last variable is used for the
    remaining orders, so ``wrt(x)`` on a fourth-order number is the same as
    ``wrt(x, x, x, x)``.
    """
    if not isinstance(wrt, Wrt):
        raise TypeError(f"seed() expects a wrt(...) list, got {type(wrt).__name__}")
    if not wrt.args:
        raise ValueError("wrt() needs at least one variable")
    variables = [_require_number(v, "each variable in wrt()") for v in wrt.args]
    n = _order(variables[0])
    if len(variables) > n:
        raise ValueError(
            f"cannot compute derivatives of order {len(variables)} with autodiff numbers "
            f"of order {n}"
        )
    if n > 1 and any(isinstance(v, Real) for v in variables):
        raise ValueError(
            "Real numbers of order above 1 carry directional derivatives only; "
            "use along(...) or Dual numbers for cross derivatives"
        )
    for k in range(1, n + 1):
        variables[min(k, len(variables)) - 1].seed(k, value)


def unseed(wrt: Wrt) -> None:
    """Reset the seeds set by :func:`seed` to zero."""
    seed(wrt, 0.0)


def _seed_first_order(at: At, directions: tuple[Any, ...]) -> None:
    if len(at.args) != len(directions):
        raise ValueError(
            f"at() has {len(at.args)} arguments but along() has {len(directions)} directions"
        )
    for arg, direction in zip(at.args, directions):
        if is_vector(arg):
            if not is_vector(direction):
                raise TypeError("a vector argument needs a vector direction")
            if len(arg) != len(direction):
                raise ValueError(
                    f"direction of length {len(direction)} for a vector of length {len(arg)}"
                )
            for item, d in zip(arg, direction):
                _require_number(item, "each entry of a vector in at()").seed(1, d)
        else:
            _require_number(arg, "each argument in at()").seed(1, direction)


def seed_along(at: At, along: Along) -> None:
    """Seed the first-order part of every argument with its direction."""
    if not isinstance(at, At) or not isinstance(along, Along):
        raise TypeError("seed_along() expects at(...) and along(...) lists")
    _seed_first_order(at, along.args)


def unseed_at(at: At) -> None:
    """Reset the first-order part of every argument to zero."""
    if not isinstance(at, At):
        raise TypeError(f"unseed_at() expects an at(...) list, got {type(at).__name__}")
    zeros = tuple([0.0] * len(arg) if is_vector(arg) else 0.0 for arg in at.args)
    _seed_first_order(at, zeros)


def evaluate(f: Callable[..., Any], at: At, direction: Wrt | Along) -> Any:
    """Call ``f`` on the arguments of ``at`` with the seeding given by ``direction``.

    The seeds are removed again afterwards, also when ``f`` raises.
    """
    if not isinstance(at, At):
        raise TypeError(f"evaluate() expects an at(...) list, got {type(at).__name__}")
    if isinstance(direction, Wrt):
        seed(direction)
        try:
            return f(*at.args)
        finally:
            unseed(direction)
    if isinstance(direction, Along):
        seed_along(at, direction)
        try:
            return f(*at.args)
        finally:
            unseed_at(at)
    raise TypeError(
        f"evaluate() expects a wrt(...) or along(...) list, got {type(direction).__name__}"
    )


def derivative(u: Any, order: int = 1) -> Any:
    """Return the derivative of the given order of a number, or of each entry of a vector."""
    if is_vector(u):
        return np.array(
            [_require_number(x, "each entry").derivative(order) for x in u], dtype=float
        )
    return _require_number(u, "the argument").derivative(order)


def grad(u: Any, order: int = 1) -> Any:
    """Return ``derivative(u, order)``."""
    return derivative(u, order)


def derivatives(result: Any) -> list[Any]:
    """Return all derivatives, from order 0 up, of a number or a vector of numbers.

    For a vector the list holds one float array per order.
    """
    if is_vector(result):
        items = list(result)
        if not items:
            raise ValueError("cannot determine the order of an empty vector")
        n = _order(_require_number(items[0], "each entry"))
        return [derivative(items, k) for k in range(n + 1)]
    n = _order(_require_number(result, "the argument"))
    return [result.derivative(k) for k in range(n + 1)]


def derivatives_of(f: Callable[..., Any], direction: Wrt | Along, at: At) -> list[Any]:
    """Evaluate ``f`` with the given seeding and return all derivatives of the result."""
    return derivatives(evaluate(f, at, direction))


def derivative_of(f: Callable[..., Any], wrt: Wrt, at: At, order: int = 1) -> Any:
    """Evaluate ``f`` with ``wrt`` seeded and return its derivative of the given order."""
    return derivative(evaluate(f, at, wrt), order)