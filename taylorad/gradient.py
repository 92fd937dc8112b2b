"""Gradients, Jacobians and Hessians computed with forward-mode autodiff numbers.

Each function evaluates ``f`` once per variable (or per pair of variables for
the Hessian). Before each call the variable is seeded in place and the seed is
removed again afterwards. The variables in ``wrt(...)`` must therefore be the
same objects that ``f`` receives through ``at(...)``. This holds for entries
of a Vector and for plain lists of those entries.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any

import numpy as np

from taylorad.derivative import At, Wrt, derivative, evaluate
from taylorad.traits import is_vector
from taylorad.traits import order as _order


def wrt_item_length(item: Any) -> int:
    """Return the number of variables in one item of a ``wrt(...)`` list."""
    return len(item) if is_vector(item) else 1


def wrt_total_length(wrt: Wrt) -> int:
    """Return the total number of variables in a ``wrt(...)`` list."""
    if not isinstance(wrt, Wrt):
        raise TypeError(f"expected a wrt(...) list, got {type(wrt).__name__}")
    return sum(wrt_item_length(item) for item in wrt.args)


def _require_variable(x: Any) -> Any:
    if is_vector(x) or _order(x) == 0:
        raise TypeError(
            "expecting a wrt list with either vectors or individual autodiff numbers, "
            f"got {type(x).__name__}"
        )
    return x


def iter_wrt_vars(wrt: Wrt) -> Iterator[tuple[int, Any]]:
    """Yield ``(i, x)`` for every variable in ``wrt``, where ``i`` is its global index."""
    if not isinstance(wrt, Wrt):
        raise TypeError(f"expected a wrt(...) list, got {type(wrt).__name__}")
    index = 0
    for item in wrt.args:
        entries = item if is_vector(item) else (item,)
        for x in entries:
            yield index, _require_variable(x)
            index += 1


def _check_lists(wrt: Wrt, at: At) -> None:
    if not isinstance(wrt, Wrt):
        raise TypeError(f"expected a wrt(...) list, got {type(wrt).__name__}")
    if not isinstance(at, At):
        raise TypeError(f"expected an at(...) list, got {type(at).__name__}")
    if not wrt.args:
        raise ValueError("wrt() needs at least one variable")
    if not at.args:
        raise ValueError("at() needs at least one argument")


def value_and_gradient(f: Callable[..., Any], wrt: Wrt, at: At) -> tuple[Any, np.ndarray]:
    """Return the value of scalar function ``f`` and its gradient with respect to ``wrt``."""
    _check_lists(wrt, at)
    n = wrt_total_length(wrt)
    g = np.zeros(n, dtype=float)
    if n == 0:
        return f(*at.args), g
    u: Any = None
    for i, xi in iter_wrt_vars(wrt):
        u = evaluate(f, at, Wrt((xi,)))
        g[i] = derivative(u, 1)
    return u, g


def gradient(f: Callable[..., Any], wrt: Wrt, at: At) -> np.ndarray:
    """Return the gradient of scalar function ``f`` with respect to ``wrt``."""
    return value_and_gradient(f, wrt, at)[1]


def value_and_jacobian(f: Callable[..., Any], wrt: Wrt, at: At) -> tuple[Any, np.ndarray]:
    """Return the value of vector function ``f`` and its Jacobian with respect to ``wrt``."""
    _check_lists(wrt, at)
    n = wrt_total_length(wrt)
    if n == 0:
        F = f(*at.args)
        if not is_vector(F):
            raise TypeError(f"jacobian() needs a vector-valued function, got {type(F).__name__}")
        return F, np.zeros((len(F), 0), dtype=float)
    F: Any = None
    J: np.ndarray | None = None
    for i, xi in iter_wrt_vars(wrt):
        F = evaluate(f, at, Wrt((xi,)))
        if not is_vector(F):
            raise TypeError(f"jacobian() needs a vector-valued function, got {type(F).__name__}")
        if J is None:
            J = np.zeros((len(F), n), dtype=float)
        elif len(F) != J.shape[0]:
            raise ValueError(
                f"function returned vectors of different lengths: {J.shape[0]} and {len(F)}"
            )
        J[:, i] = derivative(F, 1)
    assert J is not None
    return F, J


def jacobian(f: Callable[..., Any], wrt: Wrt, at: At) -> np.ndarray:
    """Return the Jacobian matrix of vector function ``f`` with respect to ``wrt``."""
    return value_and_jacobian(f, wrt, at)[1]


def value_gradient_hessian(
    f: Callable[..., Any], wrt: Wrt, at: At
) -> tuple[Any, np.ndarray, np.ndarray]:
    """Return the value, gradient and Hessian of scalar function ``f``.

    The autodiff numbers must be of order two or higher. Only the upper
    triangle is evaluated; the Hessian is filled in symmetrically.
    """
    _check_lists(wrt, at)
    n = wrt_total_length(wrt)
    g = np.zeros(n, dtype=float)
    h = np.zeros((n, n), dtype=float)
    if n == 0:
        return f(*at.args), g, h
    variables = list(iter_wrt_vars(wrt))
    u: Any = None
    for i, xi in variables:
        for j, xj in variables[i:]:
            u = evaluate(f, at, Wrt((xi, xj)))
            g[i] = derivative(u, 1)
            h[i, j] = h[j, i] = derivative(u, 2)
    return u, g, h


def hessian(f: Callable[..., Any], wrt: Wrt, at: At) -> np.ndarray:
    """Return the Hessian matrix of scalar function ``f`` with respect to ``wrt``."""
    return value_gradient_hessian(f, wrt, at)[2]