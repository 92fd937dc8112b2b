"""Nested dual numbers for forward-mode automatic differentiation.

A :class:`Dual` holds a value ``val`` and a directional derivative ``grad``.
Either may itself be a Dual, which gives numbers of higher order: a
second-order dual has first-order duals for both parts, and so on. Seeding
the derivative parts at different nesting levels lets one evaluation produce
mixed and higher-order derivatives.
"""

from __future__ import annotations

import builtins
import math
from collections.abc import Callable, Iterable
from typing import Any

from taylorad.traits import is_arithmetic
from taylorad.vector import Vector

_LN10 = math.log(10.0)
_TWO_OVER_SQRT_PI = 2.0 / math.sqrt(math.pi)

Number = Any


def _order_of(x: Any) -> int:
    return x.order() if isinstance(x, Dual) else 0


def _value_of(x: Any) -> float:
    return x.value() if isinstance(x, Dual) else float(x)


def _zero(n: int) -> Any:
    if n == 0:
        return 0.0
    return Dual._make(_zero(n - 1), _zero(n - 1))


def _lift(x: Any, n: int) -> Any:
    """Return x as a number of order n (a float when n is 0)."""
    if isinstance(x, Dual):
        if x.order() != n:
            raise ValueError(f"order mismatch: expected {n}, got {x.order()}")
        return x
    if not is_arithmetic(x):
        raise TypeError(f"cannot use {type(x).__name__} as a number")
    if n == 0:
        return float(x)
    return Dual._make(_lift(x, n - 1), _zero(n - 1))


def _derivative_of(x: Any, k: int) -> float:
    if k == 0:
        return _value_of(x)
    return _derivative_of(x.grad, k - 1)


class Dual:
    """A value paired with its derivative; both parts may be Duals themselves."""

    __slots__ = ("val", "grad")

    def __init__(self, val: Any = 0.0, grad: Any = 0.0) -> None:
        if isinstance(val, Dual) and isinstance(grad, Dual):
            if val.order() != grad.order():
                raise ValueError(
                    f"order mismatch between value ({val.order()}) and gradient ({grad.order()})"
                )
        elif isinstance(val, Dual):
            grad = _lift(grad, val.order())
        elif isinstance(grad, Dual):
            val = _lift(val, grad.order())
        else:
            val, grad = _lift(val, 0), _lift(grad, 0)
        self.val = val
        self.grad = grad

    @classmethod
    def _make(cls, val: Any, grad: Any) -> Dual:
        obj = object.__new__(cls)
        obj.val = val
        obj.grad = grad
        return obj

    # ------------------------------------------------------------------ access

    def order(self) -> int:
        """Return the highest derivative order this number can carry."""
        return 1 + _order_of(self.val)

    def value(self) -> float:
        """Return the innermost plain value."""
        return _value_of(self.val)

    def _check_order(self, order: int) -> int:
        if isinstance(order, bool) or not isinstance(order, int):
            raise TypeError(f"order must be an integer, got {type(order).__name__}")
        if not 0 <= order <= self.order():
            raise ValueError(
                f"order {order} out of range for a dual number of order {self.order()}"
            )
        return order

    def seed(self, order: int = 1, value: Any = 1.0) -> None:
        """Set the seed of the given order: 0 is the value, k >= 1 a derivative part."""
        order = self._check_order(order)
        if order == 0:
            if isinstance(self.val, Dual):
                inner = +self.val
                inner.seed(0, value)
                self.val = inner
            else:
                self.val = float(value)
        elif order == 1:
            self.grad = _lift(value, self.order() - 1)
        else:
            inner = +self.val
            inner.seed(order - 1, value)
            self.val = inner

    def derivative(self, order: int = 1) -> float:
        """Return the derivative of the given order as a plain float."""
        return _derivative_of(self, self._check_order(order))

    def __float__(self) -> float:
        return self.value()

    def __str__(self) -> str:
        return f"{self.value():g}"

    def __repr__(self) -> str:
        return f"Dual({self.val!r}, {self.grad!r})"

    # -------------------------------------------------------------- arithmetic

    def _same(self, other: Dual) -> Dual:
        if other.order() != self.order():
            raise ValueError(f"order mismatch: {self.order()} and {other.order()}")
        return other

    def __pos__(self) -> Dual:
        return Dual._make(self.val, self.grad)

    def __neg__(self) -> Dual:
        return Dual._make(-self.val, -self.grad)

    def __abs__(self) -> Dual:
        return abs(self)

    def __add__(self, other: Any) -> Any:
        if isinstance(other, Dual):
            b = self._same(other)
            return Dual._make(self.val + b.val, self.grad + b.grad)
        if is_arithmetic(other):
            return Dual._make(self.val + float(other), self.grad)
        return NotImplemented

    def __radd__(self, other: Any) -> Any:
        return self.__add__(other)

    def __sub__(self, other: Any) -> Any:
        if isinstance(other, Dual):
            b = self._same(other)
            return Dual._make(self.val - b.val, self.grad - b.grad)
        if is_arithmetic(other):
            return Dual._make(self.val - float(other), self.grad)
        return NotImplemented

    def __rsub__(self, other: Any) -> Any:
        if is_arithmetic(other):
            return Dual._make(float(other) - self.val, -self.grad)
        return NotImplemented

    def __mul__(self, other: Any) -> Any:
        if isinstance(other, Dual):
            b = self._same(other)
            return Dual._make(self.val * b.val, self.grad * b.val + self.val * b.grad)
        if is_arithmetic(other):
            c = float(other)
            return Dual._make(self.val * c, self.grad * c)
        return NotImplemented

    def __rmul__(self, other: Any) -> Any:
        return self.__mul__(other)

    def __truediv__(self, other: Any) -> Any:
        if isinstance(other, Dual):
            b = self._same(other)
            q = self.val / b.val
            return Dual._make(q, (self.grad - q * b.grad) / b.val)
        if is_arithmetic(other):
            c = float(other)
            return Dual._make(self.val / c, self.grad / c)
        return NotImplemented

    def __rtruediv__(self, other: Any) -> Any:
        if is_arithmetic(other):
            q = float(other) / self.val
            return Dual._make(q, -q * self.grad / self.val)
        return NotImplemented

    def __pow__(self, other: Any) -> Any:
        if not isinstance(other, Dual) and not is_arithmetic(other):
            return NotImplemented
        return pow(self, other)

    def __rpow__(self, other: Any) -> Any:
        if not is_arithmetic(other):
            return NotImplemented
        return pow(other, self)

    # ------------------------------------------------------------- comparison

    @staticmethod
    def _compare_value(other: Any) -> float | None:
        if isinstance(other, Dual):
            return other.value()
        if is_arithmetic(other):
            return float(other)
        return None

    def __eq__(self, other: Any) -> Any:
        v = self._compare_value(other)
        return NotImplemented if v is None else self.value() == v

    def __ne__(self, other: Any) -> Any:
        v = self._compare_value(other)
        return NotImplemented if v is None else self.value() != v

    def __lt__(self, other: Any) -> Any:
        v = self._compare_value(other)
        return NotImplemented if v is None else self.value() < v

    def __le__(self, other: Any) -> Any:
        v = self._compare_value(other)
        return NotImplemented if v is None else self.value() <= v

    def __gt__(self, other: Any) -> Any:
        v = self._compare_value(other)
        return NotImplemented if v is None else self.value() > v

    def __ge__(self, other: Any) -> Any:
        v = self._compare_value(other)
        return NotImplemented if v is None else self.value() >= v

    def __hash__(self) -> int:
        return hash(self.value())


# ---------------------------------------------------------------- factories


def dual1st(value: Any = 0.0) -> Dual:
    """Return a first-order dual number."""
    return +_lift(value, 1)


def dual2nd(value: Any = 0.0) -> Dual:
    """Return a second-order dual number."""
    return +_lift(value, 2)


def dual3rd(value: Any = 0.0) -> Dual:
    """Return a third-order dual number."""
    return +_lift(value, 3)


def dual4th(value: Any = 0.0) -> Dual:
    """Return a fourth-order dual number."""
    return +_lift(value, 4)


def dual_vector(values: Iterable[Any], order: int = 1) -> Vector:
    """Return a Vector of dual numbers of the given order built from ``values``."""
    if isinstance(order, bool) or not isinstance(order, int) or order < 1:
        raise ValueError(f"order of a dual number must be a positive integer, got {order!r}")
    return Vector(+_lift(v, order) for v in values)


# ---------------------------------------------------------------- helpers


def _apply(
    x: Any, name: str, on_number: Callable[[float], float], on_dual: Callable[[Dual], Dual]
) -> Any:
    if isinstance(x, Dual):
        return on_dual(x)
    if is_arithmetic(x):
        return on_number(float(x))
    raise TypeError(f"{name}() expects a Dual or a number, got {type(x).__name__}")


def _pair(x: Any, y: Any, name: str) -> tuple[Dual, Dual]:
    if isinstance(x, Dual) and isinstance(y, Dual):
        if x.order() != y.order():
            raise ValueError(f"order mismatch: {x.order()} and {y.order()}")
        return x, y
    if isinstance(x, Dual) and is_arithmetic(y):
        return x, _lift(y, x.order())
    if is_arithmetic(x) and isinstance(y, Dual):
        return _lift(x, y.order()), y
    raise TypeError(
        f"{name}() expects Duals or numbers, got {type(x).__name__} and {type(y).__name__}"
    )


# --------------------------------------------------------- elementary functions


def abs(x: Any) -> Any:
    """Return the absolute value of x, with derivatives scaled by its sign."""
    return _apply(x, "abs", builtins.abs, lambda d: +d if d.value() >= 0.0 else -d)


def sin(x: Any) -> Any:
    """Return the sine of x."""
    return _apply(x, "sin", math.sin, lambda d: Dual._make(sin(d.val), cos(d.val) * d.grad))


def cos(x: Any) -> Any:
    """Return the cosine of x."""
    return _apply(x, "cos", math.cos, lambda d: Dual._make(cos(d.val), -sin(d.val) * d.grad))


def _tan_dual(d: Dual) -> Dual:
    t = tan(d.val)
    return Dual._make(t, d.grad * (1.0 + t * t))


def tan(x: Any) -> Any:
    """Return the tangent of x."""
    return _apply(x, "tan", math.tan, _tan_dual)


def asin(x: Any) -> Any:
    """Return the arc sine of x."""
    return _apply(
        x, "asin", math.asin,
        lambda d: Dual._make(asin(d.val), d.grad / sqrt(1.0 - d.val * d.val)),
    )


def acos(x: Any) -> Any:
    """Return the arc cosine of x."""
    return _apply(
        x, "acos", math.acos,
        lambda d: Dual._make(acos(d.val), -d.grad / sqrt(1.0 - d.val * d.val)),
    )


def atan(x: Any) -> Any:
    """Return the arc tangent of x."""
    return _apply(
        x, "atan", math.atan,
        lambda d: Dual._make(atan(d.val), d.grad / (1.0 + d.val * d.val)),
    )


arcsin = asin
arccos = acos
arctan = atan


def sinh(x: Any) -> Any:
    """Return the hyperbolic sine of x."""
    return _apply(x, "sinh", math.sinh, lambda d: Dual._make(sinh(d.val), cosh(d.val) * d.grad))


def cosh(x: Any) -> Any:
    """Return the hyperbolic cosine of x."""
    return _apply(x, "cosh", math.cosh, lambda d: Dual._make(cosh(d.val), sinh(d.val) * d.grad))


def _tanh_dual(d: Dual) -> Dual:
    t = tanh(d.val)
    return Dual._make(t, d.grad * (1.0 - t * t))


def tanh(x: Any) -> Any:
    """Return the hyperbolic tangent of x."""
    return _apply(x, "tanh", math.tanh, _tanh_dual)


def _sqrt_dual(d: Dual) -> Dual:
    s = sqrt(d.val)
    return Dual._make(s, d.grad / (2.0 * s))


def sqrt(x: Any) -> Any:
    """Return the square root of x."""
    return _apply(x, "sqrt", math.sqrt, _sqrt_dual)


def _exp_dual(d: Dual) -> Dual:
    e = exp(d.val)
    return Dual._make(e, e * d.grad)


def exp(x: Any) -> Any:
    """Return e raised to x."""
    return _apply(x, "exp", math.exp, _exp_dual)


def log(x: Any) -> Any:
    """Return the natural logarithm of x."""
    return _apply(x, "log", math.log, lambda d: Dual._make(log(d.val), d.grad / d.val))


def log10(x: Any) -> Any:
    """Return the base-10 logarithm of x."""
    return _apply(
        x, "log10", math.log10, lambda d: Dual._make(log10(d.val), d.grad / (_LN10 * d.val))
    )


def erf(x: Any) -> Any:
    """Return the error function of x."""
    return _apply(
        x, "erf", math.erf,
        lambda d: Dual._make(erf(d.val), _TWO_OVER_SQRT_PI * exp(-d.val * d.val) * d.grad),
    )


def pow(x: Any, y: Any) -> Any:
    """Return x raised to y, where either may be a Dual or a number."""
    if isinstance(x, Dual) and isinstance(y, Dual):
        x, y = _pair(x, y, "pow")
        v = pow(x.val, y.val)
        return Dual._make(v, v * (y.grad * log(x.val) + y.val * x.grad / x.val))
    if isinstance(x, Dual) and is_arithmetic(y):
        c = float(y)
        n = x.order()
        if c == 0.0:
            return Dual._make(_lift(1.0, n - 1), _zero(n - 1))
        return Dual._make(pow(x.val, c), c * pow(x.val, c - 1.0) * x.grad)
    if is_arithmetic(x) and isinstance(y, Dual):
        c = float(x)
        v = pow(c, y.val)
        return Dual._make(v, math.log(c) * v * y.grad)
    if is_arithmetic(x) and is_arithmetic(y):
        return math.pow(float(x), float(y))
    raise TypeError(
        f"pow() expects Duals or numbers, got {type(x).__name__} and {type(y).__name__}"
    )


def hypot(x: Any, y: Any) -> Any:
    """Return sqrt(x*x + y*y), where either may be a Dual or a number."""
    if is_arithmetic(x) and is_arithmetic(y):
        return math.hypot(float(x), float(y))
    a, b = _pair(x, y, "hypot")
    h = hypot(a.val, b.val)
    return Dual._make(h, (a.val * a.grad + b.val * b.grad) / h)


def max(x: Any, y: Any) -> Any:
    """Return the larger of x and y; ties go to the first Dual argument."""
    if isinstance(x, Dual) and isinstance(y, Dual):
        a, b = _pair(x, y, "max")
        return +a if a.value() >= b.value() else +b
    if isinstance(x, Dual) and is_arithmetic(y):
        return +x if x.value() >= y else _lift(y, x.order())
    if is_arithmetic(x) and isinstance(y, Dual):
        return _lift(x, y.order()) if x > y.value() else +y
    if is_arithmetic(x) and is_arithmetic(y):
        return builtins.max(float(x), float(y))
    raise TypeError(
        f"max() expects Duals or numbers, got {type(x).__name__} and {type(y).__name__}"
    )


def min(x: Any, y: Any) -> Any:
    """Return the smaller of x and y; ties go to the first Dual argument."""
    if isinstance(x, Dual) and isinstance(y, Dual):
        a, b = _pair(x, y, "min")
        return +a if a.value() <= b.value() else +b
    if isinstance(x, Dual) and is_arithmetic(y):
        return +x if x.value() <= y else _lift(y, x.order())
    if is_arithmetic(x) and isinstance(y, Dual):
        return _lift(x, y.order()) if x < y.value() else +y
    if is_arithmetic(x) and is_arithmetic(y):
        return builtins.min(float(x), float(y))
    raise TypeError(
        f"min() expects Duals or numbers, got {type(x).__name__} and {type(y).__name__}"
    )