"""Higher-order forward-mode numbers that carry a value and its derivatives.

A :class:`Real` of order ``n`` holds ``n + 1`` entries: the value followed by
its first ``n`` derivatives along a single direction. Arithmetic and the
elementary functions below propagate all of them at once using the Leibniz
rule and its relatives.
"""

from __future__ import annotations

import builtins
import math
import numbers
from collections.abc import Callable, Iterable
from typing import Any

from taylorad.binomial import binomial_coefficient as _binom
from taylorad.traits import is_arithmetic
from taylorad.vector import Vector

_LN10 = math.log(10.0)


class Real:
    """A number together with its derivatives up to a fixed order."""

    __slots__ = ("_d",)

    def __init__(self, value: Any = 0.0, order: int | None = None) -> None:
        if isinstance(value, Real):
            data = list(value._d)
            default_order = len(data) - 1
        elif is_arithmetic(value):
            data = [float(value)]
            default_order = 1
        elif isinstance(value, (str, bytes, bytearray)):
            raise TypeError(f"cannot build a Real from {type(value).__name__}")
        elif isinstance(value, Iterable):
            data = [float(v) for v in value]
            if not data:
                raise ValueError("a Real needs at least one entry")
            default_order = len(data) - 1
        else:
            raise TypeError(f"cannot build a Real from {type(value).__name__}")

        if order is None:
            order = default_order
        if isinstance(order, bool) or not isinstance(order, numbers.Integral):
            raise TypeError(f"order must be an integer, got {type(order).__name__}")
        order = int(order)
        if order < 0:
            raise ValueError(f"order must be non-negative, got {order}")
        size = order + 1
        if len(data) > size:
            if not isinstance(value, Real):
                raise ValueError(
                    f"too many entries ({len(data)}) for a Real of order {order}"
                )
            data = data[:size]
        data.extend([0.0] * (size - len(data)))
        self._d: list[float] = data

    @classmethod
    def _make(cls, data: list[float]) -> Real:
        obj = object.__new__(cls)
        obj._d = data
        return obj

    # ------------------------------------------------------------------ access

    def order(self) -> int:
        """Return the highest derivative order carried by this number."""
        return len(self._d) - 1

    def val(self) -> float:
        """Return the value (the zeroth derivative)."""
        return self._d[0]

    def seed(self, order: int = 1, value: float = 1.0) -> None:
        """Set the derivative of the given order to ``value``."""
        self[order] = value

    def derivative(self, order: int = 1) -> float:
        """Return the derivative of the given order."""
        return self[order]

    def _index(self, i: Any) -> int:
        if isinstance(i, bool) or not isinstance(i, numbers.Integral):
            raise TypeError(f"index must be an integer, got {type(i).__name__}")
        i = int(i)
        if not 0 <= i < len(self._d):
            raise IndexError(f"index {i} out of range for a Real of order {self.order()}")
        return i

    def __getitem__(self, i: int) -> float:
        return self._d[self._index(i)]

    def __setitem__(self, i: int, value: float) -> None:
        self._d[self._index(i)] = float(value)

    def __len__(self) -> int:
        return len(self._d)

    def __float__(self) -> float:
        return self._d[0]

    def __str__(self) -> str:
        return f"{self._d[0]:g}"

    def __repr__(self) -> str:
        return f"Real([{', '.join(repr(v) for v in self._d)}])"

    def __deepcopy__(self, memo: Any) -> Real:
        return Real._make(list(self._d))

    # -------------------------------------------------------------- arithmetic

    def _operand(self, other: Any) -> list[float] | None:
        if isinstance(other, Real):
            if len(other._d) != len(self._d):
                raise ValueError(
                    f"order mismatch: {self.order()} and {other.order()}"
                )
            return other._d
        if is_arithmetic(other):
            return [float(other)] + [0.0] * self.order()
        return None

    def __pos__(self) -> Real:
        return Real._make(list(self._d))

    def __neg__(self) -> Real:
        return Real._make([-v for v in self._d])

    def __abs__(self) -> Real:
        return abs(self)

    def __add__(self, other: Any) -> Any:
        b = self._operand(other)
        if b is None:
            return NotImplemented
        return Real._make([p + q for p, q in zip(self._d, b)])

    def __radd__(self, other: Any) -> Any:
        return self.__add__(other)

    def __sub__(self, other: Any) -> Any:
        b = self._operand(other)
        if b is None:
            return NotImplemented
        return Real._make([p - q for p, q in zip(self._d, b)])

    def __rsub__(self, other: Any) -> Any:
        b = self._operand(other)
        if b is None:
            return NotImplemented
        return Real._make([q - p for p, q in zip(self._d, b)])

    def __mul__(self, other: Any) -> Any:
        if is_arithmetic(other):
            c = float(other)
            return Real._make([v * c for v in self._d])
        b = self._operand(other)
        if b is None:
            return NotImplemented
        return Real._make(_multiply(self._d, b))

    def __rmul__(self, other: Any) -> Any:
        return self.__mul__(other)

    def __truediv__(self, other: Any) -> Any:
        if is_arithmetic(other):
            c = float(other)
            return Real._make([v / c for v in self._d])
        b = self._operand(other)
        if b is None:
            return NotImplemented
        return Real._make(_divide(self._d, b))

    def __rtruediv__(self, other: Any) -> Any:
        a = self._operand(other)
        if a is None:
            return NotImplemented
        return Real._make(_divide(a, self._d))

    def __pow__(self, other: Any) -> Any:
        if not isinstance(other, Real) and not is_arithmetic(other):
            return NotImplemented
        return pow(self, other)

    def __rpow__(self, other: Any) -> Any:
        if not is_arithmetic(other):
            return NotImplemented
        return pow(other, self)

    # ------------------------------------------------------------- comparison

    def __eq__(self, other: Any) -> Any:
        if isinstance(other, Real):
            return self._d == other._d
        if is_arithmetic(other):
            return self._d[0] == float(other)
        return NotImplemented

    def __ne__(self, other: Any) -> Any:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def _compare_value(self, other: Any) -> float | None:
        if isinstance(other, Real):
            return other._d[0]
        if is_arithmetic(other):
            return float(other)
        return None

    def __lt__(self, other: Any) -> Any:
        v = self._compare_value(other)
        return NotImplemented if v is None else self._d[0] < v

    def __le__(self, other: Any) -> Any:
        v = self._compare_value(other)
        return NotImplemented if v is None else self._d[0] <= v

    def __gt__(self, other: Any) -> Any:
        v = self._compare_value(other)
        return NotImplemented if v is None else self._d[0] > v

    def __ge__(self, other: Any) -> Any:
        v = self._compare_value(other)
        return NotImplemented if v is None else self._d[0] >= v

    def __hash__(self) -> int:
        return hash(self._d[0])


# ---------------------------------------------------------------- factories


def real1st(value: Any = 0.0) -> Real:
    """Return a first-order Real."""
    return Real(value, 1)


def real2nd(value: Any = 0.0) -> Real:
    """Return a second-order Real."""
    return Real(value, 2)


def real3rd(value: Any = 0.0) -> Real:
    """Return a third-order Real."""
    return Real(value, 3)


def real4th(value: Any = 0.0) -> Real:
    """Return a fourth-order Real."""
    return Real(value, 4)


def real_vector(values: Iterable[Any], order: int = 1) -> Vector:
    """Return a Vector of Reals of the given order built from ``values``."""
    return Vector(Real(v, order) for v in values)


# ---------------------------------------------------------------- recurrences


def _multiply(a: list[float], b: list[float]) -> list[float]:
    return [
        sum(_binom(k, i) * a[i] * b[k - i] for i in range(k + 1)) for k in range(len(a))
    ]


def _divide(a: list[float], b: list[float]) -> list[float]:
    z: list[float] = []
    for k in range(len(a)):
        acc = a[k] - sum(_binom(k, i) * b[i] * z[k - i] for i in range(1, k + 1))
        z.append(acc / b[0])
    return z


def _chain(d: list[float], first: float, partner: list[float], sign: float = 1.0) -> float:
    """Return the k-th derivative of y where y' = sign * x' * partner, k = len(partner)."""
    k = len(partner)
    return sign * sum(_binom(k - 1, i) * d[i + 1] * partner[k - 1 - i] for i in range(k))


def _power_series(x: Real, c: float, y0: float) -> Real:
    d = x._d
    y = [y0]
    for k in range(1, len(d)):
        acc = c * sum(_binom(k - 1, i) * y[i] * d[k - i] for i in range(k))
        acc -= sum(_binom(k - 1, i) * d[i] * y[k - i] for i in range(1, k))
        y.append(acc / d[0])
    return Real._make(y)


def _require_real(x: Any, name: str) -> Real:
    if not isinstance(x, Real):
        raise TypeError(f"{name}() expects a Real, got {type(x).__name__}")
    return x


def _with_derivative(
    x: Real, value: float, rate: Callable[[Real, Real], Real]
) -> Real:
    """Build y from y(0) = value and y' = rate(x, x')."""
    n = x.order()
    if n == 0:
        return Real._make([value])
    base = Real._make(x._d[:n])
    xprime = Real._make(x._d[1:])
    dy = rate(base, xprime)
    return Real._make([value, *dy._d])


def _pair(x: Any, y: Any, name: str) -> tuple[Real, Real]:
    if isinstance(x, Real) and isinstance(y, Real):
        if x.order() != y.order():
            raise ValueError(f"order mismatch: {x.order()} and {y.order()}")
        return x, y
    if isinstance(x, Real) and is_arithmetic(y):
        return x, Real(y, x.order())
    if is_arithmetic(x) and isinstance(y, Real):
        return Real(x, y.order()), y
    raise TypeError(
        f"{name}() expects at least one Real and otherwise plain numbers, "
        f"got {type(x).__name__} and {type(y).__name__}"
    )


# ----------------------------------------------------- exponential functions


def exp(x: Real) -> Real:
    """Return e raised to x."""
    d = _require_real(x, "exp")._d
    y = [math.exp(d[0])]
    for _ in range(1, len(d)):
        y.append(_chain(d, d[0], y))
    return Real._make(y)


def log(x: Real) -> Real:
    """Return the natural logarithm of x."""
    d = _require_real(x, "log")._d
    y = [math.log(d[0])]
    for k in range(1, len(d)):
        acc = d[k] - sum(_binom(k - 1, i) * d[i] * y[k - i] for i in range(1, k))
        y.append(acc / d[0])
    return Real._make(y)


def log10(x: Real) -> Real:
    """Return the base-10 logarithm of x."""
    res = log(_require_real(x, "log10")) / _LN10
    res._d[0] = math.log10(x._d[0])
    return res


def sqrt(x: Real) -> Real:
    """Return the square root of x."""
    x = _require_real(x, "sqrt")
    return _power_series(x, 0.5, math.sqrt(x._d[0]))


def cbrt(x: Real) -> Real:
    """Return the real cube root of x."""
    x = _require_real(x, "cbrt")
    v = x._d[0]
    return _power_series(x, 1.0 / 3.0, math.copysign(builtins.abs(v) ** (1.0 / 3.0), v))


def _pow_const(x: Real, c: float) -> Real:
    if c.is_integer():
        n = int(c)
        if n < 0:
            return 1.0 / _pow_const(x, float(-n))
        result = Real(1.0, x.order())
        base = Real._make(list(x._d))
        while n:
            if n & 1:
                result = result * base
            n >>= 1
            if n:
                base = base * base
        return result
    return _power_series(x, c, math.pow(x._d[0], c))


def pow(x: Any, y: Any) -> Real:
    """Return x raised to y, where x or y (or both) is a Real."""
    if isinstance(x, Real) and isinstance(y, Real):
        return exp(y * log(x))
    if isinstance(x, Real) and is_arithmetic(y):
        return _pow_const(x, float(y))
    if is_arithmetic(x) and isinstance(y, Real):
        return exp(y * math.log(float(x)))
    raise TypeError(
        f"pow() expects at least one Real, got {type(x).__name__} and {type(y).__name__}"
    )


# --------------------------------------------------- trigonometric functions


def _sincos(x: Real) -> tuple[Real, Real]:
    d = x._d
    s = [math.sin(d[0])]
    c = [math.cos(d[0])]
    for _ in range(1, len(d)):
        s_next = _chain(d, d[0], c)
        c_next = _chain(d, d[0], s, -1.0)
        s.append(s_next)
        c.append(c_next)
    return Real._make(s), Real._make(c)


def sin(x: Real) -> Real:
    """Return the sine of x."""
    return _sincos(_require_real(x, "sin"))[0]


def cos(x: Real) -> Real:
    """Return the cosine of x."""
    return _sincos(_require_real(x, "cos"))[1]


def tan(x: Real) -> Real:
    """Return the tangent of x."""
    s, c = _sincos(_require_real(x, "tan"))
    return s / c


def asin(x: Real) -> Real:
    """Return the arc sine of x."""
    x = _require_real(x, "asin")
    return _with_derivative(x, math.asin(x._d[0]), lambda b, p: p / sqrt(1.0 - b * b))


def acos(x: Real) -> Real:
    """Return the arc cosine of x."""
    x = _require_real(x, "acos")
    return _with_derivative(x, math.acos(x._d[0]), lambda b, p: -p / sqrt(1.0 - b * b))


def atan(x: Real) -> Real:
    """Return the arc tangent of x."""
    x = _require_real(x, "atan")
    return _with_derivative(x, math.atan(x._d[0]), lambda b, p: p / (1.0 + b * b))


def atan2(y: Any, x: Any) -> Real:
    """Return the angle of the point (x, y), where x or y (or both) is a Real."""
    ry, rx = _pair(y, x, "atan2")
    value = math.atan2(ry._d[0], rx._d[0])
    n = ry.order()
    if n == 0:
        return Real._make([value])
    yb, yp = Real._make(ry._d[:n]), Real._make(ry._d[1:])
    xb, xp = Real._make(rx._d[:n]), Real._make(rx._d[1:])
    dy = (xb * yp - yb * xp) / (xb * xb + yb * yb)
    return Real._make([value, *dy._d])


# ------------------------------------------------------ hyperbolic functions


def _sinhcosh(x: Real) -> tuple[Real, Real]:
    d = x._d
    s = [math.sinh(d[0])]
    c = [math.cosh(d[0])]
    for _ in range(1, len(d)):
        s_next = _chain(d, d[0], c)
        c_next = _chain(d, d[0], s)
        s.append(s_next)
        c.append(c_next)
    return Real._make(s), Real._make(c)


def sinh(x: Real) -> Real:
    """Return the hyperbolic sine of x."""
    return _sinhcosh(_require_real(x, "sinh"))[0]


def cosh(x: Real) -> Real:
    """Return the hyperbolic cosine of x."""
    return _sinhcosh(_require_real(x, "cosh"))[1]


def tanh(x: Real) -> Real:
    """Return the hyperbolic tangent of x."""
    s, c = _sinhcosh(_require_real(x, "tanh"))
    return s / c


def asinh(x: Real) -> Real:
    """Return the inverse hyperbolic sine of x."""
    x = _require_real(x, "asinh")
    return _with_derivative(x, math.asinh(x._d[0]), lambda b, p: p / sqrt(b * b + 1.0))


def acosh(x: Real) -> Real:
    """Return the inverse hyperbolic cosine of x (x >= 1)."""
    x = _require_real(x, "acosh")
    return _with_derivative(x, math.acosh(x._d[0]), lambda b, p: p / sqrt(b * b - 1.0))


def atanh(x: Real) -> Real:
    """Return the inverse hyperbolic tangent of x (|x| < 1)."""
    x = _require_real(x, "atanh")
    return _with_derivative(x, math.atanh(x._d[0]), lambda b, p: p / (1.0 - b * b))


arcsin = asin
arccos = acos
arctan = atan
arcsinh = asinh
arccosh = acosh
arctanh = atanh


# ----------------------------------------------------------- other functions


def abs(x: Real) -> Real:
    """Return the absolute value of x, with derivatives scaled by its sign."""
    x = _require_real(x, "abs")
    return +x if x._d[0] >= 0.0 else -x


def min(x: Any, y: Any) -> Real:
    """Return the smaller of x and y; ties go to the first Real argument."""
    if isinstance(x, Real) and isinstance(y, Real):
        rx, ry = _pair(x, y, "min")
        return +rx if rx._d[0] <= ry._d[0] else +ry
    if isinstance(x, Real) and is_arithmetic(y):
        return +x if x._d[0] <= y else Real(y, x.order())
    if is_arithmetic(x) and isinstance(y, Real):
        return Real(x, y.order()) if x < y._d[0] else +y
    raise TypeError(
        f"min() expects at least one Real, got {type(x).__name__} and {type(y).__name__}"
    )


def max(x: Any, y: Any) -> Real:
    """Return the larger of x and y; ties go to the first Real argument."""
    if isinstance(x, Real) and isinstance(y, Real):
        rx, ry = _pair(x, y, "max")
        return +rx if rx._d[0] >= ry._d[0] else +ry
    if isinstance(x, Real) and is_arithmetic(y):
        return +x if x._d[0] >= y else Real(y, x.order())
    if is_arithmetic(x) and isinstance(y, Real):
        return Real(x, y.order()) if x > y._d[0] else +y
    raise TypeError(
        f"max() expects at least one Real, got {type(x).__name__} and {type(y).__name__}"
    )