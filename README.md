# taylorad

Forward-mode automatic differentiation for Python, with numbers that carry
derivatives up to any fixed order.

Two number types are provided:

- `Real` (in `taylorad.real`): a truncated Taylor series of a fixed order,
  holding the value and its higher derivatives along one direction.
- `Dual` (in `taylorad.dual`): nested dual numbers, which also give mixed
  second-order derivatives such as those in a Hessian.

Both support arithmetic, comparisons and elementary functions (`exp`, `log`,
`log10`, `sin`, `cos`, `tan`, `sqrt`, `pow`, `min`, `max`, ...). The `Real`
module adds `cbrt`, `atan2` and the inverse hyperbolic functions; the `Dual`
module adds `hypot` and `erf`. Comparisons look at the value only, except
that `==` between two `Real` numbers compares every derivative too.

## Installation

```
pip install .
```

## Higher-order derivatives with `Real`

```python
from taylorad.real import real4th, exp, log

x = real4th([0.5, 1.0, 0.0, 0.0, 0.0])   # x = 0.5, seeded in direction 1
y = exp(x) * log(x)
print(y.val())       # value
print(y[1], y[2])    # first and second derivatives
```

`real1st` to `real4th` build numbers of order 1 to 4; `Real(value, order)`
builds one of any order, and `real_vector(values, order)` a `Vector` of them.

## Derivatives of functions

`taylorad.derivative` provides the keywords `wrt(...)`, `at(...)` and
`along(...)`. The variables are seeded in place before the function is
called and unseeded afterwards.

```python
from taylorad.real import real1st, real4th, sin
from taylorad.derivative import wrt, at, along, derivatives_of, derivative_of

def f(x, y):
    return sin(2 * x + 3 * y)

# all directional derivatives along (3, 5), orders 0 to 4
x, y = real4th(5.0), real4th(7.0)
d0, d1, d2, d3, d4 = derivatives_of(f, along(3.0, 5.0), at(x, y))

# first derivative with respect to x only
x, y = real1st(5.0), real1st(7.0)
dfdx = derivative_of(f, wrt(x), at(x, y), 1)
```

With `wrt(...)`, each variable is seeded at the derivative order given by
its position, and the last one fills the remaining orders. A `Real` of order
above 1 carries directional derivatives only, so `wrt(...)` with such
numbers raises `ValueError`; use `along(...)` or `Dual` numbers instead.

`derivative(u, order)` (alias `grad`) and `derivatives(u)` extract
derivatives from a number or from a vector of numbers; for a vector they
return NumPy arrays.

## Gradients, Jacobians and Hessians

```python
from taylorad.dual import dual_vector
from taylorad.gradient import gradient, jacobian, hessian
from taylorad.derivative import wrt, at

def f(x):
    return 0.5 * sum(xi * xi for xi in x)

x = dual_vector([1.0, 2.0, 3.0], 2)
g = gradient(f, wrt(x), at(x))   # [1.0, 2.0, 3.0]
H = hessian(f, wrt(x), at(x))    # identity matrix
```

The variables in `wrt(...)` must be the same objects that the function
receives through `at(...)`. `value_and_gradient`, `value_and_jacobian` and
`value_gradient_hessian` return the function's value alongside the
derivatives. A Hessian needs numbers of order two or higher.

## Taylor series

```python
from taylorad.real import real_vector
from taylorad.derivative import at, along
from taylorad.taylorseries import taylorseries

x = real_vector([1.0, 2.0], 4)
series = taylorseries(lambda v: v[0] * v[1], along([1.0, 1.0]), at(x))
print(series(0.1))        # approximation of f(x + 0.1 * direction)
print(series.derivatives())
```

## Containers and helpers

`taylorad.vector` provides `Vector` and `Matrix`, bounds-checked containers
of numbers with element-wise addition and subtraction, in-place scaling and
conversion to NumPy arrays through `asarray()`. They do not provide
matrix-vector products or other linear algebra.

`taylorad.binomial.binomial_coefficient(i, j)` returns C(i, j) for
`0 <= j <= i <= 50`, and `taylorad.traits` has `is_arithmetic`, `order` and
`is_vector` for classifying values.

## Scope

This is a library only: there is no command-line tool, and only forward mode
is offered.

## Running the tests

```
pip install .[test]
pytest
```