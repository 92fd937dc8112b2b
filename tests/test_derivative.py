import math

import numpy as np
import pytest

from taylorad import dual, real
from taylorad.derivative import (
    Wrt,
    along,
    at,
    derivative,
    derivative_of,
    derivatives,
    derivatives_of,
    evaluate,
    grad,
    seed,
    seed_along,
    unseed,
    unseed_at,
    wrt,
)
from taylorad.dual import dual1st, dual2nd, dual4th
from taylorad.real import real1st, real4th
from taylorad.vector import Vector


def test_keywords_hold_their_arguments():
    x, y = real1st(1.0), real1st(2.0)
    w = wrt(x, y)
    assert isinstance(w, Wrt)
    assert w.args[0] is x and w.args[1] is y
    assert at(x).args == (x,)
    assert along(3, 5).args == (3, 5)


def test_unpacking_derivatives_of_real_number():
    x = real4th([2.0, 3.0, 4.0, 5.0, 6.0])
    x0, x1, x2, x3, x4 = derivatives(x)
    assert [x0, x1, x2, x3, x4] == pytest.approx([x[0], x[1], x[2], x[3], x[4]])


def test_unpacking_derivatives_of_list_of_reals():
    x = real4th([2.0, 3.0, 4.0, 5.0, 6.0])
    y = real4th([3.0, 4.0, 5.0, 6.0, 7.0])
    z = real4th([4.0, 5.0, 6.0, 7.0, 8.0])
    u0, u1, u2, u3, u4 = derivatives([x, y, z])
    for k, uk in enumerate([u0, u1, u2, u3, u4]):
        assert uk == pytest.approx([x[k], y[k], z[k]])


def test_unpacking_derivatives_of_vector_of_reals():
    x = real4th([2.0, 3.0, 4.0, 5.0, 6.0])
    y = real4th([3.0, 4.0, 5.0, 6.0, 7.0])
    z = real4th([4.0, 5.0, 6.0, 7.0, 8.0])
    u = Vector([x, y, z])
    unpacked = derivatives(u)
    assert len(unpacked) == 5
    for k in range(5):
        assert unpacked[k] == pytest.approx([derivative(x, k), derivative(y, k), derivative(z, k)])
        uk = derivative(u, k)
        assert uk.size == 3
        assert list(uk) == [derivative(x, k), derivative(y, k), derivative(z, k)]
        assert list(uk) == [grad(x, k), grad(y, k), grad(z, k)]


def test_unpacking_derivatives_of_vector_of_duals():
    def make(values):
        n = dual4th()
        for k, v in enumerate(values):
            n.seed(k, v)
        return n

    x = make([2.0, 3.0, 4.0, 5.0, 6.0])
    y = make([3.0, 4.0, 5.0, 6.0, 7.0])
    z = make([4.0, 5.0, 6.0, 7.0, 8.0])
    unpacked = derivatives(Vector([x, y, z]))
    assert len(unpacked) == 5
    for k, uk in enumerate(unpacked):
        assert uk == pytest.approx([derivative(x, k), derivative(y, k), derivative(z, k)])
    assert unpacked[0] == pytest.approx([2.0, 3.0, 4.0])
    assert unpacked[1] == pytest.approx([3.0, 4.0, 5.0])


def test_matrix_times_vector_of_reals():
    x0 = real1st([1.0, 3.0])
    x1 = real1st([2.0, 5.0])
    b = Vector([1.0 * x0 + 3.0 * x1, 5.0 * x0 + 7.0 * x1])
    assert derivative(b, 0) == pytest.approx([7.0, 19.0])
    assert derivative(b, 1) == pytest.approx([18.0, 50.0])


def test_matrix_times_vector_of_duals():
    x0, x1 = dual1st(), dual1st()
    x0.seed(0, 1.0)
    x1.seed(0, 2.0)
    x0.seed(1, 3.0)
    x1.seed(1, 5.0)
    b = [1.0 * x0 + 3.0 * x1, 5.0 * x0 + 7.0 * x1]
    assert derivative(b, 0) == pytest.approx([7.0, 19.0])
    assert derivative(b, 1) == pytest.approx([18.0, 50.0])


@pytest.mark.parametrize(
    "expr",
    [
        lambda x, y: real.exp(real.log(2 * x + 3 * y)),
        lambda x, y: real.sin(2 * x + 3 * y),
        lambda x, y: real.exp(2 * x + 3 * y) * real.log(x / y),
    ],
)
def test_directional_derivatives_of_real4th(expr):
    x, y = real4th(5), real4th(7)
    dfdv = derivatives_of(expr, along(3, 5), at(x, y))
    x[1] = 3.0
    y[1] = 5.0
    u = expr(x, y)
    assert dfdv == pytest.approx([u[k] for k in range(5)], rel=1e-12)


def test_directional_derivatives_restore_arguments():
    x, y = real4th(5), real4th(7)
    derivatives_of(lambda a, b: a * b, along(3, 5), at(x, y))
    assert x[1] == 0.0 and y[1] == 0.0
    assert x[0] == 5.0 and y[0] == 7.0


def test_directional_derivative_of_dual_numbers():
    x, y = dual1st(2.0), dual1st(4.0)
    result = derivatives_of(lambda a, b: a * b, along(3.0, 5.0), at(x, y))
    x.seed(1, 3.0)
    y.seed(1, 5.0)
    expected = x * y
    assert result == pytest.approx([expected.derivative(0), expected.derivative(1)])


def test_along_vector_arguments():
    v = [real1st(1.0), real1st(2.0)]
    seed_along(at(v), along([3.0, 4.0]))
    assert [v[0][1], v[1][1]] == [3.0, 4.0]
    unseed_at(at(v))
    assert [v[0][1], v[1][1]] == [0.0, 0.0]


def test_cross_derivative_with_dual2nd():
    x, y = dual2nd(2.0), dual2nd(3.0)
    u = evaluate(lambda a, b: a * a * b, at(x, y), wrt(x, y))
    assert u.derivative(0) == pytest.approx(12.0)
    assert derivative(u, 1) == pytest.approx(12.0)
    assert derivative(u, 2) == pytest.approx(4.0)
    assert x.derivative(1) == 0.0
    assert y.derivative(1) == 0.0 and y.derivative(2) == 0.0


def test_single_variable_fills_remaining_orders():
    x = dual2nd(2.0)
    values = derivatives_of(lambda a: a * a * a, wrt(x), at(x))
    assert values == pytest.approx([8.0, 12.0, 12.0])


def test_derivative_of_sine():
    x = dual1st(0.5)
    assert derivative_of(dual.sin, wrt(x), at(x)) == pytest.approx(math.cos(0.5))
    assert derivative_of(dual.sin, wrt(x), at(x), 0) == pytest.approx(math.sin(0.5))


def test_seed_and_unseed_in_place():
    x = real1st(2.0)
    seed(wrt(x))
    assert x[1] == 1.0
    unseed(wrt(x))
    assert x[1] == 0.0


def test_too_many_variables_for_order():
    x = dual1st(1.0)
    with pytest.raises(ValueError):
        seed(wrt(x, x))


def test_plain_number_cannot_be_seeded():
    with pytest.raises(TypeError):
        seed(wrt(1.0))


def test_empty_wrt_is_rejected():
    with pytest.raises(ValueError):
        seed(wrt())


def test_higher_order_real_rejects_wrt():
    x = real4th(1.0)
    with pytest.raises(ValueError):
        seed(wrt(x))
    assert x[1] == 0.0


def test_along_size_mismatches():
    x, y = real1st(1.0), real1st(2.0)
    with pytest.raises(ValueError):
        seed_along(at(x, y), along(1.0))
    with pytest.raises(ValueError):
        seed_along(at([x, y]), along([1.0]))


def test_evaluate_unseeds_when_function_raises():
    x = dual1st(1.0)

    def failing(a):
        raise ZeroDivisionError("boom")

    with pytest.raises(ZeroDivisionError):
        evaluate(failing, at(x), wrt(x))
    assert x.derivative(1) == 0.0


def test_evaluate_rejects_unknown_direction():
    x = dual1st(1.0)
    with pytest.raises(TypeError):
        evaluate(lambda a: a, at(x), (x,))


def test_derivative_of_plain_number_is_rejected():
    with pytest.raises(TypeError):
        derivative(1.5)


def test_derivatives_of_empty_vector_is_rejected():
    with pytest.raises(ValueError):
        derivatives([])


def test_vector_derivative_is_float_array():
    u = [real1st([1.0, 2.0]), real1st([3.0, 4.0])]
    result = derivative(u)
    assert result.dtype == np.float64
    assert list(result) == [2.0, 4.0]