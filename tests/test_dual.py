import math

import numpy as np
import pytest

from taylorad import dual as dm
from taylorad import real as rm
from taylorad.dual import Dual, dual1st, dual2nd, dual3rd, dual4th, dual_vector
from taylorad.real import Real


def seeded(x0, order):
    """A dual number of the given order seeded for all derivatives along one variable."""
    x = {1: dual1st, 2: dual2nd, 3: dual3rd, 4: dual4th}[order](x0)
    for k in range(1, order + 1):
        x.seed(k, 1.0)
    return x


def real_along(x0, order):
    return Real([x0, 1.0] + [0.0] * (order - 1))


@pytest.mark.parametrize(
    "factory, expected", [(dual1st, 1), (dual2nd, 2), (dual3rd, 3), (dual4th, 4)]
)
def test_factories_order_and_value(factory, expected):
    x = factory(2.5)
    assert x.order() == expected
    assert x.value() == 2.5
    assert all(x.derivative(k) == 0.0 for k in range(1, expected + 1))


def test_default_dual_is_zero_first_order():
    x = Dual()
    assert x.order() == 1
    assert x.value() == 0.0
    assert x.derivative(1) == 0.0


def test_constructor_parts():
    x = Dual(3.0, 1.0)
    assert x.derivative(0) == 3.0
    assert x.derivative(1) == 1.0
    nested = Dual(dual1st(2.0), 1.0)
    assert nested.order() == 2
    assert nested.grad.value() == 1.0


def test_constructor_rejects_mismatched_orders():
    with pytest.raises(ValueError):
        Dual(dual1st(1.0), dual2nd(1.0))


def test_constructor_rejects_text():
    with pytest.raises(TypeError):
        Dual("x")


def test_derivative_and_seed_range_checked():
    x = dual2nd(1.0)
    with pytest.raises(ValueError):
        x.derivative(3)
    with pytest.raises(ValueError):
        x.seed(3, 1.0)
    with pytest.raises(ValueError):
        x.derivative(-1)


def test_seed_round_trip_fourth_order():
    x = dual4th()
    x.seed(0, 2.0)
    x.seed(1, 3.0)
    x.seed(2, 4.0)
    x.seed(3, 5.0)
    x.seed(4, 6.0)
    assert x.derivative(0) == 2.0
    assert x.derivative(1) == 3.0
    assert x.value() == 2.0


def test_seed_does_not_leak_into_copies():
    x = dual3rd(1.0)
    y = +x
    y.seed(2, 1.0)
    assert x.val.derivative(1) == 0.0
    assert y.val.derivative(1) == 1.0


def test_product_and_quotient_rules():
    x = Dual(2.0, 1.0)
    y = Dual(3.0, 0.0)
    assert (x * y).derivative() == pytest.approx(y.value())
    assert (x / y).derivative() == pytest.approx(1.0 / y.value())
    assert (x + y).derivative() == pytest.approx(1.0)
    assert (y - x).derivative() == pytest.approx(-1.0)


def test_scalar_arithmetic():
    x = Dual(2.0, 1.0)
    assert (3.0 * x).derivative() == pytest.approx(3.0)
    assert (x * 3.0).value() == pytest.approx(6.0)
    assert (1.0 - x).derivative() == pytest.approx(-1.0)
    assert (x / 4.0).derivative() == pytest.approx(0.25)
    r = 1.0 / x
    assert r.value() == pytest.approx(0.5)
    assert r.derivative() == pytest.approx(-1.0 / (x.value() ** 2))


@pytest.mark.parametrize(
    "name",
    ["sin", "cos", "tan", "asin", "acos", "atan", "sinh", "cosh", "tanh",
     "sqrt", "exp", "log", "log10", "abs", "arcsin", "arccos", "arctan"],
)
def test_higher_order_matches_real(name):
    x0 = 0.5
    d = getattr(dm, name)(seeded(x0, 4))
    r = getattr(rm, name)(real_along(x0, 4))
    for k in range(5):
        assert d.derivative(k) == pytest.approx(r[k], rel=1e-9, abs=1e-12)


@pytest.mark.parametrize("order", [1, 2, 3, 4])
def test_pow_variants_match_real(order):
    x0 = 0.7
    cases = [
        (dm.pow(seeded(x0, order), 2.5), rm.pow(real_along(x0, order), 2.5)),
        (dm.pow(2.0, seeded(x0, order)), rm.pow(2.0, real_along(x0, order))),
        (dm.pow(seeded(x0, order), seeded(x0, order)),
         rm.pow(real_along(x0, order), real_along(x0, order))),
        (seeded(x0, order) ** 3, real_along(x0, order) ** 3),
        (3.0 ** seeded(x0, order), 3.0 ** real_along(x0, order)),
    ]
    for d, r in cases:
        for k in range(order + 1):
            assert d.derivative(k) == pytest.approx(r[k], rel=1e-9, abs=1e-12)


def test_pow_zero_exponent_has_zero_derivative():
    y = dm.pow(seeded(0.7, 2), 0)
    assert y.value() == 1.0
    assert y.derivative(1) == 0.0
    assert y.derivative(2) == 0.0


def test_mixed_second_derivative():
    x = dual2nd(2.0)
    y = dual2nd(3.0)
    x.seed(1, 1.0)
    y.seed(2, 1.0)
    u = x * x * y
    assert u.value() == pytest.approx(12.0)
    assert u.derivative(1) == pytest.approx(2 * x.value() * y.value())
    assert u.derivative(2) == pytest.approx(2 * x.value())


def test_erf_derivative():
    x0 = 0.3
    y = dm.erf(Dual(x0, 1.0))
    assert y.value() == pytest.approx(math.erf(x0))
    assert y.derivative() == pytest.approx(2.0 / math.sqrt(math.pi) * math.exp(-x0 * x0))


def test_hypot_partials():
    x = Dual(3.0, 1.0)
    h = dm.hypot(x, 4.0)
    assert h.value() == pytest.approx(math.hypot(3.0, 4.0))
    assert h.derivative() == pytest.approx(3.0 / math.hypot(3.0, 4.0))
    h2 = dm.hypot(4.0, x)
    assert h2.derivative() == pytest.approx(h.derivative())


def test_abs_of_negative_flips_derivative():
    x = Dual(-2.0, 1.0)
    y = abs(x)
    assert y.value() == 2.0
    assert y.derivative() == -1.0
    assert dm.abs(-3.0) == 3.0


def test_comparisons_use_value_only():
    assert Dual(1.0, 2.0) == Dual(1.0, 5.0)
    assert Dual(1.0, 0.0) == 1.0
    assert 1.0 == Dual(1.0, 0.0)
    assert Dual(1.0, 0.0) != 2.0
    assert Dual(1.0, 0.0) < 2.0
    assert Dual(1.0, 0.0) <= Dual(1.0, 3.0)
    assert Dual(3.0, 0.0) > Dual(1.0, 0.0)
    assert 0.5 < Dual(1.0, 0.0)
    assert hash(dual1st(2.0)) == hash(2.0)


def test_max_and_min_selection():
    x = Dual(0.5, 3.0)
    assert dm.max(x, 0.1).derivative() == 3.0
    assert dm.max(8.5, x).value() == 8.5
    assert dm.max(8.5, x).derivative() == 0.0
    assert dm.min(x, 0.1).value() == 0.1
    assert dm.min(0.2, x).derivative() == 0.0
    assert dm.min(x, 3.5).derivative() == 3.0
    y = Dual(4.5, 1.0)
    assert dm.max(x, y).derivative() == 1.0
    assert dm.min(y, x).derivative() == 3.0


def test_order_mismatch_raises():
    with pytest.raises(ValueError):
        dual1st(1.0) + dual2nd(1.0)
    with pytest.raises(ValueError):
        dm.max(dual1st(1.0), dual3rd(1.0))


def test_functions_reject_non_numbers():
    with pytest.raises(TypeError):
        dm.sin("a")
    with pytest.raises(TypeError):
        dm.pow("a", 2.0)


def test_float_and_str():
    x = dual2nd(0.5)
    assert float(x) == 0.5
    assert str(x) == "0.5"
    assert "Dual(" in repr(x)


def test_dual_vector():
    v = dual_vector([1.0, 2.0, 3.0], 2)
    assert len(v) == 3
    assert all(item.order() == 2 for item in v)
    assert np.array_equal(v.asarray(), np.array([1.0, 2.0, 3.0]))
    with pytest.raises(ValueError):
        dual_vector([1.0], 0)